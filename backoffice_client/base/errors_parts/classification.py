"""
Error classification helpers mapping any raised value to a CategorizedError.

Implements HTTP status categorisation, the static per-category presentation
table, and the precedence rules used to recognise transport failures,
HTTP status failures, normalized API errors and arbitrary exceptions.
"""
from __future__ import annotations

from dataclasses import replace
from typing import Any, Dict

import httpx

from .api_error import ApiError
from .categorized_error import CategorizedError
from .error_category import ErrorCategory
from .status_tables import body_message, response_body


def categorize_by_status(status: int) -> ErrorCategory:
    """Map an HTTP status code to an :class:`ErrorCategory`."""
    if status == 401:
        return ErrorCategory.AUTH
    if status == 403:
        return ErrorCategory.PERMISSION
    if status == 404:
        return ErrorCategory.NOT_FOUND
    if status == 409:
        return ErrorCategory.CONFLICT
    if status in (400, 422):
        return ErrorCategory.VALIDATION
    if status == 429:
        return ErrorCategory.RATE_LIMIT
    if status >= 500:
        return ErrorCategory.SERVER
    return ErrorCategory.UNKNOWN


_ERROR_DETAILS: Dict[ErrorCategory, CategorizedError] = {
    ErrorCategory.NETWORK: CategorizedError(
        category=ErrorCategory.NETWORK,
        title="Connection Error",
        message="Unable to connect to the server. Please check your internet connection.",
        action="Check your connection and try again",
        retryable=True,
    ),
    ErrorCategory.AUTH: CategorizedError(
        category=ErrorCategory.AUTH,
        title="Session Expired",
        message="Your session has expired. Please sign in again.",
        action="Sign in to continue",
        retryable=False,
    ),
    ErrorCategory.PERMISSION: CategorizedError(
        category=ErrorCategory.PERMISSION,
        title="Access Denied",
        message="You do not have permission to perform this action.",
        action="Contact an administrator if you need access",
        retryable=False,
    ),
    ErrorCategory.VALIDATION: CategorizedError(
        category=ErrorCategory.VALIDATION,
        title="Invalid Data",
        message="The submitted data is invalid. Please check your input.",
        action="Review and correct your input",
        retryable=False,
    ),
    ErrorCategory.NOT_FOUND: CategorizedError(
        category=ErrorCategory.NOT_FOUND,
        title="Not Found",
        message="The requested resource could not be found.",
        action="The item may have been deleted or moved",
        retryable=False,
    ),
    ErrorCategory.CONFLICT: CategorizedError(
        category=ErrorCategory.CONFLICT,
        title="Conflict",
        message="This action conflicts with existing data.",
        action="Refresh the page and try again",
        retryable=True,
    ),
    ErrorCategory.RATE_LIMIT: CategorizedError(
        category=ErrorCategory.RATE_LIMIT,
        title="Too Many Requests",
        message="You have made too many requests. Please wait before trying again.",
        action="Wait a moment before retrying",
        retryable=True,
    ),
    ErrorCategory.SERVER: CategorizedError(
        category=ErrorCategory.SERVER,
        title="Server Error",
        message="An unexpected server error occurred. Our team has been notified.",
        action="Please try again later",
        retryable=True,
    ),
    ErrorCategory.UNKNOWN: CategorizedError(
        category=ErrorCategory.UNKNOWN,
        title="Error",
        message="Something went wrong. Please try again.",
        action="Try again or contact support",
        retryable=True,
    ),
}


def get_error_details(category: ErrorCategory) -> CategorizedError:
    """Return the static presentation entry for ``category`` (``status`` unset)."""
    return _ERROR_DETAILS[ErrorCategory(category)]


def _is_network_failure(exc: BaseException) -> bool:
    """Recognise failures raised before any response was received."""
    if isinstance(exc, TypeError) and "fetch" in str(exc):
        return True
    return isinstance(exc, (ConnectionError, httpx.RequestError))


def _from_status(status: int, message: str | None) -> CategorizedError:
    details = get_error_details(categorize_by_status(status))
    return replace(details, message=message or details.message, status=status)


def categorize_error(error: Any) -> CategorizedError:
    """Classify any raised value into a :class:`CategorizedError`.

    Precedence (first match wins):
        1. Connection-level failures (``TypeError`` mentioning a failed fetch,
           ``ConnectionError``, any ``httpx.RequestError`` incl. timeouts)
           → ``network``.
        2. ``ApiError`` raised from an httpx failure → classify that cause;
           otherwise categorise by its ``status`` keeping its message.
        3. ``httpx.HTTPStatusError`` → categorise by response status, message
           from the body's ``message``/``title``/``error`` field.
        4. Any other exception → ``unknown`` with its own message.
        5. Anything else → ``unknown`` with the canned message.
    """
    if isinstance(error, BaseException) and _is_network_failure(error):
        return get_error_details(ErrorCategory.NETWORK)

    if isinstance(error, ApiError):
        if isinstance(error.__cause__, httpx.HTTPError):
            return categorize_error(error.__cause__)
        return _from_status(error.status, error.message)

    if isinstance(error, httpx.HTTPStatusError):
        body = response_body(error.response)
        return _from_status(
            error.response.status_code,
            body_message(body, "message", "title", "error"),
        )

    if isinstance(error, Exception):
        details = get_error_details(ErrorCategory.UNKNOWN)
        return replace(details, message=str(error) or details.message)

    return get_error_details(ErrorCategory.UNKNOWN)


def is_retryable_error(error: Any) -> bool:
    """Return whether ``error`` falls in a category safe to retry automatically."""
    return categorize_error(error).retryable


__all__ = [
    "categorize_by_status",
    "get_error_details",
    "categorize_error",
    "is_retryable_error",
]
