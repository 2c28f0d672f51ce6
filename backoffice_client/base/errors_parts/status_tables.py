"""
HTTP status lookup tables and the transport-error normalizer.

Maps a status code to a default user message and a stable error code, and
turns any httpx failure into an :class:`ApiError`. Unknown statuses fall
back to generic entries, so both lookups are total.
"""
from __future__ import annotations

from typing import Any, Dict, Optional, Union

import httpx

from .api_error import ApiError

# Status used when the transport produced no response at all.
FALLBACK_STATUS = 500

_DEFAULT_MESSAGES: Dict[int, str] = {
    400: "Invalid request. Please check your input.",
    401: "You need to sign in to continue.",
    403: "You do not have permission to perform this action.",
    404: "The requested resource was not found.",
    409: "This action conflicts with existing data.",
    422: "The provided data is invalid.",
    429: "Too many requests. Please try again later.",
    500: "An unexpected error occurred. Please try again.",
    502: "Service temporarily unavailable. Please try again.",
    503: "Service is under maintenance. Please try again later.",
}
_GENERIC_MESSAGE = "Something went wrong. Please try again."

_ERROR_CODES: Dict[int, str] = {
    400: "BAD_REQUEST",
    401: "UNAUTHORIZED",
    403: "FORBIDDEN",
    404: "NOT_FOUND",
    409: "CONFLICT",
    422: "VALIDATION_ERROR",
    429: "RATE_LIMITED",
    500: "SERVER_ERROR",
    502: "BAD_GATEWAY",
    503: "SERVICE_UNAVAILABLE",
}
_GENERIC_CODE = "UNKNOWN_ERROR"


def get_default_error_message(status: int) -> str:
    """Return the canned user message for ``status``."""
    return _DEFAULT_MESSAGES.get(status, _GENERIC_MESSAGE)


def get_error_code(status: int) -> str:
    """Return the stable error code for ``status``."""
    return _ERROR_CODES.get(status, _GENERIC_CODE)


def response_body(response: Optional[httpx.Response]) -> Optional[Dict[str, Any]]:
    """Decode a JSON object body, returning ``None`` for anything else."""
    if response is None:
        return None
    try:
        body = response.json()
    except ValueError:
        return None
    return body if isinstance(body, dict) else None


def body_message(body: Optional[Dict[str, Any]], *keys: str) -> Optional[str]:
    """Return the first non-empty string found under ``keys`` in ``body``."""
    if not body:
        return None
    for key in keys:
        val = body.get(key)
        if isinstance(val, str) and val:
            return val
    return None


def _error_response(exc: Exception) -> Optional[httpx.Response]:
    if isinstance(exc, httpx.HTTPStatusError):
        return exc.response
    return None


def transform_error(exc: Union[httpx.HTTPError, httpx.InvalidURL]) -> ApiError:
    """Normalize an httpx failure into an :class:`ApiError`.

    Precedence for ``message``:
        1. ``message`` field of the JSON error body.
        2. ``title`` field (problem-details style bodies).
        3. Canned message for the status.

    Transport failures and malformed URLs (no response) get ``status=500``.
    """
    response = _error_response(exc)
    status = response.status_code if response is not None else FALLBACK_STATUS
    body = response_body(response)
    message = body_message(body, "message", "title") or get_default_error_message(status)
    return ApiError(
        message=message,
        code=get_error_code(status),
        status=status,
        details=body,
    )


__all__ = [
    "FALLBACK_STATUS",
    "get_default_error_message",
    "get_error_code",
    "response_body",
    "body_message",
    "transform_error",
]
