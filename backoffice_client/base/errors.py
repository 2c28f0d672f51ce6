"""Unified error taxonomy public surface.

This module re-exports the one-concept-per-file implementations under
``backoffice_client.base.errors_parts`` to maintain a stable import path.
"""

from .errors_parts.api_error import ApiError, is_api_error
from .errors_parts.categorized_error import CategorizedError
from .errors_parts.classification import (
    categorize_by_status,
    categorize_error,
    get_error_details,
    is_retryable_error,
)
from .errors_parts.error_category import ErrorCategory
from .errors_parts.status_tables import (
    get_default_error_message,
    get_error_code,
    transform_error,
)

__all__ = [
    "ApiError",
    "is_api_error",
    "CategorizedError",
    "ErrorCategory",
    "categorize_by_status",
    "categorize_error",
    "get_error_details",
    "is_retryable_error",
    "get_default_error_message",
    "get_error_code",
    "transform_error",
]
