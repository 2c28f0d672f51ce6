"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `backoffice_client.base.errors` for the stable surface.
"""

from .api_error import ApiError, is_api_error
from .categorized_error import CategorizedError
from .classification import (
    categorize_by_status,
    categorize_error,
    get_error_details,
    is_retryable_error,
)
from .error_category import ErrorCategory
from .status_tables import get_default_error_message, get_error_code, transform_error

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
