"""backoffice_client package

Resilient request/error pipeline for the back-office API.

Purpose:
    Provide a small, stable API for calling the back-office HTTP API from
    Python: an async client that attaches credentials and normalizes every
    failure, a deterministic error classifier, retry/safe-execution helpers,
    and a level-filtered structured logger with optional remote shipping.

Public API (re-exported):
    - Version: ``__version__``
    - Configuration: :class:`ClientSettings`, :func:`load_settings`
    - HTTP: :class:`ApiClient`, :func:`create_api_client`, :class:`ApiResponse`
    - Errors: :class:`ApiError`, :func:`is_api_error`, :class:`ErrorCategory`,
      :class:`CategorizedError`, :func:`categorize_error`,
      :func:`categorize_by_status`, :func:`is_retryable_error`
    - Logging: :class:`StructuredLogger`, :class:`LogEntry`, :class:`LogLevel`
    - Resilience: :func:`retry_async`, :class:`RetryConfig`,
      :func:`safe_async`, :func:`safe_async_with_toast`,
      :func:`handle_server_error`, :func:`handle_validation_error`
"""

from .config import ClientSettings, load_settings
from .base.credentials import InMemoryCredentialStore
from .base.dto import ApiResponse
from .base.errors import (
    ApiError,
    CategorizedError,
    ErrorCategory,
    categorize_by_status,
    categorize_error,
    get_default_error_message,
    get_error_code,
    get_error_details,
    is_api_error,
    is_retryable_error,
    transform_error,
)
from .base.http import ApiClient, create_api_client
from .base.interfaces import (
    CredentialStore,
    NotificationAction,
    NotificationSink,
    UnauthorizedHandler,
)
from .base.logging import LogEntry, LogLevel, StructuredLogger, get_logger
from .base.log_support import RemoteLogShipper
from .base.resilience import (
    RetryConfig,
    handle_server_error,
    handle_validation_error,
    retry_async,
    safe_async,
    safe_async_with_toast,
    with_retry,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ClientSettings",
    "load_settings",
    "ApiClient",
    "create_api_client",
    "ApiResponse",
    "ApiError",
    "is_api_error",
    "transform_error",
    "get_default_error_message",
    "get_error_code",
    "ErrorCategory",
    "CategorizedError",
    "categorize_by_status",
    "categorize_error",
    "get_error_details",
    "is_retryable_error",
    "CredentialStore",
    "InMemoryCredentialStore",
    "NotificationAction",
    "NotificationSink",
    "UnauthorizedHandler",
    "StructuredLogger",
    "LogEntry",
    "LogLevel",
    "RemoteLogShipper",
    "get_logger",
    "RetryConfig",
    "retry_async",
    "with_retry",
    "safe_async",
    "safe_async_with_toast",
    "handle_server_error",
    "handle_validation_error",
]
