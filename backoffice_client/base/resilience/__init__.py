"""Resilience helpers: retry with backoff, safe execution, error surfacing."""

from .error_handling import handle_server_error, handle_validation_error
from .retry import DEFAULT_RETRY_CONFIG, RetryConfig, retry_async, with_retry
from .safe_async import safe_async, safe_async_with_toast

__all__ = [
    "RetryConfig",
    "DEFAULT_RETRY_CONFIG",
    "retry_async",
    "with_retry",
    "safe_async",
    "safe_async_with_toast",
    "handle_server_error",
    "handle_validation_error",
]
