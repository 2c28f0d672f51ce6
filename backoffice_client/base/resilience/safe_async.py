"""Wrappers that run a coroutine and turn any failure into ``None``.

Both helpers log the failure on the console channel, optionally surface it
through a :class:`NotificationSink`, and hand the exception to ``on_error``.
They never re-raise.
"""
from __future__ import annotations

from typing import Awaitable, Callable, Optional, TypeVar

from ..interfaces import NotificationSink
from ..logging import get_logger

T = TypeVar("T")

_log = get_logger("backoffice.resilience")

DEFAULT_ERROR_MESSAGE = "An error occurred"


async def safe_async(
    fn: Callable[[], Awaitable[T]],
    *,
    notifier: Optional[NotificationSink] = None,
    error_message: str = DEFAULT_ERROR_MESSAGE,
    show_toast: bool = True,
    on_error: Optional[Callable[[Exception], None]] = None,
    on_success: Optional[Callable[[], None]] = None,
) -> Optional[T]:
    """Await ``fn`` and return its result, or ``None`` if it raised."""
    try:
        result = await fn()
    except Exception as err:
        _log.error("[safe_async] %s: %s", error_message, err, exc_info=err)
        if show_toast and notifier is not None:
            notifier.error(error_message)
        if on_error is not None:
            on_error(err)
        return None
    if on_success is not None:
        on_success()
    return result


async def safe_async_with_toast(
    fn: Callable[[], Awaitable[T]],
    *,
    notifier: NotificationSink,
    loading_message: str = "Loading...",
    success_message: str = "Success!",
    error_message: str = DEFAULT_ERROR_MESSAGE,
    on_error: Optional[Callable[[Exception], None]] = None,
) -> Optional[T]:
    """Await ``fn`` behind a loading notification that turns into its outcome.

    One loading notification is shown first; on completion it is replaced in
    place (same id) by a success or error notification.
    """
    toast_id = notifier.loading(loading_message)
    try:
        result = await fn()
    except Exception as err:
        _log.error("[safe_async_with_toast] %s: %s", error_message, err, exc_info=err)
        notifier.error(error_message, id=toast_id)
        if on_error is not None:
            on_error(err)
        return None
    notifier.success(success_message, id=toast_id)
    return result


__all__ = ["safe_async", "safe_async_with_toast", "DEFAULT_ERROR_MESSAGE"]
