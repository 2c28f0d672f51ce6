"""Entry points that classify, log and surface failures in that order."""
from __future__ import annotations

from typing import Any, Callable, List, Mapping, Optional

from ..errors import CategorizedError, categorize_error
from ..interfaces import NotificationAction, NotificationSink
from ..logging import StructuredLogger

RETRY_LABEL = "Retry"


def handle_server_error(
    error: Any,
    *,
    logger: StructuredLogger,
    notifier: Optional[NotificationSink] = None,
    silent: bool = False,
    on_retry: Optional[Callable[[], None]] = None,
) -> CategorizedError:
    """Categorize ``error``, log it, then notify unless ``silent``.

    A "Retry" action is attached only for retryable categories and only when
    ``on_retry`` is supplied.
    """
    categorized = categorize_error(error)
    logger.error(
        "Server error occurred",
        {
            "category": categorized.category.value,
            "status": categorized.status,
            "message": categorized.message,
            "error": str(error),
        },
    )
    if not silent and notifier is not None:
        action = None
        if categorized.retryable and on_retry is not None:
            action = NotificationAction(label=RETRY_LABEL, on_click=on_retry)
        notifier.error(categorized.title, description=categorized.message, action=action)
    return categorized


def handle_validation_error(
    errors: Mapping[str, List[str]],
    *,
    logger: StructuredLogger,
    notifier: Optional[NotificationSink] = None,
    silent: bool = False,
) -> Mapping[str, List[str]]:
    """Log field validation errors and summarise them in one notification."""
    error_count = len(errors)
    first_messages = next(iter(errors.values()), None)
    first_error = first_messages[0] if first_messages else None

    logger.warn("Validation error", {"errorCount": error_count, "errors": dict(errors)})

    if not silent and notifier is not None:
        if error_count == 1:
            description = first_error
        else:
            description = f"{error_count} fields have errors. Please review your input."
        notifier.error("Validation Error", description=description)
    return errors


__all__ = ["handle_server_error", "handle_validation_error", "RETRY_LABEL"]
