"""NotificationSink Protocol (single-class module).

UI mechanism surfacing loading/success/error states to the user (toasts,
status bar, chat message...). Notifications sharing an ``id`` replace each
other in place, which lets a loading notification turn into its outcome.
"""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

from .notification_action import NotificationAction


@runtime_checkable
class NotificationSink(Protocol):
    """Interface for user-facing notifications."""

    def error(
        self,
        title: str,
        *,
        description: Optional[str] = None,
        action: Optional[NotificationAction] = None,
        id: Optional[str] = None,  # noqa: A002 - mirrors the sink's own vocabulary
    ) -> None:  # pragma: no cover - interface
        """Show an error notification."""
        ...

    def success(
        self,
        message: str,
        *,
        id: Optional[str] = None,  # noqa: A002
    ) -> None:  # pragma: no cover - interface
        """Show a success notification, replacing ``id`` when given."""
        ...

    def loading(self, message: str) -> str:  # pragma: no cover - interface
        """Show a loading notification and return its id."""
        ...
