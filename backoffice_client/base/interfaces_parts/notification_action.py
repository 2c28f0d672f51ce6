"""NotificationAction value object (single-class module)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True)
class NotificationAction:
    """Clickable action attached to an error notification (e.g. "Retry")."""

    label: str
    on_click: Callable[[], None]
