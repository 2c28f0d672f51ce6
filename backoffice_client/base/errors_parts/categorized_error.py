"""
Presentation-ready classified error record.

`CategorizedError` is what the classifier returns for any raised value. All
fields except ``message`` and ``status`` come from the static per-category
table in :mod:`.classification`.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_category import ErrorCategory


@dataclass(frozen=True)
class CategorizedError:
    """Classified failure suitable for direct display and structured logging.

    Attributes:
        category: Normalized :class:`ErrorCategory`.
        title: Short heading (e.g. ``"Session Expired"``).
        message: Longer description; a server-supplied message when one exists.
        action: Hint telling the user what to do next.
        retryable: Whether automatic re-attempt is considered safe. Derived
            from ``category`` only.
        status: HTTP status when the failure carried one.
    """

    category: ErrorCategory
    title: str
    message: str
    action: Optional[str] = None
    retryable: bool = False
    status: Optional[int] = None


__all__ = ["CategorizedError"]
