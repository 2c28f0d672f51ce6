"""Deterministic single-line rendering of :class:`LogEntry` objects."""
from __future__ import annotations

import json

from .log_entry import LogEntry


def format_log_entry(entry: LogEntry) -> str:
    """Render ``[timestamp] [LEVEL] message {json-context}``.

    The context suffix is compact JSON and appears only when a context was
    supplied; values JSON cannot encode are rendered with ``str``.
    """
    line = f"[{entry.timestamp}] [{entry.level.value.upper()}] {entry.message}"
    if entry.context is None:
        return line
    context = json.dumps(dict(entry.context), separators=(",", ":"), default=str, ensure_ascii=False)
    return f"{line} {context}"


__all__ = ["format_log_entry"]
