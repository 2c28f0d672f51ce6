"""Log levels and the immutable log entry record.

``LogLevel`` orders severities ``debug < info < warn < error`` and maps each
onto the matching standard-library level, which is how entries reach the
console channel.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional

ISO = "%Y-%m-%dT%H:%M:%S.%fZ"


class LogLevel(str, Enum):
    """Severity levels in ascending priority."""

    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"

    @property
    def priority(self) -> int:
        return _PRIORITY[self]

    @property
    def logging_level(self) -> int:
        return _STDLIB_LEVELS[self]

    @classmethod
    def parse(cls, value: "LogLevel | str") -> "LogLevel":
        """Accept enum members or names (case-insensitive, ``warning`` → ``warn``)."""
        if isinstance(value, cls):
            return value
        name = str(value).strip().lower()
        if name == "warning":
            name = "warn"
        return cls(name)


_PRIORITY = {LogLevel.DEBUG: 0, LogLevel.INFO: 1, LogLevel.WARN: 2, LogLevel.ERROR: 3}
_STDLIB_LEVELS = {
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARN: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
}


@dataclass(frozen=True)
class LogEntry:
    """One emitted log line.

    ``context`` is copied on creation; the entry is never mutated afterwards.
    """

    timestamp: str
    level: LogLevel
    message: str
    context: Optional[Mapping[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "timestamp": self.timestamp,
            "level": self.level.value,
            "message": self.message,
        }
        if self.context is not None:
            data["context"] = dict(self.context)
        return data


__all__ = ["ISO", "LogLevel", "LogEntry"]
