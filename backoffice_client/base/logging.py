"""Structured, level-filtered logging for the client layer.

Rationale:
- Central place to configure the console channel (standard ``logging``), so
  modules never attach ad-hoc handlers.
- ``StructuredLogger`` adds what the console channel lacks: a configured
  minimum level, deterministic ``[timestamp] [LEVEL] message {context}``
  lines, convenience helpers, and best-effort remote shipping of warn/error
  entries in production.

Console channel:
    ``get_logger`` returns the shared ``backoffice`` logger (or a child that
    propagates to it). The shared logger owns exactly one tagged stderr
    handler and does not propagate to the root logger.
"""
from __future__ import annotations

import contextlib
import logging
import sys
import traceback
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Mapping, Optional

from ..config import ClientSettings
from .log_support import ISO, LogEntry, LogLevel, RemoteLogShipper, format_log_entry

_BASE_LOGGER_NAME = "backoffice"
_BASE_LOGGER_ATTR = "_backoffice_logger_initialized"
_CONSOLE_HANDLER_ATTR = "_backoffice_console_handler"


def _console_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(message)s"))
    setattr(handler, _CONSOLE_HANDLER_ATTR, True)
    return handler


def _ensure_base_logger(level: int) -> logging.Logger:
    """Initialize and return the shared ``backoffice`` logger."""
    logger = logging.getLogger(_BASE_LOGGER_NAME)
    if getattr(logger, _BASE_LOGGER_ATTR, False):
        for existing in list(logger.handlers):
            if not getattr(existing, _CONSOLE_HANDLER_ATTR, False):
                continue
            stream_obj = getattr(existing, "stream", None)
            if stream_obj is None or getattr(stream_obj, "closed", False):
                # stderr was swapped and closed underneath us (pytest capture)
                logger.removeHandler(existing)
                with contextlib.suppress(Exception):
                    existing.close()
                logger.addHandler(_console_handler(logger.level))
        return logger

    logger.setLevel(level)
    logger.handlers[:] = [_console_handler(level)]
    logger.propagate = False
    setattr(logger, _BASE_LOGGER_ATTR, True)
    return logger


def get_logger(name: str = _BASE_LOGGER_NAME, level: int = logging.DEBUG) -> logging.Logger:
    """Return the shared console logger or a child propagating to it.

    The console channel passes everything at or above ``level`` (DEBUG by
    default); level filtering for application entries happens in
    :class:`StructuredLogger`.
    """
    base_logger = _ensure_base_logger(level)
    if name == _BASE_LOGGER_NAME:
        return base_logger
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    return logger


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class StructuredLogger:
    """Leveled application logger with optional remote shipping.

    Parameters
    ----------
    settings: ClientSettings | None
        Supplies the minimum level, the production flag and the remote
        endpoint. Defaults to development settings.
    console: logging.Logger | None
        Console channel; defaults to ``get_logger("backoffice.app")``.
    shipper: RemoteLogShipper | None
        Remote sink. When omitted, one is built from ``settings.log_endpoint``
        in production; outside production nothing is shipped.
    clock: Callable[[], datetime] | None
        Timestamp source (UTC), injectable for deterministic output.
    """

    def __init__(
        self,
        settings: Optional[ClientSettings] = None,
        *,
        console: Optional[logging.Logger] = None,
        shipper: Optional[RemoteLogShipper] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self._settings = settings or ClientSettings()
        self.min_level = LogLevel.parse(self._settings.min_log_level)
        self._console = console or get_logger(f"{_BASE_LOGGER_NAME}.app")
        if shipper is None and self._settings.is_production and self._settings.log_endpoint:
            shipper = RemoteLogShipper(
                self._settings.log_endpoint,
                page_url=self._settings.page_url,
                user_agent=self._settings.user_agent,
            )
        self.shipper = shipper
        self._clock = clock or _utc_now

    def should_log(self, level: LogLevel | str) -> bool:
        return LogLevel.parse(level).priority >= self.min_level.priority

    def log(
        self,
        level: LogLevel | str,
        message: str,
        context: Optional[Mapping[str, Any]] = None,
    ) -> Optional[LogEntry]:
        """Emit one entry; returns it, or ``None`` when below the threshold."""
        lvl = LogLevel.parse(level)
        if not self.should_log(lvl):
            return None
        entry = LogEntry(
            timestamp=self._clock().strftime(ISO),
            level=lvl,
            message=message,
            context=dict(context) if context is not None else None,
        )
        self._console.log(lvl.logging_level, format_log_entry(entry))
        self._send_to_remote(entry)
        return entry

    def _send_to_remote(self, entry: LogEntry) -> None:
        if self.shipper is None or not self._settings.is_production:
            return
        if entry.level not in (LogLevel.WARN, LogLevel.ERROR):
            return
        self.shipper.ship(entry)

    def debug(self, message: str, context: Optional[Mapping[str, Any]] = None) -> Optional[LogEntry]:
        return self.log(LogLevel.DEBUG, message, context)

    def info(self, message: str, context: Optional[Mapping[str, Any]] = None) -> Optional[LogEntry]:
        return self.log(LogLevel.INFO, message, context)

    def warn(self, message: str, context: Optional[Mapping[str, Any]] = None) -> Optional[LogEntry]:
        return self.log(LogLevel.WARN, message, context)

    def error(self, message: str, context: Optional[Mapping[str, Any]] = None) -> Optional[LogEntry]:
        return self.log(LogLevel.ERROR, message, context)

    def api_error(
        self,
        endpoint: str,
        error: Any,
        context: Optional[Mapping[str, Any]] = None,
    ) -> Optional[LogEntry]:
        """Log a failed API call at ``error`` with the exception message and stack."""
        fields: Dict[str, Any] = dict(context or {})
        if isinstance(error, BaseException):
            fields["error"] = getattr(error, "message", None) or str(error)
            fields["stack"] = "".join(
                traceback.format_exception(type(error), error, error.__traceback__)
            )
        else:
            fields["error"] = "Unknown error"
        return self.log(LogLevel.ERROR, f"API Error: {endpoint}", fields)

    def action(self, name: str, context: Optional[Mapping[str, Any]] = None) -> Optional[LogEntry]:
        return self.log(LogLevel.INFO, f"User Action: {name}", context)

    def perf(
        self,
        operation: str,
        duration_ms: float,
        context: Optional[Mapping[str, Any]] = None,
    ) -> Optional[LogEntry]:
        return self.log(LogLevel.DEBUG, f"Performance: {operation}", {**(context or {}), "durationMs": duration_ms})


__all__ = [
    "LogEntry",
    "LogLevel",
    "StructuredLogger",
    "format_log_entry",
    "get_logger",
]
