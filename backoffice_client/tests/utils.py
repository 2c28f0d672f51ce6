"""Shared fakes for the client test suite.

Purpose:
    Keep the collaborator doubles (notification sink, unauthorized handler,
    remote shipper, console channel) in one place so individual test modules
    stay focused on behaviour rather than boilerplate.
"""
from __future__ import annotations

import io
import itertools
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple

from backoffice_client.base.interfaces import NotificationAction
from backoffice_client.base.log_support import LogEntry

FIXED_NOW = datetime(2024, 1, 2, 3, 4, 5, 678000, tzinfo=timezone.utc)
FIXED_TIMESTAMP = "2024-01-02T03:04:05.678000Z"

_console_ids = itertools.count()


def fixed_clock() -> datetime:
    return FIXED_NOW


class RecordingNotifier:
    """NotificationSink that records every call as ``(kind, text, options)``."""

    def __init__(self) -> None:
        self.calls: List[Tuple[str, str, Dict[str, Any]]] = []
        self._ids = itertools.count(1)

    def error(
        self,
        title: str,
        *,
        description: Optional[str] = None,
        action: Optional[NotificationAction] = None,
        id: Optional[str] = None,  # noqa: A002
    ) -> None:
        self.calls.append(("error", title, {"description": description, "action": action, "id": id}))

    def success(self, message: str, *, id: Optional[str] = None) -> None:  # noqa: A002
        self.calls.append(("success", message, {"id": id}))

    def loading(self, message: str) -> str:
        toast_id = f"toast-{next(self._ids)}"
        self.calls.append(("loading", message, {"id": toast_id}))
        return toast_id


class RecordingRedirect:
    """UnauthorizedHandler that records the paths it was asked to open."""

    def __init__(self) -> None:
        self.paths: List[str] = []

    def __call__(self, sign_in_path: str) -> None:
        self.paths.append(sign_in_path)


class RecordingShipper:
    """Stand-in for RemoteLogShipper that keeps shipped entries in memory."""

    def __init__(self) -> None:
        self.entries: List[LogEntry] = []

    def ship(self, entry: LogEntry) -> None:
        self.entries.append(entry)


def make_console() -> Tuple[logging.Logger, io.StringIO]:
    """Return an isolated console logger writing bare messages to a buffer."""
    stream = io.StringIO()
    logger = logging.getLogger(f"backoffice.tests.console{next(_console_ids)}")
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter("%(levelname)s|%(message)s"))
    logger.handlers[:] = [handler]
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    return logger, stream


def console_lines(stream: io.StringIO) -> List[str]:
    return [ln for ln in stream.getvalue().splitlines() if ln]
