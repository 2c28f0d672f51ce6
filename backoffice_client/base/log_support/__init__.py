"""Auxiliary logging helpers (entries, formatting, remote shipping) used by base.logging."""

from .entry_formatter import format_log_entry
from .log_entry import ISO, LogEntry, LogLevel
from .remote_shipper import RemoteLogShipper

__all__ = ["ISO", "LogEntry", "LogLevel", "format_log_entry", "RemoteLogShipper"]
