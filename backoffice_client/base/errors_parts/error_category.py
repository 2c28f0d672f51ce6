"""
User-facing error categories (taxonomy).

Defines the `ErrorCategory` enumeration produced by the error classifier.
Values are lowercase snake_case and are a stable public contract for logging
and analytics.
"""
from __future__ import annotations

from enum import Enum


class ErrorCategory(str, Enum):
    """Enumerated failure categories; every failure maps to exactly one."""

    NETWORK = "network"
    AUTH = "auth"
    PERMISSION = "permission"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    RATE_LIMIT = "rate_limit"
    SERVER = "server"
    UNKNOWN = "unknown"


__all__ = ["ErrorCategory"]
