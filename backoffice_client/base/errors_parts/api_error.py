"""
Normalized API error exception type.

`ApiError` is the only exception the API client lets escape. It is raised
``from`` the underlying httpx exception so the transport cause stays
available for diagnostics without leaking to callers.
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(eq=False)
class ApiError(Exception):
    """Represents a failed API call in a normalized shape.

    Attributes:
        message: Human-readable message (server-supplied when available).
        code: Stable machine code such as ``"NOT_FOUND"``.
        status: HTTP status; ``500`` when no response was received.
        details: Decoded error body returned by the server, if any.
    """

    message: str
    code: str
    status: int
    details: Optional[Dict[str, Any]] = None

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __reduce__(self):
        return (type(self), (self.message, self.code, self.status, self.details))

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"{self.status} {self.code}: {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"message": self.message, "code": self.code, "status": self.status}
        if self.details is not None:
            data["details"] = self.details
        return data


_REQUIRED_FIELDS = ("message", "code", "status")


def is_api_error(value: Any) -> bool:
    """Return True when ``value`` looks like an :class:`ApiError`.

    Accepts real ``ApiError`` instances, mappings carrying all of ``message``,
    ``code`` and ``status`` keys, and objects exposing those attributes.
    ``None`` and strings are never API errors.
    """
    if value is None or isinstance(value, (str, bytes)):
        return False
    if isinstance(value, ApiError):
        return True
    if isinstance(value, Mapping):
        return all(key in value for key in _REQUIRED_FIELDS)
    return all(hasattr(value, attr) for attr in _REQUIRED_FIELDS)


__all__ = ["ApiError", "is_api_error"]
