"""Request timeout presets for the API client.

Key Components
--------------
ApiTimeouts
    Dataclass capturing the three timeout presets (seconds) used by callers:
    ordinary requests, file uploads, and long-running reports/exports.

get_timeout_config()
    Returns a process-cached configuration, parsing environment overrides on
    first use only (or again after the relevant variables change). Supported
    environment variables (all optional):
        BACKOFFICE_TIMEOUT_DEFAULT_SECONDS
        BACKOFFICE_TIMEOUT_UPLOAD_SECONDS
        BACKOFFICE_TIMEOUT_LONG_RUNNING_SECONDS

Failure Modes
-------------
Unparsable or non-positive overrides are ignored and the built-in default
is used instead. Timeouts are not cancellable: an expired request surfaces
as an ordinary transport failure.
"""
from __future__ import annotations

from dataclasses import dataclass
import os

from .defaults import (
    API_TIMEOUT_DEFAULT_SECONDS,
    API_TIMEOUT_LONG_RUNNING_SECONDS,
    API_TIMEOUT_UPLOAD_SECONDS,
)

_ENV_NAMES = (
    "BACKOFFICE_TIMEOUT_DEFAULT_SECONDS",
    "BACKOFFICE_TIMEOUT_UPLOAD_SECONDS",
    "BACKOFFICE_TIMEOUT_LONG_RUNNING_SECONDS",
)


@dataclass(frozen=True)
class ApiTimeouts:
    """Container for request timeout presets (seconds).

    Attributes:
        default: Timeout applied to every request unless overridden.
        upload: Timeout for multipart/file upload calls.
        long_running: Timeout for slow report or export endpoints.
    """

    default: float = API_TIMEOUT_DEFAULT_SECONDS
    upload: float = API_TIMEOUT_UPLOAD_SECONDS
    long_running: float = API_TIMEOUT_LONG_RUNNING_SECONDS

    def for_preset(self, name: str) -> float:
        """Return the timeout for preset ``name`` (``default``, ``upload`` or ``long_running``)."""
        if name not in PRESETS:
            raise ValueError(f"unknown timeout preset: {name!r}")
        return getattr(self, name)


PRESETS = ("default", "upload", "long_running")

_CACHED: ApiTimeouts | None = None
# Last seen override values; a change invalidates the cache.
_ENV_GUARD: str | None = None


def _parse_env_float(name: str, default: float) -> float:
    """Parse an environment variable as a positive float with a fallback default."""
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        val = float(raw)
        return val if val > 0 else default
    except ValueError:
        return default


def get_timeout_config() -> ApiTimeouts:
    """Return the process-cached :class:`ApiTimeouts` instance."""
    global _CACHED, _ENV_GUARD  # noqa: PLW0603 - documented module cache
    cur_guard = "/".join(os.getenv(name, "") for name in _ENV_NAMES)
    if _CACHED is not None and _ENV_GUARD == cur_guard:
        return _CACHED

    _CACHED = ApiTimeouts(
        default=_parse_env_float(_ENV_NAMES[0], API_TIMEOUT_DEFAULT_SECONDS),
        upload=_parse_env_float(_ENV_NAMES[1], API_TIMEOUT_UPLOAD_SECONDS),
        long_running=_parse_env_float(_ENV_NAMES[2], API_TIMEOUT_LONG_RUNNING_SECONDS),
    )
    _ENV_GUARD = cur_guard
    return _CACHED


def reset_timeout_config() -> None:
    """Drop the cached configuration so the next call re-reads the environment."""
    global _CACHED, _ENV_GUARD  # noqa: PLW0603
    _CACHED = None
    _ENV_GUARD = None


__all__ = [
    "ApiTimeouts",
    "PRESETS",
    "get_timeout_config",
    "reset_timeout_config",
]
