"""Configuration layer for the backoffice client.

Goals
-----
* Centralize defaults (base URL, token key, sign-in path, log levels).
* Merge sources in a predictable order:
    1. Built-in defaults (``defaults.py``)
    2. Environment variables (canonical names first, then aliases; ``env.py``)
    3. In-code overrides (construct :class:`ClientSettings` directly)
* Read the environment once, at :func:`load_settings` time. Everything else
  in the package receives a :class:`ClientSettings` through its constructor.

Public API
----------
* ClientSettings
* load_settings(environ: Mapping[str, str] | None = None) -> ClientSettings
* ApiTimeouts / get_timeout_config()
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

from .defaults import (
    DEFAULT_API_URL,
    DEFAULT_ENVIRONMENT,
    DEVELOPMENT_MIN_LOG_LEVEL,
    LOG_LEVELS,
    PRODUCTION_ENVIRONMENT,
    PRODUCTION_MIN_LOG_LEVEL,
)
from .env import resolve_setting
from .timeouts import ApiTimeouts, get_timeout_config, reset_timeout_config


@dataclass(frozen=True)
class ClientSettings:
    """Immutable runtime settings shared by the client, logger and utilities.

    Attributes:
        api_url: Base URL prepended to relative request paths.
        environment: Deployment environment name (``production`` enables
            remote log shipping and raises the default log threshold).
        log_level: Optional explicit minimum log level name.
        log_endpoint: Optional URL receiving warn/error entries as JSON.
        demo_password: Demo sign-in credential; carried for completeness.
        page_url: Optional page/location string attached to shipped logs.
        user_agent: Optional client agent string attached to shipped logs.
    """

    api_url: str = DEFAULT_API_URL
    environment: str = DEFAULT_ENVIRONMENT
    log_level: Optional[str] = None
    log_endpoint: Optional[str] = None
    demo_password: Optional[str] = None
    page_url: Optional[str] = None
    user_agent: Optional[str] = None

    @property
    def is_production(self) -> bool:
        return self.environment.strip().lower() == PRODUCTION_ENVIRONMENT

    @property
    def min_log_level(self) -> str:
        """Return the effective minimum level name.

        An explicit ``log_level`` wins when it names a known level (``warning``
        is accepted for ``warn``); otherwise the environment default applies.
        """
        if self.log_level:
            name = self.log_level.strip().lower()
            if name == "warning":
                name = "warn"
            if name in LOG_LEVELS:
                return name
        return PRODUCTION_MIN_LOG_LEVEL if self.is_production else DEVELOPMENT_MIN_LOG_LEVEL


def load_settings(environ: Optional[Mapping[str, str]] = None) -> ClientSettings:
    """Build :class:`ClientSettings` from environment variables.

    Parameters
    ----------
    environ: Optional[Mapping[str, str]]
        Mapping to read from; defaults to ``os.environ``. Passing a plain
        dict keeps tests free of process-environment mutation.
    """
    api_url, _ = resolve_setting("api_url", environ)
    environment, _ = resolve_setting("environment", environ)
    log_level, _ = resolve_setting("log_level", environ)
    log_endpoint, _ = resolve_setting("log_endpoint", environ)
    demo_password, _ = resolve_setting("demo_password", environ)
    return ClientSettings(
        api_url=api_url or DEFAULT_API_URL,
        environment=environment or DEFAULT_ENVIRONMENT,
        log_level=log_level,
        log_endpoint=log_endpoint,
        demo_password=demo_password,
    )


__all__ = [
    "ClientSettings",
    "load_settings",
    "ApiTimeouts",
    "get_timeout_config",
    "reset_timeout_config",
]
