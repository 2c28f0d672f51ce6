"""backoffice_client.config.env
=============================

Centralized environment variable mapping for client settings.

Purpose
-------
- Provide a single source of truth mapping each setting to the environment
  variable names it may be read from (canonical first, legacy aliases after).
- Offer small lookup helpers so :func:`backoffice_client.config.load_settings`
  stays declarative.

Design Notes
------------
- The frontend this client grew out of used ``NEXT_PUBLIC_*`` / ``NODE_ENV``
  names; those are accepted as aliases so an existing ``.env`` keeps working.
- Helpers never raise on unknown settings or unset variables; callers apply
  their own defaults.
"""

from __future__ import annotations

import os
from typing import Dict, Iterable, Mapping, Optional, Tuple

# Setting → canonical env var
ENV_MAP: Dict[str, str] = {
    "api_url": "BACKOFFICE_API_URL",
    "environment": "BACKOFFICE_ENV",
    "log_level": "BACKOFFICE_LOG_LEVEL",
    "log_endpoint": "BACKOFFICE_LOG_ENDPOINT",
    "demo_password": "BACKOFFICE_DEMO_PASSWORD",
}

# Setting → ordered tuple of acceptable env var names (canonical first)
ENV_ALIASES: Dict[str, Tuple[str, ...]] = {
    "api_url": ("BACKOFFICE_API_URL", "NEXT_PUBLIC_API_URL"),
    "environment": ("BACKOFFICE_ENV", "NODE_ENV"),
    "log_level": ("BACKOFFICE_LOG_LEVEL", "NEXT_PUBLIC_LOG_LEVEL"),
    "log_endpoint": ("BACKOFFICE_LOG_ENDPOINT", "NEXT_PUBLIC_LOG_ENDPOINT"),
    "demo_password": ("BACKOFFICE_DEMO_PASSWORD", "NEXT_PUBLIC_DEMO_PASSWORD"),
}


def get_env_var_candidates(setting: str) -> Iterable[str]:
    """Yield acceptable environment variable names for a setting.

    The canonical name is yielded first, followed by any aliases.
    """
    canonical = ENV_MAP.get(setting)
    if canonical:
        yield canonical
    for alias in ENV_ALIASES.get(setting, ()):  # pragma: no branch - small tuples
        if alias != canonical:
            yield alias


def resolve_setting(
    setting: str, environ: Optional[Mapping[str, str]] = None
) -> Tuple[Optional[str], Optional[str]]:
    """Resolve a setting value from the environment.

    Parameters
    ----------
    setting: str
        Setting name (a key of ``ENV_MAP``).
    environ: Optional[Mapping[str, str]]
        Mapping to read from; defaults to ``os.environ``.

    Returns
    -------
    Tuple[Optional[str], Optional[str]]
        ``(value, env_var_used)`` for the first non-blank candidate, or
        ``(None, None)`` when nothing is set.
    """
    env = os.environ if environ is None else environ
    for name in get_env_var_candidates(setting):
        val = env.get(name)
        if val and val.strip():
            return val.strip(), name
    return None, None


__all__ = [
    "ENV_MAP",
    "ENV_ALIASES",
    "get_env_var_candidates",
    "resolve_setting",
]
