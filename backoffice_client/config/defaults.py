"""backoffice_client.config.defaults
==================================

Central place for small, stable default values used across the
backoffice_client package. These defaults can be overridden via environment
variables (see :mod:`backoffice_client.config.env`) or by constructing
:class:`~backoffice_client.config.ClientSettings` explicitly.

This module intentionally avoids importing from other package modules to
prevent circular dependencies. Only plain constants live here.
"""

from __future__ import annotations

# ---- HTTP layer ----

# Base URL used when no API URL is configured.
DEFAULT_API_URL = "http://localhost:3000/api"
# Headers attached to every request issued by the API client.
DEFAULT_HEADERS = {"Content-Type": "application/json"}
# Credential-store key holding the bearer token.
ACCESS_TOKEN_KEY = "zervtek_access_token"
# Path the unauthorized handler navigates to on HTTP 401.
SIGN_IN_PATH = "/sign-in"

# ---- Runtime environment ----

DEFAULT_ENVIRONMENT = "development"
PRODUCTION_ENVIRONMENT = "production"

# ---- Logging ----

# Level names in ascending severity; the index is the priority.
LOG_LEVELS = ("debug", "info", "warn", "error")
PRODUCTION_MIN_LOG_LEVEL = "warn"
DEVELOPMENT_MIN_LOG_LEVEL = "debug"

# ---- Timeouts (seconds) ----

API_TIMEOUT_DEFAULT_SECONDS = 30.0
API_TIMEOUT_UPLOAD_SECONDS = 120.0
API_TIMEOUT_LONG_RUNNING_SECONDS = 60.0
# Upper bound for one remote log shipment; shipping is best-effort.
REMOTE_LOG_TIMEOUT_SECONDS = 5.0


__all__ = [
    "DEFAULT_API_URL",
    "DEFAULT_HEADERS",
    "ACCESS_TOKEN_KEY",
    "SIGN_IN_PATH",
    "DEFAULT_ENVIRONMENT",
    "PRODUCTION_ENVIRONMENT",
    "LOG_LEVELS",
    "PRODUCTION_MIN_LOG_LEVEL",
    "DEVELOPMENT_MIN_LOG_LEVEL",
    "API_TIMEOUT_DEFAULT_SECONDS",
    "API_TIMEOUT_UPLOAD_SECONDS",
    "API_TIMEOUT_LONG_RUNNING_SECONDS",
    "REMOTE_LOG_TIMEOUT_SECONDS",
]
