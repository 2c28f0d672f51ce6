"""
Collaborator interfaces (Protocols) for the client layer.

This module re-exports Protocols split into single-class modules under
``backoffice_client.base.interfaces_parts`` while keeping imports stable for
upstream code.
"""

from __future__ import annotations

from .interfaces_parts import (
    CredentialStore,
    NotificationAction,
    NotificationSink,
    UnauthorizedHandler,
)

__all__ = [
    "CredentialStore",
    "NotificationAction",
    "NotificationSink",
    "UnauthorizedHandler",
]
