"""Collaborator Protocols, one class per module."""

from .credential_store import CredentialStore
from .notification_action import NotificationAction
from .notification_sink import NotificationSink
from .unauthorized_handler import UnauthorizedHandler

__all__ = [
    "CredentialStore",
    "NotificationAction",
    "NotificationSink",
    "UnauthorizedHandler",
]
