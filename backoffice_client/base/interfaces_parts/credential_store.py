"""CredentialStore Protocol (single-class module).

Key-value store holding the bearer token (cookie jar, keyring, session...).
The API client only ever reads from it.
"""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class CredentialStore(Protocol):
    """Interface for a string key-value credential store."""

    def get(self, name: str) -> Optional[str]:  # pragma: no cover - interface
        """Return the stored value for ``name`` or ``None`` when absent."""
        ...

    def set(self, name: str, value: str) -> None:  # pragma: no cover - interface
        """Store ``value`` under ``name``, replacing any previous value."""
        ...

    def remove(self, name: str) -> None:  # pragma: no cover - interface
        """Delete ``name``; missing keys are ignored."""
        ...
