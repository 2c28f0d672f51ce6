"""In-memory implementation of CredentialStore.

Simple reference implementation backed by a dictionary. Suitable for
development, tests, and single-process scripts that obtain a token once.

Thread safety: Not thread-safe. Use locks if mutating from multiple threads.
"""

from __future__ import annotations

from typing import Dict, Mapping, Optional


class InMemoryCredentialStore:
    """Dictionary-backed credential store."""

    def __init__(self, initial: Optional[Mapping[str, str]] = None) -> None:
        self._values: Dict[str, str] = dict(initial or {})

    def get(self, name: str) -> Optional[str]:
        return self._values.get(name)

    def set(self, name: str, value: str) -> None:
        self._values[name] = value

    def remove(self, name: str) -> None:
        self._values.pop(name, None)
