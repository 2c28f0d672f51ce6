"""Credential store implementations."""

from .in_memory_store import InMemoryCredentialStore

__all__ = ["InMemoryCredentialStore"]
