"""UnauthorizedHandler Protocol (single-class module)."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class UnauthorizedHandler(Protocol):
    """Callable invoked with the sign-in path whenever a request returns 401.

    Interactive front ends navigate to ``sign_in_path``; headless callers
    simply do not install a handler.
    """

    def __call__(self, sign_in_path: str) -> None:  # pragma: no cover - interface
        ...
