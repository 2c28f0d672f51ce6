"""
Success envelope returned by :meth:`ApiClient.request`.

External dependencies: Pydantic only. The verb helpers on the client unwrap
the envelope and hand callers ``data`` alone.
"""

from __future__ import annotations

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Decoded body of a successful response plus its HTTP status.

    Attributes:
        data: Decoded JSON body, or the raw text when the body is not JSON.
        message: Optional server message (``message`` key of an object body).
        status: HTTP status code of the response.
    """

    data: T
    message: Optional[str] = None
    status: int
