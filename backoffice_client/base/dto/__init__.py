"""Pydantic DTOs for the client layer."""

from .api_response import ApiResponse

__all__ = ["ApiResponse"]
