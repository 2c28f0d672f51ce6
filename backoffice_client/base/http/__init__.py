"""HTTP utilities package.

Exposes the async API client.
"""

from .client import ApiClient, create_api_client

__all__ = ["ApiClient", "create_api_client"]
