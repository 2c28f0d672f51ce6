"""Async API client with credential injection and error normalization.

Purpose:
    Wrap ``httpx.AsyncClient`` so every request carries the configured base
    URL, timeout, JSON headers and (when a credential store is present) a
    bearer token, and so every failure reaches callers as an
    :class:`~backoffice_client.base.errors.ApiError`.

External dependencies:
    - ``httpx`` for the underlying asynchronous HTTP client.

Failure handling:
    Transport failures (no response), malformed URLs and 4xx/5xx statuses are
    all converted by :func:`transform_error`. The resulting ``ApiError`` is raised ``from`` the
    httpx exception; nothing else escapes. On HTTP 401 the unauthorized
    handler (if any) receives the sign-in path before the error is raised.

Execution contexts:
    Interactive front ends pass a credential store and an unauthorized
    handler. Server-side callers omit both: no token lookup and no redirect
    happen on that path.

Timeout strategy:
    A single fixed timeout from :func:`get_timeout_config` (``default``)
    unless one is passed explicitly. In-flight requests cannot be cancelled
    by this layer; an expired timeout surfaces as a transport failure.
"""
from __future__ import annotations

from typing import Any, Dict, Optional, Union

import httpx

from ...config import ClientSettings, load_settings
from ...config.defaults import ACCESS_TOKEN_KEY, DEFAULT_HEADERS, SIGN_IN_PATH
from ...config.timeouts import get_timeout_config
from ..dto import ApiResponse
from ..errors import ApiError, transform_error
from ..interfaces import CredentialStore, UnauthorizedHandler
from ..logging import StructuredLogger, get_logger

_log = get_logger("backoffice.http")


def _decode_body(response: httpx.Response) -> Any:
    """Return the decoded JSON body, the raw text, or ``None`` for empty bodies."""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


class ApiClient:
    """Thin asynchronous wrapper over ``httpx.AsyncClient``."""

    def __init__(
        self,
        settings: Optional[ClientSettings] = None,
        *,
        credential_store: Optional[CredentialStore] = None,
        on_unauthorized: Optional[UnauthorizedHandler] = None,
        logger: Optional[StructuredLogger] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """Create a client bound to ``settings.api_url``.

        Parameters:
            settings: Runtime settings; defaults to development settings.
            credential_store: Source of the bearer token (read-only use).
            on_unauthorized: Called with the sign-in path on every 401.
            logger: When given, each failure is recorded via ``api_error``.
            timeout: Request timeout in seconds; defaults to the configured
                ``default`` preset.
            transport: Optional httpx transport (tests use ``MockTransport``).
            client: Pre-built ``httpx.AsyncClient``; it is not closed by
                :meth:`aclose`.
        """
        self.settings = settings or ClientSettings()
        self._credentials = credential_store
        self._on_unauthorized = on_unauthorized
        self._logger = logger
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=self.settings.api_url,
            timeout=timeout if timeout is not None else get_timeout_config().default,
            headers=dict(DEFAULT_HEADERS),
            transport=transport,
            follow_redirects=True,
        )

    async def aclose(self) -> None:
        """Close underlying transport resources when owned."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> ApiClient:
        return self

    async def __aexit__(self, *_: object) -> None:
        await self.aclose()

    def _auth_headers(self) -> Dict[str, str]:
        if self._credentials is None:
            return {}
        token = self._credentials.get(ACCESS_TOKEN_KEY)
        return {"Authorization": f"Bearer {token}"} if token else {}

    async def request(
        self,
        method: str,
        url: str,
        *,
        preset: Optional[str] = None,
        **kwargs: Any,
    ) -> ApiResponse[Any]:
        """Issue one request and return the success envelope.

        ``preset`` selects a named timeout from :func:`get_timeout_config`
        (``"upload"``, ``"long_running"``) for this request only. Redirects
        are followed; only 4xx/5xx statuses count as failures.

        Raises:
            ApiError: for any transport failure, malformed URL or error status.
            ValueError: for an unknown ``preset`` name.
        """
        if preset is not None:
            kwargs["timeout"] = get_timeout_config().for_preset(preset)
        headers = {**self._auth_headers(), **dict(kwargs.pop("headers", None) or {})}
        try:
            response = await self._client.request(method, url, headers=headers, **kwargs)
            if response.is_error:
                response.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise self._handle_failure(method, url, exc) from exc

        data = _decode_body(response)
        message = data.get("message") if isinstance(data, dict) else None
        return ApiResponse[Any](
            data=data,
            message=message if isinstance(message, str) else None,
            status=response.status_code,
        )

    def _handle_failure(
        self, method: str, url: str, exc: Union[httpx.HTTPError, httpx.InvalidURL]
    ) -> ApiError:
        api_error = transform_error(exc)
        if self._logger is not None:
            self._logger.api_error(
                f"{method.upper()} {url}",
                api_error,
                {"status": api_error.status, "code": api_error.code},
            )
        if api_error.status == 401 and self._on_unauthorized is not None:
            try:
                self._on_unauthorized(SIGN_IN_PATH)
            except Exception:
                _log.warning("unauthorized handler failed for %s %s", method.upper(), url, exc_info=True)
        return api_error

    async def get(self, url: str, **kwargs: Any) -> Any:
        """Issue one GET request and return the decoded body."""
        return (await self.request("GET", url, **kwargs)).data

    async def post(self, url: str, data: Any = None, **kwargs: Any) -> Any:
        """Issue one POST request with an optional JSON body."""
        return (await self.request("POST", url, json=data, **kwargs)).data

    async def put(self, url: str, data: Any = None, **kwargs: Any) -> Any:
        """Issue one PUT request with an optional JSON body."""
        return (await self.request("PUT", url, json=data, **kwargs)).data

    async def patch(self, url: str, data: Any = None, **kwargs: Any) -> Any:
        """Issue one PATCH request with an optional JSON body."""
        return (await self.request("PATCH", url, json=data, **kwargs)).data

    async def delete(self, url: str, **kwargs: Any) -> Any:
        """Issue one DELETE request and return the decoded body."""
        return (await self.request("DELETE", url, **kwargs)).data


def create_api_client(settings: Optional[ClientSettings] = None, **kwargs: Any) -> ApiClient:
    """Build an :class:`ApiClient`, loading settings from the environment when omitted."""
    return ApiClient(settings or load_settings(), **kwargs)


__all__ = ["ApiClient", "create_api_client"]
