"""Best-effort remote shipping of log entries.

Purpose:
    Relay warn/error entries to an HTTP collector without ever blocking or
    failing the caller. ``ship`` returns immediately; the POST runs as a
    detached asyncio task when an event loop is running in the current
    thread, or on a daemon thread otherwise.

External dependencies:
    - ``httpx`` for the POST (async client on the loop, sync client on the
      fallback thread).

Wire format (JSON body):
    ``{timestamp, level, message, context?, url?, userAgent?}``. Context values
    JSON cannot encode are sent as their ``str()``, as on the console. The response
    is never read; any non-2xx status or transport failure is ignored.

Lifecycle & cleanup:
    Pending tasks are retained until done so they are not garbage collected
    mid-flight. :meth:`drain` awaits them (shutdown, tests) and :meth:`join`
    waits for fallback threads; :meth:`aclose` does both. An injected client
    is never closed.
"""
from __future__ import annotations

import asyncio
import contextlib
import json
import threading
from typing import Any, Dict, Optional, Set

import httpx

from ...config.defaults import REMOTE_LOG_TIMEOUT_SECONDS
from .log_entry import LogEntry

_JSON_HEADERS = {"Content-Type": "application/json"}


def _encode(body: Dict[str, Any]) -> bytes:
    return json.dumps(body, default=str).encode("utf-8")


class RemoteLogShipper:
    """Fire-and-forget POST of log entries to ``endpoint``."""

    def __init__(
        self,
        endpoint: str,
        *,
        page_url: Optional[str] = None,
        user_agent: Optional[str] = None,
        timeout: float = REMOTE_LOG_TIMEOUT_SECONDS,
        transport: Any = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """Create a shipper.

        Parameters:
            endpoint: Collector URL.
            page_url: Optional location string sent as ``url``.
            user_agent: Optional agent string sent as ``userAgent``.
            timeout: Per-shipment timeout in seconds.
            transport: Optional httpx transport (sync and async capable, e.g.
                ``httpx.MockTransport``) used for clients created here.
            client: Optional shared ``httpx.AsyncClient`` for the loop path;
                it is never closed by the shipper.
        """
        self.endpoint = endpoint
        self._page_url = page_url
        self._user_agent = user_agent
        self._timeout = timeout
        self._transport = transport
        self._client = client
        self._pending: Set[asyncio.Task[None]] = set()
        self._threads: Set[threading.Thread] = set()

    def payload(self, entry: LogEntry) -> Dict[str, Any]:
        body = entry.to_dict()
        if self._page_url is not None:
            body["url"] = self._page_url
        if self._user_agent is not None:
            body["userAgent"] = self._user_agent
        return body

    def ship(self, entry: LogEntry) -> None:
        """Schedule delivery of ``entry``; never raises, never awaits."""
        body = self.payload(entry)
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            loop = None

        if loop is None:
            thread = threading.Thread(
                target=self._post_blocking,
                args=(body,),
                name="backoffice-log-shipper",
                daemon=True,
            )
            self._threads.add(thread)
            thread.start()
            return

        task = loop.create_task(self._post(body))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _post(self, body: Dict[str, Any]) -> None:
        with contextlib.suppress(Exception):  # nosec B110 - shipping is best-effort by contract
            if self._client is not None:
                await self._client.post(self.endpoint, content=_encode(body), headers=_JSON_HEADERS)
                return
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                await client.post(self.endpoint, content=_encode(body), headers=_JSON_HEADERS)

    def _post_blocking(self, body: Dict[str, Any]) -> None:
        try:
            with contextlib.suppress(Exception):  # nosec B110 - shipping is best-effort by contract
                with httpx.Client(timeout=self._timeout, transport=self._transport) as client:
                    client.post(self.endpoint, content=_encode(body), headers=_JSON_HEADERS)
        finally:
            self._threads.discard(threading.current_thread())

    async def drain(self) -> None:
        """Wait for every shipment scheduled on the running loop."""
        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    def join(self, timeout: Optional[float] = None) -> None:
        """Wait for shipments running on fallback threads."""
        for thread in list(self._threads):
            thread.join(timeout)

    async def aclose(self, timeout: Optional[float] = None) -> None:
        """Flush pending shipments on the loop and on fallback threads.

        An injected ``httpx.AsyncClient`` stays open; its owner closes it.
        """
        await self.drain()
        if self._threads:
            await asyncio.to_thread(self.join, timeout)


__all__ = ["RemoteLogShipper"]
