"""Unit tests for best-effort remote log shipping."""
from __future__ import annotations

import asyncio
import json
import threading

import httpx

from backoffice_client.base.log_support import LogEntry, LogLevel, RemoteLogShipper

_ENTRY = LogEntry(timestamp="2024-01-02T03:04:05.678000Z", level=LogLevel.ERROR, message="boom", context={"id": 1})


class _Collector:
    def __init__(self, status: int = 204):
        self.bodies = []
        self.status = status
        self.lock = threading.Lock()

    def __call__(self, request: httpx.Request) -> httpx.Response:
        with self.lock:
            self.bodies.append((request.method, str(request.url), json.loads(request.content)))
        return httpx.Response(self.status)


def test_payload_includes_client_context_only_when_known():
    shipper = RemoteLogShipper("https://logs.example.com", page_url="https://admin/x", user_agent="ua/1")
    assert shipper.payload(_ENTRY) == {
        "timestamp": "2024-01-02T03:04:05.678000Z",
        "level": "error",
        "message": "boom",
        "context": {"id": 1},
        "url": "https://admin/x",
        "userAgent": "ua/1",
    }
    bare = RemoteLogShipper("https://logs.example.com").payload(
        LogEntry(timestamp="t", level=LogLevel.WARN, message="m")
    )
    assert bare == {"timestamp": "t", "level": "warn", "message": "m"}


def test_ship_on_running_loop_is_detached_task():
    collector = _Collector()
    shipper = RemoteLogShipper("https://logs.example.com/ingest", transport=httpx.MockTransport(collector))

    async def run():
        assert shipper.ship(_ENTRY) is None
        await shipper.drain()

    asyncio.run(run())
    assert collector.bodies == [("POST", "https://logs.example.com/ingest", shipper.payload(_ENTRY))]


def test_ship_without_loop_uses_background_thread():
    collector = _Collector()
    shipper = RemoteLogShipper("https://logs.example.com/ingest", transport=httpx.MockTransport(collector))
    shipper.ship(_ENTRY)
    shipper.join(timeout=5)
    assert len(collector.bodies) == 1


def test_shipping_failures_are_swallowed():
    def _explode(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("collector down", request=request)

    shipper = RemoteLogShipper("https://logs.example.com", transport=httpx.MockTransport(_explode))

    async def run():
        shipper.ship(_ENTRY)
        await shipper.drain()

    asyncio.run(run())
    shipper.ship(_ENTRY)
    shipper.join(timeout=5)


def test_non_2xx_response_is_ignored():
    collector = _Collector(status=500)
    shipper = RemoteLogShipper("https://logs.example.com", transport=httpx.MockTransport(collector))

    async def run():
        shipper.ship(_ENTRY)
        await shipper.drain()

    asyncio.run(run())
    assert len(collector.bodies) == 1


def test_unserializable_context_is_stringified_and_shipped():
    collector = _Collector()
    shipper = RemoteLogShipper("https://logs.example.com", transport=httpx.MockTransport(collector))
    marker = object()
    entry = LogEntry(timestamp="t", level=LogLevel.ERROR, message="boom", context={"obj": marker, "n": 1})

    async def run():
        shipper.ship(entry)
        await shipper.drain()

    asyncio.run(run())
    assert len(collector.bodies) == 1
    assert collector.bodies[0][2]["context"] == {"obj": str(marker), "n": 1}


def test_aclose_flushes_tasks_and_threads():
    collector = _Collector()
    shipper = RemoteLogShipper("https://logs.example.com", transport=httpx.MockTransport(collector))
    shipper.ship(_ENTRY)

    async def run():
        shipper.ship(_ENTRY)
        await shipper.aclose(timeout=5)

    asyncio.run(run())
    assert len(collector.bodies) == 2


def test_aclose_leaves_injected_client_open():
    collector = _Collector()

    async def run():
        client = httpx.AsyncClient(transport=httpx.MockTransport(collector))
        shipper = RemoteLogShipper("https://logs.example.com", client=client)
        shipper.ship(_ENTRY)
        await shipper.aclose()
        closed = client.is_closed
        await client.aclose()
        return closed

    assert asyncio.run(run()) is False
    assert len(collector.bodies) == 1
