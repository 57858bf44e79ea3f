"""
Concurrent calls through one client
"""

import asyncio
from unittest.mock import patch

import httpx
import pytest

from cloudflare_kv.client import CloudflareKV


class ClosableTransport(httpx.AsyncBaseTransport):
    """Serves through an async handler and fails in-flight requests once closed"""

    def __init__(self, handler):
        self.handler = handler
        self.closed = False

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        response = await self.handler(request)
        if self.closed:
            raise httpx.ReadError("transport closed", request=request)
        return response

    async def aclose(self) -> None:
        self.closed = True


class SlowFastServer:
    """The "slow" key is held until release() is called, every other key answers at once"""

    def __init__(self):
        self._released = asyncio.Event()

    def release(self):
        self._released.set()

    async def handler(self, request: httpx.Request) -> httpx.Response:
        key = request.url.path.rsplit("/", 1)[-1]
        if key == "slow":
            await self._released.wait()
        return httpx.Response(200, text=f"value-{key}")


async def overlapping_gets(client: CloudflareKV, server: SlowFastServer) -> list:
    async def fast_then_release():
        value = await client.get("fast")
        server.release()
        return value

    return await asyncio.gather(client.get("slow"), fast_then_release())


@pytest.mark.asyncio
async def test_injected_transport_built_per_call(kv_options):
    """Test a finished call does not close the transport of one still in flight"""
    server = SlowFastServer()
    created = []

    def transport_factory():
        transport = ClosableTransport(server.handler)
        created.append(transport)
        return transport

    client = CloudflareKV(kv_options, transport_factory=transport_factory)

    results = await overlapping_gets(client, server)

    assert results == ["value-slow", "value-fast"]
    assert len(created) == 2
    assert created[0] is not created[1]
    assert all(transport.closed for transport in created)


@pytest.mark.asyncio
async def test_default_transport_client_per_call(kv_options):
    """Test each call without a transport factory gets its own AsyncClient"""
    server = SlowFastServer()
    real_async_client = httpx.AsyncClient
    clients = []
    transports = []

    def build_client(**kwargs):
        assert kwargs["transport"] is None
        transport = ClosableTransport(server.handler)
        transports.append(transport)
        client = real_async_client(timeout=kwargs["timeout"], transport=transport)
        clients.append(client)
        return client

    client = CloudflareKV(kv_options)

    with patch("cloudflare_kv.client.httpx.AsyncClient", side_effect=build_client):
        results = await overlapping_gets(client, server)

    assert results == ["value-slow", "value-fast"]
    assert len(clients) == 2
    assert clients[0] is not clients[1]
    assert all(transport.closed for transport in transports)


@pytest.mark.asyncio
async def test_gathered_writes_and_reads(kv, fake_server):
    """Test many concurrent calls through the shared fixture client"""
    keys = [f"key-{i}" for i in range(20)]

    await asyncio.gather(*(kv.set(key, key.upper()) for key in keys))
    values = await asyncio.gather(*(kv.get(key) for key in keys))

    assert values == [key.upper() for key in keys]
    assert len(fake_server.requests) == 40
