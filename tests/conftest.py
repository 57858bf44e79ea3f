"""
Test Configuration Module
"""

import json
from urllib.parse import unquote

import httpx
import pytest

from cloudflare_kv.client import CloudflareKV
from cloudflare_kv.domain.kv import CloudflareKVOptions


TEST_BASE_URL = "https://kv.test/client/v4"
TEST_ACCOUNT_ID = "acc-123"
TEST_NAMESPACE_ID = "ns-default"
TEST_TOKEN = "token-0123456789abcdef"


def envelope(success: bool = True, **extra) -> dict:
    body = {"success": success, "errors": [], "messages": []}
    body.update(extra)
    return body


class FakeKVServer:
    """
    In-memory stand-in for the Workers KV API

    Stores values per namespace and records every request it receives.
    """

    def __init__(self):
        self.namespaces: dict[str, dict[str, str]] = {}
        self.requests: list[httpx.Request] = []

    def _route(self, request: httpx.Request) -> tuple[str, str, list[str]]:
        prefix = f"/client/v4/accounts/{TEST_ACCOUNT_ID}/storage/kv/namespaces/"
        raw_path = request.url.raw_path.decode("ascii").split("?", 1)[0]
        assert raw_path.startswith(prefix), raw_path
        namespace, action, *rest = raw_path[len(prefix):].split("/")
        return namespace, action, rest

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        namespace, action, rest = self._route(request)
        store = self.namespaces.setdefault(namespace, {})

        if action == "keys" and request.method == "GET":
            prefix = request.url.params.get("prefix", "")
            names = sorted(name for name in store if name.startswith(prefix))
            result = [{"name": name} for name in names]
            return httpx.Response(
                200,
                json=envelope(result=result, result_info={"count": len(result), "cursor": ""}),
            )

        if action == "values":
            key = unquote(rest[0])
            if request.method == "GET":
                if key not in store:
                    return httpx.Response(
                        404,
                        json=envelope(
                            success=False,
                            errors=[{"code": 10009, "message": "get: 'key not found'"}],
                        ),
                    )
                return httpx.Response(200, text=store[key])
            if request.method == "PUT":
                store[key] = request.content.decode("utf-8")
                return httpx.Response(200, json=envelope(result=None))

        if action == "bulk" and request.method == "DELETE":
            for key in json.loads(request.content):
                store.pop(key, None)
            return httpx.Response(200, json=envelope(result=None))

        return httpx.Response(405, json=envelope(success=False))


@pytest.fixture
def kv_options() -> CloudflareKVOptions:
    return CloudflareKVOptions(
        account_id=TEST_ACCOUNT_ID,
        namespace_id=TEST_NAMESPACE_ID,
        access_token=TEST_TOKEN,
        base_url=TEST_BASE_URL,
    )


@pytest.fixture
def fake_server() -> FakeKVServer:
    return FakeKVServer()


@pytest.fixture
def kv(kv_options, fake_server) -> CloudflareKV:
    """Client wired to the in-memory server"""
    return CloudflareKV(kv_options, transport_factory=lambda: httpx.MockTransport(fake_server.handler))
