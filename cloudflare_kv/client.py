"""
Workers KV API Client

Lists, reads, writes and deletes keys of a Workers KV namespace through the
Cloudflare REST API.
"""

import json
import logging
from collections.abc import Mapping, Sequence
from typing import Any, Callable, Optional, TypeVar, Union

import httpx

from cloudflare_kv.common.duration import parse_duration
from cloudflare_kv.common.sanitizer import sanitize_headers
from cloudflare_kv.common.timer import Timer
from cloudflare_kv.common.utils import build_query, encode_key, try_parse_json
from cloudflare_kv.domain.kv import (
    CloudflareKVOptions,
    ListOptions,
    ListResponse,
    MethodOptions,
    MethodResponse,
    SetOptions,
)

logger = logging.getLogger(__name__)

OptionsT = TypeVar("OptionsT", bound=MethodOptions)

# A single key or a list of keys; delete() accepts both
KeyOrKeys = Union[str, Sequence[str]]

JSON_CONTENT_TYPE = "application/json"
TEXT_CONTENT_TYPE = "text/plain"


class CloudflareKV:
    """
    Workers KV Client

    Holds the account id, default namespace id and API token. Every call
    opens its own short-lived httpx.AsyncClient, so one instance can be shared
    by concurrent tasks. Transport errors are raised as-is and the response
    envelope is returned without inspecting success/errors.

    Example:
        kv = CloudflareKV(CloudflareKVOptions(
            account_id="...", namespace_id="...", access_token="...",
        ))
        await kv.set("greeting", "hello", {"expiration_ttl": "10m"})
        await kv.get("greeting")  # "hello"
    """

    def __init__(
        self,
        options: Union[CloudflareKVOptions, Mapping[str, Any]],
        transport_factory: Optional[Callable[[], httpx.AsyncBaseTransport]] = None,
    ):
        """
        Initialize client

        Args:
            options: Client configuration
            transport_factory: Optional callable returning a fresh httpx transport for
                each call, e.g. one building an httpx.MockTransport in tests
        """
        if not isinstance(options, CloudflareKVOptions):
            options = CloudflareKVOptions.model_validate(options)
        self.options = options
        self._transport_factory = transport_factory

    @property
    def namespace_id(self) -> str:
        """Default namespace id"""
        return self.options.namespace_id

    def _merge_options(
        self,
        options: Union[OptionsT, Mapping[str, Any], None],
        model: type[OptionsT],
    ) -> OptionsT:
        """
        Validate call options and fill in the default namespace id

        Returns a new options object; the caller's object is not modified.
        """
        if options is None:
            merged = model()
        elif isinstance(options, model):
            merged = options
        else:
            merged = model.model_validate(options)

        if merged.namespace_id is None:
            merged = merged.model_copy(update={"namespace_id": self.options.namespace_id})
        return merged

    @staticmethod
    def _query(options: MethodOptions) -> dict[str, str]:
        # namespace_id is part of the path, never the query string
        return build_query(options.model_dump(), exclude=("namespace_id",))

    def _new_transport(self) -> Optional[httpx.AsyncBaseTransport]:
        # One transport per call; the AsyncClient closes it on exit
        if self._transport_factory is None:
            return None
        return self._transport_factory()

    def _build_url(self, path: str) -> str:
        base_url = self.options.base_url.rstrip("/")
        return f"{base_url}/accounts/{self.options.account_id}/storage/kv/{path}"

    async def _request(
        self,
        method: str,
        path: str,
        params: Optional[dict[str, str]] = None,
        content: Optional[str] = None,
        content_type: str = JSON_CONTENT_TYPE,
    ) -> httpx.Response:
        """
        Send one request to the KV API

        Args:
            method: HTTP method
            path: Path below /accounts/{account}/storage/kv/
            params: Query parameters
            content: Request body
            content_type: Content-Type header value

        Returns:
            httpx.Response: Fully read response
        """
        url = self._build_url(path)
        headers = {
            "Authorization": f"Bearer {self.options.access_token}",
            "Content-Type": content_type,
        }

        logger.debug(
            "KV Request: method=%s url=%s params=%s headers=%s",
            method,
            url,
            params,
            sanitize_headers(headers),
        )

        timer = Timer().start()
        async with httpx.AsyncClient(
            timeout=self.options.timeout,
            transport=self._new_transport(),
        ) as client:
            response = await client.request(
                method=method,
                url=url,
                params=params or None,
                headers=headers,
                content=content,
            )
        timer.stop()

        logger.debug(
            "KV Response: method=%s url=%s status=%s elapsed_ms=%s",
            method,
            url,
            response.status_code,
            timer.elapsed_ms,
        )
        return response

    async def list(
        self,
        options: Union[ListOptions, Mapping[str, Any], None] = None,
    ) -> ListResponse:
        """
        List a namespace's keys

        Only one page is fetched; pass result_info.cursor back in to get the next one.

        Args:
            options: limit, cursor, prefix and an optional namespace_id override

        Returns:
            ListResponse: Parsed response envelope
        """
        merged = self._merge_options(options, ListOptions)
        response = await self._request(
            "GET",
            f"namespaces/{merged.namespace_id}/keys",
            params=self._query(merged),
        )
        return ListResponse.model_validate(response.json())

    async def get(
        self,
        key: str,
        options: Union[MethodOptions, Mapping[str, Any], None] = None,
    ) -> Optional[str]:
        """
        Read the value stored under a key

        The value is returned exactly as stored, even when it looks like JSON.

        Args:
            key: Key name
            options: Optional namespace_id override

        Returns:
            Optional[str]: The value, or None when the key does not exist or the API reported an error
        """
        merged = self._merge_options(options, MethodOptions)
        response = await self._request(
            "GET",
            f"namespaces/{merged.namespace_id}/values/{encode_key(key)}",
            params=self._query(merged),
        )

        if response.is_success:
            return response.text

        body = try_parse_json(response.text)
        errors = body.get("errors") if isinstance(body, dict) else body
        # A missing key is an ordinary result
        log = logger.debug if response.status_code == 404 else logger.warning
        log(
            "KV get failed: namespace=%s key=%s status=%s errors=%s",
            merged.namespace_id,
            key,
            response.status_code,
            errors,
        )
        return None

    async def set(
        self,
        key: str,
        value: str,
        options: Union[SetOptions, Mapping[str, Any], None] = None,
    ) -> MethodResponse:
        """
        Write a value identified by a key

        Existing values and expirations are overwritten.

        Args:
            key: Key name
            value: Value, sent as a text/plain body
            options: expiration, expiration_ttl and an optional namespace_id override

        Returns:
            MethodResponse: Parsed response envelope

        Raises:
            InvalidDurationError: expiration_ttl is a string that is not a valid duration
        """
        merged = self._merge_options(options, SetOptions)
        update: dict[str, Any] = {}
        if isinstance(merged.expiration_ttl, str):
            update["expiration_ttl"] = parse_duration(merged.expiration_ttl)
        if merged.expiration_ttl is not None and merged.expiration is not None:
            logger.debug(
                "Both expiration and expiration_ttl given for key=%s, using expiration_ttl",
                key,
            )
            update["expiration"] = None
        if update:
            merged = merged.model_copy(update=update)

        response = await self._request(
            "PUT",
            f"namespaces/{merged.namespace_id}/values/{encode_key(key)}",
            params=self._query(merged),
            content=value,
            content_type=TEXT_CONTENT_TYPE,
        )
        return MethodResponse.model_validate(response.json())

    async def delete(
        self,
        key_or_keys: KeyOrKeys,
        options: Union[MethodOptions, Mapping[str, Any], None] = None,
    ) -> MethodResponse:
        """
        Remove one or more KV pairs from the namespace

        Always issues a single bulk request. The API accepts at most 10,000
        keys per call; the limit is not checked here.

        Args:
            key_or_keys: A key name or a sequence of key names
            options: Optional namespace_id override

        Returns:
            MethodResponse: Parsed response envelope
        """
        merged = self._merge_options(options, MethodOptions)
        if isinstance(key_or_keys, str):
            keys = [key_or_keys]
        else:
            keys = list(key_or_keys)

        response = await self._request(
            "DELETE",
            f"namespaces/{merged.namespace_id}/bulk",
            params=self._query(merged),
            content=json.dumps(keys),
        )
        return MethodResponse.model_validate(response.json())
