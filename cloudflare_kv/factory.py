"""
Client Factory Module

Builds a configured CloudflareKV client from settings.
"""

from typing import Any, Callable, Optional

import httpx

from cloudflare_kv.client import CloudflareKV
from cloudflare_kv.config import Settings, get_settings
from cloudflare_kv.domain.kv import CloudflareKVOptions


def create_kv_client(
    settings: Optional[Settings] = None,
    transport_factory: Optional[Callable[[], httpx.AsyncBaseTransport]] = None,
    **overrides: Any,
) -> CloudflareKV:
    """
    Create a client from environment configuration

    Nothing is constructed at import time; call this from the application's
    composition root and reuse the returned instance.

    Args:
        settings: Settings to read, defaults to get_settings()
        transport_factory: Optional callable building a transport for each call
        **overrides: CloudflareKVOptions fields that replace the settings values

    Returns:
        CloudflareKV: Configured client
    """
    settings = settings or get_settings()
    values: dict[str, Any] = {
        "account_id": settings.CLOUDFLARE_ACCOUNT_ID,
        "namespace_id": settings.CLOUDFLARE_NAMESPACE_ID,
        "access_token": settings.CLOUDFLARE_ACCESS_TOKEN,
        "base_url": settings.CLOUDFLARE_API_BASE_URL,
        "timeout": settings.HTTP_TIMEOUT,
    }
    values.update(overrides)
    return CloudflareKV(CloudflareKVOptions(**values), transport_factory=transport_factory)
