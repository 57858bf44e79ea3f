"""
Async client for the Cloudflare Workers KV REST API
"""

from cloudflare_kv.client import CloudflareKV, KeyOrKeys
from cloudflare_kv.common.duration import parse_duration
from cloudflare_kv.common.errors import InvalidDurationError, KVClientError
from cloudflare_kv.config import Settings, get_settings
from cloudflare_kv.domain.kv import (
    CloudflareKVOptions,
    KeyInfo,
    ListOptions,
    ListResponse,
    MethodOptions,
    MethodResponse,
    ResultInfo,
    SetOptions,
)
from cloudflare_kv.factory import create_kv_client
from cloudflare_kv.logging_config import setup_logging

__version__ = "1.0.0"

__all__ = [
    "CloudflareKV",
    "KeyOrKeys",
    "create_kv_client",
    "CloudflareKVOptions",
    "MethodOptions",
    "ListOptions",
    "SetOptions",
    "MethodResponse",
    "KeyInfo",
    "ResultInfo",
    "ListResponse",
    "parse_duration",
    "KVClientError",
    "InvalidDurationError",
    "Settings",
    "get_settings",
    "setup_logging",
]
