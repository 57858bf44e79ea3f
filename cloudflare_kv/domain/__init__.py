"""
Domain models
"""

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

__all__ = [
    # Config
    "CloudflareKVOptions",
    # Options
    "MethodOptions",
    "ListOptions",
    "SetOptions",
    # Responses
    "MethodResponse",
    "KeyInfo",
    "ResultInfo",
    "ListResponse",
]
