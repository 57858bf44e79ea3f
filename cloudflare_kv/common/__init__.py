"""
Common utilities
"""

from cloudflare_kv.common.duration import parse_duration
from cloudflare_kv.common.errors import InvalidDurationError, KVClientError

__all__ = [
    "parse_duration",
    "InvalidDurationError",
    "KVClientError",
]
