"""
Data Sanitization Module

Masks the API token in headers so debug logs never contain it in plain text.
"""

from typing import Any, Optional

from cloudflare_kv.common.utils import mask_string


SENSITIVE_HEADERS = {"authorization", "x-auth-key", "x-auth-email"}


def sanitize_authorization(value: Optional[str]) -> Optional[str]:
    """
    Sanitize authorization field value

    Examples:
        >>> sanitize_authorization("Bearer 0123456789abcdef")
        'Bearer 0123***...***ef'
        >>> sanitize_authorization("Bearer short")
        'Bearer ***'
    """
    if not value:
        return value

    prefix = ""
    token = value
    if value.lower().startswith("bearer "):
        prefix = "Bearer "
        token = value[7:]

    if len(token) <= 8:
        return f"{prefix}***"

    return f"{prefix}{mask_string(token)}"


def sanitize_headers(headers: Optional[dict[str, Any]]) -> dict[str, Any]:
    """
    Sanitize request headers

    Returns a new dictionary; the original headers are not modified.
    """
    if not headers:
        return {}

    sanitized = {}
    for key, value in headers.items():
        if key.lower() in SENSITIVE_HEADERS and isinstance(value, str):
            sanitized[key] = sanitize_authorization(value)
        else:
            sanitized[key] = value

    return sanitized
