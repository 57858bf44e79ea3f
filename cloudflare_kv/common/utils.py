"""
Utility Functions Module

Helpers for request construction and response parsing.
"""

import json
from collections.abc import Iterable, Mapping
from typing import Any
from urllib.parse import quote


# Characters left unescaped by JavaScript's encodeURIComponent
_URI_COMPONENT_SAFE = "-_.!~*'()"


def encode_key(key: str) -> str:
    """
    Percent-encode a key for use as a single path segment

    Slashes are encoded too, so "a/b" addresses one key rather than a sub-path.

    Example:
        >>> encode_key("user:1/profile")
        'user%3A1%2Fprofile'
    """
    return quote(key, safe=_URI_COMPONENT_SAFE)


def build_query(options: Mapping[str, Any], exclude: Iterable[str] = ()) -> dict[str, str]:
    """
    Serialize call options into query parameters

    Keys in `exclude` and None values are dropped. Booleans are rendered as
    "true"/"false", everything else with str().

    Args:
        options: Option mapping
        exclude: Keys that must not appear in the query string

    Returns:
        dict: Query parameters, insertion order preserved
    """
    excluded = set(exclude)
    params: dict[str, str] = {}
    for key, value in options.items():
        if key in excluded or value is None:
            continue
        if isinstance(value, bool):
            params[key] = "true" if value else "false"
        else:
            params[key] = str(value)
    return params


def try_parse_json(text: str) -> Any:
    """
    Try to parse a string as JSON

    Returns the original string when it is not valid JSON.
    """
    try:
        return json.loads(text)
    except (TypeError, ValueError):
        return text


def mask_string(s: str, visible_start: int = 4, visible_end: int = 2) -> str:
    """
    Mask a string

    Keeps a few characters at both ends and replaces the middle with asterisks.

    Example:
        >>> mask_string("abcdefghijklmnop")
        'abcd***...***op'
    """
    if len(s) <= visible_start + visible_end:
        return "***"
    return f"{s[:visible_start]}***...***{s[-visible_end:]}"
