"""
Duration Parsing Module

Converts human readable durations ("10m", "1.5 hours", "2d") into whole seconds.

Grammar (case-insensitive, surrounding whitespace ignored):

    duration := [sign] number [whitespace] [unit]
    number   := digits ["." digits] | "." digits

Supported units:

    ms, msec, msecs, millisecond, milliseconds   0.001 s
    s, sec, secs, second, seconds                1 s
    m, min, mins, minute, minutes                60 s
    h, hr, hrs, hour, hours                      3600 s
    d, day, days                                 86400 s
    w, week, weeks                               604800 s
    y, yr, yrs, year, years                      31557600 s (365.25 days)

A number without a unit is taken as seconds. Fractional results are
truncated toward zero, so "1500ms" is 1 and "-1500ms" is -1.
"""

import re
from typing import Union

from cloudflare_kv.common.errors import InvalidDurationError


SECOND = 1
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE
DAY = 24 * HOUR
WEEK = 7 * DAY
YEAR = 365.25 * DAY

UNIT_SECONDS: dict[str, float] = {
    "ms": 0.001,
    "msec": 0.001,
    "msecs": 0.001,
    "millisecond": 0.001,
    "milliseconds": 0.001,
    "s": SECOND,
    "sec": SECOND,
    "secs": SECOND,
    "second": SECOND,
    "seconds": SECOND,
    "m": MINUTE,
    "min": MINUTE,
    "mins": MINUTE,
    "minute": MINUTE,
    "minutes": MINUTE,
    "h": HOUR,
    "hr": HOUR,
    "hrs": HOUR,
    "hour": HOUR,
    "hours": HOUR,
    "d": DAY,
    "day": DAY,
    "days": DAY,
    "w": WEEK,
    "week": WEEK,
    "weeks": WEEK,
    "y": YEAR,
    "yr": YEAR,
    "yrs": YEAR,
    "year": YEAR,
    "years": YEAR,
}

_DURATION_RE = re.compile(
    r"^(?P<value>[-+]?(?:\d+(?:\.\d*)?|\.\d+))\s*(?P<unit>[a-z]*)$",
    re.IGNORECASE,
)


def parse_duration(value: Union[str, int, float]) -> int:
    """
    Parse a duration into whole seconds

    Args:
        value: Duration string such as "10m", or a number of seconds

    Returns:
        int: Number of seconds, truncated toward zero

    Raises:
        InvalidDurationError: Value is empty, has an unknown unit or is not a duration

    Example:
        >>> parse_duration("10m")
        600
        >>> parse_duration("1.5h")
        5400
    """
    if isinstance(value, bool):
        raise InvalidDurationError(value)
    if isinstance(value, (int, float)):
        return int(value)
    if not isinstance(value, str):
        raise InvalidDurationError(value)

    match = _DURATION_RE.match(value.strip())
    if match is None:
        raise InvalidDurationError(value)

    unit = match.group("unit").lower() or "s"
    multiplier = UNIT_SECONDS.get(unit)
    if multiplier is None:
        raise InvalidDurationError(value, f"Unknown duration unit {unit!r} in {value!r}")

    return int(float(match.group("value")) * multiplier)
