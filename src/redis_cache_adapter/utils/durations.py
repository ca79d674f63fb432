"""Duration helpers.

Parses Go-style duration strings ("300ms", "1.5h", "2h45m") used by the
provider configuration and normalizes cache TTL arguments.
"""

import logging
import math
import re
from datetime import timedelta
from typing import Optional, Union

logger = logging.getLogger(__name__)

DurationLike = Union[timedelta, int, float, str]

_UNIT_SECONDS = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,
    "μs": 1e-6,
    "ms": 1e-3,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
}

_COMPONENT = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(ns|us|µs|μs|ms|s|m|h)")


def _from_seconds(seconds: float, value: DurationLike) -> timedelta:
    try:
        return timedelta(seconds=seconds)
    except OverflowError:
        raise ValueError(f"duration out of range {value!r}") from None


def _parse(value: DurationLike) -> timedelta:
    if isinstance(value, timedelta):
        return value
    if isinstance(value, bool):
        raise TypeError("boolean is not a duration")
    if isinstance(value, (int, float)):
        return _from_seconds(value, value)
    if not isinstance(value, str):
        raise TypeError(f"unsupported duration type: {type(value).__name__}")

    text = value.strip()
    sign = 1
    if text[:1] in ("+", "-"):
        sign = -1 if text[0] == "-" else 1
        text = text[1:]

    if text == "0":
        return timedelta(0)
    if not text:
        raise ValueError(f"invalid duration {value!r}")

    seconds = 0.0
    pos = 0
    while pos < len(text):
        match = _COMPONENT.match(text, pos)
        if match is None:
            raise ValueError(f"invalid duration {value!r}")
        seconds += float(match.group(1)) * _UNIT_SECONDS[match.group(2)]
        pos = match.end()

    return _from_seconds(sign * seconds, value)


def parse_duration(value: DurationLike, fallback: Optional[DurationLike] = None) -> timedelta:
    """Parse a duration, falling back to a default when unparsable.

    Args:
        value: timedelta, number of seconds or Go-style duration string
        fallback: Value parsed instead when ``value`` is invalid

    Returns:
        Parsed timedelta

    Raises:
        ValueError: If ``value`` is invalid and no fallback is given
    """
    try:
        return _parse(value)
    except (TypeError, ValueError):
        if fallback is None:
            raise
        logger.warning(f"Unparsable duration {value!r}, falling back to {fallback!r}")
        return _parse(fallback)


def to_timedelta(ttl: Union[timedelta, int, float]) -> timedelta:
    """Normalize a cache TTL argument.

    Zero means the entry never expires. Negative values are rejected.
    """
    if isinstance(ttl, bool) or not isinstance(ttl, (timedelta, int, float)):
        raise TypeError(f"ttl must be a timedelta or number of seconds, got {type(ttl).__name__}")

    delta = ttl if isinstance(ttl, timedelta) else _from_seconds(ttl, ttl)
    if delta < timedelta(0):
        raise ValueError(f"ttl cannot be negative: {ttl!r}")
    return delta


def to_milliseconds(delta: timedelta) -> int:
    """Convert to whole milliseconds, rounding any positive remainder up."""
    return math.ceil(delta / timedelta(microseconds=1) / 1000)
