"""Clock times as minutes since midnight, and the integer fields of a club file."""

from __future__ import annotations

import re

_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def _leading_int(text: str) -> int:
    """Read the integer at the start of ``text``, ignoring anything after it.

    Leading whitespace and a sign are accepted. Values outside the 32-bit
    signed range are rejected.
    """
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def format_time(minutes: int) -> str:
    """Render a number of minutes as ``HH:MM``; hours may exceed 23."""
    hours, rest = divmod(abs(minutes), 60)
    if minutes < 0:
        hours, rest = -hours, -rest
    hour_pad = "0" if hours < 10 else ""
    minute_pad = "0" if rest < 10 else ""
    return f"{hour_pad}{hours}:{minute_pad}{rest}"


def parse_time(text: str) -> int:
    """Parse an ``HH:MM`` clock time into minutes since midnight."""
    if len(text) != 5 or text[2] != ":":
        raise ValueError(f"not a time: {text!r}")
    hour = _leading_int(text[:2])
    minute = _leading_int(text[3:])
    if not (0 <= hour <= 23 and 0 <= minute <= 59):
        raise ValueError(f"time out of range: {text!r}")
    return hour * 60 + minute


def parse_count(text: str) -> int:
    """Parse a non-negative integer field."""
    value = _leading_int(text)
    if value < 0:
        raise ValueError(f"negative value: {text!r}")
    return value