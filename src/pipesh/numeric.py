"""Lenient number parsing and formatting shared by primitives."""

import math
import re

_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_UNSIGNED_PREFIX = re.compile(r"\s*\+?(\d+)")


def parse_float(text: str) -> float:
    """Read the longest numeric prefix of ``text``; no prefix reads as 0.0."""
    match = _FLOAT_PREFIX.match(text)
    if not match:
        return 0.0
    return float(match.group(1))


def parse_unsigned(text: str) -> int:
    """Read the leading non-negative integer of ``text``; anything else reads as 0."""
    match = _UNSIGNED_PREFIX.match(text)
    if not match:
        return 0
    return int(match.group(1))


def divide(lhs: float, rhs: float) -> float:
    """IEEE-style division: x/0 is a signed infinity and 0/0 is nan."""
    if rhs == 0:
        if lhs == 0 or math.isnan(lhs):
            return math.nan
        return math.copysign(math.inf, lhs) * math.copysign(1.0, rhs)
    return lhs / rhs


def format_number(value: float) -> str:
    """Format with 6 significant digits, dropping a trailing ``.0``."""
    return format(value, "g")
