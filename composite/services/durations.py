"""Parsing of Go-style duration strings such as ``"31m"``, ``"37s"`` or ``"1h30m"``."""

import re
from datetime import timedelta

_UNIT_MICROSECONDS = {
    "ns": 0.001,
    "us": 1.0,
    "µs": 1.0,  # U+00B5 micro sign
    "μs": 1.0,  # U+03BC greek mu
    "ms": 1_000.0,
    "s": 1_000_000.0,
    "m": 60_000_000.0,
    "h": 3_600_000_000.0,
}

_NUMBER = r"(?:\d+\.?\d*|\.\d+)"
_UNIT = r"(?:ns|us|µs|μs|ms|s|m|h)"
_DURATION_RE = re.compile(rf"[-+]?(?:{_NUMBER}{_UNIT})+")
_PART_RE = re.compile(rf"({_NUMBER})({_UNIT})")

# Largest duration representable as int64 nanoseconds.
_MAX_MICROSECONDS = (2**63 - 1) / 1_000


def parse_duration(text: str) -> timedelta:
    """Parse a signed sequence of decimal numbers with unit suffixes.

    Raises:
        ValueError: ``invalid duration "<text>"`` when ``text`` is not a duration.
    """
    if text in ("0", "+0", "-0"):
        return timedelta(0)
    if not _DURATION_RE.fullmatch(text):
        raise ValueError(f'invalid duration "{text}"')

    sign = -1 if text.startswith("-") else 1
    total = sum(float(number) * _UNIT_MICROSECONDS[unit] for number, unit in _PART_RE.findall(text.lstrip("+-")))
    if total > _MAX_MICROSECONDS:
        raise ValueError(f'invalid duration "{text}"')
    return timedelta(microseconds=sign * total)
