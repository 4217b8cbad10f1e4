"""Small text and time formatting helpers."""

from __future__ import annotations

import time

_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def timestamp_to_string(timestamp: int | float) -> str:
    """Format a Unix timestamp as local time, ``YYYY-MM-DD HH:MM:SS``."""
    return time.strftime(_TIME_FORMAT, time.localtime(int(timestamp)))


def to_utf8(text: str) -> bytes:
    """Encode text as UTF-8; unpaired surrogates raise ``UnicodeEncodeError``."""
    return text.encode("utf-8")