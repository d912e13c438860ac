"""
Conversion of raw property values into display strings
"""

import array
from datetime import datetime, timedelta
from typing import Any, Optional

from .keys import PropertyKey, PKEY_MEDIA_DURATION
from .timestamps import is_local

NULL_TEXT = "(null)"
ARRAY_SEPARATOR = "; "

TICKS_PER_SECOND = 10_000_000
UINT64_MASK = (1 << 64) - 1
INT64_SIGN = 1 << 63

# Shapes rendered as "item; item; item". str is a sequence too but is a scalar here.
ARRAY_TYPES = (list, tuple, bytes, bytearray, array.array)


def format_value(value: Any, key: Optional[PropertyKey] = None) -> str:
    """
    Convert a raw property value into its display string.

    Args:
        value: Value as returned by a property store
        key: Key the value was read under

    Returns:
        The display string
    """
    if value is None:
        return NULL_TEXT

    if isinstance(value, ARRAY_TYPES):
        return ARRAY_SEPARATOR.join(str(item) for item in value)

    if isinstance(value, datetime):
        return format_timestamp(value)

    if key == PKEY_MEDIA_DURATION and isinstance(value, int) and not isinstance(value, bool):
        return format_duration(value)

    return str(value)


def format_timestamp(value: datetime) -> str:
    """Render a timestamp as ``YYYY-MM-DDTHH:MM:SS.fffffff`` plus a zone designator.

    UTC values end in ``Z``, other zoned values in ``+HH:MM``. Values in the
    local zone are printed as naive clock values so the machine's offset
    never shows up in the output.
    """
    if is_local(value):
        value = value.replace(tzinfo=None)

    text = (f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
            f"T{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
            f".{value.microsecond * 10:07d}")

    offset = value.utcoffset()
    if offset is None:
        return text
    if offset == timedelta(0):
        return text + "Z"

    sign = "-" if offset < timedelta(0) else "+"
    minutes = abs(int(offset.total_seconds())) // 60
    return f"{text}{sign}{minutes // 60:02d}:{minutes % 60:02d}"


def format_duration(ticks: int) -> str:
    """Render a 100ns tick count as ``[-][d.]hh:mm:ss[.fffffff]``."""
    # Stored unsigned, shown as a signed span
    ticks &= UINT64_MASK
    if ticks & INT64_SIGN:
        ticks -= 1 << 64

    sign = "-" if ticks < 0 else ""
    seconds, fraction = divmod(abs(ticks), TICKS_PER_SECOND)
    minutes, seconds = divmod(seconds, 60)
    hours, minutes = divmod(minutes, 60)
    days, hours = divmod(hours, 24)

    text = sign
    if days:
        text += f"{days}."
    text += f"{hours:02d}:{minutes:02d}:{seconds:02d}"
    if fraction:
        text += f".{fraction:07d}"
    return text
