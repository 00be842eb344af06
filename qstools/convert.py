"""Conversions between human-readable sizes and byte counts."""

from __future__ import annotations

import re

__all__ = [
    "ByteSizeError",
    "ReadableSizeFormatError",
    "parse_byte_size",
    "unix_readable_size",
]

_KB = 1 << 10
_MB = 1 << 20
_GB = 1 << 30
_TB = 1 << 40
_PB = 1 << 50
_EB = 1 << 60

_UINT64_MAX = (1 << 64) - 1

_UNITS = {
    **dict.fromkeys(("", "b", "byte"), 1),
    **dict.fromkeys(("k", "kb", "kilo", "kilobyte", "kilobytes"), _KB),
    **dict.fromkeys(("m", "mb", "mega", "megabyte", "megabytes"), _MB),
    **dict.fromkeys(("g", "gb", "giga", "gigabyte", "gigabytes"), _GB),
    **dict.fromkeys(("t", "tb", "tera", "terabyte", "terabytes"), _TB),
    **dict.fromkeys(("p", "pb", "peta", "petabyte", "petabytes"), _PB),
    **dict.fromkeys(("e", "eb"), _EB),
}

_LEADING_DIGITS = re.compile(r"[0-9]*")


class ByteSizeError(ValueError):
    """Raised when user input cannot be read as a byte size."""

    def __init__(self, value: str, reason: str) -> None:
        super().__init__(f"user input byte size <{value}> invalid: {reason}")
        self.value = value
        self.reason = reason


class ReadableSizeFormatError(ValueError):
    """Raised when a readable size does not look like '<number> <unit>B'."""

    def __init__(self, value: str) -> None:
        super().__init__(f"readable size format invalid: <{value}>")
        self.value = value


def parse_byte_size(s: str) -> int:
    """Parse strings such as '1GB', '1 G' or '100MB' into a number of bytes."""
    digits = _LEADING_DIGITS.match(s).group(0)
    if not digits and s:
        raise ByteSizeError(s, "syntax error")

    value = int(digits) if digits else 0
    if value > _UINT64_MAX:
        raise ByteSizeError(s, "value overflow")

    unit = s[len(digits):].strip().lower()
    try:
        multiplier = _UNITS[unit]
    except KeyError:
        raise ByteSizeError(s, "syntax error") from None

    value *= multiplier
    if value > _UINT64_MAX:
        raise ByteSizeError(s, "value overflow")

    # Results are reported as signed 64-bit quantities.
    if value >= 1 << 63:
        value -= 1 << 64
    return value


def unix_readable_size(hr_size: str) -> str:
    """Turn '1.2 GB' into '1.2G', '103 B' into '103B'."""
    parts = hr_size.split(" ")
    if len(parts) < 2 or "B" not in parts[1] or not parts[0]:
        raise ReadableSizeFormatError(hr_size)
    return f"{parts[0]}{parts[1][0]}"