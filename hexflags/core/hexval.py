from __future__ import annotations

import string

U64_MAX = (1 << 64) - 1

_HEX_DIGITS = frozenset(string.hexdigits)


def parse_hex_u64(text: str) -> int:
    """Parse a base-16 literal into an unsigned 64-bit integer.

    Accepts an optional 0x/0X prefix and surrounding whitespace. Signs,
    underscores and trailing garbage are rejected (int(..., 16) alone would
    allow the first two).
    """

    raw = str(text).strip()
    digits = raw[2:] if raw[:2] in ("0x", "0X") else raw
    if not digits or not set(digits) <= _HEX_DIGITS:
        raise ValueError(f"not a hex value: {text!r}")
    value = int(digits, 16)
    if value > U64_MAX:
        raise ValueError(f"hex value out of 64-bit range: {text!r}")
    return value


def format_hex(value: int) -> str:
    return f"0x{value:X}"
