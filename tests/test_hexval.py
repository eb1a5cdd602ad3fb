from __future__ import annotations

import pytest

from hexflags.core.hexval import format_hex, parse_hex_u64


@pytest.mark.parametrize(
    "text,expected",
    [
        ("0x1", 1),
        ("0X1F", 0x1F),
        ("ff", 0xFF),
        ("10", 0x10),
        ("  0xdeadBEEF \n", 0xDEADBEEF),
        ("FFFFFFFFFFFFFFFF", 0xFFFFFFFFFFFFFFFF),
        ("0000000000000000001", 1),
    ],
)
def test_parse_hex_u64(text: str, expected: int) -> None:
    assert parse_hex_u64(text) == expected


@pytest.mark.parametrize("text", ["", "0x", "xyz", "-1", "+1", "1_000", "0x1g", "10000000000000000"])
def test_parse_hex_u64_rejects(text: str) -> None:
    with pytest.raises(ValueError):
        parse_hex_u64(text)


def test_format_hex_is_uppercase() -> None:
    assert format_hex(0xABCDEF) == "0xABCDEF"
    assert format_hex(0) == "0x0"
