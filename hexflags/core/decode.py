from __future__ import annotations

import logging
from dataclasses import dataclass

from hexflags.core.hexval import U64_MAX, format_hex
from hexflags.core.table import FlagTable
from hexflags.errors import ArgumentError


log = logging.getLogger(__name__)

BIT_COUNT = 64
SUMMARY_SEPARATOR = " | "


@dataclass(frozen=True)
class BitResult:
    index: int
    is_set: bool
    value: int
    name: str | None = None

    @property
    def display(self) -> str:
        if self.name is not None:
            return self.name
        return format_hex(self.value)


@dataclass(frozen=True)
class DecodeReport:
    value: int
    bits: tuple[BitResult, ...]
    summary: str

    @property
    def names(self) -> list[str]:
        return [b.name for b in self.bits if b.name is not None]


def decode_flags(value: int, table: FlagTable | None = None) -> DecodeReport:
    """Split ``value`` into its set bits, lowest first.

    Only set bits are kept in ``bits``. When ``table`` is given each bit's
    power-of-two value is looked up in it; unresolved bits display as hex.
    """

    if value < 0 or value > U64_MAX:
        raise ArgumentError(f"value out of 64-bit range: {value}")

    bits: list[BitResult] = []
    for index in range(BIT_COUNT):
        if not (value >> index) & 1:
            continue
        scalar = 1 << index
        name = table.resolve_name(scalar) if table is not None else None
        bits.append(BitResult(index=index, is_set=True, value=scalar, name=name))

    summary = SUMMARY_SEPARATOR.join(b.display for b in bits)
    log.debug(
        "decoded flags",
        extra={"value": format_hex(value), "set_bits": len(bits), "table": table.type_name if table is not None else None},
    )
    return DecodeReport(value=value, bits=tuple(bits), summary=summary)
