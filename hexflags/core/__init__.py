from __future__ import annotations

from hexflags.core.decode import BitResult, DecodeReport, decode_flags
from hexflags.core.hexval import parse_hex_u64
from hexflags.core.table import FlagTable, load_flag_table

__all__ = [
    "BitResult",
    "DecodeReport",
    "FlagTable",
    "decode_flags",
    "load_flag_table",
    "parse_hex_u64",
]
