"""
CRC-32 lookup table with the reflected polynomial 0xEDB88320.

Each entry is the remainder of one byte value after eight rounds of
bit-at-a-time reduction, so the checksum loop can fold a whole byte with a
single lookup.
"""

from __future__ import annotations

from typing import Tuple

from .constants import BITS_PER_BYTE, MASK, POLYNOMIAL, TABLE_SIZE
from .errors import InvalidByteError


def table_entry(byte: int, poly: int = POLYNOMIAL) -> int:
    if not 0 <= byte <= 0xFF:
        raise InvalidByteError(f"byte value out of range: {byte}")
    rem = byte
    for _ in range(BITS_PER_BYTE):
        if rem & 1:
            rem = (rem >> 1) ^ poly
        else:
            rem >>= 1
    return rem & MASK


def build_table(poly: int = POLYNOMIAL) -> Tuple[int, ...]:
    return tuple(table_entry(i, poly) for i in range(TABLE_SIZE))


# Built once under the import lock; tuples are never written after this.
TABLE = build_table()
