from __future__ import annotations

from .constants import BITS_PER_BYTE, MASK, POLYNOMIAL, XOR_OUT
from .inpututil import as_bytes, check_crc_value


def crc32_bitwise(data, value: int = 0) -> int:
    """CRC-32 computed one bit at a time, without the lookup table.

    Same contract as crc32b.crc32; slow, used to cross-check the table path.
    """
    c = (check_crc_value(value) ^ XOR_OUT) & MASK
    for b in as_bytes(data):
        c ^= b
        for _ in range(BITS_PER_BYTE):
            if c & 1:
                c = (c >> 1) ^ POLYNOMIAL
            else:
                c >>= 1
    return (~c) & MASK
