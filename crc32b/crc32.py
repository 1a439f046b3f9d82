"""
Table-driven CRC-32 (reflected polynomial 0xEDB88320).

Produces the same values as zlib.crc32 / binascii.crc32. Text input is
encoded as UTF-8 before folding.
"""

from __future__ import annotations

from .constants import DIGEST_SIZE, MASK, XOR_OUT
from .inpututil import as_bytes, check_crc_value
from .table import TABLE


def _fold(buf, value: int) -> int:
    # value 0 starts the register at INIT (0xFFFFFFFF)
    c = (value ^ XOR_OUT) & MASK
    tbl = TABLE
    for b in buf:
        c = (c >> 8) ^ tbl[(c ^ b) & 0xFF]
    return (~c) & MASK


def crc32(data, value: int = 0) -> int:
    """Return the CRC-32 of *data*.

    Args:
        data: bytes-like object, iterable of byte values, or str (UTF-8).
        value: CRC of the preceding data when checksumming in pieces, so that
            crc32(b, crc32(a)) == crc32(a + b). Defaults to 0 (fresh start).

    Returns:
        Unsigned 32-bit checksum.
    """
    return _fold(as_bytes(data), check_crc_value(value))


def update(value: int, data) -> int:
    return crc32(data, value)


def to_hex(value: int) -> str:
    """Canonical lowercase 8-digit hex form, e.g. 1095738169 -> '414fa339'."""
    return format(check_crc_value(value), "08x")


class CRC32:
    """Incremental CRC-32 with a hashlib-style interface."""

    name = "crc32"
    digest_size = DIGEST_SIZE
    block_size = 1

    def __init__(self, data=b"", value: int = 0):
        self._value = check_crc_value(value)
        self.update(data)

    def update(self, data) -> "CRC32":
        self._value = _fold(as_bytes(data), self._value)
        return self

    @property
    def value(self) -> int:
        return self._value

    def __int__(self) -> int:
        return self._value

    def digest(self) -> bytes:
        return self._value.to_bytes(DIGEST_SIZE, "big")

    def hexdigest(self) -> str:
        return to_hex(self._value)

    def copy(self) -> "CRC32":
        return CRC32(value=self._value)

    def __repr__(self) -> str:
        return f"<CRC32 {self.hexdigest()}>"
