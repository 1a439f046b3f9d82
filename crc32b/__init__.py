"""
crc32b — CRC-32 checksums with the reflected polynomial 0xEDB88320.

Features:

- Table-driven checksum matching zlib.crc32, binascii.crc32 and the common
  JavaScript CRC32 packages.
- Accepts bytes-like objects, iterables of byte values, and text (UTF-8).
- Continuation values for checksumming data in pieces, plus a hashlib-style
  incremental CRC32 object.
- Bit-at-a-time reference implementation for cross-checking.

The 256-entry lookup table is built once at import and shared read-only.
"""

from .crc32 import CRC32, crc32, to_hex, update
from .errors import Crc32Error, InputTypeError, InvalidByteError, InvalidCRCValueError
from .reference import crc32_bitwise
from .table import TABLE, build_table, table_entry

__version__ = "0.1"

__all__ = [
    "CRC32",
    "TABLE",
    "Crc32Error",
    "InputTypeError",
    "InvalidByteError",
    "InvalidCRCValueError",
    "build_table",
    "crc32",
    "crc32_bitwise",
    "table_entry",
    "to_hex",
    "update",
]
