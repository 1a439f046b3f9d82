from __future__ import annotations

from typing import Union

from .constants import MASK, TEXT_ENCODING
from .errors import InputTypeError, InvalidByteError, InvalidCRCValueError


def as_bytes(data) -> Union[bytes, bytearray]:
    """Normalize checksum input to a byte sequence.

    Rules:
    - str is encoded as strict UTF-8 (UnicodeEncodeError propagates)
    - bytes/bytearray pass through unchanged
    - other buffer objects (memoryview, array, mmap) are copied out raw
    - any other iterable must yield ints in 0..255
    """
    if isinstance(data, str):
        return data.encode(TEXT_ENCODING)
    if isinstance(data, (bytes, bytearray)):
        return data
    # bytes(n) would silently produce n zero bytes
    if data is None or isinstance(data, (int, float, complex)):
        raise InputTypeError(f"unsupported input type: {type(data).__name__}")
    try:
        view = memoryview(data)
    except TypeError:
        view = None
    if view is not None:
        return view.tobytes()
    try:
        items = iter(data)
    except TypeError:
        raise InputTypeError(f"unsupported input type: {type(data).__name__}") from None
    out = bytearray()
    for b in items:
        if not isinstance(b, int):
            raise InputTypeError(f"byte values must be int, got {type(b).__name__}")
        if not 0 <= b <= 0xFF:
            raise InvalidByteError(f"byte value out of range: {b}")
        out.append(b)
    return out


def check_crc_value(value: int) -> int:
    if not isinstance(value, int):
        raise InputTypeError(f"crc value must be int, got {type(value).__name__}")
    if not 0 <= value <= MASK:
        raise InvalidCRCValueError(f"crc value out of 32-bit range: {value}")
    return value
