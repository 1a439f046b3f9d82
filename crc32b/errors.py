class Crc32Error(Exception):
    """Base class for crc32b-specific errors."""


# Input validation
class InputTypeError(Crc32Error, TypeError):
    pass


class InvalidByteError(Crc32Error, ValueError):
    pass


class InvalidCRCValueError(Crc32Error, ValueError):
    pass
