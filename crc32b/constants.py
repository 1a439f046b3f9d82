# Reflected CRC-32 generator (IEEE 802.3 / zlib / PNG)
POLYNOMIAL = 0xEDB88320

INIT = 0xFFFFFFFF
XOR_OUT = 0xFFFFFFFF
MASK = 0xFFFFFFFF

TABLE_SIZE = 256
BITS_PER_BYTE = 8

DIGEST_SIZE = 4  # bytes

TEXT_ENCODING = "utf-8"

# Well-known check values
CHECK_INPUT = b"123456789"
CHECK_VALUE = 0xCBF43926
