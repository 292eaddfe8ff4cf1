# file: src/module1_checksum/crc32.py

"""
Table-driven CRC-32 (IEEE 802.3 / zlib variant).

The lookup table is computed once at import time and frozen; every call
reuses it.
"""

import numpy as np


CRC32_POLYNOMIAL = 0xEDB88320  # reversed form of 0x04C11DB7
_INITIAL = 0xFFFFFFFF
_FINAL_XOR = 0xFFFFFFFF


def _build_table(polynomial: int = CRC32_POLYNOMIAL) -> np.ndarray:
    """
    Build the 256-entry CRC lookup table.
    
    Entry i is i shifted right 8 times, XOR-ing in the polynomial
    whenever the bit shifted out is set.
    
    Args:
        polynomial: Reversed generator polynomial
    
    Returns:
        Read-only uint32 array of shape (256,)
    """
    table = np.zeros(256, dtype=np.uint32)
    
    for i in range(256):
        c = i
        for _ in range(8):
            if c & 1:
                c = polynomial ^ (c >> 1)
            else:
                c >>= 1
        table[i] = c
    
    table.flags.writeable = False
    return table


CRC32_TABLE = _build_table()

# Plain-int view for the per-byte loop (numpy scalar arithmetic is slow)
_TABLE = tuple(int(entry) for entry in CRC32_TABLE)


def crc32_value(data: bytes) -> int:
    """
    Compute the CRC-32 of a byte sequence as an unsigned integer.
    
    Args:
        data: Bytes-like payload
    
    Returns:
        Checksum in [0, 2**32)
    
    Raises:
        TypeError: If data is not bytes-like
    
    Example:
        >>> hex(crc32_value(b"123456789"))
        '0xcbf43926'
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"Expected bytes-like input, got {type(data)}")
    
    crc = _INITIAL
    for byte in bytes(data):
        crc = (crc >> 8) ^ _TABLE[(crc ^ byte) & 0xFF]
    
    return (crc ^ _FINAL_XOR) & 0xFFFFFFFF


def crc32_checksum(data: bytes) -> str:
    """
    Compute the CRC-32 of a byte sequence as 8 lowercase hex digits.
    
    Args:
        data: Bytes-like payload
    
    Returns:
        Zero-padded lowercase hex string, e.g. 'cbf43926'
    
    Example:
        >>> crc32_checksum(b"")
        '00000000'
    """
    return f"{crc32_value(data):08x}"
