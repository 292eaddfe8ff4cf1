"""
Module 1: Checksum Engine

Provides the CRC-32 (IEEE 802.3) checksum used to verify that a decoded
payload matches the bytes that were originally encoded.

Public API:
    - crc32_checksum(data: bytes) -> str   (8 lowercase hex digits)
    - crc32_value(data: bytes) -> int
    - CRC32_TABLE: read-only 256-entry lookup table
"""

from .crc32 import crc32_checksum, crc32_value, CRC32_TABLE, CRC32_POLYNOMIAL

__version__ = "1.0.0"

__all__ = [
    "crc32_checksum",
    "crc32_value",
    "CRC32_TABLE",
    "CRC32_POLYNOMIAL",
]
