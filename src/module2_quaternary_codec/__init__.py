"""
Module 2: Quaternary Codec

Maps 2-bit groups onto the four-letter nucleotide alphabet and back.
Every higher layer (chunk framing, containers, the encode/decode pipeline)
is built on this bijection.

Mapping:
    00 <-> A    01 <-> T    10 <-> G    11 <-> C

Public API:
    - bits_to_symbols(bits) -> str
    - symbols_to_bits(sequence: str) -> np.ndarray
    - bits_to_symbol(value: int) -> str / symbol_to_bits(symbol: str) -> int
    - bytes_to_bits(data: bytes) / bits_to_bytes(bits)
    - normalize_sequence(text: str) -> str
    - validate_sequence(sequence: str) -> None
"""

from .codec import (
    ALPHABET,
    SYMBOL_TO_VALUE,
    bits_to_symbol,
    symbol_to_bits,
    bits_to_symbols,
    symbols_to_bits,
    bytes_to_bits,
    bits_to_bytes,
    normalize_sequence,
    validate_sequence,
)
from .codec_errors import QuaternaryCodecError, InvalidSymbolError

__version__ = "1.0.0"

__all__ = [
    "ALPHABET",
    "SYMBOL_TO_VALUE",
    "bits_to_symbol",
    "symbol_to_bits",
    "bits_to_symbols",
    "symbols_to_bits",
    "bytes_to_bits",
    "bits_to_bytes",
    "normalize_sequence",
    "validate_sequence",
    "QuaternaryCodecError",
    "InvalidSymbolError",
]
