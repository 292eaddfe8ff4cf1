# file: src/module2_quaternary_codec/codec.py

"""
Bit <-> nucleotide conversion.

Bits are carried as 1-D numpy uint8 arrays of 0/1 values, most significant
bit first, the same representation the bitstream helpers pack and unpack
with np.packbits / np.unpackbits.
"""

import logging
from typing import Sequence, Union

import numpy as np

from .codec_errors import InvalidSymbolError


logger = logging.getLogger(__name__)

# Indexed by 2-bit value
ALPHABET = ("A", "T", "G", "C")
SYMBOL_TO_VALUE = {symbol: value for value, symbol in enumerate(ALPHABET)}

_ALPHABET_CODES = np.frombuffer("".join(ALPHABET).encode("ascii"), dtype=np.uint8)

_INVALID = 0xFF
_DECODE_TABLE = np.full(256, _INVALID, dtype=np.uint8)
for _value, _symbol in enumerate(ALPHABET):
    _DECODE_TABLE[ord(_symbol)] = _value
_DECODE_TABLE.flags.writeable = False

BitsLike = Union[np.ndarray, Sequence[int], str]


def bits_to_symbol(value: int) -> str:
    """Map a single 2-bit value (0-3) to its nucleotide."""
    if not 0 <= value < len(ALPHABET):
        raise ValueError(f"2-bit value must be in [0, 3], got {value}")
    return ALPHABET[value]


def symbol_to_bits(symbol: str) -> int:
    """Map a single nucleotide to its 2-bit value."""
    try:
        return SYMBOL_TO_VALUE[symbol]
    except KeyError:
        raise InvalidSymbolError(symbol) from None


def _as_bit_array(bits: BitsLike) -> np.ndarray:
    if isinstance(bits, str):
        if bits.strip("01"):
            raise ValueError("Bit string may only contain '0' and '1'")
        return np.frombuffer(bits.encode("ascii"), dtype=np.uint8) - ord("0")
    
    array = np.asarray(bits, dtype=np.uint8).ravel()
    if array.size and array.max() > 1:
        raise ValueError("Bit array may only contain 0 and 1")
    return array


def bits_to_symbols(bits: BitsLike) -> str:
    """
    Convert a bit sequence into a nucleotide sequence.
    
    Bits are consumed in pairs, first bit most significant. An odd-length
    input gets a single trailing 0 bit; the pad is not recorded, so callers
    that need an exact inverse must supply an even number of bits.
    
    Args:
        bits: 0/1 numpy array, sequence of ints, or '0'/'1' string
    
    Returns:
        Sequence over A/T/G/C of length ceil(len(bits) / 2)
    
    Example:
        >>> bits_to_symbols("00011011")
        'ATGC'
    """
    array = _as_bit_array(bits)
    
    if array.size % 2 != 0:
        logger.debug("Padding odd-length bit sequence (%d bits) with one 0 bit", array.size)
        array = np.concatenate([array, np.zeros(1, dtype=np.uint8)])
    
    if array.size == 0:
        return ""
    
    pairs = array.reshape(-1, 2)
    values = (pairs[:, 0] << 1) | pairs[:, 1]
    
    return _ALPHABET_CODES[values].tobytes().decode("ascii")


def _symbol_values(sequence: str) -> np.ndarray:
    # latin-1 with replacement keeps one byte per character, so indices line up
    raw = np.frombuffer(sequence.encode("latin-1", errors="replace"), dtype=np.uint8)
    values = _DECODE_TABLE[raw]
    
    invalid = np.flatnonzero(values == _INVALID)
    if invalid.size:
        position = int(invalid[0])
        raise InvalidSymbolError(sequence[position], position)
    
    return values


def validate_sequence(sequence: str) -> None:
    """
    Check that every character belongs to the alphabet.
    
    Raises:
        InvalidSymbolError: For the first offending character
    """
    _symbol_values(sequence)


def symbols_to_bits(sequence: str) -> np.ndarray:
    """
    Convert a nucleotide sequence back into bits.
    
    Args:
        sequence: String over A/T/G/C (uppercase)
    
    Returns:
        uint8 array of 0/1 values, two per symbol
    
    Raises:
        InvalidSymbolError: If any character is outside the alphabet
    """
    values = _symbol_values(sequence)
    
    bits = np.empty(values.size * 2, dtype=np.uint8)
    bits[0::2] = values >> 1
    bits[1::2] = values & 1
    
    return bits


def bytes_to_bits(data: bytes) -> np.ndarray:
    """Unpack bytes into a big-endian bit array."""
    if len(data) == 0:
        return np.array([], dtype=np.uint8)
    return np.unpackbits(np.frombuffer(bytes(data), dtype=np.uint8), bitorder="big")


def bits_to_bytes(bits: BitsLike) -> bytes:
    """
    Pack a big-endian bit array into bytes.
    
    A trailing group of fewer than 8 bits is discarded, not padded.
    """
    array = _as_bit_array(bits)
    usable = (array.size // 8) * 8
    if usable == 0:
        return b""
    return np.packbits(array[:usable], bitorder="big").tobytes()


def normalize_sequence(text: str) -> str:
    """Strip surrounding whitespace and uppercase free-form sequence input."""
    return text.strip().upper()
