# file: tests/test_module2_quaternary_codec.py

"""
Unit tests for Module 2: Quaternary Codec.

Test coverage:
    - 2-bit <-> nucleotide bijection
    - Bit array / bit string conversion
    - Odd-length padding
    - Invalid symbol reporting
    - Byte packing helpers
"""

import numpy as np
import pytest

from src.module2_quaternary_codec import (
    ALPHABET,
    SYMBOL_TO_VALUE,
    InvalidSymbolError,
    QuaternaryCodecError,
    bits_to_bytes,
    bits_to_symbol,
    bits_to_symbols,
    bytes_to_bits,
    normalize_sequence,
    symbol_to_bits,
    symbols_to_bits,
    validate_sequence,
)


class TestBijection:
    """Test the single-value mapping."""
    
    def test_alphabet_order(self):
        """Test 00->A, 01->T, 10->G, 11->C."""
        assert ALPHABET == ("A", "T", "G", "C")
        assert [bits_to_symbol(v) for v in range(4)] == ["A", "T", "G", "C"]
    
    def test_value_roundtrip(self):
        """Test every 2-bit value maps back to itself."""
        for value in range(4):
            assert symbol_to_bits(bits_to_symbol(value)) == value
    
    def test_symbol_roundtrip(self):
        """Test every symbol maps back to itself."""
        for symbol in ALPHABET:
            assert bits_to_symbol(symbol_to_bits(symbol)) == symbol
    
    def test_reverse_table_is_exact(self):
        """Test the reverse lookup has exactly four distinct entries."""
        assert len(SYMBOL_TO_VALUE) == 4
        assert sorted(SYMBOL_TO_VALUE.values()) == [0, 1, 2, 3]
    
    def test_out_of_range_value(self):
        """Test values outside 0-3 are rejected."""
        with pytest.raises(ValueError):
            bits_to_symbol(4)
    
    def test_unknown_symbol(self):
        """Test unknown single symbols raise InvalidSymbolError."""
        with pytest.raises(InvalidSymbolError) as exc_info:
            symbol_to_bits("N")
        assert exc_info.value.symbol == "N"


class TestBitsToSymbols:
    """Test bit sequence encoding."""
    
    def test_bit_string(self):
        """Test textual bit input."""
        assert bits_to_symbols("00011011") == "ATGC"
    
    def test_bit_array(self):
        """Test numpy bit input."""
        bits = np.array([1, 1, 1, 0, 0, 1, 0, 0], dtype=np.uint8)
        assert bits_to_symbols(bits) == "CGTA"
    
    def test_msb_first_within_pair(self):
        """Test the first bit of each pair is the high bit."""
        assert bits_to_symbols([0, 1]) == "T"
        assert bits_to_symbols([1, 0]) == "G"
    
    def test_empty(self):
        """Test empty input gives empty sequence."""
        assert bits_to_symbols("") == ""
        assert bits_to_symbols(np.array([], dtype=np.uint8)) == ""
    
    def test_odd_length_padded_with_zero(self):
        """Test a single trailing bit is padded with 0."""
        assert bits_to_symbols("1") == "G"
        assert bits_to_symbols("001") == "AG"
    
    def test_rejects_non_binary_string(self):
        """Test bit strings may only contain 0 and 1."""
        with pytest.raises(ValueError):
            bits_to_symbols("0120")
    
    def test_rejects_non_binary_array(self):
        """Test bit arrays may only contain 0 and 1."""
        with pytest.raises(ValueError):
            bits_to_symbols(np.array([0, 2], dtype=np.uint8))


class TestSymbolsToBits:
    """Test nucleotide decoding."""
    
    def test_decode(self):
        """Test each symbol yields its two bits."""
        bits = symbols_to_bits("ATGC")
        assert bits.dtype == np.uint8
        assert bits.tolist() == [0, 0, 0, 1, 1, 0, 1, 1]
    
    def test_roundtrip_even_bits(self):
        """Test bits -> symbols -> bits for even-length input."""
        rng = np.random.default_rng(7)
        bits = rng.integers(0, 2, size=1000, dtype=np.uint8)
        assert np.array_equal(symbols_to_bits(bits_to_symbols(bits)), bits)
    
    def test_empty(self):
        """Test empty sequence gives no bits."""
        assert symbols_to_bits("").size == 0
    
    def test_invalid_symbol_identified(self):
        """Test the offending character and position are reported."""
        with pytest.raises(InvalidSymbolError) as exc_info:
            symbols_to_bits("AXGT")
        assert exc_info.value.symbol == "X"
        assert exc_info.value.position == 1
        assert "X" in str(exc_info.value)
    
    def test_first_invalid_symbol_reported(self):
        """Test only the first offending character is reported."""
        with pytest.raises(InvalidSymbolError) as exc_info:
            symbols_to_bits("ATGN-Z")
        assert exc_info.value.symbol == "N"
        assert exc_info.value.position == 3
    
    def test_lowercase_rejected(self):
        """Test lowercase must be normalized by the caller."""
        with pytest.raises(InvalidSymbolError):
            symbols_to_bits("atgc")
    
    def test_non_latin_character(self):
        """Test characters outside latin-1 are reported intact."""
        with pytest.raises(InvalidSymbolError) as exc_info:
            symbols_to_bits("AT€G")
        assert exc_info.value.symbol == "€"
        assert exc_info.value.position == 2
    
    def test_error_hierarchy(self):
        """Test InvalidSymbolError derives from QuaternaryCodecError."""
        assert issubclass(InvalidSymbolError, QuaternaryCodecError)
    
    def test_validate_sequence(self):
        """Test validation without conversion."""
        validate_sequence("ATGCATGC")
        with pytest.raises(InvalidSymbolError):
            validate_sequence("ATGU")


class TestByteHelpers:
    """Test byte <-> bit helpers and input normalization."""
    
    def test_bytes_to_bits_msb_first(self):
        """Test big-endian unpacking."""
        assert bytes_to_bits(b"\x80\x01").tolist() == [1] + [0] * 14 + [1]
    
    def test_bytes_roundtrip(self):
        """Test bytes -> bits -> bytes."""
        data = bytes(range(256))
        assert bits_to_bytes(bytes_to_bits(data)) == data
    
    def test_partial_trailing_byte_discarded(self):
        """Test fewer than 8 trailing bits are dropped."""
        bits = np.concatenate([bytes_to_bits(b"\xab"), np.array([1, 1, 1], dtype=np.uint8)])
        assert bits_to_bytes(bits) == b"\xab"
        assert bits_to_bytes([1, 0, 1]) == b""
    
    def test_normalize_sequence(self):
        """Test stripping and uppercasing."""
        assert normalize_sequence("  atgc\n") == "ATGC"
