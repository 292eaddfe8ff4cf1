# file: src/module2_quaternary_codec/codec_errors.py
"""
Error types for the quaternary codec.
"""

from typing import Optional


class QuaternaryCodecError(Exception):
    """Base exception for bit <-> symbol conversion."""
    pass


class InvalidSymbolError(QuaternaryCodecError):
    """Raised when a sequence contains a character outside the alphabet."""
    
    def __init__(self, symbol: str, position: Optional[int] = None):
        if position is None:
            message = f"Invalid nucleotide: {symbol!r}"
        else:
            message = f"Invalid nucleotide: {symbol!r} at position {position}"
        super().__init__(message)
        self.symbol = symbol
        self.position = position
