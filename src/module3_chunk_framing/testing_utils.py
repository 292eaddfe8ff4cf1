# file: src/module3_chunk_framing/testing_utils.py

"""
Testing utilities for chunk framing.

Provides symbol-level error injection for corruption-detection tests.
Used only in test/evaluation contexts.
"""

import random
from typing import Optional

from src.module2_quaternary_codec import ALPHABET


def inject_symbol_substitution(
    sequence: str,
    position: int,
    symbol: Optional[str] = None
) -> str:
    """
    Replace the nucleotide at one position.
    
    Args:
        sequence: Original sequence
        position: Index to corrupt (negative indices allowed)
        symbol: Replacement nucleotide; defaults to the next alphabet
                member after the current one, so the result always differs
    
    Returns:
        Sequence with exactly one substituted symbol
    
    Example:
        >>> inject_symbol_substitution("AAAA", 1)
        'ATAA'
    """
    if not -len(sequence) <= position < len(sequence):
        raise IndexError(f"position {position} out of range for length {len(sequence)}")
    
    position %= len(sequence)
    current = sequence[position]
    
    if symbol is None:
        index = ALPHABET.index(current) if current in ALPHABET else -1
        symbol = ALPHABET[(index + 1) % len(ALPHABET)]
    
    return sequence[:position] + symbol + sequence[position + 1:]


def inject_symbol_errors(
    sequence: str,
    error_rate: float,
    seed: Optional[int] = None
) -> str:
    """
    Substitute a random fraction of nucleotides.
    
    Every selected position is replaced by a different alphabet member.
    
    Args:
        sequence: Original sequence
        error_rate: Fraction of positions to corrupt (0.0 to 1.0)
        seed: Random seed for reproducibility (optional)
    
    Returns:
        Corrupted sequence of the same length
    
    Example:
        >>> corrupted = inject_symbol_errors("A" * 100, error_rate=0.05, seed=42)
        >>> sum(a != b for a, b in zip("A" * 100, corrupted))
        5
    """
    if not 0.0 <= error_rate <= 1.0:
        raise ValueError(f"error_rate must be in [0, 1], got {error_rate}")
    
    rng = random.Random(seed)
    
    corrupted = list(sequence)
    num_errors = int(len(sequence) * error_rate)
    
    for pos in rng.sample(range(len(sequence)), num_errors):
        choices = [s for s in ALPHABET if s != corrupted[pos]]
        corrupted[pos] = rng.choice(choices)
    
    return "".join(corrupted)
