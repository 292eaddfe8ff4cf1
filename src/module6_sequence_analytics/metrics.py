# file: src/module6_sequence_analytics/metrics.py

"""
Sequence and storage metrics.

Provides nucleotide composition, GC content, synthesis cost estimates and
storage efficiency labels for encoded sequences.
"""

from typing import Dict

import numpy as np


DEFAULT_COST_PER_BASE = 0.10  # dollars, approximate

# (upper bound on encoded/original ratio, label), checked in order
EFFICIENCY_THRESHOLDS = (
    (2.0, "Excellent"),
    (3.0, "Good"),
    (4.0, "Fair"),
)


def compute_nucleotide_counts(sequence: str) -> Dict[str, int]:
    """
    Count each nucleotide in a sequence.
    
    Characters outside A/T/G/C are ignored.
    
    Example:
        >>> compute_nucleotide_counts("AATGx")
        {'A': 2, 'T': 1, 'G': 1, 'C': 0}
    """
    return {base: sequence.count(base) for base in "ATGC"}


def compute_gc_content(sequence: str) -> float:
    """
    Fraction of G and C nucleotides in a sequence.
    
    Returns:
        GC content in [0.0, 1.0]; 0.0 for an empty sequence
    """
    if len(sequence) == 0:
        return 0.0
    
    return (sequence.count("G") + sequence.count("C")) / len(sequence)


def estimate_synthesis_cost(
    length: int,
    cost_per_base: float = DEFAULT_COST_PER_BASE
) -> float:
    """
    Estimate synthesis cost, linear in sequence length.
    
    Raises:
        ValueError: If length or cost_per_base is negative
    """
    if length < 0:
        raise ValueError(f"length must be >= 0, got {length}")
    if cost_per_base < 0:
        raise ValueError(f"cost_per_base must be >= 0, got {cost_per_base}")
    
    return length * cost_per_base


def classify_efficiency(ratio: float) -> str:
    """Map an encoded/original size ratio to Excellent, Good, Fair or Poor."""
    for upper, label in EFFICIENCY_THRESHOLDS:
        if ratio < upper:
            return label
    return "Poor"


def compute_storage_efficiency(
    original_size: int,
    encoded_size: int
) -> dict:
    """
    Compare encoded size against original size.
    
    Args:
        original_size: Payload size in bytes
        encoded_size: Encoded sequence length in nucleotides
    
    Returns:
        Dictionary with:
            - compression_ratio: encoded_size / original_size (0.0 if original_size == 0)
            - efficiency: qualitative label for the ratio
            - space_saving: percentage saved; negative when the encoding is larger
    
    Example:
        >>> stats = compute_storage_efficiency(100, 450)
        >>> stats['efficiency']
        'Poor'
    """
    if original_size < 0 or encoded_size < 0:
        raise ValueError(
            f"Sizes must be >= 0, got original={original_size}, encoded={encoded_size}"
        )
    
    if original_size == 0:
        compression_ratio = 0.0
        space_saving = 0.0
    else:
        compression_ratio = encoded_size / original_size
        space_saving = ((original_size - encoded_size) / original_size) * 100.0
    
    return {
        'compression_ratio': compression_ratio,
        'efficiency': classify_efficiency(compression_ratio),
        'space_saving': space_saving,
    }


def analyze_sequence(
    sequence: str,
    cost_per_base: float = DEFAULT_COST_PER_BASE
) -> dict:
    """
    Summarize a nucleotide sequence.
    
    Returns:
        Dictionary with:
            - length: number of nucleotides
            - gc_content: GC fraction in [0, 1]
            - nucleotide_counts: per-base counts
            - estimated_synthesis_cost: cost at cost_per_base
    """
    return {
        'length': len(sequence),
        'gc_content': compute_gc_content(sequence),
        'nucleotide_counts': compute_nucleotide_counts(sequence),
        'estimated_synthesis_cost': estimate_synthesis_cost(len(sequence), cost_per_base),
    }


def compute_symbol_error_rate(original: str, received: str) -> float:
    """
    Fraction of positions where two equal-length sequences differ.
    
    Raises:
        ValueError: If inputs have different lengths
    
    Example:
        >>> compute_symbol_error_rate("ATGC", "ATGA")
        0.25
    """
    if len(original) != len(received):
        raise ValueError(
            f"Length mismatch: original={len(original)}, received={len(received)}"
        )
    
    if len(original) == 0:
        return 0.0
    
    a = np.array(list(original))
    b = np.array(list(received))
    return float(np.count_nonzero(a != b)) / len(original)
