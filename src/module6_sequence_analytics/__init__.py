"""
Module 6: Sequence Analytics

Stateless statistics over encoded sequences and size ratios. Purely
informational; nothing here feeds back into encoding or decoding.

Public API:
    - analyze_sequence(sequence: str, cost_per_base=0.10) -> dict
    - compute_nucleotide_counts(sequence: str) -> dict
    - compute_gc_content(sequence: str) -> float
    - estimate_synthesis_cost(length: int, cost_per_base=0.10) -> float
    - compute_storage_efficiency(original_size: int, encoded_size: int) -> dict
    - classify_efficiency(ratio: float) -> str
    - compute_symbol_error_rate(original: str, received: str) -> float
"""

from .metrics import (
    DEFAULT_COST_PER_BASE,
    analyze_sequence,
    compute_nucleotide_counts,
    compute_gc_content,
    estimate_synthesis_cost,
    compute_storage_efficiency,
    classify_efficiency,
    compute_symbol_error_rate,
)

__version__ = "1.0.0"

__all__ = [
    "DEFAULT_COST_PER_BASE",
    "analyze_sequence",
    "compute_nucleotide_counts",
    "compute_gc_content",
    "estimate_synthesis_cost",
    "compute_storage_efficiency",
    "classify_efficiency",
    "compute_symbol_error_rate",
]
