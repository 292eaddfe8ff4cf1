# file: src/module5_dna_pipeline/results.py
"""
Result records returned by encode() and decode().
"""

from dataclasses import dataclass, field
from typing import List, Tuple

from src.module4_container import ContainerMetadata


@dataclass(frozen=True)
class EncodingResult:
    """Output of one encode() call"""
    original_size: int  # bytes
    encoded_size: int  # nucleotides
    compression_ratio: float  # encoded_size / original_size, 0.0 for empty input
    sequence: str
    metadata: ContainerMetadata


@dataclass(frozen=True)
class DecodingResult:
    """
    Output of one decode() call.
    
    is_valid compares a fresh CRC-32 of data with the checksum carried in
    metadata. It is advisory: a False value still returns best-effort data.
    chunk_validity holds one flag per checksummed chunk.
    """
    data: bytes
    metadata: ContainerMetadata
    is_valid: bool
    chunk_validity: Tuple[bool, ...] = field(default_factory=tuple)
    
    @property
    def corrupted_chunks(self) -> List[int]:
        """Indices of chunks whose checksum tag did not match."""
        return [i for i, valid in enumerate(self.chunk_validity) if not valid]
    
    @property
    def corruption_detected(self) -> bool:
        return not self.is_valid or bool(self.corrupted_chunks)
