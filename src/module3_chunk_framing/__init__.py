"""
Module 3: Chunk Integrity Framing

Splits a nucleotide sequence into fixed-size chunks and appends a short
per-chunk checksum tag, so that corruption can be localised after storage.
This is error DETECTION only: corrupted chunks are flagged, never repaired.

Public API:
    - frame_chunks(sequence: str, data_chunk_size: int = 100) -> str
    - unframe_chunks(framed: str, data_chunk_size: int = 100) -> UnframedSequence
    - chunk_checksum(chunk: str) -> str
    - framed_length(symbol_count: int, data_chunk_size: int = 100) -> int
"""

from .chunk_framer import (
    DATA_CHUNK_SIZE,
    CHECKSUM_WIDTH,
    UnframedSequence,
    chunk_checksum,
    frame_chunks,
    unframe_chunks,
    framed_length,
)
from .framing_errors import ChunkFramingError

__version__ = "1.0.0"

__all__ = [
    "DATA_CHUNK_SIZE",
    "CHECKSUM_WIDTH",
    "UnframedSequence",
    "chunk_checksum",
    "frame_chunks",
    "unframe_chunks",
    "framed_length",
    "ChunkFramingError",
]
