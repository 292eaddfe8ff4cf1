# file: src/module3_chunk_framing/chunk_framer.py

"""
Per-chunk checksum framing for nucleotide sequences.

Framed layout:
    [data: N][tag: 4][data: N][tag: 4] ... [remainder: < N]

Only full N-symbol chunks carry a tag. A final chunk shorter than N is
emitted bare, and the unframer passes any slice shorter than N + 4
through unchanged, so the two sides always agree on where tags sit.
"""

import logging
from typing import List, NamedTuple

from src.module2_quaternary_codec import ALPHABET, bits_to_symbol

from .framing_errors import ChunkFramingError


logger = logging.getLogger(__name__)

DATA_CHUNK_SIZE = 100
CHECKSUM_WIDTH = 4  # one symbol per alphabet member


class UnframedSequence(NamedTuple):
    """Result of unframing: clean data symbols plus one flag per tagged chunk."""
    symbols: str
    chunk_validity: List[bool]


def _validate_chunk_size(data_chunk_size: int) -> None:
    if not isinstance(data_chunk_size, int) or isinstance(data_chunk_size, bool):
        raise ChunkFramingError(
            f"data_chunk_size must be an int, got {type(data_chunk_size)}"
        )
    if data_chunk_size < 1:
        raise ChunkFramingError(f"data_chunk_size must be >= 1, got {data_chunk_size}")


def chunk_checksum(chunk: str) -> str:
    """
    Compute the 4-symbol integrity tag of a chunk.
    
    The count of each nucleotide (in A, T, G, C order) is reduced modulo 4
    and written as one symbol. A single substitution moves two counts by
    one, so it always changes the tag.
    
    Args:
        chunk: Data symbols of one chunk
    
    Returns:
        Tag of exactly CHECKSUM_WIDTH symbols
    
    Example:
        >>> chunk_checksum("AAAAAT")
        'TTAA'
    """
    return "".join(bits_to_symbol(chunk.count(symbol) % 4) for symbol in ALPHABET)


def frame_chunks(sequence: str, data_chunk_size: int = DATA_CHUNK_SIZE) -> str:
    """
    Insert a checksum tag after every full chunk of data symbols.
    
    Args:
        sequence: Nucleotide sequence to protect
        data_chunk_size: Data symbols per tagged chunk
    
    Returns:
        Framed sequence of length framed_length(len(sequence), data_chunk_size)
    
    Raises:
        ChunkFramingError: If data_chunk_size is invalid
    """
    _validate_chunk_size(data_chunk_size)
    
    parts = []
    for offset in range(0, len(sequence), data_chunk_size):
        chunk = sequence[offset:offset + data_chunk_size]
        parts.append(chunk)
        if len(chunk) == data_chunk_size:
            parts.append(chunk_checksum(chunk))
    
    return "".join(parts)


def unframe_chunks(framed: str, data_chunk_size: int = DATA_CHUNK_SIZE) -> UnframedSequence:
    """
    Strip and verify per-chunk checksum tags.
    
    Mismatching chunks are kept (best effort) but flagged False in
    chunk_validity and logged. A trailing slice shorter than a full
    tagged chunk is passed through without verification.
    
    Args:
        framed: Output of frame_chunks()
        data_chunk_size: Must match the value used when framing
    
    Returns:
        UnframedSequence(symbols, chunk_validity)
    
    Raises:
        ChunkFramingError: If data_chunk_size is invalid
    """
    _validate_chunk_size(data_chunk_size)
    
    slice_width = data_chunk_size + CHECKSUM_WIDTH
    parts = []
    chunk_validity = []
    
    for offset in range(0, len(framed), slice_width):
        piece = framed[offset:offset + slice_width]
        
        if len(piece) < slice_width:
            parts.append(piece)
            continue
        
        data = piece[:data_chunk_size]
        tag = piece[data_chunk_size:]
        valid = tag == chunk_checksum(data)
        
        if not valid:
            logger.warning(
                "Checksum mismatch in chunk %d (symbols %d-%d), data may be corrupted",
                len(chunk_validity), offset, offset + slice_width - 1
            )
        
        parts.append(data)
        chunk_validity.append(valid)
    
    return UnframedSequence("".join(parts), chunk_validity)


def framed_length(symbol_count: int, data_chunk_size: int = DATA_CHUNK_SIZE) -> int:
    """Length of the framed form of a sequence with symbol_count symbols."""
    _validate_chunk_size(data_chunk_size)
    if symbol_count < 0:
        raise ValueError(f"symbol_count must be >= 0, got {symbol_count}")
    return symbol_count + CHECKSUM_WIDTH * (symbol_count // data_chunk_size)
