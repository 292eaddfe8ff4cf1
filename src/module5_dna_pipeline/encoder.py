# file: src/module5_dna_pipeline/encoder.py

"""
DNA encoding entry point.

Provides encode() which turns raw bytes into a checksummed nucleotide sequence.
"""

import logging
from datetime import datetime
from typing import Any, Dict, Optional

from src.module2_quaternary_codec import bits_to_symbols
from src.module3_chunk_framing import frame_chunks
from src.module4_container import ContainerError, build_container, create_metadata

from .config import get_data_chunk_size
from .errors import DNAEncodingError
from .results import EncodingResult


logger = logging.getLogger(__name__)


def encode(
    data: bytes,
    filename: Optional[str] = None,
    config: Optional[Dict[str, Any]] = None,
    timestamp: Optional[datetime] = None
) -> EncodingResult:
    """
    Encode raw bytes into a nucleotide sequence.
    
    Pipeline:
        payload -> CRC-32 metadata -> container bits
        -> nucleotides -> per-chunk checksum framing
    
    Args:
        data: Raw payload bytes
        filename: Optional name stored in the metadata
        config: Configuration dictionary (default: load_config())
        timestamp: Creation time stored in the metadata (default: now)
    
    Returns:
        EncodingResult with the framed sequence and its metadata
    
    Raises:
        DNAEncodingError: If input is not bytes or metadata cannot be framed
        DNAConfigurationError: If configuration is invalid
    
    Example:
        >>> result = encode(b"hello", filename="hello.txt")
        >>> result.sequence[:8]
        'AAAATTTT'
    """
    if not isinstance(data, (bytes, bytearray)):
        raise DNAEncodingError(f"Input must be bytes, got {type(data)}")
    if filename is not None and not isinstance(filename, str):
        raise DNAEncodingError(f"Filename must be a string, got {type(filename)}")
    
    data_chunk_size = get_data_chunk_size(config)
    payload = bytes(data)
    
    metadata = create_metadata(payload, filename=filename, timestamp=timestamp)
    
    try:
        bits = build_container(payload, metadata)
    except ContainerError as e:
        raise DNAEncodingError(f"Container assembly failed: {e}") from e
    
    sequence = frame_chunks(bits_to_symbols(bits), data_chunk_size)
    
    original_size = len(payload)
    encoded_size = len(sequence)
    compression_ratio = encoded_size / original_size if original_size > 0 else 0.0
    
    logger.debug(
        "Encoded %d bytes into %d nucleotides (%d container bits, ratio %.2f)",
        original_size, encoded_size, bits.size, compression_ratio
    )
    
    return EncodingResult(
        original_size=original_size,
        encoded_size=encoded_size,
        compression_ratio=compression_ratio,
        sequence=sequence,
        metadata=metadata,
    )
