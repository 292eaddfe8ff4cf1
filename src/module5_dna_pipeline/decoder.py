# file: src/module5_dna_pipeline/decoder.py

"""
DNA decoding entry point.

Provides decode() with chunk-level corruption reporting and whole-payload
integrity verification.
"""

import logging
from typing import Any, Dict, Optional

from src.module1_checksum import crc32_checksum
from src.module2_quaternary_codec import (
    InvalidSymbolError,
    normalize_sequence,
    symbols_to_bits,
    validate_sequence,
)
from src.module3_chunk_framing import unframe_chunks
from src.module4_container import MalformedContainerError, parse_container

from .config import get_data_chunk_size
from .errors import DNADecodingError
from .results import DecodingResult


logger = logging.getLogger(__name__)


def decode(sequence: str, config: Optional[Dict[str, Any]] = None) -> DecodingResult:
    """
    Decode a nucleotide sequence back into bytes and metadata.
    
    Input is stripped and uppercased before validation.
    
    Args:
        sequence: Output of encode(), possibly stored or transmitted
        config: Configuration dictionary; framing.data_chunk_size must
                match the encoder's
    
    Returns:
        DecodingResult with recovered bytes, metadata, is_valid and
        per-chunk validity
    
    Raises:
        DNADecodingError: stage='symbols' for characters outside A/T/G/C,
                          stage='container' for inconsistent length or
                          unparsable metadata
        DNAConfigurationError: If configuration is invalid
    
    Error Handling:
        - Structural corruption: raises, no partial result
        - Chunk tag mismatch: chunk flagged in chunk_validity, data kept
        - Payload CRC mismatch: is_valid=False, data kept
    
    Example:
        >>> result = decode(encoded.sequence)
        >>> if not result.is_valid:
        ...     print(f"Corrupted chunks: {result.corrupted_chunks}")
    """
    if not isinstance(sequence, str):
        raise DNADecodingError(f"Input must be str, got {type(sequence)}", stage="input")
    
    data_chunk_size = get_data_chunk_size(config)
    sequence = normalize_sequence(sequence)
    
    try:
        validate_sequence(sequence)
    except InvalidSymbolError as e:
        raise DNADecodingError(f"Decoding failed: {e}", stage="symbols") from e
    
    symbols, chunk_validity = unframe_chunks(sequence, data_chunk_size)
    
    try:
        payload, metadata = parse_container(symbols_to_bits(symbols))
    except MalformedContainerError as e:
        raise DNADecodingError(f"Decoding failed: {e}", stage="container") from e
    
    is_valid = crc32_checksum(payload) == metadata.checksum
    
    if not is_valid:
        logger.warning(
            "Payload checksum mismatch (expected %s), data may be corrupted",
            metadata.checksum
        )
    
    logger.debug(
        "Decoded %d nucleotides into %d bytes (%d/%d chunks valid)",
        len(sequence), len(payload), sum(chunk_validity), len(chunk_validity)
    )
    
    return DecodingResult(
        data=payload,
        metadata=metadata,
        is_valid=is_valid,
        chunk_validity=tuple(chunk_validity),
    )
