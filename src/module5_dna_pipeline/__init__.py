"""
Module 5: DNA Storage Pipeline

Public entry points that compose the checksum engine, quaternary codec,
chunk framing and container framing into:

    bytes    -> nucleotide sequence              (encode)
    sequence -> bytes + metadata + validity flag (decode)

Public API:
    - encode(data: bytes, filename=None, config=None) -> EncodingResult
    - decode(sequence: str, config=None) -> DecodingResult
    - load_config(config_path=None) -> dict
    - result_to_document / dump_document / load_sequence
"""

from .encoder import encode
from .decoder import decode
from .results import EncodingResult, DecodingResult
from .config import load_config, resolve_config, get_data_chunk_size, get_cost_per_base
from .document import (
    result_to_document,
    default_document_name,
    dump_document,
    load_sequence,
    sequence_from_document,
)
from .errors import (
    DNAStorageError,
    DNAEncodingError,
    DNADecodingError,
    DNAConfigurationError,
    DocumentFormatError,
)

__version__ = "1.0.0"

__all__ = [
    "encode",
    "decode",
    "EncodingResult",
    "DecodingResult",
    "load_config",
    "resolve_config",
    "get_data_chunk_size",
    "get_cost_per_base",
    "result_to_document",
    "default_document_name",
    "dump_document",
    "load_sequence",
    "sequence_from_document",
    "DNAStorageError",
    "DNAEncodingError",
    "DNADecodingError",
    "DNAConfigurationError",
    "DocumentFormatError",
]
