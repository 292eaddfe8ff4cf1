"""
Module 4: Container Framing

Defines the self-describing byte layout that carries metadata and payload
inside one bit stream before nucleotide encoding.

Layout:
    [metadata_length: 2 bytes, big-endian][metadata JSON: metadata_length][payload]

Public API:
    - create_metadata(payload, filename=None, timestamp=None) -> ContainerMetadata
    - assemble_container(payload, metadata) -> bytes
    - build_container(payload, metadata) -> np.ndarray (bits)
    - parse_container_bytes(data) -> (payload, metadata)
    - parse_container(bits) -> (payload, metadata)
"""

from .metadata import ContainerMetadata, create_metadata, utc_timestamp
from .framing import (
    LENGTH_HEADER_BITS,
    MAX_METADATA_SIZE,
    assemble_container,
    build_container,
    parse_container,
    parse_container_bytes,
    container_bit_length,
)
from .container_errors import (
    ContainerError,
    ContainerEncodingError,
    MalformedContainerError,
    TruncatedContainerError,
)

__version__ = "1.0.0"

__all__ = [
    "ContainerMetadata",
    "create_metadata",
    "utc_timestamp",
    "LENGTH_HEADER_BITS",
    "MAX_METADATA_SIZE",
    "assemble_container",
    "build_container",
    "parse_container",
    "parse_container_bytes",
    "container_bit_length",
    "ContainerError",
    "ContainerEncodingError",
    "MalformedContainerError",
    "TruncatedContainerError",
]
