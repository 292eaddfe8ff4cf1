# file: src/module4_container/framing.py
"""
Container assembly and parsing.
"""

import struct
from typing import Tuple

import numpy as np

from src.module2_quaternary_codec import bytes_to_bits, bits_to_bytes

from .container_errors import (
    ContainerEncodingError,
    TruncatedContainerError,
)
from .metadata import ContainerMetadata


LENGTH_HEADER_SIZE = 2
LENGTH_HEADER_BITS = LENGTH_HEADER_SIZE * 8
MAX_METADATA_SIZE = 0xFFFF


def assemble_container(payload: bytes, metadata: ContainerMetadata) -> bytes:
    """
    Assemble a container from payload and metadata.
    
    Container structure (2 + M + N bytes):
        [metadata_length:2][metadata JSON:M][payload:N]
    
    Args:
        payload: Raw bytes to store
        metadata: Metadata record (checksum computed over payload)
    
    Returns:
        Container bytes
    
    Raises:
        ContainerEncodingError: If serialized metadata exceeds 65535 bytes
    """
    metadata_bytes = metadata.to_json_bytes()
    
    if len(metadata_bytes) > MAX_METADATA_SIZE:
        raise ContainerEncodingError(
            f"Metadata too large: {len(metadata_bytes)} bytes (maximum {MAX_METADATA_SIZE})"
        )
    
    container = (
        struct.pack('>H', len(metadata_bytes)) +  # Big-endian uint16
        metadata_bytes +
        bytes(payload)
    )
    
    return container


def build_container(payload: bytes, metadata: ContainerMetadata) -> np.ndarray:
    """
    Assemble a container and unpack it into bits (MSB first).
    
    The bit length is always 16 + 8*M + 8*N, which is even.
    """
    return bytes_to_bits(assemble_container(payload, metadata))


def parse_container_bytes(data: bytes) -> Tuple[bytes, ContainerMetadata]:
    """
    Parse container bytes into payload and metadata.
    
    Args:
        data: Container bytes
    
    Returns:
        Tuple of (payload, metadata)
    
    Raises:
        TruncatedContainerError: If data is shorter than the header or
                                 the announced metadata length
        MalformedContainerError: If metadata cannot be parsed
    """
    if len(data) < LENGTH_HEADER_SIZE:
        raise TruncatedContainerError(
            f"Container too short: {len(data)} bytes (minimum {LENGTH_HEADER_SIZE})"
        )
    
    metadata_length = struct.unpack('>H', data[:LENGTH_HEADER_SIZE])[0]
    
    metadata_end = LENGTH_HEADER_SIZE + metadata_length
    if len(data) < metadata_end:
        raise TruncatedContainerError(
            f"Metadata length {metadata_length} exceeds available data "
            f"{len(data) - LENGTH_HEADER_SIZE}"
        )
    
    metadata = ContainerMetadata.from_json_bytes(data[LENGTH_HEADER_SIZE:metadata_end])
    payload = bytes(data[metadata_end:])
    
    return payload, metadata


def parse_container(bits: np.ndarray) -> Tuple[bytes, ContainerMetadata]:
    """
    Parse a container bit stream.
    
    Trailing bits that do not fill a whole byte are discarded.
    """
    return parse_container_bytes(bits_to_bytes(bits))


def container_bit_length(metadata_size: int, payload_size: int) -> int:
    """Total bits of a container: 16 + 8 * metadata_size + 8 * payload_size."""
    return LENGTH_HEADER_BITS + 8 * metadata_size + 8 * payload_size
