# file: src/module3_chunk_framing/framing_errors.py
"""
Error types for chunk integrity framing.
"""


class ChunkFramingError(Exception):
    """Raised when chunk framing parameters are invalid."""
    pass
