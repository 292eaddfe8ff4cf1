# file: src/module4_container/container_errors.py
"""
Container error types for Module 4.
"""


class ContainerError(Exception):
    """Base exception for container framing operations."""
    pass


class ContainerEncodingError(ContainerError):
    """Raised when a container cannot be assembled."""
    pass


class MalformedContainerError(ContainerError):
    """Raised when container structure or metadata is invalid."""
    pass


class TruncatedContainerError(MalformedContainerError):
    """Raised when container data is shorter than its header announces."""
    pass
