# file: src/module5_dna_pipeline/errors.py

"""
Pipeline exception hierarchy.

All exceptions inherit from DNAStorageError for unified handling.
Lower-level codec and container errors are chained as __cause__.
"""


class DNAStorageError(Exception):
    """Base exception for all encode/decode pipeline errors."""
    pass


class DNAEncodingError(DNAStorageError):
    """Raised when encoding fails."""
    pass


class DNADecodingError(DNAStorageError):
    """Raised when a sequence is structurally corrupt and cannot be decoded."""
    
    def __init__(self, message: str, stage: str = None):
        super().__init__(message)
        self.stage = stage


class DNAConfigurationError(DNAStorageError):
    """Raised when configuration is invalid."""
    pass


class DocumentFormatError(DNAStorageError):
    """Raised when an encoded document cannot be read."""
    pass
