# file: src/module5_dna_pipeline/document.py

"""
Encoded document persistence.

An EncodingResult is stored as an indented JSON document:

    {
      "sequence": "...",
      "metadata": {"timestamp": ..., "filename": ..., "checksum": ...},
      "originalSize": N,
      "encodedSize": M
    }

load_sequence() also accepts plain text files holding only the sequence.
"""

import json
import os
from typing import Any, Dict

from .errors import DocumentFormatError
from .results import EncodingResult


DOCUMENT_SUFFIX = "_dna_encoded.json"


def result_to_document(result: EncodingResult) -> Dict[str, Any]:
    """Build the JSON-ready document for an encoding result."""
    return {
        'sequence': result.sequence,
        'metadata': result.metadata.to_dict(),
        'originalSize': result.original_size,
        'encodedSize': result.encoded_size,
    }


def default_document_name(result: EncodingResult) -> str:
    """'<filename or data>_dna_encoded.json'"""
    stem = result.metadata.filename or "data"
    return os.path.basename(stem) + DOCUMENT_SUFFIX


def dump_document(result: EncodingResult, path: str) -> None:
    """
    Write an encoding result as a JSON document.
    
    Args:
        result: Output of encode()
        path: Destination file path
    """
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(result_to_document(result), f, indent=2, ensure_ascii=False)
        f.write("\n")


def sequence_from_document(document: Any) -> str:
    """
    Extract the sequence from a parsed document.
    
    Raises:
        DocumentFormatError: If there is no string 'sequence' field
    """
    if not isinstance(document, dict) or not isinstance(document.get('sequence'), str):
        raise DocumentFormatError("Encoded document has no 'sequence' string")
    return document['sequence']


def load_sequence(path: str) -> str:
    """
    Read a sequence from a JSON document or a plain text file.
    
    Args:
        path: File written by dump_document() or a text file with the sequence
    
    Returns:
        Sequence text (not yet normalized)
    
    Raises:
        DocumentFormatError: If the file is not UTF-8 text, or a JSON
                             document is invalid or lacks the sequence field
        OSError: If the file cannot be read
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            text = f.read()
    except UnicodeDecodeError as e:
        raise DocumentFormatError(f"{path} is not UTF-8 text: {e}") from e
    
    if not text.lstrip().startswith('{'):
        return text
    
    try:
        document = json.loads(text)
    except (ValueError, RecursionError) as e:
        raise DocumentFormatError(f"Invalid JSON document {path}: {e}") from e
    
    return sequence_from_document(document)
