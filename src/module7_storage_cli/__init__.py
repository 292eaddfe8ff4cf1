"""
Module 7: Storage Command-Line Interface

Thin front end over Module 5 and Module 6: reads files, encodes them into
JSON documents, decodes documents back into files, and prints sequence
statistics.

Usage:
    python -m src.module7_storage_cli encode photo.png
    python -m src.module7_storage_cli decode photo.png_dna_encoded.json -o restored.png
    python -m src.module7_storage_cli analyze photo.png_dna_encoded.json
"""

from .cli import main, build_parser, setup_logging

__all__ = [
    "main",
    "build_parser",
    "setup_logging",
]
