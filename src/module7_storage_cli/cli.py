# file: src/module7_storage_cli/cli.py

"""
Command-line entry point for encoding files into nucleotide sequences
and back.
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from src.module5_dna_pipeline import (
    DNAStorageError,
    decode,
    default_document_name,
    dump_document,
    encode,
    get_cost_per_base,
    load_config,
    load_sequence,
)
from src.module6_sequence_analytics import analyze_sequence, compute_storage_efficiency


EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_CHECKSUM_MISMATCH = 2

DEFAULT_DECODED_NAME = "decoded_data"


# =============================================================================
# LOGGING CONFIGURATION
# =============================================================================

def setup_logging(verbose: bool = False, level: str = "INFO"):
    """Configure logging for the command-line tool."""
    if verbose:
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, str(level).upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format='%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


# =============================================================================
# COMMANDS
# =============================================================================

def _refuse_overwrite(path: str, force: bool) -> None:
    if os.path.exists(path) and not force:
        raise FileExistsError(f"{path} already exists (use --force to overwrite)")


def cmd_encode(args, config: dict) -> int:
    """Encode a file into a JSON document."""
    with open(args.input, 'rb') as f:
        data = f.read()
    
    filename = args.filename if args.filename is not None else os.path.basename(args.input)
    result = encode(data, filename=filename, config=config)
    
    output = args.output
    if output is None:
        output = os.path.join(os.path.dirname(args.input), default_document_name(result))
    _refuse_overwrite(output, args.force)
    
    dump_document(result, output)
    logging.info(f"Wrote encoded document to {output}")
    
    efficiency = compute_storage_efficiency(result.original_size, result.encoded_size)
    print(f"Original size:     {result.original_size} bytes")
    print(f"Encoded size:      {result.encoded_size} bases")
    print(f"Ratio:             {efficiency['compression_ratio']:.2f} ({efficiency['efficiency']})")
    print(f"Checksum:          {result.metadata.checksum}")
    print(f"Output:            {output}")
    
    return EXIT_OK


def cmd_decode(args, config: dict) -> int:
    """Decode a JSON document (or plain sequence file) back into bytes."""
    sequence = load_sequence(args.input)
    result = decode(sequence, config=config)
    
    output = args.output
    if output is None:
        name = os.path.basename(result.metadata.filename or "") or DEFAULT_DECODED_NAME
        output = os.path.join(os.path.dirname(args.input), name)
    _refuse_overwrite(output, args.force)
    
    with open(output, 'wb') as f:
        f.write(result.data)
    logging.info(f"Wrote {len(result.data)} decoded bytes to {output}")
    
    print(f"Decoded size:      {len(result.data)} bytes")
    print(f"Created:           {result.metadata.timestamp}")
    print(f"Integrity:         {'verified' if result.is_valid else 'CHECKSUM MISMATCH'}")
    if result.corrupted_chunks:
        print(f"Corrupted chunks:  {result.corrupted_chunks}")
    print(f"Output:            {output}")
    
    return EXIT_OK if result.is_valid else EXIT_CHECKSUM_MISMATCH


def cmd_analyze(args, config: dict) -> int:
    """Print statistics for an encoded sequence."""
    sequence = load_sequence(args.input).strip().upper()
    stats = analyze_sequence(sequence, cost_per_base=get_cost_per_base(config))
    
    counts = stats['nucleotide_counts']
    print(f"Length:            {stats['length']} bases")
    print(f"GC content:        {stats['gc_content'] * 100:.1f}%")
    print("Counts:            " + "  ".join(f"{base}={counts[base]}" for base in "ATGC"))
    print(f"Estimated cost:    ${stats['estimated_synthesis_cost']:.2f}")
    
    return EXIT_OK


# =============================================================================
# COMMAND-LINE INTERFACE
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with encode/decode/analyze subcommands."""
    parser = argparse.ArgumentParser(
        prog='dna-storage',
        description='Encode files into nucleotide sequences and decode them back',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Encode a file (writes report.pdf_dna_encoded.json next to it)
  dna-storage encode report.pdf

  # Decode back into a file
  dna-storage decode report.pdf_dna_encoded.json -o restored.pdf

  # Sequence statistics
  dna-storage analyze report.pdf_dna_encoded.json
        """
    )
    
    parser.add_argument(
        '--config',
        type=str,
        default=None,
        help='Path to configuration YAML file (default: packaged defaults)'
    )
    
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable debug logging'
    )
    
    subparsers = parser.add_subparsers(dest='command', required=True)
    
    encode_parser = subparsers.add_parser('encode', help='Encode a file into a JSON document')
    encode_parser.add_argument('input', help='File to encode')
    encode_parser.add_argument('-o', '--output', default=None, help='Document path')
    encode_parser.add_argument(
        '--filename',
        default=None,
        help='Filename stored in metadata (default: input basename)'
    )
    encode_parser.add_argument('--force', action='store_true', help='Overwrite output')
    encode_parser.set_defaults(handler=cmd_encode)
    
    decode_parser = subparsers.add_parser('decode', help='Decode a document or sequence file')
    decode_parser.add_argument('input', help='JSON document or plain sequence file')
    decode_parser.add_argument(
        '-o', '--output',
        default=None,
        help='Output path (default: filename from metadata)'
    )
    decode_parser.add_argument('--force', action='store_true', help='Overwrite output')
    decode_parser.set_defaults(handler=cmd_decode)
    
    analyze_parser = subparsers.add_parser('analyze', help='Print sequence statistics')
    analyze_parser.add_argument('input', help='JSON document or plain sequence file')
    analyze_parser.set_defaults(handler=cmd_analyze)
    
    return parser


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the command-line tool."""
    args = build_parser().parse_args(argv)
    
    try:
        config = load_config(args.config)
    except DNAStorageError as e:
        setup_logging(verbose=args.verbose)
        logging.error(f"Configuration error: {e}")
        return EXIT_FAILURE
    
    setup_logging(verbose=args.verbose, level=config.get('system', {}).get('log_level', 'INFO'))
    
    try:
        return args.handler(args, config)
    except (DNAStorageError, OSError) as e:
        logging.error(f"{args.command} failed: {e}")
        return EXIT_FAILURE


if __name__ == '__main__':
    sys.exit(main())
