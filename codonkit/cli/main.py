"""
codonkit Command Line Interface.

Main entry point for translating sequences and computing protein statistics.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from codonkit.core.errors import CodonKitError
from codonkit.core.models import FastaRecord
from codonkit.io.readers import read_fasta_records
from codonkit.nucleotides.transcription import transcribe
from codonkit.protein.mass import protein_mass
from codonkit.protein.mrna_count import MODULUS, count_source_rna
from codonkit.protein.translation import translate
from codonkit.utils.logging_config import (
    LogContext,
    console_level_from_env,
    get_logger,
    setup_logging,
)

logger = get_logger('cli')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='codonkit',
        description='codonkit - codon translation and protein statistics',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Translate an RNA string
  codonkit translate AUGGCCAUGGCGCCCAGAACUGAGAUCAAUAGUACCCGUAUUAACGGGUGA

  # Translate every DNA record of a FASTA file
  codonkit translate --fasta genes.fa --dna

  # Number of mRNAs that could encode a protein
  codonkit count-rna MA

  # Monoisotopic mass
  codonkit mass SKADYEK
        """
    )
    parser.add_argument('--log-file', type=Path,
                        help='Log file path')
    parser.add_argument('--json-log', action='store_true',
                        help='Use JSON logging format')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Log progress to stderr')

    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    translate_parser = subparsers.add_parser('translate', help='Translate RNA into protein')
    _add_input_arguments(translate_parser, 'RNA sequence')
    translate_parser.add_argument('--dna', action='store_true',
                                  help='Input is DNA; transcribe before translating')

    count_parser = subparsers.add_parser('count-rna',
                                         help='Count mRNAs a protein could be translated from')
    _add_input_arguments(count_parser, 'Protein sequence')
    count_parser.add_argument('--modulus', type=int, default=MODULUS,
                              help=f'Report count modulo this value (default: {MODULUS})')

    mass_parser = subparsers.add_parser('mass', help='Monoisotopic protein mass')
    _add_input_arguments(mass_parser, 'Protein sequence')

    return parser


def _add_input_arguments(parser: argparse.ArgumentParser, what: str) -> None:
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument('sequence', nargs='?', help=what)
    group.add_argument('--fasta', type=Path,
                       help='FASTA file; every record is processed')


def load_inputs(args) -> List[FastaRecord]:
    """Records to process: the FASTA file, or the single command-line sequence"""
    if args.fasta:
        return read_fasta_records(args.fasta)
    return [FastaRecord('', args.sequence)]


def run_translate(args) -> List[str]:
    results = []
    for record in load_inputs(args):
        with LogContext(logger, record_id=record.header, operation='translate'):
            rna = transcribe(record.sequence) if args.dna else record.sequence
            protein = translate(rna)
            logger.info(f"Translated {record.header or 'sequence'}: {len(protein)} residues")
        results.append(protein)
    return results


def run_count_rna(args) -> List[str]:
    results = []
    for record in load_inputs(args):
        with LogContext(logger, record_id=record.header, operation='count-rna'):
            count = count_source_rna(record.sequence, modulus=args.modulus)
            logger.info(f"Counted {record.header or 'sequence'}: {count}")
        results.append(str(count))
    return results


def run_mass(args) -> List[str]:
    results = []
    for record in load_inputs(args):
        with LogContext(logger, record_id=record.header, operation='mass'):
            mass = protein_mass(record.sequence)
            logger.info(f"Mass of {record.header or 'sequence'}: {mass:.3f}")
        results.append(f"{mass:.3f}")
    return results


COMMANDS = {
    'translate': run_translate,
    'count-rna': run_count_rna,
    'mass': run_mass,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point"""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if args.command == 'count-rna' and args.modulus <= 0:
        parser.error("--modulus must be positive")

    console_level = logging.INFO if args.verbose else console_level_from_env()
    setup_logging(log_file=args.log_file, console_level=console_level,
                  json_format=args.json_log)

    try:
        lines = COMMANDS[args.command](args)
    except CodonKitError as e:
        logger.debug(f"{args.command} failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        logger.debug("Cannot read input", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for line in lines:
        print(line)
    return 0


if __name__ == '__main__':
    sys.exit(main())
