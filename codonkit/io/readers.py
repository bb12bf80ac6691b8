"""
FASTA readers.
"""

from pathlib import Path
from typing import List, Tuple

from codonkit.core.errors import FastaFormatError
from codonkit.core.models import FastaRecord
from codonkit.utils.logging_config import get_logger

logger = get_logger('io.readers')


def parse_fasta(text: str) -> List[FastaRecord]:
    """
    Parse FASTA-formatted text into records.

    Lines are stripped before use, so indented datasets are accepted.
    Sequence lines are concatenated until the next header. Unlike lenient
    dataset parsers that keep headerless leading lines as an unnamed first
    entry, sequence data before the first header is rejected.

    Args:
        text: FASTA dataset

    Returns:
        Records in input order

    Raises:
        FastaFormatError: If sequence data appears before any header
    """
    records: List[FastaRecord] = []
    header = None
    chunks: List[str] = []

    for line_number, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.strip()
        if not line:
            continue
        if line.startswith('>'):
            if header is not None:
                records.append(FastaRecord(header, ''.join(chunks)))
            header = line[1:].strip()
            chunks = []
        elif header is None:
            raise FastaFormatError(line_number, line)
        else:
            chunks.append(line)

    if header is not None:
        records.append(FastaRecord(header, ''.join(chunks)))

    return records


def read_fasta_records(fasta_path: Path) -> List[FastaRecord]:
    """Read every record of a FASTA file"""
    with open(fasta_path, 'r') as f:
        records = parse_fasta(f.read())
    logger.debug(f"Read {len(records)} records from {fasta_path}")
    return records


def read_fasta(fasta_path: Path) -> Tuple[str, str]:
    """
    Read the first record of a FASTA file.

    Args:
        fasta_path: Path to FASTA file

    Returns:
        Tuple of (header, sequence); both empty if the file has no records
    """
    records = read_fasta_records(fasta_path)
    if not records:
        return "", ""
    return records[0].header, records[0].sequence
