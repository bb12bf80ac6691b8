"""
Translating RNA into protein.
"""

from codonkit.core.errors import CodonParseError
from codonkit.core.models import Protein
from codonkit.utils.codon_table import codon_to_amino_acid
from codonkit.utils.logging_config import get_logger

logger = get_logger('protein.translation')


def usable_length(sequence: str) -> int:
    """Length of sequence excluding a single trailing newline"""
    if sequence.endswith('\n'):
        return len(sequence) - 1
    return len(sequence)


def translate(rna: str) -> Protein:
    """
    Translate an RNA sequence into a protein string.

    Codons are read from offset 0 in non-overlapping windows; translation
    ends at the first stop codon, which is not included in the output.

    Args:
        rna: RNA sequence over ACGU, optionally ending with one newline

    Returns:
        Protein as one-letter codes (empty if the first codon is a stop)

    Raises:
        CodonParseError: If the usable length is not a multiple of 3
        UnknownCodon: On the first window that is not a valid codon
    """
    length = usable_length(rna)
    if length % 3 != 0:
        raise CodonParseError(length)

    residues = []
    for start in range(0, length, 3):
        acid = codon_to_amino_acid(rna[start:start + 3])
        if acid.is_stop:
            logger.debug(f"Stop codon at position {start + 1}, {len(residues)} residues")
            break
        residues.append(acid.code)

    return ''.join(residues)
