"""
Inferring the number of mRNAs a protein could have been translated from.
"""

from codonkit.core.models import AminoAcid
from codonkit.utils.codon_table import degeneracy
from codonkit.utils.logging_config import get_logger

logger = get_logger('protein.mrna_count')

MODULUS = 1_000_000


def count_source_rna(protein: str, modulus: int = MODULUS) -> int:
    """
    Count candidate source mRNAs for a protein, modulo `modulus`.

    The count is the product of the codon degeneracy of every residue times
    the number of stop codons. Newlines are skipped wherever they occur.
    An empty protein counts as 0.

    Args:
        protein: Protein as one-letter codes
        modulus: Modulus applied to the running product

    Returns:
        Number of possible mRNA strings modulo `modulus`

    Raises:
        UnknownAminoAcid: On the first character that is not an amino acid
    """
    if not protein:
        return 0

    total = 1
    for code in protein:
        if code == '\n':
            continue
        total *= degeneracy(code)
        if total > modulus:
            total %= modulus
        if total == 0:
            logger.debug("Running product reached 0")
            return 0

    total *= degeneracy(AminoAcid.STOP)
    return total % modulus
