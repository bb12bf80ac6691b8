"""
Utility functions for codonkit.

Includes the genetic code and mass tables, and logging configuration.
"""

from codonkit.utils.codon_table import (
    CODON_TABLE,
    AMINO_ACID_CODONS,
    STOP_CODONS,
    codon_to_amino_acid,
    amino_acid_to_codons,
    degeneracy,
)
from codonkit.utils.masses import MONOISOTOPIC_MASS, monoisotopic_mass
from codonkit.utils.logging_config import (
    setup_logging,
    get_logger,
    LogContext,
)

__all__ = [
    # Genetic code
    "CODON_TABLE",
    "AMINO_ACID_CODONS",
    "STOP_CODONS",
    "codon_to_amino_acid",
    "amino_acid_to_codons",
    "degeneracy",
    # Masses
    "MONOISOTOPIC_MASS",
    "monoisotopic_mass",
    # Logging
    "setup_logging",
    "get_logger",
    "LogContext",
]
