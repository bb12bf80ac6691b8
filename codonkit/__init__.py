"""
codonkit - codon translation and protein counting

Pure functions for translating RNA into protein, counting the mRNAs a
protein could have come from, and computing monoisotopic protein mass.
"""

__version__ = "1.0.0"

from codonkit.core.errors import (
    CodonKitError,
    CodonParseError,
    UnknownCodon,
    UnknownAminoAcid,
    UnknownNucleotide,
    FastaFormatError,
)
from codonkit.core.models import AminoAcid, FastaRecord
from codonkit.utils.codon_table import (
    codon_to_amino_acid,
    amino_acid_to_codons,
    degeneracy,
)
from codonkit.protein import translate, count_source_rna, protein_mass
from codonkit.nucleotides import transcribe
from codonkit.io import parse_fasta

__all__ = [
    "CodonKitError",
    "CodonParseError",
    "UnknownCodon",
    "UnknownAminoAcid",
    "UnknownNucleotide",
    "FastaFormatError",
    "AminoAcid",
    "FastaRecord",
    "codon_to_amino_acid",
    "amino_acid_to_codons",
    "degeneracy",
    "translate",
    "count_source_rna",
    "protein_mass",
    "transcribe",
    "parse_fasta",
]
