"""
Protein-level operations: translation, mRNA inference, and mass.
"""

from codonkit.protein.translation import translate
from codonkit.protein.mrna_count import count_source_rna, MODULUS
from codonkit.protein.mass import protein_mass

__all__ = [
    "translate",
    "count_source_rna",
    "MODULUS",
    "protein_mass",
]
