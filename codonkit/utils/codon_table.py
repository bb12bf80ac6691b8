"""
Standard genetic code and its inverse.

The table is stored as a 4x4x4 numpy grid indexed by the compact nucleotide
encoding U=0, C=1, A=2, G=3 (NCBI translation table 1 order).
"""

from itertools import product
from types import MappingProxyType
from typing import Dict, Mapping, Tuple, Union

import numpy as np

from codonkit.core.errors import UnknownCodon
from codonkit.core.models import AminoAcid

RNA_NUCLEOTIDES = 'UCAG'

# NCBI table 1, codons enumerated first base slowest; '*' marks stop
STANDARD_CODE = 'FFLLSSSSYY**CC*WLLLLPPPPHHQQRRRRIIIMTTTTNNKKSSRRVVVVAAAADDEEGGGG'

NUCLEOTIDE_INDEX: Mapping[str, int] = MappingProxyType(
    {base: i for i, base in enumerate(RNA_NUCLEOTIDES)}
)

CODON_GRID = np.array(
    [AminoAcid(symbol) for symbol in STANDARD_CODE], dtype=object
).reshape(4, 4, 4)
CODON_GRID.setflags(write=False)


def _build_tables() -> Tuple[Dict[str, AminoAcid], Dict[AminoAcid, Tuple[str, ...]]]:
    forward: Dict[str, AminoAcid] = {}
    inverse: Dict[AminoAcid, list] = {}
    for i, j, k in product(range(4), repeat=3):
        codon = RNA_NUCLEOTIDES[i] + RNA_NUCLEOTIDES[j] + RNA_NUCLEOTIDES[k]
        acid = CODON_GRID[i, j, k]
        forward[codon] = acid
        inverse.setdefault(acid, []).append(codon)
    return forward, {acid: tuple(codons) for acid, codons in inverse.items()}


_forward, _inverse = _build_tables()

# Codon -> amino acid (64 entries, 3 of them STOP)
CODON_TABLE: Mapping[str, AminoAcid] = MappingProxyType(_forward)

# Amino acid -> codons that encode it, in table order
AMINO_ACID_CODONS: Mapping[AminoAcid, Tuple[str, ...]] = MappingProxyType(_inverse)

STOP_CODONS: Tuple[str, ...] = AMINO_ACID_CODONS[AminoAcid.STOP]

del _forward, _inverse


def codon_to_amino_acid(codon: str) -> AminoAcid:
    """
    Decode a single RNA codon.

    Args:
        codon: Three-letter RNA codon (e.g., "AUG")

    Returns:
        Encoded amino acid, or AminoAcid.STOP for UAA/UAG/UGA

    Raises:
        UnknownCodon: If codon is not one of the 64 RNA codons
    """
    if len(codon) != 3:
        raise UnknownCodon(codon)
    try:
        i, j, k = (NUCLEOTIDE_INDEX[base] for base in codon)
    except KeyError:
        raise UnknownCodon(codon) from None
    return CODON_GRID[i, j, k]


def _as_amino_acid(acid: Union[AminoAcid, str]) -> AminoAcid:
    if isinstance(acid, AminoAcid):
        return acid
    return AminoAcid.from_code(acid)


def amino_acid_to_codons(acid: Union[AminoAcid, str]) -> Tuple[str, ...]:
    """
    Codons encoding an amino acid.

    Args:
        acid: AminoAcid member (STOP included) or one-letter code

    Returns:
        Tuple of codons in table order

    Raises:
        UnknownAminoAcid: If acid is not a standard one-letter code
    """
    return AMINO_ACID_CODONS[_as_amino_acid(acid)]


def degeneracy(acid: Union[AminoAcid, str]) -> int:
    """Number of distinct codons encoding acid"""
    return len(amino_acid_to_codons(acid))
