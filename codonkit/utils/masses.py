"""
Monoisotopic residue masses of the standard amino acids (Daltons).
"""

from types import MappingProxyType
from typing import Mapping, Union

from codonkit.core.errors import UnknownAminoAcid
from codonkit.core.models import AminoAcid

MONOISOTOPIC_MASS: Mapping[AminoAcid, float] = MappingProxyType({
    AminoAcid.ALANINE: 71.03711,
    AminoAcid.CYSTEINE: 103.00919,
    AminoAcid.ASPARTATE: 115.02694,
    AminoAcid.GLUTAMATE: 129.04259,
    AminoAcid.PHENYLALANINE: 147.06841,
    AminoAcid.GLYCINE: 57.02146,
    AminoAcid.HISTIDINE: 137.05891,
    AminoAcid.ISOLEUCINE: 113.08406,
    AminoAcid.LYSINE: 128.09496,
    AminoAcid.LEUCINE: 113.08406,
    AminoAcid.METHIONINE: 131.04049,
    AminoAcid.ASPARAGINE: 114.04293,
    AminoAcid.PROLINE: 97.05276,
    AminoAcid.GLUTAMINE: 128.05858,
    AminoAcid.ARGININE: 156.10111,
    AminoAcid.SERINE: 87.03203,
    AminoAcid.THREONINE: 101.04768,
    AminoAcid.VALINE: 99.06841,
    AminoAcid.TRYPTOPHAN: 186.07931,
    AminoAcid.TYROSINE: 163.06333,
})


def monoisotopic_mass(acid: Union[AminoAcid, str]) -> float:
    """
    Look up the monoisotopic mass of a residue.

    Raises:
        UnknownAminoAcid: For STOP or any non-standard code
    """
    if not isinstance(acid, AminoAcid):
        acid = AminoAcid.from_code(acid)
    try:
        return MONOISOTOPIC_MASS[acid]
    except KeyError:
        raise UnknownAminoAcid(acid) from None
