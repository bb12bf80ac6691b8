"""
Calculating protein mass.
"""

import math

from codonkit.utils.masses import monoisotopic_mass


def round_half_away(value: float, digits: int = 3) -> float:
    """Round to `digits` decimals, ties away from zero"""
    scale = 10 ** digits
    scaled = value * scale
    rounded = math.floor(abs(scaled) + 0.5)
    return math.copysign(rounded, scaled) / scale


def protein_mass(protein: str) -> float:
    """
    Monoisotopic mass of a protein, rounded to 3 decimals.

    Residue masses are summed left to right; newlines contribute 0.0.

    Raises:
        UnknownAminoAcid: On the first character that is not an amino acid
    """
    total = 0.0
    for code in protein:
        total += 0.0 if code == '\n' else monoisotopic_mass(code)
    return round_half_away(total)
