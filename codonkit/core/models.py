"""
Core data models for codonkit.

Amino acids are an Enum so the stop signal is its own tagged member rather
than a magic character that could collide with sequence text.
"""

from dataclasses import dataclass
from enum import Enum

from codonkit.core.errors import UnknownAminoAcid

# Protein sequences are plain strings of one-letter codes
Protein = str


class AminoAcid(Enum):
    """The 20 standard amino acids plus the translation stop signal"""
    ALANINE = 'A'
    CYSTEINE = 'C'
    ASPARTATE = 'D'
    GLUTAMATE = 'E'
    PHENYLALANINE = 'F'
    GLYCINE = 'G'
    HISTIDINE = 'H'
    ISOLEUCINE = 'I'
    LYSINE = 'K'
    LEUCINE = 'L'
    METHIONINE = 'M'
    ASPARAGINE = 'N'
    PROLINE = 'P'
    GLUTAMINE = 'Q'
    ARGININE = 'R'
    SERINE = 'S'
    THREONINE = 'T'
    VALINE = 'V'
    TRYPTOPHAN = 'W'
    TYROSINE = 'Y'
    STOP = '*'

    @property
    def code(self) -> str:
        """One-letter code (empty for STOP, which is never emitted)"""
        if self is AminoAcid.STOP:
            return ''
        return self.value

    @property
    def is_stop(self) -> bool:
        return self is AminoAcid.STOP

    @classmethod
    def from_code(cls, code: str) -> 'AminoAcid':
        """
        Parse a one-letter amino acid code.

        Only the 20 standard letters are accepted; STOP has no textual form.

        Raises:
            UnknownAminoAcid: If code is not a standard amino acid letter
        """
        member = _BY_CODE.get(code)
        if member is None:
            raise UnknownAminoAcid(code)
        return member


_BY_CODE = {acid.value: acid for acid in AminoAcid if acid is not AminoAcid.STOP}


@dataclass(frozen=True)
class FastaRecord:
    """Single FASTA entry"""
    header: str
    sequence: str

    def __len__(self) -> int:
        return len(self.sequence)
