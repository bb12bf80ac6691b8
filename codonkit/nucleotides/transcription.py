"""
Transcribing DNA into RNA.
"""

from codonkit.core.errors import UnknownNucleotide

_TRANSCRIPTION = {'A': 'A', 'C': 'C', 'G': 'G', 'T': 'U'}


def transcribe(dna: str) -> str:
    """
    Transcribe DNA into RNA by replacing T with U.

    Newlines are skipped wherever they occur.

    Raises:
        UnknownNucleotide: On the first character outside ACGT
    """
    rna = []
    for nucleotide in dna:
        if nucleotide == '\n':
            continue
        try:
            rna.append(_TRANSCRIPTION[nucleotide])
        except KeyError:
            raise UnknownNucleotide(nucleotide) from None
    return ''.join(rna)
