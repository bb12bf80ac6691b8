"""
Error types raised by codonkit operations.

Every error reflects invalid input and carries the offending payload, so
callers can report kind and value without parsing message strings.
"""


class CodonKitError(ValueError):
    """Base class for all codonkit input errors"""

    kind = "Invalid input"

    def payload(self):
        return None

    def __str__(self) -> str:
        payload = self.payload()
        if payload is None:
            return self.kind
        return f"{self.kind}: {payload!r}"

    def __eq__(self, other) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self.payload() == other.payload()

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.payload()))


class CodonParseError(CodonKitError):
    """Raised when an RNA sequence cannot be split into whole codons"""

    kind = "Cannot parse codons"

    def __init__(self, length: int):
        super().__init__(length)
        self.length = length

    def payload(self):
        return None

    def __str__(self) -> str:
        return f"{self.kind}: usable length {self.length} is not a multiple of 3"


class UnknownCodon(CodonKitError):
    """Raised when a 3-character window is not one of the 64 codons"""

    kind = "Unknown codon"

    def __init__(self, codon: str):
        super().__init__(codon)
        self.codon = codon

    def payload(self):
        return self.codon


class UnknownAminoAcid(CodonKitError):
    """Raised when a character is not a standard amino acid code"""

    kind = "Unknown amino acid"

    def __init__(self, amino_acid):
        super().__init__(amino_acid)
        self.amino_acid = amino_acid

    def payload(self):
        return self.amino_acid


class UnknownNucleotide(CodonKitError):
    """Raised when a DNA sequence contains a character outside ACGT"""

    kind = "Unknown nucleotide"

    def __init__(self, nucleotide: str):
        super().__init__(nucleotide)
        self.nucleotide = nucleotide

    def payload(self):
        return self.nucleotide


class FastaFormatError(CodonKitError):
    """Raised when sequence data appears before the first FASTA header"""

    kind = "Malformed FASTA"

    def __init__(self, line_number: int, line: str):
        super().__init__(line_number, line)
        self.line_number = line_number
        self.line = line

    def payload(self):
        return (self.line_number, self.line)

    def __str__(self) -> str:
        return f"{self.kind}: sequence before header at line {self.line_number}: {self.line!r}"
