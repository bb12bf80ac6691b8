"""
Nucleotide-level operations.
"""

from codonkit.nucleotides.transcription import transcribe

__all__ = ["transcribe"]
