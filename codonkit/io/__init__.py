"""
Input/Output module for codonkit.

Handles reading FASTA datasets.
"""

from codonkit.io.readers import (
    parse_fasta,
    read_fasta,
    read_fasta_records,
)

__all__ = [
    "parse_fasta",
    "read_fasta",
    "read_fasta_records",
]
