"""
Command line interface for codonkit.
"""
