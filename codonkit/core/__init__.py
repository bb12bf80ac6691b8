"""
Core data models and error types.
"""
