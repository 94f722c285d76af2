"""Suffix arrays and gamma-compressed psi arrays for substring search."""

__version__ = "0.1.0"

__all__ = ["gamma", "psi", "suffix_array"]