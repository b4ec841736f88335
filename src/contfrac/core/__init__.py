"""
Core continued-fraction model, integer primitives, and text notation.

This module contains the value type, its normalization engine, and the
constructors for rationals, decimals, and known constants.
"""
