"""
Core formulas, domain records and contracts for exponential growth and decay.

Self-contained: no I/O.
"""
