"""
Core math modules

Замкнутые формулы роста/распада и примитивы сравнения float.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    as_float,
    compare_with_tolerance,
    is_close,
    is_valid_float,
    non_finite_fields,
)

# Exponential formulas
from src.core.math.exponential import (
    LN_2,
    InvalidInput,
    compound_final_value,
    continuous_final_value,
    decay_constant,
    decay_elapsed_time,
    decay_ratio,
    implied_rate,
    time_to_reach,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Numerical Safeguards — Checks and comparisons
    "as_float",
    "compare_with_tolerance",
    "is_close",
    "is_valid_float",
    "non_finite_fields",
    # Exponential — Constants
    "LN_2",
    # Exponential — Exceptions
    "InvalidInput",
    # Exponential — Functions
    "compound_final_value",
    "continuous_final_value",
    "decay_constant",
    "decay_elapsed_time",
    "decay_ratio",
    "implied_rate",
    "time_to_reach",
]
