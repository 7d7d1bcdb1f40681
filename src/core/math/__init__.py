"""
Core math modules

Математические примитивы с гарантией детерминированности результата.
"""

from src.core.math.numerical_safeguards import (
    EPS_MACHINE,
    EXPONENT_LOWER,
    EXPONENT_UPPER,
    ROUNDING_SCALE,
    is_valid_float,
    round_half_up,
    to_canonical_string,
)

__all__ = [
    # Constants
    "EPS_MACHINE",
    "EXPONENT_LOWER",
    "EXPONENT_UPPER",
    "ROUNDING_SCALE",
    # Functions
    "is_valid_float",
    "round_half_up",
    "to_canonical_string",
]
