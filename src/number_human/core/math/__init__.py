"""
Core math modules для number_human

Точные десятичные примитивы без float-арифметики.
"""

from number_human.core.math.decimal_ops import (
    # Precision constants
    MIN_CONTEXT_PRECISION,
    PRECISION_HEADROOM,
    # Constants
    D,
    # Comparisons
    compare,
    is_between,
    # Division and rounding
    absolute,
    exact_divide,
    round_half_up,
    # Validation
    is_finite_decimal,
    validate_finite,
)

__all__ = [
    # Decimal Ops: Precision constants
    "MIN_CONTEXT_PRECISION",
    "PRECISION_HEADROOM",
    # Decimal Ops: Constants
    "D",
    # Decimal Ops: Comparisons
    "compare",
    "is_between",
    # Decimal Ops: Division and rounding
    "absolute",
    "exact_divide",
    "round_half_up",
    # Decimal Ops: Validation
    "is_finite_decimal",
    "validate_finite",
]
