"""Converter contracts and failure types.

Contracts fail immediately and loudly when a stage does not produce its
promised invariants. Input problems are reported through the
ConversionError family instead.

Key principle:
- Pydantic validates option correctness
- ConversionError reports bad input
- Contracts validate converter correctness
"""

from matrix2triplets.contracts.failure import (
    ContractViolation,
    ConversionError,
    FormatError,
    InputNotFound,
    ShapeError,
    SymmetryError,
)
from matrix2triplets.contracts.base import require
from matrix2triplets.contracts.table import assert_parsed
from matrix2triplets.contracts.triangle import assert_lower_triangle

__all__ = [
    "ContractViolation",
    "ConversionError",
    "FormatError",
    "InputNotFound",
    "ShapeError",
    "SymmetryError",
    "require",
    "assert_parsed",
    "assert_lower_triangle",
]
