"""
Core infrastructure for pydensela.

This module provides shared abstractions and utilities used by the dense
types and every algorithm (elimination, orthogonalization, decomposition).

Key components:
    protocols: Backend, InnerProduct protocols
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    tolerances: Tolerance tiers and numerical thresholds
    compute: Timing
"""

from pydensela.core.protocols import Backend, InnerProduct
from pydensela.core.result import Result
from pydensela.core.exceptions import (
    PyDenseLAError,
    ValidationError,
    DimensionError,
    NumericalError,
    SingularMatrixError,
    DegenerateBasisError,
)

__all__ = [
    # Protocols
    "Backend",
    "InnerProduct",
    # Result
    "Result",
    # Exceptions
    "PyDenseLAError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "SingularMatrixError",
    "DegenerateBasisError",
]
