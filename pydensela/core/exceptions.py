"""
Exception hierarchy for pydensela.

All exceptions inherit from PyDenseLAError to allow catching any
library-specific error. Algorithm-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyDenseLAError(Exception):
    """Base exception for all pydensela errors."""
    pass


class ValidationError(PyDenseLAError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Operand dimensions are incorrect or inconsistent.

    Raised when matrix/vector shapes don't match the operation (unequal
    vector lengths, incompatible product dimensions) or when literal data
    does not match the requested shape.
    """
    pass


class NumericalError(PyDenseLAError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.

    Raised when elimination or back-substitution meets a pivot that is
    zero or below the numerical tolerance.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        rank: Number of pivot steps completed before the failure
        expected_rank: Expected rank (the system order)
        pivot_index: Elimination step at which the pivot vanished
        pivot_value: Magnitude of the offending pivot
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        rank: int | None = None,
        expected_rank: int | None = None,
        pivot_index: int | None = None,
        pivot_value: float | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.rank = rank
        self.expected_rank = expected_rank
        self.pivot_index = pivot_index
        self.pivot_value = pivot_value


class DegenerateBasisError(NumericalError):
    """
    Basis is linearly dependent.

    Raised when Gram-Schmidt produces a (numerically) zero vector, which
    cannot be normalized or projected onto.

    Attributes:
        index: Position of the dependent vector in the input basis
        norm: Norm of the residual vector after removing projections
    """

    def __init__(
        self,
        message: str,
        index: int | None = None,
        norm: float | None = None,
    ):
        super().__init__(message)
        self.index = index
        self.norm = norm
