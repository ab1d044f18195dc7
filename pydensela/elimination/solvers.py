"""
Solver dispatch for Gaussian elimination.

This module provides solve() (the full-diagnostics API) and the three
gaussian_elimination_* functions that return only the solution vector.
"""

from numpy.typing import ArrayLike

from pydensela.dense.matrix import Matrix
from pydensela.dense.vector import Vector
from pydensela.elimination.backends.cpu import CPUEliminationBackend
from pydensela.elimination.design import LinearSystemDesign
from pydensela.elimination.pivoting import PivotStrategy
from pydensela.elimination.solution import EliminationSolution


def solve(
    A: Matrix | ArrayLike,
    b: Matrix | ArrayLike,
    *,
    pivoting: PivotStrategy = 'partial',
) -> EliminationSolution:
    """
    Solve the square linear system A x = b by Gaussian elimination.

    All input validation, backend selection, and result wrapping happens
    here. Neither A nor b is modified.

    Args:
        A: Coefficient matrix (n x n). Matrix or any 2D array-like.
        b: Right-hand side (n,). Vector or any 1D array-like.
        pivoting: Pivot selection discipline:
            - 'none': use the diagonal as-is (requires non-zero leading
              pivots, e.g. diagonally dominant or positive-definite A)
            - 'partial': largest-magnitude entry in the pivot column
            - 'complete': largest-magnitude entry in the remaining submatrix

    Returns:
        EliminationSolution with the solution, pivot order and diagnostics

    Raises:
        ValidationError: If inputs are non-numeric or non-finite
        DimensionError: If A is not square or b has the wrong length
        SingularMatrixError: If a pivot vanishes

    Example:
        >>> from pydensela.elimination import solve
        >>> sol = solve([[2.0, 1.0], [1.0, 3.0]], [3.0, 5.0])
        >>> sol.x.data()    # approximately [0.8, 1.4]
    """
    # === Input Validation ===
    # This is the boundary - validate here, trust everywhere else
    design = LinearSystemDesign.build(A, b)

    # === Select Backend ===
    backend_impl = _get_backend(pivoting)

    # === Solve ===
    result = backend_impl.solve(design)

    # === Wrap and Return ===
    return EliminationSolution(_result=result, _design=design)


def _get_backend(pivoting: PivotStrategy) -> CPUEliminationBackend:
    """
    Instantiate the backend for a pivoting strategy.

    Raises:
        ValueError: If the strategy is unknown
    """
    if pivoting in ('none', 'partial', 'complete'):
        return CPUEliminationBackend(pivoting)
    raise ValueError(f"Unknown pivoting strategy: {pivoting!r}")


def gaussian_elimination_no_pivot(A: Matrix | ArrayLike, b: Matrix | ArrayLike) -> Vector:
    """Solve A x = b without pivoting; see solve()."""
    return solve(A, b, pivoting='none').x


def gaussian_elimination_partial_pivot(A: Matrix | ArrayLike, b: Matrix | ArrayLike) -> Vector:
    """Solve A x = b with row (partial) pivoting; see solve()."""
    return solve(A, b, pivoting='partial').x


def gaussian_elimination_complete_pivot(A: Matrix | ArrayLike, b: Matrix | ArrayLike) -> Vector:
    """Solve A x = b with row and column (complete) pivoting; see solve()."""
    return solve(A, b, pivoting='complete').x
