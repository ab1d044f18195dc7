"""
Gaussian elimination and back-substitution.

Public API:
    solve(A, b, pivoting='partial') -> EliminationSolution
    gaussian_elimination_no_pivot(A, b) -> Vector
    gaussian_elimination_partial_pivot(A, b) -> Vector
    gaussian_elimination_complete_pivot(A, b) -> Vector
    back_substitution(U, b, pivots=None) -> Vector

Example:
    >>> from pydensela.elimination import solve
    >>> sol = solve(A, b, pivoting='complete')
    >>> print(sol.x)
    >>> print(sol.summary())
"""

from pydensela.elimination.design import LinearSystemDesign
from pydensela.elimination.pivoting import PivotOrder, PivotStrategy
from pydensela.elimination.solution import EliminationParams, EliminationSolution
from pydensela.elimination.triangular import back_substitution
from pydensela.elimination.solvers import (
    solve,
    gaussian_elimination_no_pivot,
    gaussian_elimination_partial_pivot,
    gaussian_elimination_complete_pivot,
)

__all__ = [
    "solve",
    "gaussian_elimination_no_pivot",
    "gaussian_elimination_partial_pivot",
    "gaussian_elimination_complete_pivot",
    "back_substitution",
    "PivotOrder",
    "PivotStrategy",
    "LinearSystemDesign",
    "EliminationParams",
    "EliminationSolution",
]
