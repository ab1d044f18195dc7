"""
Back-substitution for upper-triangular systems.

One operation serves all three pivoting strategies: the PivotOrder
argument says which physical row and column hold each pivot, so the
identity, row-only and row-and-column cases differ only in the
permutations they carry.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike

from pydensela.core.exceptions import DimensionError, SingularMatrixError
from pydensela.core.tolerances import pivot_scale, pivot_tolerance
from pydensela.core.validation import check_consistent_length, check_scalar, check_square
from pydensela.dense.matrix import Matrix
from pydensela.dense.vector import Vector
from pydensela.elimination.design import as_matrix_array, as_vector_array
from pydensela.elimination.pivoting import PivotOrder


def back_substitution(
    U: Matrix | ArrayLike,
    b: Matrix | ArrayLike,
    pivots: PivotOrder | None = None,
    *,
    tol: float | None = None,
) -> Vector:
    """
    Solve U x = b for a (permuted) upper-triangular U.

    Works from the last pivot step to the first:

        x[cols[i]] = (b[rows[i]] - sum_{k>i} U[rows[i], cols[k]] * x[cols[k]])
                     / U[rows[i], cols[i]]

    so the solution comes out in original variable order. Entries of U
    that elimination zeroed are never read.

    Args:
        U: Reduced matrix (n x n), in physical storage order
        b: Reduced right-hand side (n,)
        pivots: Pivot permutations; None means no pivoting
        tol: Pivot magnitudes <= tol are rejected. Defaults to a per-step
             threshold, n * eps times the pivot_scale() of the pivot's row
             and column within the triangle; exact zeros are always rejected.

    Returns:
        Solution vector x (n,)

    Raises:
        DimensionError: If U is not square, or b or pivots have the wrong size
        SingularMatrixError: If a diagonal pivot is zero or below tol
    """
    U_arr = as_matrix_array(U, 'U')
    b_arr = as_vector_array(b, 'b')
    check_square(U_arr, 'U')
    check_consistent_length(U_arr, b_arr, names=('U', 'b'))

    n = U_arr.shape[0]
    if pivots is None:
        pivots = PivotOrder.identity(n)
    elif pivots.n != n:
        raise DimensionError(
            f"pivots: expected permutations of length {n}, got {pivots.n}"
        )

    if tol is not None:
        check_scalar(tol, 'tol')

    rows = np.asarray(pivots.rows, dtype=np.intp)
    cols = np.asarray(pivots.cols, dtype=np.intp)
    x: Any = np.zeros(n, dtype=np.result_type(U_arr, b_arr))

    for i in range(n - 1, -1, -1):
        r, c = rows[i], cols[i]
        diag = U_arr[r, c]
        later = cols[i + 1:]
        if tol is None:
            # Scale from the logical triangle only; eliminated entries are never read
            row_scale = np.max(np.abs(U_arr[r, cols[i:]]))
            col_scale = np.max(np.abs(U_arr[rows[:i + 1], c]))
            step_tol = pivot_tolerance(pivot_scale(row_scale, col_scale), n, U_arr.dtype)
        else:
            step_tol = tol
        if abs(diag) <= step_tol:
            raise SingularMatrixError(
                f"Matrix is singular: pivot {i} (row {r}, column {c}) is "
                f"{abs(diag):.3e}, tolerance {step_tol:.3e}",
                matrix_name='U',
                expected_rank=n,
                pivot_index=i,
                pivot_value=float(abs(diag)),
            )
        x[c] = (b_arr[r] - U_arr[r, later] @ x[later]) / diag

    return Vector(n, x)
