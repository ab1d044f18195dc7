"""
Forward-elimination kernels.

Reduce a square system to upper-triangular form with one of three
pivoting disciplines. Rows and columns are never moved in storage; the
kernels permute index arrays and address the working copy through them.

Within one pivot step all rows below the pivot are updated together
(they are independent of each other); the steps themselves are
sequential.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pydensela.core.exceptions import SingularMatrixError
from pydensela.core.tolerances import line_scales, pivot_scale, pivot_tolerance
from pydensela.elimination.pivoting import PivotOrder, PivotStrategy, swap


@dataclass(frozen=True)
class Reduction:
    """
    Output of forward elimination.

    Attributes:
        upper: Reduced matrix in physical storage order. Row rows[i] holds
               zeros in columns cols[0..i-1].
        rhs: Right-hand side after the same row operations
        pivots: Row/column pivot order
        pivot_magnitudes: |pivot| at each step, in step order
        pivot_scales: Scale each pivot was measured against, in step order
        pivot_tolerances: Zero threshold applied at each step
    """
    upper: NDArray[np.inexact[Any]]
    rhs: NDArray[np.inexact[Any]]
    pivots: PivotOrder
    pivot_magnitudes: tuple[float, ...]
    pivot_scales: tuple[float, ...]
    pivot_tolerances: tuple[float, ...]


def _select_partial(W: NDArray, rows: NDArray[np.intp], cols: NDArray[np.intp], i: int) -> None:
    # argmax returns the first maximum, so ties go to the earliest candidate
    candidates = np.abs(W[rows[i:], cols[i]])
    swap(rows, i, i + int(np.argmax(candidates)))


def _select_complete(W: NDArray, rows: NDArray[np.intp], cols: NDArray[np.intp], i: int) -> None:
    block = np.abs(W[np.ix_(rows[i:], cols[i:])])
    # flattened argmax scans row-major: first maximum in row-major order wins
    k, l = divmod(int(np.argmax(block)), block.shape[1])
    swap(rows, i, i + k)
    swap(cols, i, i + l)


def eliminate(
    A: NDArray[np.inexact[Any]],
    b: NDArray[np.inexact[Any]],
    strategy: PivotStrategy,
    tol: float | None = None,
) -> Reduction:
    """
    Forward elimination on private copies of A and b.

    Args:
        A: Square coefficient matrix (n x n); not modified
        b: Right-hand side (n,); not modified
        strategy: 'none', 'partial' or 'complete'
        tol: Pivots with magnitude <= tol are treated as zero. Defaults to
             a per-pivot threshold, n * eps times the pivot_scale() of the
             pivot's row and column in A.

    Returns:
        Reduction with the upper-triangular system and pivot order

    Raises:
        SingularMatrixError: If a pivot is zero or below its tolerance
    """
    n = A.shape[0]
    dtype = np.result_type(A, b)
    W = np.array(A, dtype=dtype, copy=True)
    rhs = np.array(b, dtype=dtype, copy=True)
    rows = np.arange(n, dtype=np.intp)
    cols = np.arange(n, dtype=np.intp)
    row_scales, col_scales = line_scales(A)
    magnitudes: list[float] = []
    scales: list[float] = []
    tolerances: list[float] = []

    for i in range(n):
        if strategy == 'partial':
            _select_partial(W, rows, cols, i)
        elif strategy == 'complete':
            _select_complete(W, rows, cols, i)

        pivot = W[rows[i], cols[i]]
        scale = pivot_scale(row_scales[rows[i]], col_scales[cols[i]])
        step_tol = pivot_tolerance(scale, n, dtype) if tol is None else tol
        if abs(pivot) <= step_tol:
            hint = " (try partial or complete pivoting)" if strategy == 'none' else ""
            raise SingularMatrixError(
                f"Matrix is singular: pivot {i} is {abs(pivot):.3e}, "
                f"tolerance {step_tol:.3e}{hint}",
                matrix_name='A',
                rank=i,
                expected_rank=n,
                pivot_index=i,
                pivot_value=float(abs(pivot)),
            )
        magnitudes.append(float(abs(pivot)))
        scales.append(scale)
        tolerances.append(float(step_tol))

        below = rows[i + 1:]
        if below.size == 0:
            continue
        ratios = W[below, cols[i]] / pivot
        W[np.ix_(below, cols[i:])] -= np.outer(ratios, W[rows[i], cols[i:]])
        W[below, cols[i]] = 0
        rhs[below] -= ratios * rhs[rows[i]]

    return Reduction(
        upper=W,
        rhs=rhs,
        pivots=PivotOrder.from_arrays(strategy, rows, cols),
        pivot_magnitudes=tuple(magnitudes),
        pivot_scales=tuple(scales),
        pivot_tolerances=tuple(tolerances),
    )
