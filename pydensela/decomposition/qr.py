"""
QR decomposition via Gram-Schmidt.

Factors an m x n matrix A as A = Q R, where Q has columns orthonormal
under the chosen inner product and

    R[i, j] = <q_i, a_j>    for j >= c_i

with c_i the column of A that produced q_i. When the columns are
linearly independent (so m >= n), Q is m x n and R is n x n upper
triangular. With on_dependent='skip' dependent columns produce no q_i,
so Q is m x k and R is k x n in row echelon form, k being the rank.

Because each a_j lies in span(q_i : c_i <= j), these coefficients
reconstruct A exactly (up to rounding) for any inner product whose
kernel is linear in its second argument.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import ArrayLike

from pydensela.core.exceptions import DimensionError, ValidationError
from pydensela.core.protocols import InnerProduct
from pydensela.core.tolerances import DEGENERACY_RTOL, machine_epsilon
from pydensela.dense.matrix import Matrix
from pydensela.dense.ops import from_column_vectors
from pydensela.dense.vector import Vector
from pydensela.elimination.design import as_matrix_array, as_vector_array
from pydensela.elimination.triangular import back_substitution
from pydensela.orthogonalization.gram_schmidt import (
    DependencyPolicy,
    OrthogonalizationMethod,
    _orthonormalize,
)
from pydensela.orthogonalization.inner_product import inner_product


@dataclass(frozen=True)
class QRResult:
    """
    Result of QR decomposition.

    Attributes:
        Q: Matrix with orthonormal columns (m x k)
        R: Upper triangular (or row echelon) matrix (k x n)
        rank: Numerical rank determined from the pivots of R
        columns: Column of A behind each column of Q
    """
    Q: Matrix
    R: Matrix
    rank: int
    columns: tuple[int, ...]


def _numerical_rank(R: np.ndarray, shape: tuple[int, int]) -> int:
    diag_R = np.abs(np.diag(R))
    if len(diag_R) > 0 and diag_R.max() > 0:
        # Tolerance based on matrix size and machine epsilon
        tol = max(shape) * machine_epsilon(R.dtype) * diag_R.max()
        return int(np.sum(diag_R > tol))
    return 0


def qr_decomposition(
    matrix: Matrix | ArrayLike,
    func: InnerProduct | None = None,
    *,
    method: OrthogonalizationMethod = 'modified',
    on_dependent: DependencyPolicy = 'raise',
) -> QRResult:
    """
    QR decomposition by Gram-Schmidt on the columns.

    Args:
        matrix: Matrix to decompose (m x n)
        func: Inner product kernel; None means the standard product
        method: 'modified' or 'classical' Gram-Schmidt
        on_dependent: 'raise' on a linearly dependent column, or 'skip'
            it with a warning so rank-deficient matrices still factor

    Returns:
        QRResult with Q, R, numerical rank and the columns kept

    Raises:
        ValidationError: If the matrix has no rows or no columns
        DegenerateBasisError: If the columns are linearly dependent
            (always the case when n > m) and on_dependent='raise', or if
            every column is zero
    """
    A = as_matrix_array(matrix, 'matrix')
    m, n = A.shape
    if m == 0 or n == 0:
        raise ValidationError(f"matrix: cannot decompose an empty matrix of shape {A.shape}")

    columns = Matrix(m, n, A).column_vectors()
    q_columns, kept = _orthonormalize(
        columns, func, method, on_dependent, DEGENERACY_RTOL, stacklevel=3
    )
    Q = from_column_vectors(q_columns)
    k = len(q_columns)

    R = np.zeros((k, n), dtype=np.result_type(Q.dtype, A.dtype))
    for i in range(k):
        for j in range(kept[i], n):
            R[i, j] = inner_product(q_columns[i], columns[j], func)

    return QRResult(
        Q=Q,
        R=Matrix(k, n, R),
        rank=_numerical_rank(R[:, kept], (m, n)),
        columns=tuple(kept),
    )


def qr_solve(
    A: Matrix | ArrayLike,
    b: Matrix | ArrayLike,
    func: InnerProduct | None = None,
) -> Vector:
    """
    Least-squares solution of A x = b via QR.

    Solves R x = Q* b, where (Q* b)_i = <q_i, b>, by back-substitution.
    For square non-singular A this is the exact solution.

    Args:
        A: Matrix (m x n) with linearly independent columns
        b: Right-hand side (m,)
        func: Inner product kernel; None means the standard product

    Returns:
        Solution vector x (n,)

    Raises:
        DimensionError: If b does not have m entries
        DegenerateBasisError: If the columns of A are dependent
    """
    A_arr = as_matrix_array(A, 'A')
    b_arr = as_vector_array(b, 'b')
    if A_arr.shape[0] != b_arr.shape[0]:
        raise DimensionError(
            f"Inconsistent lengths: A has {A_arr.shape[0]} rows, b has {b_arr.shape[0]} entries"
        )

    qr = qr_decomposition(A_arr, func)
    rhs: Any = np.array(
        [inner_product(q, b_arr, func) for q in qr.Q.column_vectors()]
    )
    return back_substitution(qr.R, rhs)
