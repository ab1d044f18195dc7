"""
Linear System Design.

Design validates a square system A x = b once, at the boundary, and
holds the validated arrays. Backends trust it and never re-validate.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pydensela.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_consistent_length,
    check_finite,
    check_square,
)
from pydensela.dense.matrix import Matrix


def as_matrix_array(value: Matrix | ArrayLike, name: str) -> NDArray[np.inexact[Any]]:
    """Matrix or 2D array-like -> 2D inexact array (a copy for Matrix input)."""
    if isinstance(value, Matrix):
        value = value.to_array()
    arr = check_array(value, name)
    check_2d(arr, name)
    return arr


def as_vector_array(value: Matrix | ArrayLike, name: str) -> NDArray[np.inexact[Any]]:
    """Vector, N x 1 Matrix or 1D array-like -> 1D inexact array."""
    if isinstance(value, Matrix):
        value = value.to_array()
    arr = check_array(value, name)
    if arr.ndim == 2 and arr.shape[1] == 1:
        arr = arr.ravel()
    check_1d(arr, name)
    return arr


@dataclass(frozen=True)
class LinearSystemDesign:
    """
    Validated square linear system.

    Immutable after construction. The arrays are never handed to a
    kernel directly; kernels take their own working copies.

    Construction:
        LinearSystemDesign.build(A, b)    # Matrix/Vector or array-likes
    """
    _A: NDArray[np.inexact[Any]]
    _b: NDArray[np.inexact[Any]]
    _n: int

    @classmethod
    def build(cls, A: Matrix | ArrayLike, b: Matrix | ArrayLike) -> LinearSystemDesign:
        """Validate A (n x n) and b (n,) and take private copies."""
        A_arr = as_matrix_array(A, 'A')
        b_arr = as_vector_array(b, 'b')

        check_square(A_arr, 'A')
        check_consistent_length(A_arr, b_arr, names=('A', 'b'))
        check_finite(A_arr, 'A')
        check_finite(b_arr, 'b')

        dtype = np.result_type(A_arr, b_arr)
        return cls(
            _A=np.array(A_arr, dtype=dtype, copy=True),
            _b=np.array(b_arr, dtype=dtype, copy=True),
            _n=A_arr.shape[0],
        )

    # === Properties ===

    @property
    def A(self) -> NDArray[np.inexact[Any]]:
        """Coefficient matrix (n x n)."""
        return self._A

    @property
    def b(self) -> NDArray[np.inexact[Any]]:
        """Right-hand side (n,)."""
        return self._b

    @property
    def n(self) -> int:
        """System order."""
        return self._n

    @property
    def dtype(self) -> np.dtype:
        return self._A.dtype

    @property
    def scale(self) -> float:
        """Largest absolute entry of A (0.0 for an empty system)."""
        if self._n == 0:
            return 0.0
        return float(np.max(np.abs(self._A)))
