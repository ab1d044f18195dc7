"""
Free functions over dense matrices and vectors.

Public API:
    transpose(m) -> Matrix
    matmul(a, b) -> Matrix
    matvec(m, v) -> Vector
    inf_norm(x) -> float
    from_column_vectors(basis) -> Matrix
    from_row_vectors(basis) -> Matrix
    render(x) -> str
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from pydensela.core.exceptions import DimensionError, ValidationError
from pydensela.core.validation import check_not_empty
from pydensela.dense.matrix import Matrix
from pydensela.dense.vector import Vector


def transpose(m: Matrix) -> Matrix:
    """Transpose about the main diagonal: an R x C matrix becomes C x R."""
    return Matrix(m.col_count, m.row_count, m.to_array().T)


def matmul(a: Matrix, b: Matrix) -> Matrix:
    """Matrix product a @ b."""
    return a @ b


def matvec(m: Matrix, v: Vector) -> Vector:
    """
    Matrix-vector product.

    Raises:
        DimensionError: If m.col_count != v.size
    """
    return m @ v


def inf_norm(x: Matrix) -> float:
    """
    Infinity norm.

    For a vector, the largest absolute entry; for a matrix, the largest
    absolute row sum. Empty operands have norm 0.
    """
    if x.row_count == 0 or x.col_count == 0:
        return 0.0
    return float(np.max(np.sum(np.abs(x.to_array()), axis=1)))


def _basis_length(basis: Sequence[Vector], name: str) -> int:
    check_not_empty(basis, name)
    for k, v in enumerate(basis):
        if not isinstance(v, Vector):
            raise ValidationError(
                f"{name}[{k}]: expected Vector, got {type(v).__name__}"
            )
    lengths = [v.size for v in basis]
    if len(set(lengths)) > 1:
        raise DimensionError(
            f"{name}: all vectors must have equal length, got lengths {lengths}"
        )
    return lengths[0]


def from_column_vectors(basis: Sequence[Vector]) -> Matrix:
    """
    Build a matrix whose columns are the given vectors, in order.

    Raises:
        ValidationError: If basis is empty
        DimensionError: If the vectors differ in length
    """
    n = _basis_length(basis, 'basis')
    return Matrix(n, len(basis), np.column_stack([v.data() for v in basis]))


def from_row_vectors(basis: Sequence[Vector]) -> Matrix:
    """
    Build a matrix whose rows are the given vectors, in order.

    Raises:
        ValidationError: If basis is empty
        DimensionError: If the vectors differ in length
    """
    n = _basis_length(basis, 'basis')
    return Matrix(len(basis), n, np.vstack([v.data() for v in basis]))


def render(x: Matrix) -> str:
    """
    Human-readable rendering.

    Matrices render as "[e00, e01;\\ne10, e11]", vectors as "[e0; e1]".
    Not a parseable format.
    """
    return str(x)
