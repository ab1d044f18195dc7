"""
Dense matrix and vector types.

Public API:
    Matrix, Vector
    transpose, matmul, matvec, inf_norm
    from_column_vectors, from_row_vectors, render

Example:
    >>> from pydensela.dense import Matrix, Vector
    >>> A = Matrix(2, 2, [2.0, 1.0, 1.0, 3.0])
    >>> b = Vector(2, [3.0, 5.0])
    >>> print(A @ b)
    [11.0; 18.0]
"""

from pydensela.dense.matrix import Matrix
from pydensela.dense.vector import Vector
from pydensela.dense.ops import (
    transpose,
    matmul,
    matvec,
    inf_norm,
    from_column_vectors,
    from_row_vectors,
    render,
)

__all__ = [
    "Matrix",
    "Vector",
    "transpose",
    "matmul",
    "matvec",
    "inf_norm",
    "from_column_vectors",
    "from_row_vectors",
    "render",
]
