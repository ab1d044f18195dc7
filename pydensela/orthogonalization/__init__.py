"""
Inner products, projections and Gram-Schmidt orthonormalization.

Public API:
    inner_product(v1, v2, func=None)
    project(e, a, func=None) -> Vector
    induced_norm(v, func=None) -> float
    gram_matrix(basis, func=None) -> Matrix
    orthonormalize(basis, func=None, method='modified') -> list[Vector]
    check_orthonormality(basis, func=None)

Kernels:
    standard_product: x * y
    hermitian_product: conj(x) * y
"""

from pydensela.orthogonalization.inner_product import (
    standard_product,
    hermitian_product,
    inner_product,
    project,
    induced_norm,
    gram_matrix,
)
from pydensela.orthogonalization.gram_schmidt import (
    orthonormalize,
    check_orthonormality,
)

__all__ = [
    "standard_product",
    "hermitian_product",
    "inner_product",
    "project",
    "induced_norm",
    "gram_matrix",
    "orthonormalize",
    "check_orthonormality",
]
