"""
Pluggable inner products and projections.

An inner product is described by its elementwise kernel f(x, y); the
product of two vectors is sum_i f(v1[i], v2[i]). Swapping the kernel lets
the same orthogonalization machinery serve real, complex (Hermitian) or
scaled forms. Kernels must be linear in their second argument.
"""

from __future__ import annotations

from typing import Any, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pydensela.core.exceptions import DegenerateBasisError, DimensionError, NumericalError
from pydensela.core.protocols import InnerProduct
from pydensela.core.validation import check_1d, check_numeric, check_not_empty
from pydensela.dense.matrix import Matrix
from pydensela.dense.vector import Vector


def standard_product(x: Any, y: Any) -> Any:
    """Real scalar product kernel: x * y."""
    return x * y


def hermitian_product(x: Any, y: Any) -> Any:
    """Complex Hermitian kernel: conj(x) * y (conjugate-linear in x)."""
    return np.conj(x) * y


def _values(v: Vector | ArrayLike, name: str) -> NDArray[Any]:
    if isinstance(v, Matrix):
        if v.col_count != 1:
            raise DimensionError(f"{name}: expected a vector, got shape {v.shape}")
        return v.data()
    arr = check_numeric(v, name)
    check_1d(arr, name)
    return arr


def _max_abs(values: NDArray[Any]) -> float:
    return float(np.max(np.abs(values))) if values.size else 0.0


def as_vector(v: Vector | ArrayLike, name: str) -> Vector:
    """Vector or 1D array-like -> Vector."""
    if isinstance(v, Vector):
        return v
    values = _values(v, name)
    return Vector(len(values), values)


def inner_product(
    v1: Vector | ArrayLike,
    v2: Vector | ArrayLike,
    func: InnerProduct | None = None,
) -> Any:
    """
    Inner product sum_i func(v1[i], v2[i]).

    Args:
        v1, v2: Vectors of equal length
        func: Elementwise kernel; None means the standard product x * y

    Returns:
        The scalar inner product

    Raises:
        DimensionError: If the vectors differ in length
    """
    a = _values(v1, 'v1')
    b = _values(v2, 'v2')
    if len(a) != len(b):
        raise DimensionError(
            f"Vectors must be of the same size: v1={len(a)}, v2={len(b)}"
        )
    if func is None or func is standard_product:
        return a @ b
    total: Any = 0
    for x, y in zip(a, b):
        total = total + func(x, y)
    return total


def project(
    e: Vector | ArrayLike,
    a: Vector | ArrayLike,
    func: InnerProduct | None = None,
) -> Vector:
    """
    Orthogonal projection of a onto the line spanned by e.

        proj_e(a) = (<e, a> / <e, e>) e

    Raises:
        DimensionError: If the vectors differ in length
        DegenerateBasisError: If <e, e> is zero (nothing to project onto)
    """
    e_vec = as_vector(e, 'e')
    # proj_e(a) is unchanged by rescaling e
    scale = _max_abs(e_vec.data())
    if scale > 0:
        e_vec = e_vec / scale
    denom = inner_product(e_vec, e_vec, func)
    if denom == 0:
        raise DegenerateBasisError(
            "Cannot project onto a vector with zero inner product with itself",
            norm=0.0,
        )
    return e_vec * (inner_product(e_vec, a, func) / denom)


def induced_norm(v: Vector | ArrayLike, func: InnerProduct | None = None) -> float:
    """
    Norm induced by an inner product: sqrt(<v, v>).

    Equals the Euclidean norm for the standard product. Evaluated as
    m * sqrt(<v/m, v/m>) with m = max |v_i|, so vectors with very small or
    very large entries neither underflow nor overflow. This assumes a
    kernel that scales quadratically, which every bilinear or Hermitian
    form does.

    Raises:
        NumericalError: If <v, v> is negative (the form is not positive)
    """
    values = _values(v, 'v')
    scale = _max_abs(values)
    if scale == 0:
        return 0.0
    unit = values / scale
    square = inner_product(unit, unit, func)
    value = float(np.real(square))
    if value < 0:
        raise NumericalError(
            f"Inner product is not positive: <v, v> = {value:.3e}"
        )
    return scale * float(np.sqrt(value))


def gram_matrix(
    basis: Sequence[Vector],
    func: InnerProduct | None = None,
) -> Matrix:
    """Matrix G with G[i, j] = <basis[i], basis[j]>."""
    check_not_empty(basis, 'basis')
    k = len(basis)
    entries = [inner_product(basis[i], basis[j], func) for i in range(k) for j in range(k)]
    return Matrix(k, k, np.asarray(entries))
