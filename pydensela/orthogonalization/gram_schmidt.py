"""
Gram-Schmidt orthonormalization.

Produces an orthonormal basis from an ordered basis under a pluggable
inner product. The outer loop is inherently sequential: vector i depends
on every vector produced before it.

Two variants:
    - 'modified' (default): each projection is removed from the running
      vector, which keeps orthogonality much better in floating point
    - 'classical': every projection is taken of the original input vector

In both, projections use the already-orthogonalized but not yet
normalized vectors, in input order; normalization is a final pass.

A vector that is (numerically) zero after removing projections means the
input was linearly dependent. By default this raises DegenerateBasisError;
on_dependent='skip' drops the vector with a warning instead, so the
output can be shorter than the input.
"""

from __future__ import annotations

import warnings
from typing import Any, Literal, Sequence

import numpy as np
from numpy.typing import ArrayLike

from pydensela.core.exceptions import DegenerateBasisError, DimensionError
from pydensela.core.protocols import InnerProduct
from pydensela.core.tolerances import DEGENERACY_RTOL
from pydensela.core.validation import check_array, check_not_empty, check_scalar
from pydensela.dense.vector import Vector
from pydensela.orthogonalization.inner_product import (
    as_vector,
    induced_norm,
    inner_product,
    project,
)


OrthogonalizationMethod = Literal['classical', 'modified']
DependencyPolicy = Literal['raise', 'skip']


def _check_basis(basis: Sequence[Vector | ArrayLike]) -> list[Vector]:
    """Validate a basis and return inexact copies of its vectors."""
    check_not_empty(basis, 'basis')
    vectors = [as_vector(v, f'basis[{k}]') for k, v in enumerate(basis)]
    lengths = [v.size for v in vectors]
    if len(set(lengths)) > 1:
        raise DimensionError(
            f"basis: all vectors must have equal length, got lengths {lengths}"
        )
    return [Vector(v.size, check_array(v.data(), 'basis')) for v in vectors]


def orthonormalize(
    basis: Sequence[Vector | ArrayLike],
    func: InnerProduct | None = None,
    *,
    method: OrthogonalizationMethod = 'modified',
    on_dependent: DependencyPolicy = 'raise',
    rtol: float = DEGENERACY_RTOL,
) -> list[Vector]:
    """
    Orthonormalize an ordered basis.

    Args:
        basis: Non-empty sequence of equal-length vectors
        func: Inner product kernel; None means the standard product
        method: 'modified' or 'classical' Gram-Schmidt
        on_dependent: 'raise' or 'skip' for linearly dependent vectors
        rtol: A vector is dependent when its norm after removing
              projections is <= rtol times its original norm

    Returns:
        Unit vectors, pairwise orthogonal under func, in input order

    Raises:
        ValidationError: If basis is empty
        DimensionError: If the vectors differ in length
        DegenerateBasisError: If a vector is dependent and on_dependent='raise',
            or if no independent vector remains
    """
    q, _ = _orthonormalize(basis, func, method, on_dependent, rtol, stacklevel=3)
    return q


def _orthonormalize(
    basis: Sequence[Vector | ArrayLike],
    func: InnerProduct | None,
    method: OrthogonalizationMethod,
    on_dependent: DependencyPolicy,
    rtol: float,
    stacklevel: int,
) -> tuple[list[Vector], list[int]]:
    """orthonormalize() that also returns the input index of each output vector."""
    if method not in ('classical', 'modified'):
        raise ValueError(f"Unknown Gram-Schmidt method: {method!r}")
    if on_dependent not in ('raise', 'skip'):
        raise ValueError(f"Unknown on_dependent policy: {on_dependent!r}")
    check_scalar(rtol, 'rtol')

    vectors = _check_basis(basis)
    orthogonal: list[Vector] = []
    kept: list[int] = []

    for i, v in enumerate(vectors):
        w = v
        for e in orthogonal:
            w = w - project(e, w if method == 'modified' else v, func)

        residual = induced_norm(w, func)
        if residual == 0 or residual <= rtol * induced_norm(v, func):
            msg = (
                f"basis[{i}] is linearly dependent on the preceding vectors "
                f"(residual norm {residual:.3e})"
            )
            if on_dependent == 'raise':
                raise DegenerateBasisError(msg, index=i, norm=residual)
            warnings.warn(f"{msg}; skipped", RuntimeWarning, stacklevel=stacklevel)
            continue
        orthogonal.append(w)
        kept.append(i)

    if not orthogonal:
        raise DegenerateBasisError("basis: no linearly independent vectors", norm=0.0)

    return [w / induced_norm(w, func) for w in orthogonal], kept


def check_orthonormality(
    basis: Sequence[Vector | ArrayLike],
    func: InnerProduct | None = None,
) -> Any:
    """
    Sum of <basis[0], basis[k]> over k >= 1.

    Near zero for a correctly orthogonalized basis. A quick diagnostic for
    tests; see gram_matrix() for the full picture.
    """
    check_not_empty(basis, 'basis')
    first = basis[0]
    total: Any = np.float64(0.0)
    for other in basis[1:]:
        total = total + inner_product(first, other, func)
    return total
