"""
Column vector type.

A Vector is a Matrix fixed to a single column, with v[i] as sugar for
v[i, 0]. All storage, copying and arithmetic come from Matrix.
"""

from __future__ import annotations

from typing import Any, Iterator

import numpy as np
from numpy.typing import ArrayLike

from pydensela.core.validation import check_1d, check_numeric
from pydensela.dense.matrix import Matrix, MismatchPolicy


class Vector(Matrix):
    """N x 1 matrix with sequence-style indexing."""

    __slots__ = ()

    def __init__(
        self,
        size: int,
        values: ArrayLike | None = None,
        *,
        dtype: Any = None,
        on_mismatch: MismatchPolicy = 'raise',
    ):
        super().__init__(size, 1, values, dtype=dtype, on_mismatch=on_mismatch)

    @classmethod
    def from_array(cls, array: ArrayLike, *, dtype: Any = None) -> Vector:
        """Build a vector from a 1D sequence (or an N x 1 array)."""
        arr = check_numeric(array, 'array', dtype=dtype)
        if arr.ndim == 2 and arr.shape[1] == 1:
            arr = arr.ravel()
        check_1d(arr, 'array')
        return cls(arr.shape[0], arr)

    def __getitem__(self, key: Any) -> Any:
        if isinstance(key, tuple):
            return super().__getitem__(key)
        return super().__getitem__((key, 0))

    def __setitem__(self, key: Any, value: Any) -> None:
        if isinstance(key, tuple):
            super().__setitem__(key, value)
        else:
            super().__setitem__((key, 0), value)

    @property
    def size(self) -> int:
        return self._rows

    def __len__(self) -> int:
        return self._rows

    def __iter__(self) -> Iterator[Any]:
        # Iterates a snapshot: writes during iteration are not observed.
        return iter(self._data.copy())

    def norm(self) -> float:
        """Euclidean norm sqrt(sum |x_i|^2), scaled by max |x_i| against under- and overflow."""
        magnitudes = np.abs(self._data)
        scale = float(magnitudes.max()) if magnitudes.size else 0.0
        if scale == 0:
            return 0.0
        return scale * float(np.sqrt(np.sum((magnitudes / scale) ** 2)))

    def __str__(self) -> str:
        return "[" + "; ".join(str(x) for x in self._data.tolist()) + "]"

    def __repr__(self) -> str:
        return f"Vector({self._rows}, {self._data.tolist()!r}, dtype={self._data.dtype})"
