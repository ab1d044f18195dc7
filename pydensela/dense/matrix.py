"""
Dense matrix type.

A Matrix owns a flat, row-major NumPy buffer of a numeric element type:
element (i, j) lives at buffer[i * cols + j]. Matrices are value types:
copies never share storage, and every accessor that hands out data hands
out a snapshot.

Construction forms:
    Matrix(2, 3)                        # zero-filled float64
    Matrix(2, 3, 1.5)                   # filled with a scalar
    Matrix(2, 2, [1, 2, 3, 4])          # flat literal, row-major
    Matrix(2, 2, [[1, 2], [3, 4]])      # nested rows
    Matrix.from_array(np.eye(3))        # shape taken from a 2D array

Literal data whose size does not match rows * cols is rejected with
DimensionError. Passing on_mismatch='fill' instead keeps the historical
behavior of leaving the matrix zero-filled, with a warning.
"""

from __future__ import annotations

import warnings
from typing import Any, Literal, TYPE_CHECKING
import numbers

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pydensela.core.exceptions import DimensionError
from pydensela.core.validation import (
    check_2d,
    check_dimension,
    check_numeric,
    check_numeric_dtype,
)

if TYPE_CHECKING:
    from pydensela.dense.vector import Vector


MismatchPolicy = Literal['raise', 'fill']


class Matrix:
    """
    Dense R x C matrix over a numeric element type.

    Attributes are read through properties; the shape is fixed at
    construction. Indexing is bounds-checked and takes (row, col) pairs.
    """

    __slots__ = ('_rows', '_cols', '_data')
    __hash__ = None  # mutable value type
    # NumPy scalars and arrays defer to our reflected operators
    __array_ufunc__ = None

    def __init__(
        self,
        rows: int,
        cols: int,
        values: ArrayLike | None = None,
        *,
        dtype: Any = None,
        on_mismatch: MismatchPolicy = 'raise',
    ):
        rows = check_dimension(rows, 'rows')
        cols = check_dimension(cols, 'cols')
        if on_mismatch not in ('raise', 'fill'):
            raise ValueError(f"Unknown on_mismatch policy: {on_mismatch!r}")
        size = rows * cols

        if values is None:
            resolved = check_numeric_dtype(np.float64 if dtype is None else dtype, 'dtype')
            data = np.zeros(size, dtype=resolved)
        else:
            arr = check_numeric(values, 'values', dtype=dtype)
            if arr.ndim == 0:
                data = np.full(size, arr, dtype=arr.dtype)
            elif arr.size == size:
                data = np.ravel(arr).copy()
            elif on_mismatch == 'fill':
                warnings.warn(
                    f"values: {arr.size} elements do not fit shape ({rows}, {cols}); "
                    f"matrix left zero-filled",
                    stacklevel=2,
                )
                data = np.zeros(size, dtype=arr.dtype)
            else:
                raise DimensionError(
                    f"values: expected {size} elements for shape ({rows}, {cols}), "
                    f"got {arr.size}"
                )

        self._rows = rows
        self._cols = cols
        self._data = data

    # === Alternate constructors ===

    @classmethod
    def from_array(cls, array: ArrayLike, *, dtype: Any = None) -> Matrix:
        """Build a matrix whose shape is taken from a 2D array-like."""
        arr = check_numeric(array, 'array', dtype=dtype)
        check_2d(arr, 'array')
        return cls(arr.shape[0], arr.shape[1], arr)

    @classmethod
    def identity(cls, n: int, *, dtype: Any = np.float64) -> Matrix:
        """n x n identity matrix."""
        n = check_dimension(n, 'n')
        return cls(n, n, np.eye(n, dtype=check_numeric_dtype(dtype, 'dtype')))

    def _like(self, flat: NDArray[Any]) -> Matrix:
        """Same class and shape around an already-owned flat buffer."""
        new = object.__new__(type(self))
        new._rows = self._rows
        new._cols = self._cols
        new._data = flat
        return new

    # === Shape ===

    @property
    def row_count(self) -> int:
        return self._rows

    @property
    def col_count(self) -> int:
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        return (self._rows, self._cols)

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    # === Element access ===

    def _offset(self, key: Any) -> int:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError(
                f"{type(self).__name__} indices must be (row, col) pairs, got {key!r}"
            )
        i = _check_index(key[0], self._rows, 'row')
        j = _check_index(key[1], self._cols, 'column')
        return i * self._cols + j

    def __getitem__(self, key: Any) -> Any:
        return self._data[self._offset(key)]

    def __setitem__(self, key: Any, value: Any) -> None:
        self._data[self._offset(key)] = value

    # === Snapshots ===

    def data(self) -> NDArray[Any]:
        """Flat row-major copy of the buffer."""
        return self._data.copy()

    def to_array(self) -> NDArray[Any]:
        """2D copy of the matrix contents."""
        return self._data.reshape(self._rows, self._cols).copy()

    def row_vectors(self) -> list[Vector]:
        """The rows as independent vectors of length col_count."""
        from pydensela.dense.vector import Vector

        c = self._cols
        return [Vector(c, self._data[i * c:(i + 1) * c]) for i in range(self._rows)]

    def column_vectors(self) -> list[Vector]:
        """The columns as independent vectors of length row_count."""
        from pydensela.dense.vector import Vector

        grid = self._data.reshape(self._rows, self._cols)
        return [Vector(self._rows, grid[:, j]) for j in range(self._cols)]

    def row(self, i: int) -> Vector:
        """Row i as an independent vector of length col_count."""
        from pydensela.dense.vector import Vector

        i = _check_index(i, self._rows, 'row')
        c = self._cols
        return Vector(c, self._data[i * c:(i + 1) * c])

    def column(self, j: int) -> Vector:
        """Column j as an independent vector of length row_count."""
        from pydensela.dense.vector import Vector

        j = _check_index(j, self._cols, 'column')
        return Vector(self._rows, self._data[j::self._cols])

    def copy(self) -> Matrix:
        return self._like(self._data.copy())

    def __copy__(self) -> Matrix:
        return self.copy()

    def __deepcopy__(self, memo: dict) -> Matrix:
        return self.copy()

    # === Comparison ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    # === Arithmetic ===

    def _check_same_shape(self, other: Matrix, op: str) -> None:
        if self.shape != other.shape:
            raise DimensionError(
                f"Operands of '{op}' must have equal shapes, got {self.shape} and {other.shape}"
            )

    def __add__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other, '+')
        return self._like(self._data + other._data)

    def __sub__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other, '-')
        return self._like(self._data - other._data)

    def __mul__(self, scalar: Any) -> Matrix:
        if not _is_scalar(scalar):
            return NotImplemented
        return self._like(self._data * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: Any) -> Matrix:
        if not _is_scalar(scalar):
            return NotImplemented
        return self._like(self._data / scalar)

    def __neg__(self) -> Matrix:
        return self._like(-self._data)

    def __matmul__(self, other: Any) -> Matrix:
        from pydensela.dense.vector import Vector

        if not isinstance(other, Matrix):
            return NotImplemented
        if self._cols != other._rows:
            raise DimensionError(
                f"Matrix and {'vector' if isinstance(other, Vector) else 'matrix'} "
                f"dimensions are not compatible: {self.shape} @ {other.shape}"
            )
        product = self.to_array() @ other.to_array()
        if isinstance(other, Vector):
            return Vector(self._rows, product)
        return Matrix(self._rows, other._cols, product)

    # === Rendering ===

    def __str__(self) -> str:
        grid = self._data.reshape(self._rows, self._cols).tolist()
        rows = [", ".join(str(x) for x in row) for row in grid]
        return "[" + ";\n".join(rows) + "]"

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self._rows}, {self._cols}, "
            f"{self._data.tolist()!r}, dtype={self._data.dtype})"
        )


def _check_index(index: Any, bound: int, axis: str) -> int:
    if isinstance(index, (bool, np.bool_)) or not isinstance(index, (numbers.Integral, np.integer)):
        raise TypeError(f"{axis} index must be an integer, got {type(index).__name__}")
    if not 0 <= index < bound:
        raise IndexError(f"{axis} index {index} out of range [0, {bound})")
    return int(index)


def _is_scalar(value: Any) -> bool:
    return (
        isinstance(value, (numbers.Number, np.number))
        and not isinstance(value, (bool, np.bool_))
    )
