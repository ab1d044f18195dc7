"""
Pivot bookkeeping.

Elimination never moves rows or columns in storage. It records the order
in which physical rows and columns serve as pivots: logical row i is
physical row rows[i], logical column i is physical column cols[i]. The
finished pair is frozen into a PivotOrder, which tags it with the
strategy that produced it so back-substitution can take one argument
instead of three overloads.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Sequence

import numpy as np
from numpy.typing import NDArray

from pydensela.core.exceptions import DimensionError, ValidationError


PivotStrategy = Literal['none', 'partial', 'complete']

PIVOT_STRATEGIES: tuple[str, ...] = ('none', 'partial', 'complete')


def _is_identity(order: tuple[int, ...]) -> bool:
    return all(k == idx for k, idx in enumerate(order))


def _check_permutation(order: tuple[int, ...], name: str) -> None:
    if sorted(order) != list(range(len(order))):
        raise ValidationError(
            f"{name}: {list(order)} is not a permutation of 0..{len(order) - 1}"
        )


@dataclass(frozen=True)
class PivotOrder:
    """
    Row and column pivot permutations of one elimination.

    Attributes:
        strategy: 'none' (both identity), 'partial' (rows only) or
                  'complete' (rows and columns)
        rows: rows[i] is the physical row used as pivot row at step i
        cols: cols[i] is the physical column (variable) pivoted at step i
    """
    strategy: PivotStrategy
    rows: tuple[int, ...]
    cols: tuple[int, ...]

    def __post_init__(self):
        if self.strategy not in PIVOT_STRATEGIES:
            raise ValidationError(
                f"strategy: expected one of {PIVOT_STRATEGIES}, got {self.strategy!r}"
            )
        # Normalize numpy integers to plain ints
        object.__setattr__(self, 'rows', tuple(int(k) for k in self.rows))
        object.__setattr__(self, 'cols', tuple(int(k) for k in self.cols))
        if len(self.rows) != len(self.cols):
            raise DimensionError(
                f"Inconsistent lengths: rows={len(self.rows)}, cols={len(self.cols)}"
            )
        _check_permutation(self.rows, 'rows')
        _check_permutation(self.cols, 'cols')
        if self.strategy != 'complete' and not _is_identity(self.cols):
            raise ValidationError(
                f"cols: strategy {self.strategy!r} does not permute columns, got {list(self.cols)}"
            )
        if self.strategy == 'none' and not _is_identity(self.rows):
            raise ValidationError(
                f"rows: strategy 'none' does not permute rows, got {list(self.rows)}"
            )

    @classmethod
    def identity(cls, n: int, strategy: PivotStrategy = 'none') -> PivotOrder:
        order = tuple(range(n))
        return cls(strategy=strategy, rows=order, cols=order)

    @classmethod
    def from_arrays(
        cls,
        strategy: PivotStrategy,
        rows: Sequence[int] | NDArray[np.intp],
        cols: Sequence[int] | NDArray[np.intp],
    ) -> PivotOrder:
        return cls(strategy=strategy, rows=tuple(rows), cols=tuple(cols))

    @property
    def n(self) -> int:
        return len(self.rows)

    def row_permutation_matrix(self) -> NDArray[np.float64]:
        """P such that (P @ A)[i] is physical row rows[i] of A."""
        return np.eye(self.n)[list(self.rows)]

    def col_permutation_matrix(self) -> NDArray[np.float64]:
        """Q such that (A @ Q)[:, i] is physical column cols[i] of A."""
        return np.eye(self.n)[:, list(self.cols)]


def swap(order: NDArray[np.intp], i: int, j: int) -> None:
    """Exchange two entries of a working permutation in place."""
    if i != j:
        order[i], order[j] = order[j], order[i]
