"""
Gaussian elimination solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pydensela.core.result import Result
from pydensela.dense.matrix import Matrix
from pydensela.dense.vector import Vector
from pydensela.elimination.pivoting import PivotOrder

if TYPE_CHECKING:
    from pydensela.elimination.design import LinearSystemDesign


@dataclass(frozen=True)
class EliminationParams:
    """
    Parameter payload for Gaussian elimination.

    This is the immutable data computed by backends.
    """
    x: NDArray[np.inexact[Any]]
    upper: NDArray[np.inexact[Any]]
    reduced_rhs: NDArray[np.inexact[Any]]
    pivots: PivotOrder
    pivot_magnitudes: tuple[float, ...]
    residual: NDArray[np.inexact[Any]]
    relative_residual: float
    growth_factor: float


@dataclass
class EliminationSolution:
    """
    User-facing elimination results.

    Wraps the backend Result and hands out Matrix/Vector snapshots so
    callers can never reach the arrays inside the Result.
    """
    _result: Result[EliminationParams]
    _design: 'LinearSystemDesign'

    @property
    def x(self) -> Vector:
        """Solution vector in original variable order."""
        p = self._result.params
        return Vector(len(p.x), p.x)

    @property
    def upper(self) -> Matrix:
        """Reduced matrix in physical storage order (see pivots)."""
        u = self._result.params.upper
        return Matrix(u.shape[0], u.shape[1], u)

    @property
    def reduced_rhs(self) -> Vector:
        r = self._result.params.reduced_rhs
        return Vector(len(r), r)

    @property
    def pivots(self) -> PivotOrder:
        return self._result.params.pivots

    @property
    def pivoting(self) -> str:
        return self._result.params.pivots.strategy

    @property
    def pivot_magnitudes(self) -> tuple[float, ...]:
        return self._result.params.pivot_magnitudes

    @property
    def residual(self) -> Vector:
        """A x - b."""
        r = self._result.params.residual
        return Vector(len(r), r)

    @property
    def relative_residual(self) -> float:
        """||A x - b||_inf / ||b||_inf (absolute when b = 0)."""
        return self._result.params.relative_residual

    @property
    def growth_factor(self) -> float:
        """max|U| / max|A|: how much elimination amplified the entries."""
        return self._result.params.growth_factor

    @property
    def n(self) -> int:
        return self._design.n

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Generate a plain-text summary."""
        lines = [
            "Gaussian Elimination Results",
            "=" * 60,
            f"System order: {self.n}",
            f"Pivoting: {self.pivoting}",
            f"Relative residual (inf-norm): {self.relative_residual:.3e}",
            f"Growth factor: {self.growth_factor:.3e}",
        ]
        if self.pivot_magnitudes:
            lines.append(
                f"Pivot magnitudes: min {min(self.pivot_magnitudes):.3e}, "
                f"max {max(self.pivot_magnitudes):.3e}"
            )
        lines.extend([
            "",
            "Solution:",
            "-" * 60,
        ])
        for i, value in enumerate(self._result.params.x.tolist()):
            lines.append(f"  x[{i}]: {value}")
        lines.append("-" * 60)
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"EliminationSolution(n={self.n}, pivoting={self.pivoting!r}, "
            f"relative_residual={self.relative_residual:.3e})"
        )
