"""
CPU backend for Gaussian elimination.

Forward elimination with the configured pivoting strategy followed by
back-substitution through the recorded pivot order, on NumPy arrays.
"""

from typing import Any
import warnings

import numpy as np

from pydensela.core.result import Result
from pydensela.core.compute.timing import Timer
from pydensela.core.tolerances import (
    ill_conditioning_threshold,
    select_tolerance,
)
from pydensela.elimination._eliminate import eliminate
from pydensela.elimination.design import LinearSystemDesign
from pydensela.elimination.pivoting import PIVOT_STRATEGIES, PivotStrategy
from pydensela.elimination.solution import EliminationParams
from pydensela.elimination.triangular import back_substitution


_BACKEND_NAMES = {
    'none': 'cpu_no_pivot',
    'partial': 'cpu_partial_pivot',
    'complete': 'cpu_complete_pivot',
}


class CPUEliminationBackend:
    """
    CPU backend for Gaussian elimination.

    Implements the Backend protocol for LinearSystemDesign -> EliminationParams.
    """

    def __init__(self, strategy: PivotStrategy = 'partial'):
        if strategy not in PIVOT_STRATEGIES:
            raise ValueError(f"Unknown pivoting strategy: {strategy!r}")
        self._strategy = strategy

    @property
    def name(self) -> str:
        return _BACKEND_NAMES[self._strategy]

    @property
    def strategy(self) -> PivotStrategy:
        return self._strategy

    def solve(self, design: LinearSystemDesign) -> Result[EliminationParams]:
        """
        Solve A x = b by Gaussian elimination.

        Algorithm:
            1. Reduce a working copy of [A | b] to upper-triangular form,
               choosing pivots per the strategy
            2. Back-substitute through the pivot order
            3. Compute residual and growth diagnostics

        Args:
            design: Validated linear system

        Returns:
            Result containing EliminationParams

        Raises:
            SingularMatrixError: If a pivot is zero or numerically zero
        """
        timer = Timer()
        timer.start()

        A, b, n = design.A, design.b, design.n
        scale = design.scale

        with timer.section('elimination'):
            reduction = eliminate(A, b, self._strategy)

        with timer.section('back_substitution'):
            # Every pivot already passed its tolerance during elimination
            x = back_substitution(
                reduction.upper, reduction.rhs, reduction.pivots, tol=0.0
            ).data()

        with timer.section('residual'):
            residual = A @ x - b
            r_norm = float(np.max(np.abs(residual))) if n else 0.0
            b_norm = float(np.max(np.abs(b))) if n else 0.0
            relative = r_norm / b_norm if b_norm > 0 else r_norm
            growth = float(np.max(np.abs(reduction.upper))) / scale if scale > 0 else 1.0

        timer.stop()

        issues: list[str] = []
        weak = [
            (k, magnitude, local)
            for k, (magnitude, local) in enumerate(
                zip(reduction.pivot_magnitudes, reduction.pivot_scales)
            )
            if magnitude < ill_conditioning_threshold(local, design.dtype)
        ]
        if weak:
            k, magnitude, local = min(weak, key=lambda item: item[1] / item[2])
            msg = (
                f"System is ill-conditioned: pivot {k} is {magnitude:.3e} "
                f"against a row/column scale of {local:.3e}"
            )
            warnings.warn(msg, RuntimeWarning, stacklevel=3)
            issues.append(msg)

        tier = select_tolerance(design.dtype)
        if relative > tier.rtol:
            msg = (
                f"Relative residual {relative:.3e} exceeds the {tier.name} "
                f"tolerance {tier.rtol:.0e}"
            )
            warnings.warn(msg, RuntimeWarning, stacklevel=3)
            issues.append(msg)

        params = EliminationParams(
            x=x,
            upper=reduction.upper,
            reduced_rhs=reduction.rhs,
            pivots=reduction.pivots,
            pivot_magnitudes=reduction.pivot_magnitudes,
            residual=residual,
            relative_residual=relative,
            growth_factor=growth,
        )

        info: dict[str, Any] = {
            'method': 'gaussian_elimination',
            'pivoting': self._strategy,
            'n': n,
            'pivot_tolerances': reduction.pivot_tolerances,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(issues),
        )
