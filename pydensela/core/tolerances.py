"""
Tolerance tiers and numerical thresholds.

Defines precision expectations for the supported element types and the
thresholds the algorithms use to decide when a pivot or an orthogonalized
vector is numerically zero:
- FP64 (reference): double precision
- FP32: relaxed for single-precision arithmetic
- Pivot tolerance: n * eps * s, where s is the scale of the pivot's own
  row and column (so badly row- or column-scaled systems are not rejected)
- Degeneracy tolerance: relative to the norm of the input vector

Used by the elimination kernels, Gram-Schmidt and the test suite.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Double precision reference
FP64 = ToleranceTier(
    rtol=1e-9,
    atol=1e-12,
    name='fp64',
    description='Double precision: residuals at machine-precision scale',
)

# Single precision
FP32 = ToleranceTier(
    rtol=1e-4,
    atol=1e-5,
    name='fp32',
    description='Single precision: relaxed residual bounds',
)

# Relative size below which an orthogonalized vector counts as zero.
DEGENERACY_RTOL = 1e-10


def machine_epsilon(dtype: np.dtype | type = np.float64) -> float:
    """
    Get machine epsilon for a given dtype.

    Integer dtypes are computed in float64 by the algorithms, so they
    report float64 epsilon. Complex dtypes report the epsilon of their
    real component.
    """
    dtype = np.dtype(dtype)
    if not np.issubdtype(dtype, np.inexact):
        dtype = np.dtype(np.float64)
    return float(np.finfo(dtype).eps)


def select_tolerance(dtype: np.dtype | type) -> ToleranceTier:
    """Select the tolerance tier for an element dtype."""
    if machine_epsilon(dtype) > machine_epsilon(np.float64):
        return FP32
    return FP64


def pivot_tolerance(scale: float, n: int, dtype: np.dtype | type = np.float64) -> float:
    """
    Threshold below which a pivot is treated as zero.

    Args:
        scale: Scale of the pivot, see pivot_scale()
        n: System order
        dtype: Working dtype

    Returns:
        n * eps * scale (0.0 for a pivot in an all-zero row or column,
        so only exact zeros are rejected there)
    """
    return max(n, 1) * machine_epsilon(dtype) * float(scale)


def ill_conditioning_threshold(scale: float, dtype: np.dtype | type = np.float64) -> float:
    """
    Pivot magnitude below which the system is reported as ill-conditioned.

    At sqrt(eps) relative to its own scale roughly half the significant
    digits of the solution are at risk.
    """
    return float(np.sqrt(machine_epsilon(dtype))) * float(scale)


def line_scales(A: NDArray[Any]) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Largest absolute entry of each row and of each column of a 2D array."""
    magnitudes = np.abs(A)
    if magnitudes.size == 0:
        return np.zeros(A.shape[0]), np.zeros(A.shape[1])
    return magnitudes.max(axis=1), magnitudes.max(axis=0)


def pivot_scale(row_scale: float, col_scale: float) -> float:
    """
    Scale a pivot is measured against: the smaller of the largest entries
    in its row and in its column.

    A huge entry elsewhere in the matrix therefore never makes a pivot
    look singular.
    """
    return float(min(row_scale, col_scale))
