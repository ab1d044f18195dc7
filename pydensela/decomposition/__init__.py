"""
Matrix decompositions.

Public API:
    qr_decomposition(matrix, func=None) -> QRResult
    qr_solve(A, b, func=None) -> Vector
"""

from pydensela.decomposition.qr import QRResult, qr_decomposition, qr_solve

__all__ = [
    "QRResult",
    "qr_decomposition",
    "qr_solve",
]
