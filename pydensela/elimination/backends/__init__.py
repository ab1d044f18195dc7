"""
Gaussian elimination backends.

Available backends:
    CPUEliminationBackend: NumPy implementation, one instance per pivoting strategy
"""

from pydensela.elimination.backends.cpu import CPUEliminationBackend

__all__ = [
    "CPUEliminationBackend",
]
