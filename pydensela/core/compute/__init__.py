"""
Shared compute infrastructure for pydensela.

Submodules:
    timing: Execution timing utilities
"""

from pydensela.core.compute.timing import Timer, timed

__all__ = [
    "Timer",
    "timed",
]
