"""
Execution timing utilities.

Provides wall-clock timing of named sections for the solver backends.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Accumulating section timer.

    Usage:
        timer = Timer()
        timer.start()

        with timer.section('elimination'):
            upper, rhs, pivots = eliminate(A, b)

        with timer.section('back_substitution'):
            x = back_substitution(upper, rhs, pivots)

        timer.stop()
        result = timer.result()
        # {'total_seconds': 0.002, 'elimination': 0.0015, 'back_substitution': 0.0004}
    """

    def __init__(self):
        self._sections: dict[str, float] = {}
        self._start_time: float | None = None
        self._total: float | None = None

    def start(self) -> None:
        """Start the overall timer."""
        self._start_time = time.perf_counter()

    def stop(self) -> None:
        """Stop the overall timer."""
        if self._start_time is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._total = time.perf_counter() - self._start_time

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """
        Time a named section.

        Args:
            name: Section identifier (used as key in result dict)

        Yields:
            None

        Note:
            Sections can overlap with each other and with the total time.
            The timer does not enforce mutual exclusion.
        """
        start = time.perf_counter()
        try:
            yield
        finally:
            elapsed = time.perf_counter() - start
            # Accumulate if section called multiple times
            self._sections[name] = self._sections.get(name, 0.0) + elapsed

    def result(self) -> dict[str, float]:
        """
        Get timing results.

        Returns:
            Dictionary with 'total_seconds' and all section timings

        Raises:
            RuntimeError: If called before stop()
        """
        if self._total is None:
            raise RuntimeError("Timer.result() called before stop()")

        result = {'total_seconds': self._total}
        result.update(self._sections)
        return result


@contextmanager
def timed() -> Iterator[Timer]:
    """
    Context manager for simple timing.

    Usage:
        with timed() as timer:
            x = gaussian_elimination_partial_pivot(A, b)
        print(f"Took {timer.result()['total_seconds']:.3f}s")

    Yields:
        Timer instance
    """
    timer = Timer()
    timer.start()
    try:
        yield timer
    finally:
        timer.stop()
