"""
Wall-clock timing for solver runs.

Every Solution exposes ``.timing``: a dict with ``total_seconds`` and one
entry per named section. The statistics here finish in microseconds, so
the numbers matter mainly to callers computing many results in a loop.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Wall-clock timer with named, accumulating sections.

    Usage:
        timer = Timer()
        timer.start()
        with timer.section('sort'):
            ordered = np.sort(data)
        timer.stop()
        timer.result()  # {'total_seconds': ..., 'sort': ...}

    Re-entering a section name adds to its running total. Sections are not
    required to partition the total.
    """

    def __init__(self):
        self._sections: dict[str, float] = {}
        self._started_at: float | None = None
        self._total: float | None = None

    def start(self) -> None:
        self._started_at = time.perf_counter()
        self._total = None

    def stop(self) -> None:
        if self._started_at is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._total = time.perf_counter() - self._started_at

    @property
    def running(self) -> bool:
        return self._started_at is not None and self._total is None

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Time the enclosed block under ``name``."""
        began = time.perf_counter()
        try:
            yield
        finally:
            self._sections[name] = (
                self._sections.get(name, 0.0) + time.perf_counter() - began
            )

    def result(self) -> dict[str, float]:
        """
        Timing dict: 'total_seconds' first, then sections in entry order.

        Raises:
            RuntimeError: If called before stop()
        """
        if self._total is None:
            raise RuntimeError("Timer.result() called before stop()")
        return {'total_seconds': self._total, **self._sections}
