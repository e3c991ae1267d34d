"""
Wall-clock timing of decomposition phases.

Backends time their phases ('hessenberg', 'schur') with Timer and store
``Timer.result()`` in ``Result.timing``. All times are seconds measured
with ``time.perf_counter``.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Total run time plus named phase times.

    A phase entered more than once accumulates, so a loop body can be
    wrapped in the same section on every pass::

        timer = Timer()
        timer.start()
        with timer.section('hessenberg'):
            reduced = hessenberg_cpu(A)
        with timer.section('schur'):
            stats = schur_transform(reduced.H, reduced.P)
        timer.stop()
        timer.result()  # {'total_seconds': ..., 'hessenberg': ..., 'schur': ...}
    """

    def __init__(self) -> None:
        self._phases: dict[str, float] = {}
        self._t0: float | None = None
        self._elapsed: float | None = None

    def start(self) -> None:
        self._t0 = time.perf_counter()
        self._elapsed = None

    def stop(self) -> None:
        if self._t0 is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._elapsed = time.perf_counter() - self._t0

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Add the wall time of the ``with`` body to phase ``name``."""
        t0 = time.perf_counter()
        try:
            yield
        finally:
            spent = time.perf_counter() - t0
            self._phases[name] = self._phases.get(name, 0.0) + spent

    def result(self) -> dict[str, float]:
        """
        Timing breakdown, phases in order of first entry.

        Raises:
            RuntimeError: If the timer has not been stopped
        """
        if self._elapsed is None:
            raise RuntimeError("Timer.result() called before stop()")
        return {'total_seconds': self._elapsed, **self._phases}
