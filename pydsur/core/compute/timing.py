"""
Wall-clock timing for solvers.

Each solver stores a breakdown in Result.timing:
``{'total_seconds': ..., '<section>': ...}``.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Total timer plus accumulated named sections.

        timer = Timer()
        timer.start()
        with timer.section('kmo'):
            params, warnings_list = kmo_from_correlation(X)
        timer.stop()
        timer.result()   # {'total_seconds': ..., 'kmo': ...}

    A section entered twice accumulates.
    """

    def __init__(self):
        self._sections: dict[str, float] = {}
        self._t0: float | None = None
        self._total: float | None = None

    def start(self) -> None:
        self._t0 = time.perf_counter()

    def stop(self) -> None:
        if self._t0 is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._total = time.perf_counter() - self._t0

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        t0 = time.perf_counter()
        try:
            yield
        finally:
            self._sections[name] = (
                self._sections.get(name, 0.0) + time.perf_counter() - t0
            )

    def result(self) -> dict[str, float]:
        """Timing dict; raises RuntimeError before stop()."""
        if self._total is None:
            raise RuntimeError("Timer.result() called before stop()")
        return {'total_seconds': self._total, **self._sections}

