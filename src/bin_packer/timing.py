"""Stopwatches used to time the packing loop of each heuristic."""

from __future__ import annotations

import time
from typing import Callable, Protocol


class Stopwatch(Protocol):
    def start(self) -> None: ...

    def stop(self) -> float:
        """Stop timing and return the elapsed seconds since start()."""
        ...


class _ClockStopwatch:
    clock: Callable[[], float] = staticmethod(time.perf_counter)

    def __init__(self) -> None:
        self._started: float | None = None

    def start(self) -> None:
        self._started = self.clock()

    def stop(self) -> float:
        if self._started is None:
            raise RuntimeError("stopwatch was not started")
        elapsed = self.clock() - self._started
        self._started = None
        return max(elapsed, 0.0)


class PerfCounterStopwatch(_ClockStopwatch):
    """Wall-clock timing through the monotonic performance counter."""

    clock = staticmethod(time.perf_counter)


class ProcessTimeStopwatch(_ClockStopwatch):
    """CPU time of the current process (excludes sleeping)."""

    clock = staticmethod(time.process_time)


CLOCKS: dict[str, Callable[[], Stopwatch]] = {
    "wall": PerfCounterStopwatch,
    "process": ProcessTimeStopwatch,
}


def default_stopwatch() -> Stopwatch:
    return PerfCounterStopwatch()
