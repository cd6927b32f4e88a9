"""Registry of bin packing heuristics sharing one calling contract."""

from __future__ import annotations

from typing import Optional, Protocol

from bin_packer.models import PackingResult, ProblemInstance
from bin_packer.packing.best_fit import best_fit, best_fit_heap, best_fit_lookup
from bin_packer.packing.next_fit import next_fit, next_fit_decreasing
from bin_packer.timing import Stopwatch


class Heuristic(Protocol):
    def __call__(
        self, instance: ProblemInstance, stopwatch: Optional[Stopwatch] = None
    ) -> PackingResult: ...


HEURISTICS: dict[str, Heuristic] = {
    "best_fit": best_fit,
    "best_fit_heap": best_fit_heap,
    "best_fit_lookup": best_fit_lookup,
    "next_fit": next_fit,
    "next_fit_decreasing": next_fit_decreasing,
}


def get_heuristic(name: str) -> Heuristic:
    key = name.strip().lower()
    if key not in HEURISTICS:
        raise ValueError(f"Unknown heuristic '{name}'. Valid: {sorted(HEURISTICS.keys())}")
    return HEURISTICS[key]


def run_heuristic(
    name: str,
    instance: ProblemInstance,
    stopwatch: Optional[Stopwatch] = None,
) -> PackingResult:
    return get_heuristic(name)(instance, stopwatch)
