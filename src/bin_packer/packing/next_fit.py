from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional

from bin_packer.models import PackingResult, ProblemInstance
from bin_packer.timing import Stopwatch, default_stopwatch

logger = logging.getLogger(__name__)

SortRoutine = Callable[..., list[int]]


def _next_fit_loop(items: Iterable[int], capacity: int, assignment: Optional[list[int]]) -> int:
    num_bins = 0
    current_load = capacity  # no bin is open yet
    for i, size in enumerate(items):
        if current_load + size > capacity:
            num_bins += 1
            current_load = 0
        current_load += size
        if assignment is not None:
            assignment[i] = num_bins - 1
    return num_bins


def next_fit(instance: ProblemInstance, stopwatch: Optional[Stopwatch] = None) -> PackingResult:
    """Keep a single open bin; close it as soon as an item does not fit."""
    stopwatch = stopwatch or default_stopwatch()
    assignment = [0] * instance.n

    stopwatch.start()
    num_bins = _next_fit_loop(instance.items, instance.capacity, assignment)
    elapsed = stopwatch.stop()

    logger.debug("next_fit: n=%d K=%d bins=%d time=%.6fs", instance.n, instance.capacity, num_bins, elapsed)
    return PackingResult(
        heuristic="next_fit",
        bins_used=num_bins,
        elapsed_seconds=elapsed,
        assignment=assignment,
    )


def next_fit_decreasing(
    instance: ProblemInstance,
    stopwatch: Optional[Stopwatch] = None,
    sort: SortRoutine = sorted,
) -> PackingResult:
    """
    Next-Fit over the items in decreasing order.

    `sort` is called as sort(items, reverse=True) and must return a new list;
    sorting is part of the timed region.
    """
    stopwatch = stopwatch or default_stopwatch()
    items = list(instance.items)

    stopwatch.start()
    ordered = sort(items, reverse=True)
    num_bins = _next_fit_loop(ordered, instance.capacity, None)
    elapsed = stopwatch.stop()

    logger.debug(
        "next_fit_decreasing: n=%d K=%d bins=%d time=%.6fs", instance.n, instance.capacity, num_bins, elapsed
    )
    return PackingResult(heuristic="next_fit_decreasing", bins_used=num_bins, elapsed_seconds=elapsed)
