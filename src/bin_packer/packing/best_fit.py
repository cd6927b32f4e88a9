"""Best-Fit heuristics: array scan, heap search and capacity lookup table."""

from __future__ import annotations

import logging
from collections import deque
from typing import Optional

from bin_packer.heap import BinHeap
from bin_packer.models import PackingResult, ProblemInstance
from bin_packer.packing.histogram import CapacityHistogram
from bin_packer.timing import Stopwatch, default_stopwatch

logger = logging.getLogger(__name__)


def best_fit(instance: ProblemInstance, stopwatch: Optional[Stopwatch] = None) -> PackingResult:
    """
    Best-Fit by scanning every open bin. Worst-case running time is O(n^2).

    A bin whose load exceeds K - min_item_size can never take another item;
    it is retired by moving the last open bin into its slot. `bin_ids`
    follows the loads through these moves so the assignment keeps the
    creation index of each bin.
    """
    items = instance.items
    capacity = instance.capacity
    limit_capacity = instance.limit_capacity
    stopwatch = stopwatch or default_stopwatch()

    loads: list[int] = [0] * instance.n
    bin_ids: list[int] = [0] * instance.n
    assignment: list[int] = [0] * instance.n
    num_open_bins = 0
    num_full_bins = 0

    stopwatch.start()
    for i, size in enumerate(items):
        best_slot = -1  # slot of the best bin found so far
        best_load = 0  # load of said bin once the item is added

        for j in range(num_open_bins):
            new_load = loads[j] + size
            if new_load <= capacity and new_load > best_load:
                best_slot = j
                best_load = new_load

        if best_slot >= 0:
            loads[best_slot] = best_load
            assignment[i] = bin_ids[best_slot]

            # Remove (almost) full bins
            if best_load > limit_capacity:
                num_open_bins -= 1
                num_full_bins += 1
                loads[best_slot] = loads[num_open_bins]
                bin_ids[best_slot] = bin_ids[num_open_bins]
        else:
            new_id = num_open_bins + num_full_bins
            assignment[i] = new_id
            if size > limit_capacity:
                num_full_bins += 1
            else:
                loads[num_open_bins] = size
                bin_ids[num_open_bins] = new_id
                num_open_bins += 1
    elapsed = stopwatch.stop()

    bins_used = num_open_bins + num_full_bins
    logger.debug("best_fit: n=%d K=%d bins=%d time=%.6fs", instance.n, capacity, bins_used, elapsed)
    return PackingResult(
        heuristic="best_fit",
        bins_used=bins_used,
        elapsed_seconds=elapsed,
        assignment=assignment,
    )


def best_fit_heap(instance: ProblemInstance, stopwatch: Optional[Stopwatch] = None) -> PackingResult:
    """
    Best-Fit over a max-heap of bin loads.

    The breadth-first search does not expand a node whose bin cannot take
    the item. A child may still fit when its parent does not, so the bin
    found is a good fit, not necessarily the best one.
    """
    items = instance.items
    capacity = instance.capacity
    stopwatch = stopwatch or default_stopwatch()

    bins = BinHeap(instance.n)
    heap_queue: deque[int] = deque()
    num_bins = 0

    stopwatch.start()
    for size in items:
        best_index = 0  # heap index of the best bin; 0 means none
        best_load = 0

        if num_bins != 0 and bins.element_at(1) + size <= capacity:
            heap_queue.append(1)
            while heap_queue:
                j = heap_queue.popleft()
                new_load = bins.element_at(j) + size
                if new_load > capacity:
                    continue

                if new_load > best_load:
                    best_index = j
                    best_load = new_load

                # Check whether the children are still in range
                if 2 * j <= num_bins:
                    heap_queue.append(2 * j)
                if 2 * j + 1 <= num_bins:
                    heap_queue.append(2 * j + 1)

        if best_index:
            bins.increase(best_index, best_load)
        else:
            bins.push(size)
            num_bins += 1
    elapsed = stopwatch.stop()

    logger.debug("best_fit_heap: n=%d K=%d bins=%d time=%.6fs", instance.n, capacity, num_bins, elapsed)
    return PackingResult(heuristic="best_fit_heap", bins_used=num_bins, elapsed_seconds=elapsed)


def best_fit_lookup(instance: ProblemInstance, stopwatch: Optional[Stopwatch] = None) -> PackingResult:
    """
    Best-Fit through a lookup table of bins per remaining capacity.

    Every remaining capacity is directly addressable, so the tightest bin is
    always found. Running time is O(n*K).
    """
    stopwatch = stopwatch or default_stopwatch()
    histogram = CapacityHistogram(instance.capacity, instance.n)

    stopwatch.start()
    for size in instance.items:
        histogram.place(size)
    elapsed = stopwatch.stop()

    bins_used = histogram.bins_used()
    logger.debug(
        "best_fit_lookup: n=%d K=%d bins=%d time=%.6fs", instance.n, instance.capacity, bins_used, elapsed
    )
    return PackingResult(heuristic="best_fit_lookup", bins_used=bins_used, elapsed_seconds=elapsed)
