from __future__ import annotations


class CapacityHistogram:
    """
    Number of bins per remaining capacity 0..K.

    Starts with `n_bins` empty bins at remaining capacity K, an upper bound on
    the bins any packing of n items can need. Bins still at K were never
    opened and do not count as used.
    """

    __slots__ = ("capacity", "counts")

    def __init__(self, capacity: int, n_bins: int):
        self.capacity = capacity
        self.counts = [0] * (capacity + 1)
        self.counts[capacity] = n_bins

    def place(self, size: int) -> int:
        """
        Put an item into the tightest bin that can hold it.

        Returns the remaining capacity of the chosen bin before placement.
        Raises ValueError when no bin has room, which cannot happen while
        fewer than n_bins items of size <= K have been placed.
        """
        counts = self.counts
        remaining = size
        capacity = self.capacity
        while remaining <= capacity and counts[remaining] == 0:
            remaining += 1
        if remaining > capacity:
            raise ValueError(f"no bin can take an item of size {size}")
        counts[remaining] -= 1
        counts[remaining - size] += 1
        return remaining

    def bins_used(self) -> int:
        return sum(self.counts[: self.capacity])

    def total(self) -> int:
        """Bin slots over all capacities; stays equal to n_bins."""
        return sum(self.counts)
