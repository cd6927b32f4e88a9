"""Fixed-capacity binary max-heap of bin loads."""

from __future__ import annotations


class BinHeap:
    """
    Array-backed max-heap, 1-indexed: the root lives at index 1 and the
    children of node j live at 2j and 2j+1. Slot 0 is unused.

    Only the operations the heap-based Best-Fit needs are exposed:
    push, increase-and-reheapify, and positional access.
    """

    __slots__ = ("_elements", "_size", "_capacity")

    def __init__(self, capacity: int):
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self._capacity = capacity
        self._elements = [0] * (capacity + 1)
        self._size = 0

    def __len__(self) -> int:
        return self._size

    @property
    def capacity(self) -> int:
        return self._capacity

    def element_at(self, index: int) -> int:
        if not 1 <= index <= self._size:
            raise IndexError(f"heap index {index} out of range 1..{self._size}")
        return self._elements[index]

    def push(self, value: int) -> None:
        """Insert a new leaf and restore heap order."""
        if self._size == self._capacity:
            raise IndexError(f"heap is full (capacity {self._capacity})")
        self._size += 1
        self._elements[self._size] = value
        self._reheap_up(self._size)

    def increase(self, index: int, new_value: int) -> None:
        """Raise the value at `index` and restore heap order; a larger value only moves up."""
        current = self.element_at(index)
        if new_value < current:
            raise ValueError(f"cannot decrease heap value {current} to {new_value}")
        self._elements[index] = new_value
        self._reheap_up(index)

    def values(self) -> list[int]:
        """Current values in heap (array) order."""
        return self._elements[1 : self._size + 1]

    def is_heap(self) -> bool:
        """Check the max-heap property over every parent/child pair."""
        elements = self._elements
        for j in range(2, self._size + 1):
            if elements[j // 2] < elements[j]:
                return False
        return True

    def _reheap_up(self, index: int) -> int:
        elements = self._elements
        value = elements[index]
        while index > 1 and elements[index // 2] < value:
            elements[index] = elements[index // 2]
            index //= 2
        elements[index] = value
        return index
