"""
Priority frontier for best-first search.

A binary heap of FrontierEntry tuples. Entries are ordered by
(priority, tie_key, sequence): the state space's tie-break key decides
between equal priorities, and the insertion sequence decides between
entries for the same state, so the heap never compares anything else.

Duplicate entries for one state are allowed; the driver discards the
stale ones when they are popped.
"""

import heapq
from itertools import count
from typing import Any, List

from ..types import FrontierEntry, Number


class Frontier:
    """
    Min-priority queue of pending states.

    Attributes:
        pushes: Total number of entries pushed.
        peak_size: Largest number of entries held at once.
    """

    def __init__(self):
        self._heap: List[FrontierEntry] = []
        self._sequence = count()
        self.pushes = 0
        self.peak_size = 0

    def push(self, state_id: int, cost: int, priority: Number, tie_key: Any) -> FrontierEntry:
        """
        Add a pending state.

        Args:
            state_id: Interned id of the state.
            cost: Cumulative cost g of the path that reached it.
            priority: f = g + heuristic.
            tie_key: Deterministic secondary ordering key.

        Returns:
            The entry that was pushed.
        """
        entry = FrontierEntry(priority, tie_key, next(self._sequence), cost, state_id)
        heapq.heappush(self._heap, entry)
        self.pushes += 1
        if len(self._heap) > self.peak_size:
            self.peak_size = len(self._heap)
        return entry

    def pop_min(self) -> FrontierEntry:
        """Remove and return the cheapest entry. Raises IndexError when empty."""
        if not self._heap:
            raise IndexError("pop from empty frontier")
        return heapq.heappop(self._heap)

    def peek(self) -> FrontierEntry:
        if not self._heap:
            raise IndexError("peek at empty frontier")
        return self._heap[0]

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)


__all__ = ['Frontier']
