"""Tracking the k-th largest value of a growing stream."""

from __future__ import annotations

import heapq
from collections.abc import Iterable


class KthLargest:
    """Keeps the ``k`` largest values seen and reports the smallest of them."""

    def __init__(self, k: int, nums: Iterable[int] = ()) -> None:
        if k < 1:
            raise ValueError("k must be at least 1")
        self.k = k
        self._heap = heapq.nlargest(k, nums)
        heapq.heapify(self._heap)

    def add(self, val: int) -> int:
        """Record ``val`` and return the k-th largest value seen so far."""
        if len(self._heap) < self.k:
            heapq.heappush(self._heap, val)
        else:
            heapq.heappushpop(self._heap, val)
        if len(self._heap) < self.k:
            raise ValueError(f"fewer than {self.k} values seen")
        return self._heap[0]