"""
Scored Ranker - Max-priority queue of (item, score) pairs.

Backed by a binary heap in a plain list (heapq on negated scores).
Equal scores come out in insertion order: every entry carries a
monotonically increasing sequence number as the secondary key.
"""

from itertools import count
from typing import Any, Optional
import heapq


class ScoredRanker:
    """Keeps scored items and hands back the best ones first."""

    def __init__(self):
        self._heap: list[tuple[float, int, Any]] = []
        self._sequence = count()

    def add(self, item: Any, score: float) -> None:
        """Insert an item. O(log n)."""
        heapq.heappush(self._heap, (-score, next(self._sequence), item))

    def pop_max(self) -> Optional[Any]:
        """Remove and return the highest-scoring item, or None when empty. O(log n)."""
        if not self._heap:
            return None
        return heapq.heappop(self._heap)[2]

    def peek_max(self) -> Optional[Any]:
        if not self._heap:
            return None
        return self._heap[0][2]

    def peek_max_score(self) -> float:
        """Score of the current top item, 0.0 when empty."""
        if not self._heap:
            return 0.0
        return -self._heap[0][0]

    def top_k(self, k: int) -> list[tuple[Any, float]]:
        """
        Get the k best (item, score) pairs, highest score first.

        Leaves the ranker untouched.
        """
        k = max(0, k)
        return [(item, -neg_score) for neg_score, _, item in heapq.nsmallest(k, self._heap)]

    def size(self) -> int:
        return len(self._heap)

    def is_empty(self) -> bool:
        return not self._heap

    def clear(self) -> None:
        self._heap.clear()
        self._sequence = count()

    def __len__(self) -> int:
        return len(self._heap)
