"""Priority queue for A* with a deterministic total order."""

import heapq
import itertools
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .types import Coord


@dataclass(order=True)
class PriorityItem:
    """
    Open-set entry.

    Comparison order:
    1. f_cost (lower is better)
    2. h_cost (lower is better - favor nodes closer to the goal)
    3. sequence (earlier insertion wins)
    """
    f_cost: int
    h_cost: int
    sequence: int
    coord: Coord = field(compare=False)
    removed: bool = field(default=False, compare=False)


class PriorityQueue:
    """
    Binary-heap open set with lazy deletion.
    Re-inserting a coordinate with a lower f-cost supersedes the old entry.
    """

    def __init__(self):
        self._heap: List[PriorityItem] = []
        self._entry_finder: dict[Coord, PriorityItem] = {}
        self._counter = itertools.count()

    def __len__(self) -> int:
        return len(self._entry_finder)

    def is_empty(self) -> bool:
        """Check if the queue is empty."""
        return not self._entry_finder

    def put(self, coord: Coord, f_cost: int, h_cost: int):
        """Add a coordinate or lower its priority. Worse or equal re-insertions are ignored."""
        existing = self._entry_finder.get(coord)
        if existing is not None:
            if existing.f_cost <= f_cost:
                return
            existing.removed = True

        entry = PriorityItem(f_cost, h_cost, next(self._counter), coord)
        self._entry_finder[coord] = entry
        heapq.heappush(self._heap, entry)

    def get(self) -> Optional[Coord]:
        """Remove and return the coordinate with the lowest priority, or None if empty."""
        while self._heap:
            entry = heapq.heappop(self._heap)
            if not entry.removed:
                del self._entry_finder[entry.coord]
                return entry.coord
        return None

    def peek(self) -> Optional[Tuple[Coord, int]]:
        """Look at the next (coord, f_cost) without removing it."""
        while self._heap:
            entry = self._heap[0]
            if not entry.removed:
                return entry.coord, entry.f_cost
            heapq.heappop(self._heap)
        return None
