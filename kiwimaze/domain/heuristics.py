"""Heuristic functions for the repair pathfinder."""

from typing import Callable, Dict

from .types import Coord


def manhattan_distance(start: Coord, target: Coord) -> int:
    """
    Manhattan (L1) distance heuristic.
    Admissible and consistent for 4-directional movement with unit step cost.
    """
    return abs(start[0] - target[0]) + abs(start[1] - target[1])


HEURISTICS: Dict[str, Callable[[Coord, Coord], int]] = {
    "manhattan": manhattan_distance,
}


def get_heuristic(heuristic_id: str) -> Callable[[Coord, Coord], int]:
    """Get heuristic function by ID."""
    try:
        return HEURISTICS[heuristic_id]
    except KeyError:
        raise ValueError(f"Unknown heuristic: {heuristic_id}") from None
