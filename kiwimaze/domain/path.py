"""Path reconstruction and validation utilities."""

from typing import Dict, List, Optional

from .types import Coord, MazeGrid


def reconstruct_path(goal: Coord, came_from: Dict[Coord, Optional[Coord]]) -> List[Coord]:
    """
    Reconstruct the path from the start to goal using predecessor links.
    The start is the coordinate whose predecessor is None.
    """
    path = []
    current: Optional[Coord] = goal

    while current is not None:
        path.append(current)
        current = came_from.get(current)

    path.reverse()
    return path


def is_adjacent(a: Coord, b: Coord) -> bool:
    """True when a and b differ by exactly one orthogonal step."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1]) == 1


def is_contiguous_path(path: List[Coord], start: Coord, goal: Coord) -> bool:
    """
    Check that path runs from start to goal in orthogonal single steps
    without visiting any cell twice.
    """
    if not path:
        return False
    if path[0] != start or path[-1] != goal:
        return False
    if len(set(path)) != len(path):
        return False
    return all(is_adjacent(path[i - 1], path[i]) for i in range(1, len(path)))


def is_walkable_path(path: List[Coord], grid: MazeGrid) -> bool:
    """True if every cell on the path is a PATH cell of grid."""
    return bool(path) and all(grid.is_path(coord) for coord in path)


def path_length(path: List[Coord]) -> int:
    """Number of steps (edges) in a path."""
    return max(len(path) - 1, 0)
