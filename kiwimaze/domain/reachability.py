"""Breadth-first reachability queries over PATH cells."""

from collections import deque
from typing import Dict, List, Optional, Set

from .path import reconstruct_path
from .types import Coord, MazeGrid


def is_reachable(grid: MazeGrid, start: Coord, goal: Coord) -> bool:
    """
    Check if goal can be reached from start moving orthogonally over PATH cells.

    Args:
        grid: Grid to check
        start: Start coordinate
        goal: Goal coordinate

    Returns:
        True if a route exists, False otherwise (including when either end is
        a wall or out of bounds)
    """
    if not grid.is_path(start) or not grid.is_path(goal):
        return False

    visited: Set[Coord] = {start}
    queue = deque([start])

    while queue:
        current = queue.popleft()

        if current == goal:
            return True

        for neighbor in grid.neighbors4(current):
            if neighbor not in visited and grid.is_path(neighbor):
                visited.add(neighbor)
                queue.append(neighbor)

    return False


def reachable_region(grid: MazeGrid, start: Coord) -> Set[Coord]:
    """All PATH cells connected to start (empty if start is not a path)."""
    if not grid.is_path(start):
        return set()

    visited: Set[Coord] = {start}
    queue = deque([start])
    while queue:
        current = queue.popleft()
        for neighbor in grid.neighbors4(current):
            if neighbor not in visited and grid.is_path(neighbor):
                visited.add(neighbor)
                queue.append(neighbor)
    return visited


def shortest_walk(grid: MazeGrid, start: Coord, goal: Coord) -> List[Coord]:
    """Fewest-step route over PATH cells, or an empty list if none exists."""
    if not grid.is_path(start) or not grid.is_path(goal):
        return []

    came_from: Dict[Coord, Optional[Coord]] = {start: None}
    queue = deque([start])
    while queue:
        current = queue.popleft()
        if current == goal:
            return reconstruct_path(goal, came_from)
        for neighbor in grid.neighbors4(current):
            if neighbor not in came_from and grid.is_path(neighbor):
                came_from[neighbor] = current
                queue.append(neighbor)
    return []
