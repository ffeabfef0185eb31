"""A* search used to repair mazes whose goal is cut off from the start."""

import logging
from typing import Dict, List, Optional, Set

from .heuristics import get_heuristic
from .path import reconstruct_path
from .priority_queue import PriorityQueue
from .types import Coord, MazeGrid, PathfindingResult

logger = logging.getLogger(__name__)


class AStarPathfinder:
    """
    A* over every cell of the grid, ignoring walls.

    The returned route is meant to be carved, not walked, so WALL cells are
    regular nodes with unit step cost. Ties on f-cost are broken by h-cost and
    then by insertion order, which makes results reproducible.
    """

    def __init__(self, heuristic: str = "manhattan"):
        self._heuristic = get_heuristic(heuristic)
        self.reset()

    def reset(self):
        """Reset the search state."""
        self.open_set = PriorityQueue()
        self.closed_set: Set[Coord] = set()
        self.g_score: Dict[Coord, int] = {}
        self.f_score: Dict[Coord, int] = {}
        self.came_from: Dict[Coord, Optional[Coord]] = {}
        self.nodes_explored = 0

    def search(self, start: Coord, goal: Coord, grid: MazeGrid) -> PathfindingResult:
        """
        Run A* from start to goal.

        Raises:
            ValueError: If start or goal is outside the grid
        """
        if not grid.in_bounds(start):
            raise ValueError(f"Start coordinate {start} is out of bounds")
        if not grid.in_bounds(goal):
            raise ValueError(f"Goal coordinate {goal} is out of bounds")

        self.reset()

        if start == goal:
            return PathfindingResult(path=[start], nodes_explored=0, found=True)

        h = self._heuristic(start, goal)
        self.g_score[start] = 0
        self.f_score[start] = h
        self.came_from[start] = None
        self.open_set.put(start, h, h)

        while not self.open_set.is_empty():
            current = self.open_set.get()
            if current is None:
                break
            self.nodes_explored += 1

            if current == goal:
                path = reconstruct_path(goal, self.came_from)
                logger.debug("A* reached %s after exploring %d nodes", goal, self.nodes_explored)
                return PathfindingResult(path=path, nodes_explored=self.nodes_explored, found=True)

            self.closed_set.add(current)

            for neighbor in grid.neighbors4(current):
                if neighbor in self.closed_set:
                    continue

                tentative_g = self.g_score[current] + 1
                if tentative_g < self.g_score.get(neighbor, tentative_g + 1):
                    h_cost = self._heuristic(neighbor, goal)
                    self.came_from[neighbor] = current
                    self.g_score[neighbor] = tentative_g
                    self.f_score[neighbor] = tentative_g + h_cost
                    self.open_set.put(neighbor, tentative_g + h_cost, h_cost)

        logger.debug("A* found no route from %s to %s", start, goal)
        return PathfindingResult(found=False, nodes_explored=self.nodes_explored)


def find_path(start: Coord, goal: Coord, grid: MazeGrid) -> List[Coord]:
    """
    Convenience function returning the cells of a start-to-goal route.

    Returns an empty list when no route exists.
    """
    return AStarPathfinder().search(start, goal, grid).path
