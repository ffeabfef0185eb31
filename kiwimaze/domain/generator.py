"""Maze generation by randomized depth-first carving."""

import logging
from typing import List, Optional, Tuple

from .types import Coord, GameConfig, MazeGrid
from ..utils.rng import SeededRNG

logger = logging.getLogger(__name__)

# Move by 2 so a wall cell always separates lattice cells
LATTICE_STEPS: Tuple[Tuple[int, int], ...] = ((0, -2), (2, 0), (0, 2), (-2, 0))


class MazeGenerator:
    """
    Produces the initial maze for a game.

    Carving walks the lattice of cells reachable from the start in steps of
    two, which yields a spanning tree: every carved lattice cell is connected
    to the start. A few extra openings are punched afterwards so the maze is
    not purely corridors.
    """

    def __init__(self, rng: SeededRNG, config: Optional[GameConfig] = None):
        self.rng = rng
        self.config = config or GameConfig()

    def generate(self, start: Optional[Coord] = None) -> MazeGrid:
        """Create a fresh all-wall grid and carve a maze into it."""
        start = start if start is not None else self.config.start
        grid = MazeGrid(self.config.grid_size)
        carved = self.carve_lattice(grid, start)
        opened = self.add_extra_openings(grid)
        logger.debug(
            "Generated %dx%d maze: %d lattice cells, %d extra openings",
            grid.size, grid.size, carved, len(opened),
        )
        return grid

    def carve_lattice(self, grid: MazeGrid, start: Coord) -> int:
        """
        Carve a perfect maze from start using recursive backtracking with an
        explicit stack. Returns the number of lattice cells carved.
        """
        visited = {start}
        stack: List[Coord] = []
        current = start
        grid.carve(current)

        while True:
            neighbors = self._unvisited_neighbors(grid, current, visited)

            if neighbors:
                next_cell, wall_between = self.rng.choice(neighbors)

                # Remove wall between current and neighbor
                grid.carve(wall_between)
                grid.carve(next_cell)
                visited.add(next_cell)

                stack.append(current)
                current = next_cell
            elif stack:
                # Backtrack
                current = stack.pop()
            else:
                break

        return len(visited)

    def _unvisited_neighbors(self, grid: MazeGrid, current: Coord, visited) -> List[Tuple[Coord, Coord]]:
        x, y = current
        neighbors = []
        for dx, dy in LATTICE_STEPS:
            next_coord = (x + dx, y + dy)
            if grid.is_interior(next_coord) and next_coord not in visited:
                neighbors.append((next_coord, (x + dx // 2, y + dy // 2)))
        return neighbors

    def add_extra_openings(self, grid: MazeGrid) -> List[Coord]:
        """
        Carve a small random number of interior walls that touch at least two
        paths. Such a cell can only join regions, never split one.
        """
        low, high = self.config.extra_openings
        count = self.rng.randint(low, high)

        candidates = [
            coord for coord in grid.coords()
            if grid.is_interior(coord)
            and not grid.is_path(coord)
            and grid.path_neighbor_count(coord) >= 2
        ]
        if not candidates or count == 0:
            return []

        openings = self.rng.sample(candidates, min(count, len(candidates)))
        for coord in openings:
            grid.carve(coord)
        return openings
