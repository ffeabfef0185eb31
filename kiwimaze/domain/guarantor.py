"""Connectivity guarantee: repair a generated maze so the goal is always reachable."""

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from .astar import find_path
from .generator import MazeGenerator
from .reachability import is_reachable
from .types import Coord, GameConfig, MazeGrid
from ..utils.rng import SeededRNG

logger = logging.getLogger(__name__)

PathFinder = Callable[[Coord, Coord, MazeGrid], List[Coord]]

REPAIR_NONE = "none"
REPAIR_ASTAR = "astar"
REPAIR_DIRECT = "direct"


@dataclass
class RepairReport:
    """What the guarantor had to do to a maze."""
    initially_reachable: bool = False
    repair: str = REPAIR_NONE
    carved_cells: List[Coord] = field(default_factory=list)
    extra_segments: List[List[Coord]] = field(default_factory=list)
    final_fallback: bool = False


def carve_direct_path(grid: MazeGrid, start: Coord, goal: Coord) -> List[Coord]:
    """
    Carve an L-shaped route: along start's row to goal's column, then along
    that column to the goal. Returns the carved cells in walking order.
    """
    x, y = start
    gx, gy = goal
    carved = []

    step_x = 1 if gx > x else -1
    while x != gx:
        grid.carve((x, y))
        carved.append((x, y))
        x += step_x

    step_y = 1 if gy > y else -1
    while y != gy:
        grid.carve((x, y))
        carved.append((x, y))
        y += step_y

    grid.carve(goal)
    carved.append(goal)
    return carved


class ConnectivityGuarantor:
    """
    Validates and repairs a freshly generated maze.

    Repair is layered: an A* route carved through walls, an L-shaped direct
    route if A* returns nothing, then a last direct carve if the final check
    still fails. After ``ensure`` returns the goal is reachable from the start.
    """

    def __init__(self, rng: SeededRNG, config: Optional[GameConfig] = None,
                 path_finder: PathFinder = find_path):
        self.rng = rng
        self.config = config or GameConfig()
        self.path_finder = path_finder

    def ensure(self, grid: MazeGrid, start: Coord, goal: Coord) -> RepairReport:
        """Repair grid in place so goal is reachable from start."""
        report = RepairReport()

        grid.carve(start)
        grid.carve(goal)

        report.initially_reachable = is_reachable(grid, start, goal)
        if not report.initially_reachable:
            self._repair(grid, start, goal, report)

        report.extra_segments = self.add_extra_paths(grid)

        if not is_reachable(grid, start, goal):
            logger.warning("Goal %s still unreachable after repair, forcing direct path", goal)
            report.carved_cells.extend(carve_direct_path(grid, start, goal))
            report.final_fallback = True

        return report

    def _repair(self, grid: MazeGrid, start: Coord, goal: Coord, report: RepairReport):
        path = self.path_finder(start, goal, grid)
        if path:
            logger.info("Goal %s unreachable, carving %d-cell A* route", goal, len(path))
            for coord in path:
                grid.carve(coord)
            report.repair = REPAIR_ASTAR
            report.carved_cells = list(path)
        else:
            logger.warning("Pathfinder returned no route to %s, carving direct path", goal)
            report.repair = REPAIR_DIRECT
            report.carved_cells = carve_direct_path(grid, start, goal)

    def add_extra_paths(self, grid: MazeGrid) -> List[List[Coord]]:
        """
        Carve short straight segments for variety. A segment is only carved
        when one of its cells is already a path or touches one.
        """
        low, high = self.config.extra_paths
        count = self.rng.randint(low, high)
        limit = grid.size - 1
        segments = []

        for _ in range(count):
            x = self.rng.randint(1, grid.size - 2)
            y = self.rng.randint(1, grid.size - 2)

            if self.rng.random() > 0.5:
                # Horizontal
                segment = [(x + j, y) for j in range(self.config.segment_length) if x + j < limit]
            else:
                # Vertical
                segment = [(x, y + j) for j in range(self.config.segment_length) if y + j < limit]

            if not self._is_anchored(grid, segment):
                continue

            for coord in segment:
                grid.carve(coord)
            segments.append(segment)

        logger.debug("Added %d of %d extra path segments", len(segments), count)
        return segments

    @staticmethod
    def _is_anchored(grid: MazeGrid, segment: List[Coord]) -> bool:
        return any(
            grid.is_path(coord) or grid.path_neighbor_count(coord) > 0
            for coord in segment
        )


def build_maze(config: GameConfig, rng: SeededRNG, goal: Coord,
               generator: Optional[MazeGenerator] = None,
               guarantor: Optional[ConnectivityGuarantor] = None) -> MazeGrid:
    """
    Full generation cycle: carve a maze, then guarantee start-to-goal connectivity.

    Args:
        config: Game configuration (grid size and start)
        rng: Random source shared by both stages
        goal: Goal coordinate for this game
        generator: Generator to use (a MazeGenerator over rng if None)
        guarantor: Guarantor to use (a ConnectivityGuarantor over rng if None)

    Returns:
        The finished grid
    """
    if not (0 <= goal[0] < config.grid_size and 0 <= goal[1] < config.grid_size):
        raise ValueError(f"Goal {goal} is outside the {config.grid_size}x{config.grid_size} grid")

    generator = generator or MazeGenerator(rng, config)
    guarantor = guarantor or ConnectivityGuarantor(rng, config)

    grid = generator.generate(config.start)
    report = guarantor.ensure(grid, config.start, goal)
    logger.debug(
        "Maze ready: goal=%s reachable_before_repair=%s repair=%s",
        goal, report.initially_reachable, report.repair,
    )
    return grid
