"""Core type definitions for the maze game."""

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Iterator, List, Optional, Tuple

import numpy as np

# Coordinate type for grid positions, (x, y)
Coord = Tuple[int, int]


class Cell(IntEnum):
    """State of a single grid cell."""
    PATH = 0
    WALL = 1


class Direction(Enum):
    """Orthogonal move directions with their (dx, dy) deltas."""
    UP = (0, -1)
    RIGHT = (1, 0)
    DOWN = (0, 1)
    LEFT = (-1, 0)

    @property
    def delta(self) -> Tuple[int, int]:
        return self.value

    def apply(self, coord: Coord) -> Coord:
        """Return the coordinate one step from coord in this direction."""
        return (coord[0] + self.value[0], coord[1] + self.value[1])


# Up, right, down, left
ORTHOGONAL_STEPS: Tuple[Tuple[int, int], ...] = tuple(d.delta for d in Direction)


class MazeGrid:
    """
    Square grid of WALL/PATH cells.

    Cells are stored in a numpy array indexed ``[y, x]``. Access outside the
    grid raises IndexError; negative indices are never wrapped.
    """

    def __init__(self, size: int, cells: Optional[np.ndarray] = None):
        if size <= 0:
            raise ValueError(f"Grid size must be positive, got {size}")
        self.size = size
        if cells is None:
            self._cells = np.full((size, size), int(Cell.WALL), dtype=np.uint8)
        else:
            if cells.shape != (size, size):
                raise ValueError(f"Cell array shape {cells.shape} does not match size {size}")
            self._cells = cells.astype(np.uint8, copy=True)

    @classmethod
    def from_rows(cls, rows: List[str]) -> "MazeGrid":
        """
        Build a grid from text rows, '#' for walls and anything else for paths.
        Handy for fixtures and debugging.
        """
        size = len(rows)
        grid = cls(size)
        for y, row in enumerate(rows):
            if len(row) != size:
                raise ValueError(f"Row {y} has length {len(row)}, expected {size}")
            for x, char in enumerate(row):
                if char != "#":
                    grid.carve((x, y))
        return grid

    def in_bounds(self, coord: Coord) -> bool:
        """Check if coordinate is within grid bounds."""
        x, y = coord
        return 0 <= x < self.size and 0 <= y < self.size

    def is_interior(self, coord: Coord) -> bool:
        """Check if coordinate lies strictly inside the outer border."""
        x, y = coord
        return 0 < x < self.size - 1 and 0 < y < self.size - 1

    def _check(self, coord: Coord):
        if not self.in_bounds(coord):
            raise IndexError(f"Coordinate {coord} is outside the {self.size}x{self.size} grid")

    def get(self, coord: Coord) -> Cell:
        self._check(coord)
        x, y = coord
        return Cell(int(self._cells[y, x]))

    def set(self, coord: Coord, cell: Cell):
        self._check(coord)
        x, y = coord
        self._cells[y, x] = int(cell)

    def carve(self, coord: Coord):
        """Turn the cell at coord into a path."""
        self.set(coord, Cell.PATH)

    def is_path(self, coord: Coord) -> bool:
        """True for in-bounds PATH cells, False otherwise (never raises)."""
        if not self.in_bounds(coord):
            return False
        x, y = coord
        return bool(self._cells[y, x] == Cell.PATH)

    def neighbors4(self, coord: Coord) -> List[Coord]:
        """In-bounds orthogonal neighbors, in up/right/down/left order."""
        x, y = coord
        neighbors = []
        for dx, dy in ORTHOGONAL_STEPS:
            neighbor = (x + dx, y + dy)
            if self.in_bounds(neighbor):
                neighbors.append(neighbor)
        return neighbors

    def path_neighbor_count(self, coord: Coord) -> int:
        """Number of orthogonal neighbors that are paths."""
        return sum(1 for n in self.neighbors4(coord) if self.is_path(n))

    def coords(self) -> Iterator[Coord]:
        """Iterate all coordinates in row-major order."""
        for y in range(self.size):
            for x in range(self.size):
                yield (x, y)

    def path_cells(self) -> List[Coord]:
        """All PATH coordinates in row-major order."""
        ys, xs = np.nonzero(self._cells == Cell.PATH)
        return [(int(x), int(y)) for y, x in zip(ys, xs)]

    def path_count(self) -> int:
        return int(np.count_nonzero(self._cells == Cell.PATH))

    def copy(self) -> "MazeGrid":
        return MazeGrid(self.size, self._cells)

    def snapshot(self) -> np.ndarray:
        """Read-only view of the cell array for renderers."""
        view = self._cells.view()
        view.flags.writeable = False
        return view

    def to_rows(self) -> List[str]:
        """Text rendering, '#' for walls and '.' for paths."""
        return ["".join("#" if v == Cell.WALL else "." for v in row) for row in self._cells]

    def __eq__(self, other) -> bool:
        if not isinstance(other, MazeGrid):
            return NotImplemented
        return self.size == other.size and bool(np.array_equal(self._cells, other._cells))

    def __repr__(self) -> str:
        return f"MazeGrid(size={self.size}, paths={self.path_count()})"


@dataclass
class GameConfig:
    """Configuration for maze generation and the game session."""
    grid_size: int = 12
    start: Coord = (1, 1)
    cell_size: int = 40
    extra_openings: Tuple[int, int] = (2, 4)  # inclusive range
    extra_paths: Tuple[int, int] = (4, 11)  # inclusive range
    segment_length: int = 3
    seed: Optional[int] = None

    def validate(self):
        """Raise ValueError if the configuration cannot produce a playable maze."""
        if self.grid_size < 5:
            raise ValueError(f"Grid size must be at least 5, got {self.grid_size}")
        x, y = self.start
        if not (0 < x < self.grid_size - 1 and 0 < y < self.grid_size - 1):
            raise ValueError(f"Start {self.start} must lie inside the outer border")
        if tuple(self.start) in self.goal_candidates():
            raise ValueError(f"Start {self.start} coincides with a goal position")
        for name in ("extra_openings", "extra_paths"):
            low, high = getattr(self, name)
            if low < 0 or high < low:
                raise ValueError(f"Invalid {name} range: {(low, high)}")
        if self.segment_length < 1:
            raise ValueError(f"Segment length must be positive, got {self.segment_length}")

    def goal_candidates(self) -> List[Coord]:
        """Corner and edge-midpoint cells the goal is drawn from."""
        n = self.grid_size
        return [
            (n - 2, n - 2),
            (n - 2, 1),
            (1, n - 2),
            (n // 2, n - 2),
            (n - 2, n // 2),
        ]


@dataclass
class PathfindingResult:
    """Result of a pathfinding operation."""
    path: List[Coord] = field(default_factory=list)
    nodes_explored: int = 0
    found: bool = False

    @property
    def success(self) -> bool:
        """Whether pathfinding was successful."""
        return self.found and len(self.path) > 0
