"""Kiwi Maze Escape: guide a kiwi through a generated maze to the goal."""

from .domain.session import GameEvent, GameSession, GameSnapshot, MoveOutcome
from .domain.types import Cell, Coord, Direction, GameConfig, MazeGrid

__version__ = "1.0.0"

__all__ = [
    "Cell",
    "Coord",
    "Direction",
    "GameConfig",
    "GameEvent",
    "GameSession",
    "GameSnapshot",
    "MazeGrid",
    "MoveOutcome",
]
