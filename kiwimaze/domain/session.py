"""Game session: player position, move counting, win state and event dispatch."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Optional

import numpy as np

from .generator import MazeGenerator
from .guarantor import build_maze
from .types import Coord, Direction, GameConfig, MazeGrid
from .fsm import GameStateMachine, GameState
from ..utils.rng import SeededRNG

logger = logging.getLogger(__name__)


class GameEvent(Enum):
    """Events surfaced to presentation and feedback layers."""
    MOVE_ACCEPTED = "move_accepted"
    MOVE_REJECTED = "move_rejected"
    GOAL_REACHED = "goal_reached"
    NEW_GAME = "new_game"


class MoveOutcome(Enum):
    """Result of a move request."""
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    IGNORED = "ignored"  # game already won


@dataclass(frozen=True, eq=False)
class GameSnapshot:
    """Read-only view of the game for renderers."""
    cells: np.ndarray
    start: Coord
    player: Coord
    goal: Coord
    moves: int
    won: bool

    @property
    def size(self) -> int:
        return int(self.cells.shape[0])


Listener = Callable[[GameSnapshot], None]


class GameSession:
    """
    One player's game against a generated maze.

    The session owns the grid between generations. Moves never mutate the
    grid; only ``new_game`` replaces it.
    """

    def __init__(self, config: Optional[GameConfig] = None, rng: Optional[SeededRNG] = None,
                 generator: Optional[MazeGenerator] = None):
        self.config = config or GameConfig()
        self.config.validate()
        self.rng = rng or SeededRNG(self.config.seed)
        self._generator = generator

        self._listeners: Dict[GameEvent, List[Listener]] = {event: [] for event in GameEvent}
        self._state_machine = GameStateMachine()
        self._state_machine.on_state_enter(GameState.WON, self._on_won_entered)

        self._start: Coord = self.config.start
        self._goal: Coord = self.config.goal_candidates()[0]
        self._player: Coord = self._start
        self._moves = 0
        self._grid: MazeGrid = self._build_grid()

    # Properties

    @property
    def grid(self) -> MazeGrid:
        return self._grid

    @property
    def start(self) -> Coord:
        return self._start

    @property
    def goal(self) -> Coord:
        return self._goal

    @property
    def player(self) -> Coord:
        return self._player

    @property
    def moves(self) -> int:
        return self._moves

    @property
    def won(self) -> bool:
        return self._state_machine.is_won()

    @property
    def state(self) -> GameState:
        return self._state_machine.current_state

    @property
    def status_text(self) -> str:
        return self._state_machine.get_state_description()

    # Events

    def subscribe(self, event: GameEvent, callback: Listener):
        """Register a callback invoked with the current snapshot when event fires."""
        self._listeners[event].append(callback)

    def unsubscribe(self, event: GameEvent, callback: Listener):
        if callback in self._listeners[event]:
            self._listeners[event].remove(callback)

    def _emit(self, event: GameEvent):
        if not self._listeners[event]:
            return
        snapshot = self.snapshot()
        for callback in list(self._listeners[event]):
            callback(snapshot)

    # Game operations

    def is_valid_move(self, x: int, y: int) -> bool:
        """True only for in-bounds PATH cells."""
        return self._grid.is_path((x, y))

    def move(self, direction: Direction) -> MoveOutcome:
        """
        Try to move the player one cell.

        Accepted moves increment the move counter and may win the game;
        rejected moves leave all state unchanged. State is settled before
        any listener runs, so a failing listener cannot leave the player
        on the goal without a win.
        """
        if self.won:
            return MoveOutcome.IGNORED

        target = direction.apply(self._player)
        if not self.is_valid_move(*target):
            self._emit(GameEvent.MOVE_REJECTED)
            return MoveOutcome.REJECTED

        self._player = target
        self._moves += 1
        reached = self._player == self._goal
        if reached:
            self._state_machine.win({"moves": self._moves})

        self._emit(GameEvent.MOVE_ACCEPTED)
        if reached:
            self._emit(GameEvent.GOAL_REACHED)

        return MoveOutcome.ACCEPTED

    def new_game(self):
        """Re-roll the goal, reset player and counter, and regenerate the maze."""
        self._goal = self.rng.choice(self.config.goal_candidates())
        self._player = self._start
        self._moves = 0
        self._state_machine.restart()
        self._grid = self._build_grid()
        logger.info("New game: goal at %s", self._goal)
        self._emit(GameEvent.NEW_GAME)

    def snapshot(self) -> GameSnapshot:
        cells = self._grid.snapshot().copy()
        cells.flags.writeable = False
        return GameSnapshot(
            cells=cells,
            start=self._start,
            player=self._player,
            goal=self._goal,
            moves=self._moves,
            won=self.won,
        )

    def _build_grid(self) -> MazeGrid:
        return build_maze(self.config, self.rng, self._goal, generator=self._generator)

    def _on_won_entered(self, context):
        logger.info("Goal reached in %d moves", context["moves"])
