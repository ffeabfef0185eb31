"""Main application controller connecting the UI and the game session."""

from typing import Optional

from PySide6.QtCore import QObject, Signal

from ..domain.session import GameEvent, GameSession, GameSnapshot, MoveOutcome
from ..domain.types import Direction, GameConfig
from ..utils.rng import SeededRNG
from ..domain.fsm import GameState


class GameController(QObject):
    """
    Controller that owns the game session and re-exposes its events as Qt signals.

    Signals:
        grid_updated: Emitted when the maze or player position needs redrawing
        moves_changed: Emitted with the move count whenever it changes
        move_accepted: Emitted after the player moved
        move_rejected: Emitted when a move ran into a wall
        goal_reached: Emitted with the final move count on a win
        state_changed: Emitted with the new GameState
        error_occurred: Emitted when an error occurs
    """

    grid_updated = Signal()
    moves_changed = Signal(int)
    move_accepted = Signal()
    move_rejected = Signal()
    goal_reached = Signal(int)
    state_changed = Signal(object)  # GameState
    error_occurred = Signal(str)

    def __init__(self, config: Optional[GameConfig] = None, rng: Optional[SeededRNG] = None):
        super().__init__()
        self._session = GameSession(config, rng)
        self._connect_session()

    def _connect_session(self):
        self._session.subscribe(GameEvent.MOVE_ACCEPTED, self._on_move_accepted)
        self._session.subscribe(GameEvent.MOVE_REJECTED, self._on_move_rejected)
        self._session.subscribe(GameEvent.GOAL_REACHED, self._on_goal_reached)
        self._session.subscribe(GameEvent.NEW_GAME, self._on_new_game)

    # Properties

    @property
    def session(self) -> GameSession:
        return self._session

    @property
    def config(self) -> GameConfig:
        return self._session.config

    @property
    def current_state(self) -> GameState:
        return self._session.state

    def snapshot(self) -> GameSnapshot:
        """Consistent read of grid, start, player and goal for one frame."""
        return self._session.snapshot()

    # Game control

    def move(self, direction: Direction) -> bool:
        """Request a move. Returns True if the player moved."""
        try:
            return self._session.move(direction) == MoveOutcome.ACCEPTED
        except Exception as e:
            self.error_occurred.emit(f"Move failed: {str(e)}")
            return False

    def new_game(self) -> bool:
        """Start a new game with a fresh maze."""
        try:
            self._session.new_game()
            return True
        except Exception as e:
            self.error_occurred.emit(f"Failed to generate maze: {str(e)}")
            return False

    # Session callbacks

    def _on_move_accepted(self, snapshot: GameSnapshot):
        self.move_accepted.emit()
        self.moves_changed.emit(snapshot.moves)
        self.grid_updated.emit()

    def _on_move_rejected(self, snapshot: GameSnapshot):
        self.move_rejected.emit()

    def _on_goal_reached(self, snapshot: GameSnapshot):
        self.goal_reached.emit(snapshot.moves)
        self.state_changed.emit(GameState.WON)

    def _on_new_game(self, snapshot: GameSnapshot):
        self.moves_changed.emit(snapshot.moves)
        self.state_changed.emit(GameState.PLAYING)
        self.grid_updated.emit()
