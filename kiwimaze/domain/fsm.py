"""Finite State Machine for the game's play/win phases."""

from enum import Enum
from typing import Callable, Dict, Optional, Set


class GameState(Enum):
    """Phases of a single game."""
    PLAYING = "playing"
    WON = "won"


class GameStateMachine:
    """
    Finite State Machine for a game session.

    State Transitions:
    PLAYING -> WON (when the player reaches the goal)
    WON -> PLAYING (when a new game starts)
    PLAYING -> PLAYING (new game started mid-play)
    """

    def __init__(self):
        self._current_state = GameState.PLAYING
        self._state_callbacks: Dict[GameState, Callable[[Optional[dict]], None]] = {}
        self._valid_transitions = self._build_transition_map()

    def _build_transition_map(self) -> Dict[GameState, Set[GameState]]:
        """Build the valid state transition map."""
        return {
            GameState.PLAYING: {GameState.WON, GameState.PLAYING},
            GameState.WON: {GameState.PLAYING},
        }

    @property
    def current_state(self) -> GameState:
        """Get the current state."""
        return self._current_state

    def can_transition_to(self, target_state: GameState) -> bool:
        """Check if transition to target state is valid."""
        return target_state in self._valid_transitions.get(self._current_state, set())

    def transition_to(self, target_state: GameState, context: Optional[dict] = None) -> bool:
        """
        Attempt to transition to the target state.

        Returns:
            True if transition was successful, False otherwise
        """
        if not self.can_transition_to(target_state):
            return False

        self._current_state = target_state

        callback = self._state_callbacks.get(target_state)
        if callback is not None:
            callback(context)

        return True

    def on_state_enter(self, state: GameState, callback: Callable[[Optional[dict]], None]):
        """Register a callback for when entering a specific state."""
        self._state_callbacks[state] = callback

    def is_playing(self) -> bool:
        return self._current_state == GameState.PLAYING

    def is_won(self) -> bool:
        return self._current_state == GameState.WON

    def win(self, context: Optional[dict] = None) -> bool:
        """Mark the game as won."""
        return self.transition_to(GameState.WON, context)

    def restart(self, context: Optional[dict] = None) -> bool:
        """Return to playing for a new game."""
        return self.transition_to(GameState.PLAYING, context)

    def get_state_description(self) -> str:
        """Get a human-readable description of the current state."""
        descriptions = {
            GameState.PLAYING: "Find the way to the goal",
            GameState.WON: "Goal reached",
        }
        return descriptions.get(self._current_state, "Unknown state")
