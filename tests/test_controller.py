"""Tests for the Qt controller's signal wiring."""

import pytest

pytest.importorskip("PySide6")

from kiwimaze.app.controller import GameController  # noqa: E402
from kiwimaze.domain.fsm import GameState  # noqa: E402
from kiwimaze.domain.reachability import shortest_walk  # noqa: E402
from kiwimaze.domain.types import Direction, GameConfig  # noqa: E402
from kiwimaze.utils.rng import SeededRNG  # noqa: E402


@pytest.fixture
def controller(qt_app):
    return GameController(GameConfig(), SeededRNG(77))


@pytest.fixture
def signals(controller):
    received = {
        "grid_updated": [], "moves_changed": [], "move_accepted": [],
        "move_rejected": [], "goal_reached": [], "state_changed": [],
    }
    controller.grid_updated.connect(lambda: received["grid_updated"].append(True))
    controller.moves_changed.connect(lambda n: received["moves_changed"].append(n))
    controller.move_accepted.connect(lambda: received["move_accepted"].append(True))
    controller.move_rejected.connect(lambda: received["move_rejected"].append(True))
    controller.goal_reached.connect(lambda n: received["goal_reached"].append(n))
    controller.state_changed.connect(lambda s: received["state_changed"].append(s))
    return received


def test_rejected_move_signal(controller, signals):
    assert not controller.move(Direction.UP)
    assert signals["move_rejected"] == [True]
    assert signals["moves_changed"] == []
    assert signals["grid_updated"] == []


def test_walk_to_goal_signals(controller, signals):
    session = controller.session
    route = shortest_walk(session.grid, session.player, session.goal)
    for a, b in zip(route, route[1:]):
        direction = next(d for d in Direction if d.apply(a) == b)
        assert controller.move(direction)

    steps = len(route) - 1
    assert signals["moves_changed"] == list(range(1, steps + 1))
    assert len(signals["move_accepted"]) == steps
    assert signals["goal_reached"] == [steps]
    assert signals["state_changed"] == [GameState.WON]
    assert controller.current_state == GameState.WON


def test_new_game_signals(controller, signals):
    assert controller.new_game()
    assert signals["moves_changed"] == [0]
    assert signals["state_changed"] == [GameState.PLAYING]
    assert signals["grid_updated"] == [True]
    snapshot = controller.snapshot()
    assert snapshot.player == snapshot.start
    assert snapshot.moves == 0
