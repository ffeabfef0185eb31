"""
Pytest configuration and shared fixtures for the kiwi maze test suite.
"""

import os

import pytest

from kiwimaze.domain.types import GameConfig, MazeGrid
from kiwimaze.utils.rng import SeededRNG


def pytest_collection_modifyitems(config, items):
    """Mark tests by file name so `-m unit` / `-m integration` select them."""
    for item in items:
        test_path = str(item.fspath)
        if "test_controller" in test_path or "test_main_window" in test_path:
            item.add_marker(pytest.mark.qt)
        elif "test_pipeline" in test_path or "test_session" in test_path:
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


@pytest.fixture(scope="session")
def qt_app():
    """Shared QApplication on the offscreen platform."""
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    QtWidgets = pytest.importorskip("PySide6.QtWidgets")
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app


@pytest.fixture
def rng():
    """Deterministic random source."""
    return SeededRNG(1234)


@pytest.fixture
def config():
    """Default 12x12 game configuration."""
    return GameConfig()


@pytest.fixture
def open_grid():
    """7x7 grid with a walled border and an open interior."""
    return MazeGrid.from_rows([
        "#######",
        "#.....#",
        "#.....#",
        "#.....#",
        "#.....#",
        "#.....#",
        "#######",
    ])


@pytest.fixture
def split_grid():
    """7x7 grid whose left and right halves are separated by a wall column."""
    return MazeGrid.from_rows([
        "#######",
        "#..#..#",
        "#..#..#",
        "#..#..#",
        "#..#..#",
        "#..#..#",
        "#######",
    ])


@pytest.fixture
def winding_grid():
    """7x7 grid with a single winding corridor from (1,1) to (5,5)."""
    return MazeGrid.from_rows([
        "#######",
        "#.....#",
        "#####.#",
        "#.....#",
        "#.#####",
        "#.....#",
        "#######",
    ])
