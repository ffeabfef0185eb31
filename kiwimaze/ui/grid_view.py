"""Grid view drawing the maze, goal and player."""

from typing import Dict, Optional, Tuple

from PySide6.QtCore import Qt
from PySide6.QtGui import QPainter
from PySide6.QtWidgets import QGraphicsScene, QGraphicsView

from ..app.controller import GameController
from ..domain.types import Cell
from .tiles import CellTile, GoalTile, PlayerToken


class MazeView(QGraphicsView):
    """Graphics view that renders the controller's game snapshot."""

    def __init__(self, controller: GameController):
        super().__init__()

        self.controller = controller
        self.scene = QGraphicsScene()
        self.setScene(self.scene)

        self.tiles: Dict[Tuple[int, int], CellTile] = {}
        self.goal_tile: Optional[GoalTile] = None
        self.player_token: Optional[PlayerToken] = None
        self.tile_size = float(controller.config.cell_size)

        self.setRenderHint(QPainter.Antialiasing)
        # Arrow keys belong to the game, not to scrolling
        self.setFocusPolicy(Qt.NoFocus)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarAlwaysOff)

        self.controller.grid_updated.connect(self.update_grid)

        self.update_grid()

    def update_grid(self):
        """Redraw from a fresh snapshot."""
        snapshot = self.controller.snapshot()
        size = snapshot.size

        if len(self.tiles) != size * size:
            self._rebuild_scene(size)

        for (x, y), tile in self.tiles.items():
            tile.set_cell(Cell(int(snapshot.cells[y, x])))

        self.goal_tile.set_cell(*snapshot.goal)
        self.player_token.set_cell(*snapshot.player)
        self.player_token.update()

    def _rebuild_scene(self, size: int):
        self.scene.clear()
        self.tiles.clear()

        extent = size * self.tile_size
        self.scene.setSceneRect(0, 0, extent, extent)

        for y in range(size):
            for x in range(size):
                tile = CellTile(x, y, self.tile_size, Cell.WALL)
                self.scene.addItem(tile)
                self.tiles[(x, y)] = tile

        self.goal_tile = GoalTile(self.tile_size)
        self.scene.addItem(self.goal_tile)
        self.player_token = PlayerToken(self.tile_size)
        self.scene.addItem(self.player_token)

        self.setFixedSize(int(extent) + 4, int(extent) + 4)
