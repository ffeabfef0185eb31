"""Main window for the kiwi maze game."""

from PySide6.QtCore import Qt
from PySide6.QtGui import QKeySequence, QShortcut
from PySide6.QtWidgets import (
    QFrame, QHBoxLayout, QLabel, QMainWindow, QMessageBox, QPushButton,
    QStatusBar, QVBoxLayout, QWidget
)

from ..app.controller import GameController
from ..domain.fsm import GameState
from ..domain.types import Direction
from .grid_view import MazeView

ARROW_KEYS = {
    Qt.Key_Up: Direction.UP,
    Qt.Key_Down: Direction.DOWN,
    Qt.Key_Left: Direction.LEFT,
    Qt.Key_Right: Direction.RIGHT,
}


class MainWindow(QMainWindow):
    """Main application window."""

    def __init__(self, controller: GameController):
        super().__init__()
        self.controller = controller

        self.setWindowTitle("Kiwi Maze Escape")

        self._create_ui()
        self._setup_connections()
        self._setup_shortcuts()

        self._update_move_counter(self.controller.session.moves)
        self.setFocusPolicy(Qt.StrongFocus)

    def _create_ui(self):
        """Create the user interface."""
        central_widget = QWidget()
        self.setCentralWidget(central_widget)
        main_layout = QVBoxLayout(central_widget)

        # Header: move counter and new game button
        header_layout = QHBoxLayout()
        self.move_count_label = QLabel()
        self.new_game_btn = QPushButton("New Game")
        self.new_game_btn.setFocusPolicy(Qt.NoFocus)
        header_layout.addWidget(self.move_count_label)
        header_layout.addStretch()
        header_layout.addWidget(self.new_game_btn)
        main_layout.addLayout(header_layout)

        self.maze_view = MazeView(self.controller)
        main_layout.addWidget(self.maze_view, 0, Qt.AlignCenter)

        self.win_panel = self._create_win_panel()
        main_layout.addWidget(self.win_panel)
        self.win_panel.hide()

        self.status_bar = QStatusBar()
        self.setStatusBar(self.status_bar)
        self.status_bar.showMessage("Use the arrow keys to guide the kiwi to the goal | N: new game, Q: quit")

    def _create_win_panel(self) -> QFrame:
        panel = QFrame()
        panel.setFrameStyle(QFrame.Box | QFrame.Raised)
        layout = QHBoxLayout(panel)

        self.win_label = QLabel()
        self.win_label.setStyleSheet("font-weight: bold;")
        self.play_again_btn = QPushButton("Play Again")
        self.play_again_btn.setFocusPolicy(Qt.NoFocus)

        layout.addWidget(self.win_label)
        layout.addStretch()
        layout.addWidget(self.play_again_btn)
        return panel

    def _setup_connections(self):
        """Setup signal connections."""
        self.new_game_btn.clicked.connect(self.controller.new_game)
        self.play_again_btn.clicked.connect(self.controller.new_game)

        self.controller.moves_changed.connect(self._update_move_counter)
        self.controller.move_rejected.connect(self._on_move_rejected)
        self.controller.goal_reached.connect(self._on_goal_reached)
        self.controller.state_changed.connect(self._on_state_changed)
        self.controller.error_occurred.connect(self._on_error)

    def _setup_shortcuts(self):
        """Setup keyboard shortcuts."""
        QShortcut(QKeySequence("N"), self, self.controller.new_game)
        QShortcut(QKeySequence("Q"), self, self.close)
        QShortcut(QKeySequence("Ctrl+Q"), self, self.close)
        QShortcut(QKeySequence("Escape"), self, self.close)

    def keyPressEvent(self, event):
        """Arrow keys move the kiwi."""
        direction = ARROW_KEYS.get(event.key())
        if direction is None:
            super().keyPressEvent(event)
            return
        event.accept()
        self.controller.move(direction)

    def _update_move_counter(self, moves: int):
        self.move_count_label.setText(f"Moves: {moves}")

    def _on_move_rejected(self):
        self.status_bar.showMessage("Bump! That's a wall.", 1000)

    def _on_goal_reached(self, moves: int):
        self.win_label.setText(f"You escaped the maze in {moves} moves!")
        self.win_panel.show()
        self.status_bar.showMessage("Goal reached!")

    def _on_state_changed(self, state: GameState):
        if state == GameState.PLAYING:
            self.win_panel.hide()
            self.status_bar.showMessage("New maze generated - find the goal!", 2000)
        self.setFocus()

    def _on_error(self, message: str):
        QMessageBox.warning(self, "Error", message)
