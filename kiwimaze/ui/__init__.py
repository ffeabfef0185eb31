"""PySide6 widgets for drawing and playing the maze."""
