"""Maze model, generation, connectivity repair and game rules (no Qt dependency)."""
