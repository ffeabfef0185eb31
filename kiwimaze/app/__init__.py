"""Application layer: the Qt controller."""
