"""Shared utilities: seeded randomness and logging."""
