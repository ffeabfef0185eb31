"""Logging setup shared by the game and its entry point."""

import logging
import sys
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s - %(name)-20s - %(levelname)-8s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_ROOT_LOGGER = "kiwimaze"


def configure_logging(level: Union[str, int] = "WARNING", stream=None) -> logging.Logger:
    """
    Configure the package logger once.

    Args:
        level: Logging level name or number
        stream: Output stream (stderr if None)

    Returns:
        The configured package logger
    """
    if isinstance(level, str):
        numeric_level = getattr(logging, level.upper(), None)
        if not isinstance(numeric_level, int):
            raise ValueError(f"Unknown log level: {level}")
        level = numeric_level

    logger = logging.getLogger(_ROOT_LOGGER)
    logger.setLevel(level)

    # Replace handlers so repeated configuration does not duplicate output
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger under the package namespace."""
    if not name:
        return logging.getLogger(_ROOT_LOGGER)
    if name.startswith(_ROOT_LOGGER):
        return logging.getLogger(name)
    return logging.getLogger(f"{_ROOT_LOGGER}.{name}")
