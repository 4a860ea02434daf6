"""Logging setup for the config cache server.

All project loggers hang off a single 'config_cache' logger. Output goes
to stderr because stdout carries the MCP stdio transport.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

LOGGER_NAME = "config_cache"

logger = logging.getLogger(LOGGER_NAME)


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach a stderr handler to the project logger (once) and set its level."""
    logger.setLevel(level.upper())

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(handler)

    # Avoid duplicate records via the root logger
    logger.propagate = False
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    if name:
        return logging.getLogger(f"{LOGGER_NAME}.{name}")
    return logger
