"""Logging configuration for applications embedding the engine.

Library modules only create ``logging.getLogger(__name__)`` loggers; call
:func:`setup_logging` once from the application entry point to see them.
"""

import logging

from mirror_grid.config import LOG_FORMAT


def setup_logging(level: int = logging.INFO) -> None:
    """Attach one console handler with a unified format to the root logger.

    Args:
        level: Minimum severity level (e.g. ``logging.DEBUG``).
    """
    root = logging.getLogger()
    root.setLevel(level)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root.handlers.clear()
    root.addHandler(handler)
