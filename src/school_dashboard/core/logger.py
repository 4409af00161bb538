"""Centralized logging.

Every module asks for its logger through ``get_logger(__name__)``. The handler
and formatter live on the package root logger only; module loggers propagate
to it.
"""

from __future__ import annotations

import logging
import sys

ROOT_LOGGER = "school_dashboard"
_FORMAT = "[%(asctime)s] %(levelname)s in %(module)s: %(message)s"


def _root() -> logging.Logger:
    root = logging.getLogger(ROOT_LOGGER)

    # Avoid stacking handlers when modules are imported repeatedly
    if not root.handlers:
        root.setLevel(logging.INFO)
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(handler)

    return root


def get_logger(name: str) -> logging.Logger:
    _root()
    return logging.getLogger(name)


def configure(level: int | str) -> None:
    """Apply ``level`` to the package root logger (used by the app factory)."""
    if isinstance(level, str):
        level = level.upper()
    _root().setLevel(level)
