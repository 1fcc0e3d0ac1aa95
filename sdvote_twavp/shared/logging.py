"""
Package-wide logging for the TWAVP strategies.

A single handler lives on the "sdvote_twavp" logger. Module loggers are its
children and propagate to it, so strategies, planner and executor share one
format and one level. TWAVP_LOG_LEVEL sets that level (default INFO).
"""

import logging
import os
from typing import Optional

PACKAGE_LOGGER = "sdvote_twavp"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def _level_from_env() -> int:
    level = getattr(logging, os.getenv("TWAVP_LOG_LEVEL", "INFO").upper(), None)
    return level if isinstance(level, int) else logging.INFO


def _configure_package_logger() -> logging.Logger:
    root = logging.getLogger(PACKAGE_LOGGER)
    if root.handlers:
        return root

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(_level_from_env())
    return root


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger for a module of this package, e.g. get_logger(__name__)."""
    root = _configure_package_logger()
    if not name or name == PACKAGE_LOGGER:
        return root
    if name.startswith(PACKAGE_LOGGER + "."):
        return logging.getLogger(name)
    # Names from outside the package are nested under it
    return root.getChild(name)
