# src/nav/logging_config.py
"""
Logging setup for the nav / tilemap loggers.

The level comes from the `logging.level` key of config/pathfinding.yaml
unless the caller passes one explicitly:

    from nav.logging_config import configure_logging
    configure_logging()          # level from YAML
    configure_logging("DEBUG")   # override, e.g. from --log-level

Only the project loggers get a handler; the root logger and any handlers
an embedding application installed are left alone.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Dict, Optional, Union

from .config import load_path_search_config

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
PROJECT_LOGGERS = ("nav", "tilemap")

# logger name -> handler installed by configure_logging
_installed: Dict[str, logging.Handler] = {}


def resolve_level(level: Union[int, str, None], config_path: Optional[Path] = None) -> int:
    """Turn an int, a level name or None (read YAML) into a logging level."""
    if level is None:
        level = load_path_search_config(config_path).log_level
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def configure_logging(
    level: Union[int, str, None] = None,
    config_path: Optional[Path] = None,
) -> int:
    """
    Attach one stdout handler to each project logger and set its level.

    Calling it again only updates the level. Returns the level applied.
    """
    resolved = resolve_level(level, config_path)

    for name in PROJECT_LOGGERS:
        logger = logging.getLogger(name)
        if name not in _installed:
            handler = logging.StreamHandler(stream=sys.stdout)
            handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT))
            logger.addHandler(handler)
            _installed[name] = handler
        logger.setLevel(resolved)

    return resolved


def reset_logging() -> None:
    """Remove handlers installed by configure_logging (used by tests and tools)."""
    for name, handler in list(_installed.items()):
        logger = logging.getLogger(name)
        logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)
        del _installed[name]
