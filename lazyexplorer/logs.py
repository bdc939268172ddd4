"""File logging setup.

The TUI owns stdout/stderr while running, so log records go to a file under
the platform log directory.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from platformdirs import user_log_dir

from .config import APP_NAME

LOG_LEVEL_ENV_VAR = "LAZYEXPLORER_LOG"
LOG_FILENAME = "lazyexplorer.log"
LOG_FORMAT = "%(asctime)s %(levelname)s %(threadName)s %(name)s: %(message)s"


def default_log_path() -> Path:
    return Path(user_log_dir(APP_NAME, appauthor=False)) / LOG_FILENAME


def resolve_log_level(value: str | None) -> int:
    """Map a level name such as ``"debug"`` to a logging level, default WARNING."""
    if not value:
        return logging.WARNING
    level = logging.getLevelName(value.strip().upper())
    return level if isinstance(level, int) else logging.WARNING


def setup_logging(log_path: Path | None = None, level: int | None = None) -> Path:
    """Attach a file handler to the package logger and return the log path."""
    path = log_path if log_path is not None else default_log_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    if level is None:
        level = resolve_log_level(os.environ.get(LOG_LEVEL_ENV_VAR))

    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger = logging.getLogger("lazyexplorer")
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = False
    return path


__all__ = ["LOG_LEVEL_ENV_VAR", "default_log_path", "resolve_log_level", "setup_logging"]
