"""Persistent JSON config helpers.

Reads the UI theme name and the debug preference. Malformed or missing
config reads as empty.
"""

from __future__ import annotations

import json
import os
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "lazyexplorer"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
DEBUG_ENV_VAR = "LAZYEXPLORER_DEBUG"


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def load_theme_name() -> str | None:
    """Load persisted UI theme name, returning ``None`` when unset/invalid."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def _env_flag(value: str | None) -> bool | None:
    if value is None:
        return None
    return value.strip().lower() in {"1", "true", "yes", "on"}


def load_debug() -> bool:
    """Debug diagnostics flag; the environment variable overrides the file."""
    from_env = _env_flag(os.environ.get(DEBUG_ENV_VAR))
    if from_env is not None:
        return from_env
    value = load_config().get("debug")
    return value if isinstance(value, bool) else False


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "DEBUG_ENV_VAR",
    "load_config",
    "load_theme_name",
    "load_debug",
]
