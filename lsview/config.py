"""Persistent JSON config helpers.

Stores default listing flags and the log level.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

from .options import FLAG_FIELDS, ListingOptions

APP_NAME = "lsview"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
DEFAULT_LOG_LEVEL = "WARNING"


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


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem errors are ignored so an unwritable config never breaks a run.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError:
        pass


def load_default_options() -> ListingOptions:
    """Return default flags from config.

    Only explicit boolean values are accepted; any other type falls back to
    ``False``.
    """
    data = load_config()
    values = {}
    for field_name in FLAG_FIELDS.values():
        value = data.get(field_name)
        values[field_name] = value if isinstance(value, bool) else False
    return ListingOptions(**values)


def save_default_options(options: ListingOptions) -> None:
    """Persist default flags as booleans."""
    config = load_config()
    for field_name in FLAG_FIELDS.values():
        config[field_name] = bool(getattr(options, field_name))
    save_config(config)


def load_log_level() -> str:
    """Load a valid logging level name, defaulting to ``WARNING``."""
    value = load_config().get("log_level")
    if not isinstance(value, str):
        return DEFAULT_LOG_LEVEL
    normalized = value.strip().upper()
    if not isinstance(logging.getLevelName(normalized), int):
        return DEFAULT_LOG_LEVEL
    return normalized


def save_log_level(level: str) -> None:
    """Persist a logging level name, upper-cased; blank names are ignored."""
    stripped = str(level).strip().upper()
    if not stripped:
        return
    config = load_config()
    config["log_level"] = stripped
    save_config(config)
