"""Persistent JSON config helpers.

Stores default listing flags so ``lazyls`` can behave like ``ls -a`` or
``ls -l`` without passing the flag every time. Malformed or missing config
falls back to all flags off.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "lazyls"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH

FLAG_KEYS = ("show_hidden", "reverse_order", "long_format")


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
    """Persist config data as pretty-printed JSON, ignoring write failures."""
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError:
        pass


def load_default_flags() -> dict[str, bool]:
    """Return persisted default flags.

    Only explicit boolean values are accepted; anything else counts as
    ``False``.
    """
    config = load_config()
    flags: dict[str, bool] = {}
    for key in FLAG_KEYS:
        value = config.get(key)
        flags[key] = value if isinstance(value, bool) else False
    return flags


def save_default_flag(key: str, value: bool) -> None:
    if key not in FLAG_KEYS:
        raise KeyError(key)
    config = load_config()
    config[key] = bool(value)
    save_config(config)
