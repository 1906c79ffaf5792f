"""Persistent JSON config helpers.

Stores the default pad width, fill character, and highlight style used by
the command-line filter. All access is defensive: malformed or missing
config falls back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

from .ansi import char_display_width

APP_NAME = "ansipad"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


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

    Filesystem errors are ignored so an unwritable config never breaks output.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError:
        pass


def _update(key: str, value: object) -> None:
    config = load_config()
    config[key] = value
    save_config(config)


def load_default_width() -> int | None:
    """Return the persisted pad width, or ``None`` when unset/invalid.

    Booleans and negative numbers are rejected.
    """
    value = load_config().get("width")
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        return None
    return value


def save_default_width(width: int) -> None:
    if width < 0:
        return
    _update("width", int(width))


def is_valid_fill_char(value: object) -> bool:
    return isinstance(value, str) and len(value) == 1 and char_display_width(value) == 1


def load_fill_char() -> str | None:
    value = load_config().get("fill")
    return value if is_valid_fill_char(value) else None


def save_fill_char(fill: str) -> None:
    if not is_valid_fill_char(fill):
        return
    _update("fill", fill)


def load_style_name() -> str | None:
    """Load persisted Pygments style name, returning ``None`` when unset/invalid."""
    value = load_config().get("style")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def save_style_name(style: str) -> None:
    stripped = str(style).strip()
    if not stripped:
        return
    _update("style", stripped)
