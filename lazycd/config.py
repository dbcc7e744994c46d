"""Persistent JSON config helpers.

Stores default load depth, theme, symlink policy, and hand-off file name.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "lazycd"
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


def load_depth() -> int | None:
    """Return the configured load depth when it is a positive integer."""
    value = load_config().get("load_depth")
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value if value > 0 else None


def load_theme_name() -> str | None:
    """Load persisted UI theme name, returning ``None`` when unset/invalid."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def load_follow_symlinks() -> bool:
    """Return the symlink policy; only an explicit boolean ``true`` enables it."""
    value = load_config().get("follow_symlinks")
    return value if isinstance(value, bool) else False


def load_handoff_filename() -> str | None:
    """Return a configured hand-off file name if it is a bare file name."""
    value = load_config().get("handoff_filename")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    if not stripped or stripped in {".", ".."} or "/" in stripped or "\\" in stripped:
        return None
    return stripped
