"""Persistent JSON config helpers.

Stores the preferred sort column/direction and the last opened workspace.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

from .tree_model.types import SORT_ASC, SORT_COLUMNS, SORT_DIRECTIONS

APP_NAME = "lazytree"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Any filesystem/serialization error is ignored to keep runtime behavior
    non-fatal when config cannot be written.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except Exception:
        pass


def load_sort_preference() -> tuple[str | None, str]:
    """Return persisted ``(column, direction)``.

    Unknown columns fall back to ``None`` (default listing order) and unknown
    directions to ascending.
    """
    config = load_config()
    column = config.get("sort_column")
    direction = config.get("sort_direction")
    if column not in SORT_COLUMNS:
        column = None
    if direction not in SORT_DIRECTIONS:
        direction = SORT_ASC
    return column, direction


def save_sort_preference(column: str | None, direction: str) -> None:
    """Persist sort column/direction; ``None`` column clears the stored one."""
    if direction not in SORT_DIRECTIONS:
        return
    config = load_config()
    if column is None:
        config.pop("sort_column", None)
    elif column in SORT_COLUMNS:
        config["sort_column"] = column
    else:
        return
    config["sort_direction"] = direction
    save_config(config)


def load_workspace_path() -> Path | None:
    """Load the last opened workspace path, returning ``None`` when unset/invalid."""
    value = load_config().get("workspace")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return Path(stripped) if stripped else None


def save_workspace_path(path: Path) -> None:
    """Persist the workspace path as an absolute string."""
    config = load_config()
    config["workspace"] = str(Path(path).resolve())
    save_config(config)


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "load_config",
    "save_config",
    "load_sort_preference",
    "save_sort_preference",
    "load_workspace_path",
    "save_workspace_path",
]
