"""Type tags, sort keys and naming helpers shared by tree modules."""

from __future__ import annotations

TYPE_ARCHIVE = "archive"
TYPE_FOLDER = "folder"
TYPE_FILE = "file"
TYPE_ROOT = "root folder"
TYPE_USER = "user folder"
TYPE_NETWORK = "network folder"
TYPE_TRASH = "trash folder"

CONTAINER_TYPES = frozenset(
    {TYPE_ARCHIVE, TYPE_FOLDER, TYPE_ROOT, TYPE_USER, TYPE_NETWORK, TYPE_TRASH}
)
VIRTUAL_TYPES = frozenset({TYPE_ROOT, TYPE_USER, TYPE_NETWORK, TYPE_TRASH})

DEFAULT_NAME = "Untitled"
ANONYMOUS_NAME = "Anonymous"

SORT_NAME = "name"
SORT_SIZE = "size"
SORT_MTIME = "mtime"
SORT_TYPE = "type"
SORT_COLUMNS = (SORT_NAME, SORT_SIZE, SORT_MTIME, SORT_TYPE)

SORT_ASC = "asc"
SORT_DESC = "desc"
SORT_DIRECTIONS = (SORT_ASC, SORT_DESC)

ROOT_URL = "virtual://root"
NETWORK_URL = "virtual://network"
TRASH_URL = "virtual://trash"
USER_URL_PREFIX = "virtual://user-"


def display_name(raw: str | None, default: str = DEFAULT_NAME) -> str:
    """Return trimmed ``raw`` or ``default`` when it is empty/whitespace-only."""
    return (raw or "").strip() or default


__all__ = [
    "TYPE_ARCHIVE",
    "TYPE_FOLDER",
    "TYPE_FILE",
    "TYPE_ROOT",
    "TYPE_USER",
    "TYPE_NETWORK",
    "TYPE_TRASH",
    "CONTAINER_TYPES",
    "VIRTUAL_TYPES",
    "DEFAULT_NAME",
    "ANONYMOUS_NAME",
    "SORT_NAME",
    "SORT_SIZE",
    "SORT_MTIME",
    "SORT_TYPE",
    "SORT_COLUMNS",
    "SORT_ASC",
    "SORT_DESC",
    "SORT_DIRECTIONS",
    "ROOT_URL",
    "NETWORK_URL",
    "TRASH_URL",
    "USER_URL_PREFIX",
    "display_name",
]
