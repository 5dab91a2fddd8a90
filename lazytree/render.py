"""Outline formatting for a materialized tree.

Only already-loaded nodes are rendered; nothing here fetches data.
"""

from __future__ import annotations

from dataclasses import dataclass

from .tree_model import Node, walk
from .tree_model.types import VIRTUAL_TYPES

TREE_SIZE_LABEL_MIN_BYTES = 10 * 1024


@dataclass(frozen=True)
class TreeTheme:
    """Semantic ANSI palette used by the outline renderer."""

    reset: str
    marker: str
    virtual: str
    directory: str
    file: str
    size: str


DEFAULT_THEME = TreeTheme(
    reset="\033[0m",
    marker="\033[38;5;44m",
    virtual="\033[1;38;5;81m",
    directory="\033[1;34m",
    file="\033[38;5;252m",
    size="\033[38;5;109m",
)

PLAIN_THEME = TreeTheme(reset="", marker="", virtual="", directory="", file="", size="")


def format_size(size: int) -> str:
    """Human-readable byte count (``B``/``KB``/``MB``/``GB``)."""
    value = float(size)
    for unit in ("B", "KB", "MB"):
        if value < 1024:
            return f"{int(value)} {unit}" if unit == "B" else f"{value:.1f} {unit}"
        value /= 1024
    return f"{value:.1f} GB"


def format_node(node: Node, depth: int, theme: TreeTheme = DEFAULT_THEME, show_size_labels: bool = True) -> str:
    """Render one node row as display text."""
    reset = theme.reset
    if node.is_container:
        indent = "  " * depth
        marker = "▾ " if node.is_loaded else "▸ "
        color = theme.virtual if node.type in VIRTUAL_TYPES else theme.directory
        return f"{indent}{theme.marker}{marker}{reset}{color}{node.name}/{reset}"

    # Align file names under the parent container's marker column.
    indent = "  " * max(0, depth - 1)
    size_label = ""
    if show_size_labels and node.size >= TREE_SIZE_LABEL_MIN_BYTES:
        size_label = f"{theme.size} [{format_size(node.size)}]{reset}"
    return f"{indent}  {theme.file}{node.name}{reset}{size_label}"


def render_tree(root: Node, theme: TreeTheme = DEFAULT_THEME, show_size_labels: bool = True) -> str:
    """Render ``root`` and its loaded descendants, one row per line."""
    rows = [format_node(node, depth, theme, show_size_labels) for node, depth in walk(root)]
    return "\n".join(rows) + "\n"


__all__ = [
    "TREE_SIZE_LABEL_MIN_BYTES",
    "TreeTheme",
    "DEFAULT_THEME",
    "PLAIN_THEME",
    "format_size",
    "format_node",
    "render_tree",
]
