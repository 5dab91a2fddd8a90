"""Comparator and recursive sort engine for tree containers.

``column=None`` selects the default listing order (containers first, then by
name). Explicit columns compare one attribute, ``direction`` flips the sign
and ties fall back to ascending name order.
"""

from __future__ import annotations

import locale
from collections.abc import Iterable
from functools import cmp_to_key
from typing import TYPE_CHECKING

from . import types as kinds
from .types import (
    SORT_ASC,
    SORT_COLUMNS,
    SORT_DESC,
    SORT_DIRECTIONS,
    SORT_MTIME,
    SORT_NAME,
    SORT_SIZE,
    SORT_TYPE,
)

if TYPE_CHECKING:
    from .nodes import ContainerNode, Node


def _sign(value: float) -> int:
    return (value > 0) - (value < 0)


def compare_names(a: str, b: str) -> int:
    """Locale-aware name comparison, case-insensitive first, then exact."""
    result = locale.strcoll(a.casefold(), b.casefold())
    if result == 0:
        result = locale.strcoll(a, b)
    return _sign(result)


def _sort_value(node: Node, column: str) -> object:
    if column == SORT_SIZE:
        return getattr(node, "size", None) or 0
    if column == SORT_MTIME:
        return getattr(node, "mtime", None) or 0
    if column == SORT_TYPE:
        return node.type
    return node.name


def default_compare(a: Node, b: Node) -> int:
    """Containers before leaves, then by name."""
    if a.is_container and not b.is_container:
        return -1
    if not a.is_container and b.is_container:
        return 1
    return compare_names(a.name, b.name)


def sort_compare(a: Node, b: Node, column: str | None = None, direction: str = SORT_ASC) -> int:
    """Compare two sibling nodes under ``column``/``direction``."""
    if column is None:
        return default_compare(a, b)

    if column == SORT_NAME:
        result = compare_names(a.name, b.name)
    else:
        left = _sort_value(a, column)
        right = _sort_value(b, column)
        result = (left > right) - (left < right)
    if direction == SORT_DESC:
        result = -result
    if result == 0 and column != SORT_NAME:
        result = compare_names(a.name, b.name)
    return result


def validate_sort(column: str | None, direction: str) -> None:
    """Raise ``ValueError`` for unknown sort columns or directions."""
    if column is not None and column not in SORT_COLUMNS:
        raise ValueError(f"unknown sort column: {column!r}")
    if direction not in SORT_DIRECTIONS:
        raise ValueError(f"unknown sort direction: {direction!r}")


def order_nodes(nodes: Iterable[Node], column: str | None = None, direction: str = SORT_ASC) -> list[Node]:
    """Return ``nodes`` as a new list ordered by ``sort_compare``."""
    return sorted(nodes, key=cmp_to_key(lambda a, b: sort_compare(a, b, column, direction)))


def has_fixed_order(container: ContainerNode) -> bool:
    """Root and network folders keep insertion order regardless of sort requests."""
    match container.type:
        case kinds.TYPE_ROOT | kinds.TYPE_NETWORK:
            return True
        case _:
            return False


def sort_tree(container: ContainerNode, column: str | None = None, direction: str = SORT_ASC) -> None:
    """Recursively order ``container`` and every descendant container in place."""
    if has_fixed_order(container):
        return
    validate_sort(column, direction)
    for child in container.children:
        if child.is_container:
            sort_tree(child, column, direction)
    container.children.sort(key=cmp_to_key(lambda a, b: sort_compare(a, b, column, direction)))


__all__ = [
    "compare_names",
    "default_compare",
    "sort_compare",
    "validate_sort",
    "order_nodes",
    "has_fixed_order",
    "sort_tree",
]
