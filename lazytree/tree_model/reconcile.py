"""Diff-based reconciliation of a container's children.

Refreshing a container re-fetches its listing and builds brand new nodes.
``diff_update`` merges that fresh list into the previously materialized one so
that entries whose ``url`` is unchanged keep their original instance, along with
any loaded subtree or UI state attached to it.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import TypeVar

logger = logging.getLogger(__name__)

NodeT = TypeVar("NodeT")


def diff_update(
    previous: Sequence[NodeT],
    fresh: Sequence[NodeT],
    absorb: Callable[[NodeT, NodeT], None] | None = None,
) -> list[NodeT]:
    """Return ``fresh`` order with matching ``previous`` instances substituted.

    Matching is by ``(url, type)``: a directory and a file sharing a name are
    distinct entries, and an entry whose kind changed gets its fresh node.
    A kept previous node is passed to ``absorb(previous_node, fresh_node)``
    first so it can pick up updated data. Previous nodes without a fresh
    counterpart are dropped. When ``fresh`` repeats a key, the first
    occurrence wins and later ones are dropped.
    """
    previous_by_key: dict[tuple[str, str], NodeT] = {}
    for node in previous:
        previous_by_key.setdefault((node.url, node.type), node)

    out: list[NodeT] = []
    seen: set[tuple[str, str]] = set()
    for node in fresh:
        key = (node.url, node.type)
        if key in seen:
            logger.debug("dropping duplicate %s %s from fresh listing", node.type, node.url)
            continue
        seen.add(key)

        existing = previous_by_key.get(key)
        if existing is None:
            out.append(node)
            continue
        if absorb is not None:
            absorb(existing, node)
        out.append(existing)
    return out


__all__ = ["diff_update"]
