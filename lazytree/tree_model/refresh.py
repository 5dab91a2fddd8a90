"""Container refresh: fetch, reconcile and swap children.

``read_data`` is the single integration point for every container type. The
fetch policy is picked by type tag; the reconciled list replaces
``children`` in one assignment, so readers see either the old or the new
list, never a partial one.

Overlapping refreshes of one container follow latest-request-wins: each call
takes a new read generation, and a call whose generation was superseded while
it awaited the backend drops its result.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from . import types as kinds
from .archive import read_archive_children
from .nodes import ContainerNode, Node, copy_node_data
from .reconcile import diff_update
from .virtual import read_virtual_children

logger = logging.getLogger(__name__)


async def read_children(container: ContainerNode) -> list[Node]:
    """Build a fresh, unreconciled child list for ``container``."""
    match container.type:
        case kinds.TYPE_ARCHIVE | kinds.TYPE_FOLDER:
            return await read_archive_children(container)
        case kinds.TYPE_ROOT | kinds.TYPE_USER | kinds.TYPE_NETWORK | kinds.TYPE_TRASH:
            return await read_virtual_children(container)
        case _:
            raise TypeError(f"not a container: {container!r}")


async def read_data(container: ContainerNode) -> None:
    """Refresh ``container.children`` from its backing source.

    Backend errors propagate and leave ``children`` untouched.
    """
    container.read_generation += 1
    generation = container.read_generation
    logger.debug("refreshing %s (generation %d)", container.url, generation)

    try:
        fresh = await read_children(container)
    except Exception:
        logger.debug("refresh of %s failed; keeping previous children", container.url, exc_info=True)
        raise

    if generation != container.read_generation:
        logger.debug("discarding stale refresh of %s (generation %d)", container.url, generation)
        return

    container.children = diff_update(container.children, fresh, absorb=copy_node_data)
    container.loaded = True
    logger.debug("refreshed %s: %d children", container.url, len(container.children))


async def read_tree(container: ContainerNode, depth: int = 1) -> None:
    """Refresh ``container`` and its descendant containers ``depth`` levels deep.

    ``depth=1`` refreshes only ``container`` itself.
    """
    if depth <= 0:
        return
    await read_data(container)
    for child in list(container.children):
        if child.is_container:
            await read_tree(child, depth - 1)


def walk(node: Node, depth: int = 0) -> Iterator[tuple[Node, int]]:
    """Yield ``(node, depth)`` for ``node`` and its materialized descendants in pre-order."""
    yield node, depth
    if not node.is_container:
        return
    for child in node.children:
        yield from walk(child, depth + 1)


__all__ = [
    "read_children",
    "read_data",
    "read_tree",
    "walk",
]
