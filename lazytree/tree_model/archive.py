"""Fetch policy for archive-backed containers (``Archive`` and ``Folder``)."""

from __future__ import annotations

from ..backends.protocols import ArchiveHandle
from . import types as kinds
from .nodes import Archive, File, Folder
from .sorting import order_nodes


def open_handle(container: Archive | Folder) -> ArchiveHandle:
    """Return the container's archive handle, opening it on first use."""
    if container.handle is None:
        assert container.type == kinds.TYPE_ARCHIVE
        container.handle = ArchiveHandle(backend=container.backend, archive_id=container.info.url)
    return container.handle


def child_path(parent_path: str, name: str) -> str:
    """Archive-relative path of ``name`` inside ``parent_path`` (root is ``""``)."""
    return f"{parent_path}/{name}"


async def read_archive_children(container: Archive | Folder) -> list[Folder | File]:
    """List ``container``'s directory and wrap entries as ``Folder``/``File`` nodes.

    The result is in default order: directories first, then by name.
    """
    handle = open_handle(container)
    entries = await handle.readdir(container.path)

    nodes: list[Folder | File] = []
    for entry in entries:
        path = child_path(container.path, entry.name)
        if entry.is_directory:
            nodes.append(Folder(container.info, handle, entry.name, path, entry, parent=container))
        else:
            nodes.append(File(container.info, handle, entry.name, path, entry, parent=container))
    return order_nodes(nodes)


__all__ = [
    "open_handle",
    "child_path",
    "read_archive_children",
]
