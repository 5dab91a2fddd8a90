"""Node variants of the archive tree.

Every node exposes ``name``, ``url``, ``type``, ``parent`` and
``is_container``. Containers additionally own ``children`` and can be
refreshed with ``read_data()`` and reordered with ``sort()``.

``parent`` is a weak back-reference: children never keep their container
alive, and nothing walks it during reconciliation.
"""

from __future__ import annotations

import weakref
from typing import TYPE_CHECKING

from ..backends.types import ArchiveDescriptor, DirectoryListingEntry, Profile
from . import types as kinds
from .sorting import sort_tree
from .types import (
    ANONYMOUS_NAME,
    NETWORK_URL,
    ROOT_URL,
    SORT_ASC,
    TRASH_URL,
    USER_URL_PREFIX,
    display_name,
)

if TYPE_CHECKING:
    from ..backends.protocols import ArchiveBackend, ArchiveHandle, Backends


class _TreeNode:
    """Attributes shared by every node variant."""

    type = ""
    is_container = False

    def __init__(self, parent: ContainerNode | None = None) -> None:
        self._parent_ref: weakref.ref[ContainerNode] | None = None
        self.attach(parent)

    @property
    def parent(self) -> ContainerNode | None:
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    def attach(self, parent: ContainerNode | None) -> None:
        """Point the back-reference at ``parent`` (or detach with ``None``)."""
        self._parent_ref = weakref.ref(parent) if parent is not None else None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}<{self.url!r}>"


class _ContainerNode(_TreeNode):
    """Children list, load state and the refresh/sort entry points."""

    is_container = True

    def __init__(self, parent: ContainerNode | None = None) -> None:
        super().__init__(parent)
        self.children: list[Node] = []
        self.loaded = False
        self.read_generation = 0

    @property
    def is_empty(self) -> bool:
        return len(self.children) == 0

    @property
    def is_loaded(self) -> bool:
        return self.loaded

    async def read_data(self) -> None:
        """Re-fetch this container's listing and reconcile it into ``children``."""
        from .refresh import read_data

        await read_data(self)

    def sort(self, column: str | None = None, direction: str = SORT_ASC) -> None:
        """Recursively order this subtree; see ``sorting.sort_tree``."""
        sort_tree(self, column, direction)


class Archive(_ContainerNode):
    """One whole archive; its root path is ``""``."""

    type = kinds.TYPE_ARCHIVE

    def __init__(
        self,
        info: ArchiveDescriptor,
        backend: ArchiveBackend,
        parent: ContainerNode | None = None,
        handle: ArchiveHandle | None = None,
    ) -> None:
        super().__init__(parent)
        self.info = info
        self.backend = backend
        self.handle = handle
        self.path = ""

    @property
    def url(self) -> str:
        return self.info.url

    @property
    def name(self) -> str:
        return display_name(self.info.title)

    @property
    def size(self) -> int | None:
        return self.info.size

    @property
    def mtime(self) -> float | None:
        return self.info.mtime


class Folder(_ContainerNode):
    """A directory inside an archive, sharing the archive's handle."""

    type = kinds.TYPE_FOLDER

    def __init__(
        self,
        info: ArchiveDescriptor,
        handle: ArchiveHandle,
        name: str,
        path: str,
        stat: DirectoryListingEntry,
        parent: ContainerNode | None = None,
    ) -> None:
        super().__init__(parent)
        self.info = info
        self.handle = handle
        self.raw_name = name
        self.path = path
        self.stat = stat

    @property
    def url(self) -> str:
        return self.info.url + self.path

    @property
    def name(self) -> str:
        return display_name(self.raw_name)

    @property
    def size(self) -> int:
        return self.stat.size

    @property
    def mtime(self) -> float:
        return self.stat.mtime


class File(_TreeNode):
    """A file inside an archive; ``size``/``mtime`` come verbatim from the listing."""

    type = kinds.TYPE_FILE

    def __init__(
        self,
        info: ArchiveDescriptor,
        handle: ArchiveHandle,
        name: str,
        path: str,
        stat: DirectoryListingEntry,
        parent: ContainerNode | None = None,
    ) -> None:
        super().__init__(parent)
        self.info = info
        self.handle = handle
        self.raw_name = name
        self.path = path
        self.stat = stat

    @property
    def url(self) -> str:
        return self.info.url + self.path

    @property
    def name(self) -> str:
        return display_name(self.raw_name)

    @property
    def size(self) -> int:
        return self.stat.size

    @property
    def mtime(self) -> float:
        return self.stat.mtime


class Root(_ContainerNode):
    """Tree root: current user, network, followed users, trash."""

    type = kinds.TYPE_ROOT
    url = ROOT_URL
    name = "Root"

    def __init__(self, backends: Backends, parent: ContainerNode | None = None) -> None:
        super().__init__(parent)
        self.backends = backends


class UserFolder(_ContainerNode):
    """Archives of one profile (the current user or a followed one)."""

    type = kinds.TYPE_USER

    def __init__(self, profile: Profile, backends: Backends, parent: ContainerNode | None = None) -> None:
        super().__init__(parent)
        self.profile = profile
        self.backends = backends

    @property
    def url(self) -> str:
        return USER_URL_PREFIX + self.profile.origin

    @property
    def name(self) -> str:
        return display_name(self.profile.name, ANONYMOUS_NAME)


class NetworkFolder(_ContainerNode):
    """Archives the user saved but does not own."""

    type = kinds.TYPE_NETWORK
    url = NETWORK_URL
    name = "Network"

    def __init__(self, backends: Backends, parent: ContainerNode | None = None) -> None:
        super().__init__(parent)
        self.backends = backends

    def add_archive(self, info: ArchiveDescriptor) -> Archive | None:
        """Append an archive visited outside the refresh cycle.

        Idempotent by url: returns the new node, or ``None`` when a child with
        the same url already exists.
        """
        if any(child.url == info.url for child in self.children):
            return None
        archive = Archive(info, self.backends.archives, parent=self)
        self.children = [*self.children, archive]
        return archive


class TrashFolder(_ContainerNode):
    """Archives the user unsaved."""

    type = kinds.TYPE_TRASH
    url = TRASH_URL
    name = "Trash"

    def __init__(self, backends: Backends, parent: ContainerNode | None = None) -> None:
        super().__init__(parent)
        self.backends = backends


Node = Archive | Folder | File | Root | UserFolder | NetworkFolder | TrashFolder
ContainerNode = Archive | Folder | Root | UserFolder | NetworkFolder | TrashFolder
VirtualFolder = Root | UserFolder | NetworkFolder | TrashFolder


def copy_node_data(target: Node, source: Node) -> None:
    """Move updated data from a freshly built ``source`` into kept ``target``.

    Both nodes share the same url. Loaded children and attached state of
    ``target`` are left alone.
    """
    match target.type:
        case kinds.TYPE_ARCHIVE:
            target.info = source.info
            if source.backend is not target.backend:
                target.backend = source.backend
                target.handle = source.handle
        case kinds.TYPE_FOLDER | kinds.TYPE_FILE:
            target.info = source.info
            target.raw_name = source.raw_name
            target.path = source.path
            target.stat = source.stat
            target.handle = source.handle
        case kinds.TYPE_USER:
            target.profile = source.profile
        case _:
            pass


__all__ = [
    "Archive",
    "Folder",
    "File",
    "Root",
    "UserFolder",
    "NetworkFolder",
    "TrashFolder",
    "Node",
    "ContainerNode",
    "VirtualFolder",
    "copy_node_data",
]
