"""Backend contracts and bundled backend implementations.

- protocols the tree consumes (archive listing, profile queries)
- descriptor records exchanged with backends
- a local-directory archive backend
- a JSON workspace loader providing a profile backend
"""

from __future__ import annotations

from .local import LocalArchiveBackend, scan_directory
from .protocols import ArchiveBackend, ArchiveHandle, Backends, ProfileBackend
from .types import ArchiveDescriptor, ArchiveMetadata, DirectoryListingEntry, Profile
from .workspace import Workspace, WorkspaceArchive, WorkspaceProfileBackend, load_workspace, parse_workspace

__all__ = [
    "ArchiveBackend",
    "ProfileBackend",
    "ArchiveHandle",
    "Backends",
    "ArchiveDescriptor",
    "ArchiveMetadata",
    "DirectoryListingEntry",
    "Profile",
    "LocalArchiveBackend",
    "scan_directory",
    "Workspace",
    "WorkspaceArchive",
    "WorkspaceProfileBackend",
    "load_workspace",
    "parse_workspace",
]
