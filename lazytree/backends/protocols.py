"""Backend contracts consumed by the tree plus the archive handle wrapper.

Backends are injected into nodes explicitly; any object satisfying these
protocols (including test doubles) can drive a tree.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from .types import ArchiveDescriptor, ArchiveMetadata, DirectoryListingEntry, Profile


class ArchiveBackend(Protocol):
    """Lists directory entries and reads metadata of remote archives."""

    async def list_directory(self, archive_id: str, path: str) -> list[DirectoryListingEntry]: ...

    async def get_archive_metadata(self, archive_id: str) -> ArchiveMetadata: ...


class ProfileBackend(Protocol):
    """Read-only view of the current user, followed profiles and archive lists."""

    async def get_current_profile(self) -> Profile: ...

    async def get_profile(self, origin: str) -> Profile: ...

    async def list_owned_archives(self) -> list[ArchiveDescriptor]: ...

    async def list_published_archives(self, author: str) -> list[ArchiveDescriptor]: ...

    async def list_saved_archives(self, owned: bool) -> list[ArchiveDescriptor]: ...

    async def list_unsaved_archives(self) -> list[ArchiveDescriptor]: ...


@dataclass(frozen=True)
class Backends:
    """Backend pair handed to virtual folders."""

    archives: ArchiveBackend
    profiles: ProfileBackend


@dataclass(frozen=True)
class ArchiveHandle:
    """Open archive bound to one backend; shared by an archive and its folders."""

    backend: ArchiveBackend
    archive_id: str

    async def readdir(self, path: str) -> list[DirectoryListingEntry]:
        return await self.backend.list_directory(self.archive_id, path)

    async def get_info(self) -> ArchiveMetadata:
        return await self.backend.get_archive_metadata(self.archive_id)


__all__ = [
    "ArchiveBackend",
    "ProfileBackend",
    "Backends",
    "ArchiveHandle",
]
