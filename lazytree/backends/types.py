"""Descriptor records exchanged with archive/profile backends."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DirectoryListingEntry:
    """One directory entry with stat metadata as reported by an archive backend."""

    name: str
    is_directory: bool
    size: int = 0
    mtime: float = 0.0


@dataclass(frozen=True)
class ArchiveDescriptor:
    """Backend record describing one archive."""

    url: str
    title: str = ""
    size: int | None = None
    mtime: float | None = None


@dataclass(frozen=True)
class ArchiveMetadata:
    """Archive-level metadata fetched directly from an archive."""

    title: str
    origin: str

    def to_descriptor(self) -> ArchiveDescriptor:
        return ArchiveDescriptor(url=self.origin, title=self.title)


@dataclass(frozen=True)
class Profile:
    """User profile with the origin urls it follows."""

    origin: str
    name: str = ""
    follow_urls: tuple[str, ...] = ()
    is_current_user: bool = False


__all__ = [
    "DirectoryListingEntry",
    "ArchiveDescriptor",
    "ArchiveMetadata",
    "Profile",
]
