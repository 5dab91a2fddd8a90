"""Archive backend serving archives from local directories.

Each archive url maps to a directory on disk. Listings carry stat metadata
(size, mtime, directory flag) and are produced off the event loop.
"""

from __future__ import annotations

import asyncio
import os
from collections.abc import Mapping
from pathlib import Path

from ..errors import ArchiveNotFoundError, ArchiveUnavailableError
from .types import ArchiveMetadata, DirectoryListingEntry


def scan_directory(directory: Path, show_hidden: bool = True) -> list[DirectoryListingEntry]:
    """List ``directory`` with stat metadata, in scan order.

    Raises ``OSError`` when the directory itself cannot be scanned. Entries
    whose stat fails are still listed with zero size/mtime.
    """
    entries: list[DirectoryListingEntry] = []
    with os.scandir(directory) as scan:
        for child in scan:
            name = child.name
            if not show_hidden and name.startswith("."):
                continue

            try:
                is_dir = child.is_dir(follow_symlinks=False)
            except OSError:
                is_dir = False

            size = 0
            mtime = 0.0
            try:
                stat = child.stat(follow_symlinks=False)
                mtime = float(stat.st_mtime)
                if not is_dir:
                    size = int(stat.st_size)
            except OSError:
                pass

            entries.append(DirectoryListingEntry(name=name, is_directory=is_dir, size=size, mtime=mtime))
    return entries


class LocalArchiveBackend:
    """``ArchiveBackend`` over a mapping of archive url -> root directory."""

    def __init__(
        self,
        roots: Mapping[str, Path],
        titles: Mapping[str, str] | None = None,
        show_hidden: bool = True,
    ) -> None:
        self._roots = {url: Path(path) for url, path in roots.items()}
        self._titles = dict(titles or {})
        self.show_hidden = show_hidden

    def _root_for(self, archive_id: str) -> Path:
        try:
            return self._roots[archive_id]
        except KeyError:
            raise ArchiveNotFoundError(f"unknown archive: {archive_id}") from None

    def resolve_path(self, archive_id: str, path: str) -> Path:
        """Map an archive-relative ``path`` onto disk, refusing escapes from the root."""
        root = self._root_for(archive_id).resolve()
        target = root.joinpath(*[part for part in path.split("/") if part]).resolve()
        if not target.is_relative_to(root):
            raise ArchiveUnavailableError(f"path escapes archive {archive_id}: {path!r}")
        return target

    async def list_directory(self, archive_id: str, path: str) -> list[DirectoryListingEntry]:
        directory = self.resolve_path(archive_id, path)
        try:
            return await asyncio.to_thread(scan_directory, directory, self.show_hidden)
        except OSError as exc:
            raise ArchiveUnavailableError(f"cannot list {archive_id}{path}: {exc}") from exc

    async def get_archive_metadata(self, archive_id: str) -> ArchiveMetadata:
        root = self._root_for(archive_id)
        title = self._titles.get(archive_id, root.name)
        return ArchiveMetadata(title=title, origin=archive_id)


__all__ = [
    "scan_directory",
    "LocalArchiveBackend",
]
