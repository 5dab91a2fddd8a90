"""Fetch policies for virtual folders, selected by type tag.

Each policy returns the freshly constructed children of one virtual folder;
``refresh.read_data`` then reconciles them against the previous children.
"""

from __future__ import annotations

import asyncio
import dataclasses

from ..backends.types import ArchiveDescriptor
from . import types as kinds
from .nodes import Archive, NetworkFolder, Root, TrashFolder, UserFolder, VirtualFolder


async def _read_root_children(root: Root) -> list[UserFolder | NetworkFolder | TrashFolder]:
    profiles = root.backends.profiles
    profile = await profiles.get_current_profile()
    profile = dataclasses.replace(profile, is_current_user=True)

    # following yourself must not add a second entry for the current user
    follow_urls = [url for url in profile.follow_urls if url != profile.origin]

    # gather keeps request order even when fetches complete out of order
    followed = await asyncio.gather(*(profiles.get_profile(url) for url in follow_urls))
    followed_folders = [UserFolder(p, root.backends, parent=root) for p in followed]

    return [
        UserFolder(profile, root.backends, parent=root),
        NetworkFolder(root.backends, parent=root),
        *followed_folders,
        TrashFolder(root.backends, parent=root),
    ]


async def _read_user_children(folder: UserFolder) -> list[Archive]:
    profiles = folder.backends.profiles
    profile = folder.profile
    archives: list[ArchiveDescriptor]
    if profile.is_current_user:
        archives = list(await profiles.list_owned_archives())
    else:
        published = await profiles.list_published_archives(profile.origin)
        archives = [info for info in published if info.url != profile.origin]
        # the profile's own archive always comes first, read from the source
        metadata = await folder.backends.archives.get_archive_metadata(profile.origin)
        archives.insert(0, metadata.to_descriptor())
    return _wrap_archives(folder, archives)


async def _read_network_children(folder: NetworkFolder) -> list[Archive]:
    archives = await folder.backends.profiles.list_saved_archives(owned=False)
    return _wrap_archives(folder, archives)


async def _read_trash_children(folder: TrashFolder) -> list[Archive]:
    archives = await folder.backends.profiles.list_unsaved_archives()
    return _wrap_archives(folder, archives)


def _wrap_archives(folder: VirtualFolder, archives: list[ArchiveDescriptor]) -> list[Archive]:
    return [Archive(info, folder.backends.archives, parent=folder) for info in archives]


async def read_virtual_children(folder: VirtualFolder) -> list:
    """Build fresh children for ``folder`` according to its type tag."""
    match folder.type:
        case kinds.TYPE_ROOT:
            return await _read_root_children(folder)
        case kinds.TYPE_USER:
            return await _read_user_children(folder)
        case kinds.TYPE_NETWORK:
            return await _read_network_children(folder)
        case kinds.TYPE_TRASH:
            return await _read_trash_children(folder)
        case _:
            raise TypeError(f"not a virtual folder: {folder!r}")


__all__ = ["read_virtual_children"]
