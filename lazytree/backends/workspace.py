"""JSON workspace files describing profiles and locally mirrored archives.

A workspace file looks like::

    {
      "current_profile": "dat://me",
      "profiles": {
        "dat://me": {"name": "Me", "follows": ["dat://alice"]},
        "dat://alice": {"name": "Alice"}
      },
      "archives": [
        {"url": "dat://me", "title": "Me", "path": "me",
         "owner": "dat://me", "saved": true, "published": true}
      ]
    }

Relative archive paths resolve against the directory holding the file.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from ..errors import ProfileNotFoundError, WorkspaceError
from .local import LocalArchiveBackend
from .protocols import Backends
from .types import ArchiveDescriptor, Profile


@dataclass(frozen=True)
class WorkspaceArchive:
    """One archive record from a workspace file."""

    descriptor: ArchiveDescriptor
    path: Path
    owner: str | None = None
    saved: bool = True
    published: bool = False


class WorkspaceProfileBackend:
    """``ProfileBackend`` answering from parsed workspace records."""

    def __init__(self, current_origin: str, profiles: dict[str, Profile], archives: list[WorkspaceArchive]) -> None:
        self.current_origin = current_origin
        self._profiles = dict(profiles)
        self._archives = list(archives)

    async def get_current_profile(self) -> Profile:
        return self._profiles.get(self.current_origin, Profile(origin=self.current_origin))

    async def get_profile(self, origin: str) -> Profile:
        try:
            return self._profiles[origin]
        except KeyError:
            raise ProfileNotFoundError(f"unknown profile: {origin}") from None

    async def list_owned_archives(self) -> list[ArchiveDescriptor]:
        return [a.descriptor for a in self._archives if a.saved and a.owner == self.current_origin]

    async def list_published_archives(self, author: str) -> list[ArchiveDescriptor]:
        return [a.descriptor for a in self._archives if a.published and a.owner == author]

    async def list_saved_archives(self, owned: bool) -> list[ArchiveDescriptor]:
        return [
            a.descriptor
            for a in self._archives
            if a.saved and (a.owner == self.current_origin) == owned
        ]

    async def list_unsaved_archives(self) -> list[ArchiveDescriptor]:
        return [a.descriptor for a in self._archives if not a.saved]


@dataclass(frozen=True)
class Workspace:
    """Parsed workspace plus the backends built from it."""

    path: Path
    archives: LocalArchiveBackend
    profiles: WorkspaceProfileBackend

    @property
    def backends(self) -> Backends:
        return Backends(archives=self.archives, profiles=self.profiles)


def _require_str(value: object, what: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise WorkspaceError(f"{what} must be a non-empty string")
    return value


def _optional_number(value: object, what: str) -> float | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise WorkspaceError(f"{what} must be a number")
    return value


def _optional_bool(value: object, default: bool, what: str) -> bool:
    if value is None:
        return default
    if not isinstance(value, bool):
        raise WorkspaceError(f"{what} must be true or false")
    return value


def _parse_profiles(raw: object) -> dict[str, Profile]:
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise WorkspaceError("'profiles' must be an object")

    profiles: dict[str, Profile] = {}
    for origin, raw_profile in raw.items():
        origin = _require_str(origin, "profile origin")
        if not isinstance(raw_profile, dict):
            raise WorkspaceError(f"profile {origin} must be an object")
        name = raw_profile.get("name", "")
        if not isinstance(name, str):
            raise WorkspaceError(f"profile {origin}: 'name' must be a string")
        follows = raw_profile.get("follows", [])
        if not isinstance(follows, list):
            raise WorkspaceError(f"profile {origin}: 'follows' must be a list")
        follow_urls = tuple(_require_str(url, f"profile {origin} follow url") for url in follows)
        profiles[origin] = Profile(origin=origin, name=name, follow_urls=follow_urls)
    return profiles


def _parse_archive(raw: object, base_dir: Path) -> WorkspaceArchive:
    if not isinstance(raw, dict):
        raise WorkspaceError("archive entries must be objects")
    url = _require_str(raw.get("url"), "archive 'url'")
    title = raw.get("title", "")
    if not isinstance(title, str):
        raise WorkspaceError(f"archive {url}: 'title' must be a string")
    raw_path = _require_str(raw.get("path"), f"archive {url}: 'path'")
    owner = raw.get("owner")
    if owner is not None:
        owner = _require_str(owner, f"archive {url}: 'owner'")

    size = _optional_number(raw.get("size"), f"archive {url}: 'size'")
    path = Path(raw_path).expanduser()
    if not path.is_absolute():
        path = base_dir / path
    return WorkspaceArchive(
        descriptor=ArchiveDescriptor(
            url=url,
            title=title,
            size=int(size) if size is not None else None,
            mtime=_optional_number(raw.get("mtime"), f"archive {url}: 'mtime'"),
        ),
        path=path,
        owner=owner,
        saved=_optional_bool(raw.get("saved"), True, f"archive {url}: 'saved'"),
        published=_optional_bool(raw.get("published"), False, f"archive {url}: 'published'"),
    )


def parse_workspace(data: object, base_dir: Path, path: Path | None = None) -> Workspace:
    """Build a ``Workspace`` from decoded JSON ``data``."""
    if not isinstance(data, dict):
        raise WorkspaceError("workspace must be a JSON object")
    current = _require_str(data.get("current_profile"), "'current_profile'")
    profiles = _parse_profiles(data.get("profiles"))

    raw_archives = data.get("archives", [])
    if not isinstance(raw_archives, list):
        raise WorkspaceError("'archives' must be a list")
    archives = [_parse_archive(raw, base_dir) for raw in raw_archives]

    archive_backend = LocalArchiveBackend(
        roots={a.descriptor.url: a.path for a in archives},
        titles={a.descriptor.url: a.descriptor.title for a in archives if a.descriptor.title},
    )
    return Workspace(
        path=path if path is not None else base_dir,
        archives=archive_backend,
        profiles=WorkspaceProfileBackend(current, profiles, archives),
    )


def load_workspace(path: Path) -> Workspace:
    """Read and parse the workspace file at ``path``."""
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except OSError as exc:
        raise WorkspaceError(f"cannot read workspace {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise WorkspaceError(f"invalid JSON in workspace {path}: {exc}") from exc
    resolved = Path(path).resolve()
    return parse_workspace(data, resolved.parent, path=resolved)


__all__ = [
    "WorkspaceArchive",
    "WorkspaceProfileBackend",
    "Workspace",
    "parse_workspace",
    "load_workspace",
]
