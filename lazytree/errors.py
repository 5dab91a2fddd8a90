"""Exception taxonomy shared by tree and backend modules."""

from __future__ import annotations


class LazyTreeError(Exception):
    """Base class for all lazytree errors."""


class BackendError(LazyTreeError):
    """A backend fetch failed; the refreshing container keeps its children."""


class ArchiveNotFoundError(BackendError):
    ...


class ArchiveUnavailableError(BackendError):
    ...


class ProfileNotFoundError(BackendError):
    ...


class WorkspaceError(LazyTreeError):
    """Workspace file is missing or malformed."""


__all__ = [
    "LazyTreeError",
    "BackendError",
    "ArchiveNotFoundError",
    "ArchiveUnavailableError",
    "ProfileNotFoundError",
    "WorkspaceError",
]
