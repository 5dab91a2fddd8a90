"""Tests for archive-backed containers: listing, ordering and refresh identity."""

from __future__ import annotations

import gc
import unittest

from lazytree.backends import ArchiveDescriptor, ArchiveMetadata, DirectoryListingEntry
from lazytree.errors import ArchiveUnavailableError
from lazytree.tree_model import Archive, File, Folder

URL = "dat://site"


def _dir(name: str, mtime: float = 0.0) -> DirectoryListingEntry:
    return DirectoryListingEntry(name=name, is_directory=True, size=0, mtime=mtime)


def _file(name: str, size: int = 0, mtime: float = 0.0) -> DirectoryListingEntry:
    return DirectoryListingEntry(name=name, is_directory=False, size=size, mtime=mtime)


class FakeArchiveBackend:
    """In-memory listings keyed by ``(archive_id, path)``."""

    def __init__(self, listings: dict[tuple[str, str], list[DirectoryListingEntry]]) -> None:
        self.listings = listings
        self.calls: list[tuple[str, str]] = []
        self.fail = False

    async def list_directory(self, archive_id: str, path: str) -> list[DirectoryListingEntry]:
        self.calls.append((archive_id, path))
        if self.fail:
            raise ArchiveUnavailableError(f"{archive_id} offline")
        return list(self.listings.get((archive_id, path), []))

    async def get_archive_metadata(self, archive_id: str) -> ArchiveMetadata:
        return ArchiveMetadata(title="Site", origin=archive_id)


def _archive(backend: FakeArchiveBackend, title: str = "Site") -> Archive:
    return Archive(ArchiveDescriptor(url=URL, title=title), backend)


class ArchiveReadDataTests(unittest.IsolatedAsyncioTestCase):
    async def test_default_order_lists_directories_first_then_names(self) -> None:
        backend = FakeArchiveBackend({(URL, ""): [_file("b"), _dir("a"), _file("a")]})
        archive = _archive(backend)

        await archive.read_data()

        self.assertEqual(
            [(child.type, child.name) for child in archive.children],
            [("folder", "a"), ("file", "a"), ("file", "b")],
        )

    async def test_children_urls_extend_archive_origin_with_path(self) -> None:
        backend = FakeArchiveBackend(
            {
                (URL, ""): [_dir("docs")],
                (URL, "/docs"): [_file("guide.md", size=12, mtime=99.0)],
            }
        )
        archive = _archive(backend)

        await archive.read_data()
        docs = archive.children[0]
        await docs.read_data()
        guide = docs.children[0]

        self.assertIsInstance(docs, Folder)
        self.assertEqual(docs.url, "dat://site/docs")
        self.assertIsInstance(guide, File)
        self.assertEqual(guide.url, "dat://site/docs/guide.md")
        self.assertEqual((guide.size, guide.mtime), (12, 99.0))
        self.assertEqual(backend.calls, [(URL, ""), (URL, "/docs")])

    async def test_handle_is_opened_lazily_and_shared_with_folders(self) -> None:
        backend = FakeArchiveBackend({(URL, ""): [_dir("docs")]})
        archive = _archive(backend)
        self.assertIsNone(archive.handle)

        await archive.read_data()
        handle = archive.handle
        await archive.read_data()

        self.assertIsNotNone(handle)
        self.assertIs(archive.handle, handle)
        self.assertIs(archive.children[0].handle, handle)

    async def test_refresh_keeps_instances_for_unchanged_urls(self) -> None:
        backend = FakeArchiveBackend({(URL, ""): [_dir("docs"), _file("a.txt")]})
        archive = _archive(backend)
        await archive.read_data()
        docs_before, file_before = archive.children

        await archive.read_data()

        self.assertIs(archive.children[0], docs_before)
        self.assertIs(archive.children[1], file_before)

    async def test_refresh_keeps_loaded_subtree_of_unchanged_folder(self) -> None:
        backend = FakeArchiveBackend(
            {
                (URL, ""): [_dir("docs")],
                (URL, "/docs"): [_file("guide.md")],
            }
        )
        archive = _archive(backend)
        await archive.read_data()
        docs = archive.children[0]
        await docs.read_data()
        guide = docs.children[0]

        await archive.read_data()

        self.assertIs(archive.children[0], docs)
        self.assertTrue(docs.is_loaded)
        self.assertIs(docs.children[0], guide)

    async def test_refresh_drops_removed_entries(self) -> None:
        backend = FakeArchiveBackend({(URL, ""): [_file("a.txt"), _file("b.txt")]})
        archive = _archive(backend)
        await archive.read_data()

        backend.listings[(URL, "")] = [_file("b.txt")]
        await archive.read_data()

        self.assertEqual([child.name for child in archive.children], ["b.txt"])

    async def test_refresh_absorbs_updated_stat_into_kept_file(self) -> None:
        backend = FakeArchiveBackend({(URL, ""): [_file("a.txt", size=1, mtime=1.0)]})
        archive = _archive(backend)
        await archive.read_data()
        kept = archive.children[0]

        backend.listings[(URL, "")] = [_file("a.txt", size=7, mtime=2.0)]
        await archive.read_data()

        self.assertIs(archive.children[0], kept)
        self.assertEqual((kept.size, kept.mtime), (7, 2.0))

    async def test_refresh_replaces_file_that_became_directory(self) -> None:
        backend = FakeArchiveBackend({(URL, ""): [_file("notes", size=5)]})
        archive = _archive(backend)
        await archive.read_data()
        old = archive.children[0]

        backend.listings[(URL, "")] = [_dir("notes")]
        backend.listings[(URL, "/notes")] = [_file("today.md")]
        await archive.read_data()
        notes = archive.children[0]
        await notes.read_data()

        self.assertIsNot(notes, old)
        self.assertIsInstance(notes, Folder)
        self.assertTrue(notes.is_container)
        self.assertEqual([child.name for child in notes.children], ["today.md"])

    async def test_failed_refresh_leaves_previous_children(self) -> None:
        backend = FakeArchiveBackend({(URL, ""): [_file("a.txt")]})
        archive = _archive(backend)
        await archive.read_data()
        before = list(archive.children)

        backend.fail = True
        with self.assertRaises(ArchiveUnavailableError):
            await archive.read_data()

        self.assertEqual(archive.children, before)
        self.assertIs(archive.children[0], before[0])

    async def test_failed_first_refresh_leaves_container_unloaded(self) -> None:
        backend = FakeArchiveBackend({})
        backend.fail = True
        archive = _archive(backend)

        with self.assertRaises(ArchiveUnavailableError):
            await archive.read_data()

        self.assertFalse(archive.is_loaded)
        self.assertTrue(archive.is_empty)

    async def test_children_point_back_to_parent(self) -> None:
        backend = FakeArchiveBackend({(URL, ""): [_file("a.txt")]})
        archive = _archive(backend)
        await archive.read_data()

        self.assertIs(archive.children[0].parent, archive)
        self.assertIsNone(archive.parent)


class ArchiveNodeAttributeTests(unittest.TestCase):
    def test_blank_names_fall_back_to_untitled(self) -> None:
        backend = FakeArchiveBackend({})
        info = ArchiveDescriptor(url=URL, title="   ")
        self.assertEqual(Archive(info, backend).name, "Untitled")
        self.assertEqual(Archive(ArchiveDescriptor(url=URL, title=""), backend).name, "Untitled")
        self.assertEqual(Folder(info, None, "", "/x", _dir("")).name, "Untitled")
        self.assertEqual(File(info, None, "  ", "/y", _file("  ")).name, "Untitled")

    def test_names_are_trimmed(self) -> None:
        archive = Archive(ArchiveDescriptor(url=URL, title="  My Site "), FakeArchiveBackend({}))
        self.assertEqual(archive.name, "My Site")

    def test_container_flags(self) -> None:
        archive = _archive(FakeArchiveBackend({}))
        self.assertTrue(archive.is_container)
        self.assertTrue(archive.is_empty)
        self.assertFalse(archive.is_loaded)
        self.assertFalse(File(archive.info, None, "a", "/a", _file("a")).is_container)

    def test_parent_reference_is_weak(self) -> None:
        archive = _archive(FakeArchiveBackend({}))
        child = File(archive.info, None, "a", "/a", _file("a"), parent=archive)
        self.assertIs(child.parent, archive)

        del archive
        gc.collect()

        self.assertIsNone(child.parent)


if __name__ == "__main__":
    unittest.main()
