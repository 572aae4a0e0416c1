"""Tests for bounded, non-blocking ingestion into the candidate index."""

from __future__ import annotations

import unittest
from pathlib import Path
from queue import Queue

from lazylauncher.desktop_entry import DesktopEntry, search_key
from lazylauncher.discovery import CLOSED, DiscoveredEntry
from lazylauncher.index import DEFAULT_BATCH_SIZE, CandidateIndex


def _discovered(name: str, comment: str | None = None, path: str | None = None, exec_: str | None = None) -> DiscoveredEntry:
    entry = DesktopEntry(name=name, comment=comment, exec=exec_, path=Path(path) if path else None)
    return DiscoveredEntry(key=search_key(entry), entry=entry)


class CandidateIndexDrainTests(unittest.TestCase):
    def test_drain_is_bounded_by_batch_size(self) -> None:
        source: Queue = Queue()
        for idx in range(150):
            source.put(_discovered(f"app{idx:03d}"))

        index = CandidateIndex()

        self.assertEqual(DEFAULT_BATCH_SIZE, 60)
        self.assertEqual(index.drain(source), 60)
        self.assertEqual(len(index), 60)
        self.assertEqual(index.drain(source), 60)
        self.assertEqual(index.drain(source), 30)
        self.assertEqual(len(index), 150)
        self.assertFalse(index.complete)

    def test_drain_on_empty_queue_returns_immediately(self) -> None:
        index = CandidateIndex(batch_size=5)

        self.assertEqual(index.drain(Queue()), 0)
        self.assertEqual(len(index), 0)
        self.assertFalse(index.complete)

    def test_closed_marker_completes_index_and_stops_draining(self) -> None:
        source: Queue = Queue()
        source.put(_discovered("Alpha"))
        source.put(CLOSED)
        index = CandidateIndex()

        self.assertEqual(index.drain(source), 1)
        self.assertTrue(index.complete)

        source.put(_discovered("Late"))
        self.assertEqual(index.drain(source), 0)
        self.assertEqual(len(index), 1)

    def test_items_are_in_key_order_regardless_of_arrival(self) -> None:
        source: Queue = Queue()
        for name in ("zeta", "Alpha", "beta"):
            source.put(_discovered(name))
        index = CandidateIndex()
        index.drain(source)

        self.assertEqual([key for key, _entry in index.items()], ["Alpha", "beta", "zeta"])

    def test_revision_advances_on_each_insert(self) -> None:
        index = CandidateIndex()
        start = index.revision
        index.insert("A", DesktopEntry(name="A"))
        index.insert("A", DesktopEntry(name="A", exec="a"))

        self.assertEqual(index.revision, start + 2)


class CandidateIndexCollisionTests(unittest.TestCase):
    def test_same_key_is_last_write_wins_by_default(self) -> None:
        index = CandidateIndex()
        index.insert("Editor|Edit text", DesktopEntry(name="Editor", comment="Edit text", exec="first"))
        index.insert("Editor|Edit text", DesktopEntry(name="Editor", comment="Edit text", exec="second"))

        self.assertEqual(len(index), 1)
        self.assertEqual(index.get("Editor|Edit text").exec, "second")

    def test_key_by_path_keeps_distinct_files_with_same_key(self) -> None:
        source: Queue = Queue()
        source.put(_discovered("Editor", "Edit text", "/b/editor.desktop", "second"))
        source.put(_discovered("Editor", "Edit text", "/a/editor.desktop", "first"))
        source.put(_discovered("Browser", None, "/c/browser.desktop", "browser"))
        index = CandidateIndex(key_by_path=True)
        index.drain(source)

        self.assertEqual(len(index), 3)
        self.assertEqual(
            [(key, entry.exec) for key, entry in index.items()],
            [("Browser", "browser"), ("Editor|Edit text", "first"), ("Editor|Edit text", "second")],
        )
        self.assertEqual(index.get("Editor|Edit text").exec, "first")

    def test_key_by_path_still_replaces_reinserted_file(self) -> None:
        index = CandidateIndex(key_by_path=True)
        path = Path("/apps/editor.desktop")
        index.insert("Editor", DesktopEntry(name="Editor", exec="old", path=path))
        index.insert("Editor", DesktopEntry(name="Editor", exec="new", path=path))

        self.assertEqual(len(index), 1)
        self.assertEqual(index.get("Editor").exec, "new")

    def test_get_missing_key_returns_none(self) -> None:
        self.assertIsNone(CandidateIndex().get("nope"))


if __name__ == "__main__":
    unittest.main()
