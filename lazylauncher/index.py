"""Incrementally populated candidate index.

Entries arrive from the discovery queue and are drained in bounded batches
so a redraw cycle never waits on the filesystem walk.
"""

from __future__ import annotations

from queue import Empty, Queue

from .desktop_entry import DesktopEntry
from .discovery import CLOSED, DiscoveredEntry

DEFAULT_BATCH_SIZE = 60


class CandidateIndex:
    """Ordered mapping from search key to entry.

    By default a later entry with the same search key replaces the earlier one.
    Which one survives depends on walk order and is not stable across runs.
    With ``key_by_path`` entries are identified by ``(key, path)`` instead, so
    distinct files sharing a key both stay listed.
    """

    def __init__(self, batch_size: int = DEFAULT_BATCH_SIZE, key_by_path: bool = False) -> None:
        self.batch_size = max(1, batch_size)
        self.key_by_path = key_by_path
        self.complete = False
        self.revision = 0
        self._entries: dict[tuple[str, str], tuple[str, DesktopEntry]] = {}
        self._snapshot: list[tuple[str, DesktopEntry]] | None = []

    def __len__(self) -> int:
        return len(self._entries)

    def insert(self, key: str, entry: DesktopEntry) -> None:
        identity = (key, str(entry.path) if self.key_by_path and entry.path is not None else "")
        self._entries[identity] = (key, entry)
        self.revision += 1
        self._snapshot = None

    def drain(self, source: Queue) -> int:
        """Move up to ``batch_size`` ready items from ``source`` into the index.

        Never blocks. Returns how many entries were inserted. Receiving
        ``CLOSED`` marks the index complete; later drains do nothing.
        """
        if self.complete:
            return 0
        inserted = 0
        while inserted < self.batch_size:
            try:
                item = source.get_nowait()
            except Empty:
                break
            if item is CLOSED:
                self.complete = True
                break
            if isinstance(item, DiscoveredEntry):
                self.insert(item.key, item.entry)
                inserted += 1
        return inserted

    def items(self) -> list[tuple[str, DesktopEntry]]:
        """Return ``(key, entry)`` pairs in key order."""
        if self._snapshot is None:
            self._snapshot = [self._entries[identity] for identity in sorted(self._entries)]
        return list(self._snapshot)

    def get(self, key: str) -> DesktopEntry | None:
        """Return the entry stored under ``key`` (the first by path when keyed by path)."""
        if not self.key_by_path:
            stored = self._entries.get((key, ""))
            return stored[1] if stored is not None else None
        for item_key, entry in self.items():
            if item_key == key:
                return entry
        return None


__all__ = ["CandidateIndex", "DEFAULT_BATCH_SIZE"]
