"""Background discovery of application descriptors.

One daemon thread walks the scan directories, parses every regular file and
streams each candidate onto a queue as soon as it is parsed. The stream always
ends with ``CLOSED`` so consumers can tell "nothing yet" from "nothing more".
"""

from __future__ import annotations

import logging
import os
import threading
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path
from queue import Queue

from .desktop_entry import DesktopEntry, read_desktop_entry, search_key

logger = logging.getLogger(__name__)


class _Closed:
    """Terminal marker placed on a discovery queue after the last entry."""

    def __repr__(self) -> str:
        return "CLOSED"


CLOSED = _Closed()


@dataclass(frozen=True)
class DiscoveredEntry:
    """Parsed entry paired with its derived search key."""

    key: str
    entry: DesktopEntry


def _log_walk_error(exc: OSError) -> None:
    logger.debug("skipping unreadable directory %s: %s", exc.filename, exc)


def iter_entry_files(roots: Iterable[Path]) -> Iterator[Path]:
    """Yield every regular file below ``roots``, depth-first and unsorted.

    Symlinked directories are followed; a directory reached twice through
    links is walked once, so link cycles terminate.
    """
    for root in roots:
        if not root.is_dir():
            continue
        seen: set[str] = set()
        for dirpath, dirnames, filenames in os.walk(root, onerror=_log_walk_error, followlinks=True):
            real = os.path.realpath(dirpath)
            if real in seen:
                dirnames[:] = []
                continue
            seen.add(real)
            base = Path(dirpath)
            for filename in filenames:
                path = base / filename
                if path.is_file():
                    yield path


def iter_discovered(roots: Iterable[Path]) -> Iterator[DiscoveredEntry]:
    """Parse files under ``roots`` lazily, yielding only files that produce entries."""
    for path in iter_entry_files(roots):
        entry = read_desktop_entry(path)
        if entry is None:
            continue
        yield DiscoveredEntry(key=search_key(entry), entry=entry)


class DiscoveryWorker:
    """Run one discovery walk on a daemon thread, feeding ``results``.

    The worker cannot be cancelled and reports no progress; consumers only see
    entries arriving on the queue, followed by ``CLOSED``.
    """

    def __init__(self, roots: Iterable[Path], results: Queue | None = None) -> None:
        self._roots = list(roots)
        self.results: Queue = Queue() if results is None else results
        self._thread: threading.Thread | None = None
        self._lock = threading.Lock()

    def _worker(self) -> None:
        count = 0
        try:
            for discovered in iter_discovered(self._roots):
                self.results.put(discovered)
                count += 1
        except Exception:
            logger.exception("descriptor discovery stopped early")
        finally:
            self.results.put(CLOSED)
            logger.debug("discovery finished with %d entries", count)

    def start(self) -> None:
        """Start the walk; later calls are no-ops."""
        with self._lock:
            if self._thread is not None:
                return
            self._thread = threading.Thread(
                target=self._worker,
                name="lazylauncher-discovery",
                daemon=True,
            )
        self._thread.start()

    @property
    def done(self) -> bool:
        return self._thread is not None and not self._thread.is_alive()

    def join(self, timeout: float | None = None) -> None:
        if self._thread is not None:
            self._thread.join(timeout)


__all__ = [
    "CLOSED",
    "DiscoveredEntry",
    "DiscoveryWorker",
    "iter_discovered",
    "iter_entry_files",
]
