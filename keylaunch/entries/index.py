"""Application index: one-shot directory scan plus a swappable snapshot holder."""

from __future__ import annotations

import logging
import os
import stat
import threading
from collections.abc import Callable, Iterable, Iterator, Sequence
from pathlib import Path

from .desktop import DesktopEntryError, parse_desktop_file
from .types import Entry, sort_by_name

logger = logging.getLogger(__name__)

DESKTOP_FILE_SUFFIX = ".desktop"
MAX_DESKTOP_FILE_SIZE = 1024 * 1024
SHARED_APPLICATIONS_DIR = Path("/usr/share/applications")

EntryParser = Callable[[Path], Entry]


def local_applications_dir() -> Path:
    return Path.home() / ".local" / "share" / "applications"


def default_application_dirs(extra: Iterable[Path] = ()) -> list[Path]:
    """Return scan directories: system-wide first, then per-user, then ``extra``."""
    return [SHARED_APPLICATIONS_DIR, local_applications_dir(), *extra]


def _iter_candidate_files(directory: Path) -> Iterator[Path]:
    """Yield ``.desktop`` regular files of ``directory`` that fit the size ceiling.

    Raises ``OSError`` when the directory itself cannot be listed.
    """
    for name in sorted(os.listdir(directory)):
        if not name.endswith(DESKTOP_FILE_SUFFIX):
            continue
        path = directory / name
        try:
            st = path.stat()
        except OSError as exc:
            logger.warning("skipping entry file %s: %s", path, exc)
            continue
        if not stat.S_ISREG(st.st_mode):
            continue
        if st.st_size > MAX_DESKTOP_FILE_SIZE:
            logger.debug("skipping entry file %s: %d bytes is too big", path, st.st_size)
            continue
        yield path


def build_app_index(
    directories: Sequence[Path] | None = None,
    parse_entry: EntryParser | None = None,
) -> list[Entry]:
    """Scan ``directories`` non-recursively and return their entries sorted by name.

    Unreadable directories and unparseable files are logged and skipped; a
    missing system directory never prevents indexing the per-user one.
    """
    if directories is None:
        directories = default_application_dirs()
    if parse_entry is None:
        parse_entry = parse_desktop_file

    entries: list[Entry] = []
    for directory in directories:
        try:
            candidates = list(_iter_candidate_files(directory))
        except OSError as exc:
            logger.warning("skipping application directory %s: %s", directory, exc)
            continue
        for path in candidates:
            try:
                entries.append(parse_entry(path))
            except (DesktopEntryError, OSError) as exc:
                logger.debug("skipping entry file %s: %s", path, exc)

    logger.debug("indexed %d application entries", len(entries))
    return sort_by_name(entries)


class AppIndex:
    """Owned, atomically swappable snapshot of the application index.

    Readers take ``snapshot()`` once per search and never observe a partially
    built index; writers install a complete list with ``swap()``.
    """

    def __init__(self, entries: Iterable[Entry] = ()) -> None:
        self._lock = threading.Lock()
        self._entries: tuple[Entry, ...] = tuple(entries)
        self._generation = 0

    def snapshot(self) -> tuple[Entry, ...]:
        with self._lock:
            return self._entries

    @property
    def generation(self) -> int:
        """Number of swaps performed so far."""
        with self._lock:
            return self._generation

    def swap(self, entries: Iterable[Entry]) -> tuple[Entry, ...]:
        """Install ``entries`` as the new snapshot and return the previous one."""
        new_entries = tuple(entries)
        with self._lock:
            previous = self._entries
            self._entries = new_entries
            self._generation += 1
        return previous

    def __len__(self) -> int:
        return len(self.snapshot())


class IndexRebuildScheduler:
    """Rebuild an ``AppIndex`` on a background daemon thread.

    Requests arriving while a rebuild runs collapse into a single follow-up
    rebuild, so scans never pile up behind each other.
    """

    def __init__(self, index: AppIndex, build: Callable[[], list[Entry]] = build_app_index) -> None:
        self._index = index
        self._build = build
        self._lock = threading.Lock()
        self._pending = False
        self._running = False
        self._worker: threading.Thread | None = None

    def _work(self) -> None:
        while True:
            with self._lock:
                if not self._pending:
                    self._running = False
                    return
                self._pending = False

            try:
                entries = self._build()
            except Exception:
                logger.exception("application index rebuild failed, keeping previous index")
                continue
            self._index.swap(entries)

    def schedule(self) -> None:
        """Request a rebuild and start the worker thread if idle."""
        with self._lock:
            self._pending = True
            if self._running:
                return
            self._running = True

        worker = threading.Thread(target=self._work, name="keylaunch-index", daemon=True)
        self._worker = worker
        worker.start()

    def wait(self, timeout: float | None = None) -> bool:
        """Block until the current worker finishes; return ``False`` on timeout."""
        worker = self._worker
        if worker is None:
            return True
        worker.join(timeout)
        return not worker.is_alive()


__all__ = [
    "DESKTOP_FILE_SUFFIX",
    "MAX_DESKTOP_FILE_SIZE",
    "SHARED_APPLICATIONS_DIR",
    "AppIndex",
    "EntryParser",
    "IndexRebuildScheduler",
    "build_app_index",
    "default_application_dirs",
    "local_applications_dir",
]
