"""Filesystem completion for path queries.

Lists one directory level per query and keeps names starting with the typed
filename prefix. The lexicographic listing order is the only ranking signal.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator

from ..entries.types import Entry, Label
from ..system import icon_for_path, is_directory, is_executable_file, open_command, safe_stat
from .path_query import PathQuery, resolve_path_query

logger = logging.getLogger(__name__)

ELIDED_DIRECTORY_PREFIX = ".../"


def file_entry(path: str, label: Label, completion_text: str) -> Entry:
    """Build an entry that opens ``path`` with the default handler.

    Raises ``OSError`` when ``path`` cannot be stat'ed.
    """
    st = os.stat(path)
    return Entry(
        icon=icon_for_path(path, st),
        label=label,
        completion_text=completion_text,
        command=open_command(path),
    )


def listing_label(name: str, prefix_length: int) -> Label:
    """Label ``.../name`` with the already-typed part of ``name`` highlighted."""
    return Label.span(
        ELIDED_DIRECTORY_PREFIX + name,
        len(ELIDED_DIRECTORY_PREFIX),
        prefix_length,
    )


def _exact_path_entry(path_query: PathQuery) -> Entry | None:
    """Entry opening the queried path itself, when it exists and is not runnable."""
    st = safe_stat(path_query.resolved_path)
    if st is None or is_executable_file(st):
        return None
    query = path_query.original_query
    try:
        return file_entry(path_query.resolved_path, Label.whole(query), query)
    except OSError as exc:
        logger.debug("skipping file entry %s: %s", path_query.resolved_path, exc)
        return None


def _iter_listing_entries(path_query: PathQuery, names: list[str]) -> Iterator[Entry]:
    prefix = path_query.filename_prefix
    for name in sorted(names):
        if not name.startswith(prefix):
            continue
        file_path = path_query.directory_path + name
        if file_path == path_query.resolved_path:
            continue

        completion_text = path_query.directory_display_prefix + name
        if is_directory(safe_stat(file_path)):
            completion_text += "/"
        try:
            yield file_entry(file_path, listing_label(name, len(prefix)), completion_text)
        except OSError as exc:
            logger.debug("skipping file entry %s: %s", file_path, exc)


def search_files(query: str) -> list[Entry]:
    """Return file entries for a path query, or ``[]`` for anything else.

    The queried path itself comes first when it exists and is not executable,
    followed by sorted directory children matching the filename prefix.
    Directory listing failures are logged and yield the partial result.
    """
    is_path, path_query = resolve_path_query(query)
    if not is_path or path_query is None:
        return []

    results: list[Entry] = []
    exact = _exact_path_entry(path_query)
    if exact is not None:
        results.append(exact)

    try:
        names = os.listdir(path_query.directory_path)
    except (OSError, ValueError) as exc:
        logger.debug("cannot list directory %s: %s", path_query.directory_path, exc)
        return results

    results.extend(_iter_listing_entries(path_query, names))
    return results


__all__ = [
    "ELIDED_DIRECTORY_PREFIX",
    "file_entry",
    "listing_label",
    "search_files",
]
