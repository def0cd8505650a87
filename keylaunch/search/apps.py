"""Substring search over the application index.

Ranking is positional: a match at the start of a name beats any later match,
and equal positions fall back to alphabetical order of the search key.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import replace

from ..entries.types import Entry, Label, sort_by_match


def match_offset(query_folded: str, entry: Entry) -> int:
    """Return the first index of ``query_folded`` in ``entry.search_key`` or ``-1``."""
    return entry.search_key.find(query_folded)


def _fold_positions(text: str, search_key: str) -> list[int] | None:
    """Map each ``search_key`` index back to its character index in ``text``.

    Lower-casing can grow a character (``"İ"`` folds to two), so offsets
    found in the key drift from the label. Returns ``None`` when ``search_key``
    is not the per-character fold of ``text``.
    """
    positions: list[int] = []
    folded: list[str] = []
    for idx, ch in enumerate(text):
        lowered = ch.lower()
        folded.append(lowered)
        positions.extend([idx] * len(lowered))
    if "".join(folded) != search_key:
        return None
    return positions


def highlight_for_match(entry: Entry, offset: int, folded_length: int, query_length: int) -> Label:
    """Highlight the label characters that produced the key match at ``offset``."""
    text = entry.label.text
    positions = _fold_positions(text, entry.search_key)
    if positions is None or folded_length == 0:
        return Label.span(text, offset, query_length)
    start = positions[offset]
    end = positions[offset + folded_length - 1] + 1
    return Label.span(text, start, end - start)


def relabel_match(entry: Entry, offset: int, query: str) -> Entry:
    """Return a copy of ``entry`` carrying its match offset and highlighted label."""
    return replace(
        entry,
        match_offset=offset,
        label=highlight_for_match(entry, offset, len(query.lower()), len(query)),
    )


def iter_app_matches(query: str, index: Iterable[Entry]) -> Iterator[Entry]:
    """Yield relabelled copies of index entries containing ``query``, in index order."""
    query_folded = query.lower()
    for entry in index:
        offset = match_offset(query_folded, entry)
        if offset < 0:
            continue
        yield relabel_match(entry, offset, query)


def search_apps(query: str, index: Iterable[Entry]) -> list[Entry]:
    """Return index entries matching ``query`` ranked by match offset then name.

    An empty query matches nothing. Entries in ``index`` are never mutated.
    """
    if not query:
        return []
    return sort_by_match(iter_app_matches(query, index))


__all__ = [
    "highlight_for_match",
    "iter_app_matches",
    "match_offset",
    "relabel_match",
    "search_apps",
]
