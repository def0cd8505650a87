"""Domain datatypes for launcher candidates and their display labels."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

NO_MATCH_OFFSET = -1


@dataclass(frozen=True)
class Label:
    """Plain display text plus one highlighted character range.

    Rendering into a concrete markup dialect is left to the UI layer; see
    ``keylaunch.render`` for the reference renderers.
    """

    text: str
    highlight_start: int = 0
    highlight_length: int = 0

    @classmethod
    def plain(cls, text: str) -> "Label":
        return cls(text=text)

    @classmethod
    def whole(cls, text: str) -> "Label":
        return cls(text=text, highlight_start=0, highlight_length=len(text))

    @classmethod
    def span(cls, text: str, start: int, length: int) -> "Label":
        """Build a label highlighting ``length`` chars at ``start``, clamped to ``text``."""
        start = max(0, min(start, len(text)))
        length = max(0, min(length, len(text) - start))
        return cls(text=text, highlight_start=start, highlight_length=length)

    @property
    def highlighted(self) -> str:
        return self.text[self.highlight_start : self.highlight_start + self.highlight_length]

    def segments(self) -> Iterator[tuple[str, bool]]:
        """Yield ``(text, is_highlighted)`` runs in display order, skipping empty runs."""
        end = self.highlight_start + self.highlight_length
        runs = (
            (self.text[: self.highlight_start], False),
            (self.text[self.highlight_start : end], True),
            (self.text[end:], False),
        )
        for text, is_highlighted in runs:
            if text:
                yield text, is_highlighted


@dataclass(frozen=True)
class Entry:
    """One launchable candidate: an application, a file, or a shell command.

    ``search_key`` and ``match_offset`` only carry meaning for application
    entries; file and command entries leave them at their defaults.
    """

    icon: str
    label: Label
    completion_text: str
    command: str
    search_key: str = ""
    match_offset: int = NO_MATCH_OFFSET
    source: Path | None = None


def sort_by_name(entries: Iterable[Entry]) -> list[Entry]:
    """Return entries ordered by ``search_key``; equal keys keep input order."""
    return sorted(entries, key=lambda entry: entry.search_key)


def sort_by_match(entries: Iterable[Entry]) -> list[Entry]:
    """Return entries ordered by ``match_offset`` with ``search_key`` breaking ties."""
    return sorted(entries, key=lambda entry: (entry.match_offset, entry.search_key))


__all__ = [
    "NO_MATCH_OFFSET",
    "Label",
    "Entry",
    "sort_by_name",
    "sort_by_match",
]
