"""Per-keystroke search over every enabled result category."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import partial

from ..entries.desktop import parse_desktop_file
from ..entries.index import AppIndex, IndexRebuildScheduler, build_app_index, default_application_dirs
from ..entries.types import Entry
from ..runtime.config import LauncherSettings
from .apps import search_apps
from .commands import search_commands
from .files import search_files


@dataclass(frozen=True)
class SearchResults:
    """Matcher outputs for one query, each list in its own ranking order."""

    query: str
    apps: list[Entry] = field(default_factory=list)
    files: list[Entry] = field(default_factory=list)
    commands: list[Entry] = field(default_factory=list)

    def by_category(self) -> list[tuple[str, list[Entry]]]:
        return [("apps", self.apps), ("files", self.files), ("commands", self.commands)]

    def all(self) -> list[Entry]:
        """Concatenate categories in display order: apps, files, then commands."""
        return [*self.apps, *self.files, *self.commands]


class Launcher:
    """Owns the application index and answers queries against it."""

    def __init__(self, settings: LauncherSettings | None = None, index: AppIndex | None = None) -> None:
        self.settings = settings if settings is not None else LauncherSettings()
        self.index = index if index is not None else AppIndex()
        self._rebuilder = IndexRebuildScheduler(self.index, build=self.build_index)

    def build_index(self) -> list[Entry]:
        """Scan the configured application directories into a sorted entry list."""
        return build_app_index(
            default_application_dirs(self.settings.application_dirs),
            parse_entry=partial(parse_desktop_file, terminal=self.settings.terminal),
        )

    def reindex(self) -> None:
        """Rebuild the index synchronously and swap it in."""
        self.index.swap(self.build_index())

    def reindex_in_background(self) -> IndexRebuildScheduler:
        self._rebuilder.schedule()
        return self._rebuilder

    def search(self, query: str) -> SearchResults:
        settings = self.settings
        return SearchResults(
            query=query,
            apps=search_apps(query, self.index.snapshot()) if settings.is_enabled("apps") else [],
            files=search_files(query) if settings.is_enabled("files") else [],
            commands=search_commands(query) if settings.is_enabled("commands") else [],
        )


__all__ = ["Launcher", "SearchResults"]
