"""Fallback candidate that runs the raw query as a shell command."""

from __future__ import annotations

from ..entries.types import Entry, Label
from ..system import is_executable_file, safe_stat
from .path_query import expand_query_path

COMMAND_ICON = "utilities-terminal"


def command_entry(query: str) -> Entry:
    return Entry(
        icon=COMMAND_ICON,
        label=Label.whole(query),
        completion_text=query,
        command=query,
    )


def search_commands(query: str) -> list[Entry]:
    """Offer to run ``query`` verbatim.

    Path queries are only offered when they resolve to an executable file, so
    typing an existing document or directory does not also suggest "running" it.
    """
    if not query:
        return []

    is_path, path = expand_query_path(query)
    if is_path:
        st = safe_stat(path)
        if st is None or not is_executable_file(st):
            return []
    return [command_entry(query)]


__all__ = ["COMMAND_ICON", "command_entry", "search_commands"]
