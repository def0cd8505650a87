"""Query matchers for applications, files and shell commands.

Each matcher runs independently against the same raw query string and returns
its own ordered entry list; ``Launcher`` groups them by category.
"""

from __future__ import annotations

from .apps import search_apps
from .commands import search_commands
from .files import search_files
from .launcher import Launcher, SearchResults
from .path_query import PathQuery, expand_query_path, resolve_path_query

__all__ = [
    "Launcher",
    "PathQuery",
    "SearchResults",
    "expand_query_path",
    "resolve_path_query",
    "search_apps",
    "search_commands",
    "search_files",
]
