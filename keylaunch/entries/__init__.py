"""Launcher candidate model and the application index.

This package contains non-UI entry primitives:
- ``Entry``/``Label`` datatypes and the two entry orderings
- the ``.desktop`` reader used to turn files into application entries
- the one-shot application index scan and its swappable snapshot holder
"""

from __future__ import annotations

from .types import NO_MATCH_OFFSET, Entry, Label, sort_by_match, sort_by_name
from .desktop import DesktopEntryError, clean_exec, parse_desktop_file
from .index import (
    MAX_DESKTOP_FILE_SIZE,
    AppIndex,
    IndexRebuildScheduler,
    build_app_index,
    default_application_dirs,
)

__all__ = [
    "NO_MATCH_OFFSET",
    "Entry",
    "Label",
    "sort_by_match",
    "sort_by_name",
    "DesktopEntryError",
    "clean_exec",
    "parse_desktop_file",
    "MAX_DESKTOP_FILE_SIZE",
    "AppIndex",
    "IndexRebuildScheduler",
    "build_app_index",
    "default_application_dirs",
]
