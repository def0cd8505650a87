"""Host environment helpers: home directory, file opener, stat and icons."""

from __future__ import annotations

import mimetypes
import os
import shlex
import stat
import sys
from pathlib import Path

FOLDER_ICON = "folder"
EXECUTABLE_ICON = "application-x-executable"
GENERIC_FILE_ICON = "text-x-generic"
ANY_EXECUTE_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


def home_directory() -> str:
    """Return the user's home directory as a string, honouring ``$HOME``."""
    return str(Path.home())


def file_opener() -> str:
    """Return the command that opens a path with its default handler."""
    if sys.platform == "darwin":
        return "open"
    return "xdg-open"


def open_command(path: str) -> str:
    return f"{file_opener()} {shlex.quote(path)}"


def safe_stat(path: str) -> os.stat_result | None:
    """Return ``os.stat(path)`` or ``None`` when the path cannot be stat'ed."""
    try:
        return os.stat(path)
    except (OSError, ValueError):
        return None


def is_directory(st: os.stat_result | None) -> bool:
    return st is not None and stat.S_ISDIR(st.st_mode)


def is_executable_file(st: os.stat_result) -> bool:
    """True for non-directories carrying at least one execute permission bit."""
    return not stat.S_ISDIR(st.st_mode) and bool(st.st_mode & ANY_EXECUTE_BITS)


def icon_for_path(path: str, st: os.stat_result) -> str:
    """Pick a freedesktop icon name for ``path`` from its stat result and mime type."""
    if stat.S_ISDIR(st.st_mode):
        return FOLDER_ICON
    if is_executable_file(st):
        return EXECUTABLE_ICON
    mime_type, _encoding = mimetypes.guess_type(path, strict=False)
    if mime_type is None:
        return GENERIC_FILE_ICON
    return mime_type.replace("/", "-")


__all__ = [
    "EXECUTABLE_ICON",
    "FOLDER_ICON",
    "GENERIC_FILE_ICON",
    "file_opener",
    "home_directory",
    "icon_for_path",
    "is_directory",
    "is_executable_file",
    "open_command",
    "safe_stat",
]
