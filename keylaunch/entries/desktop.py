"""Freedesktop ``.desktop`` file reader producing application entries.

Only the handful of keys the launcher needs are interpreted. Anything that
makes a file unusable as a launchable application raises
``DesktopEntryError`` so index builders can log and skip it.
"""

from __future__ import annotations

import configparser
import os
import re
from pathlib import Path

from .types import Entry, Label

DESKTOP_ENTRY_SECTION = "Desktop Entry"
DEFAULT_APP_ICON = "application-x-executable"
DEFAULT_TERMINAL = "x-terminal-emulator -e"

_FIELD_CODE_RE = re.compile(r"%[fFuUdDnNickvm]")


class DesktopEntryError(ValueError):
    """Raised when a desktop file cannot be turned into an application entry."""


def _is_true(value: str) -> bool:
    return value.strip().lower() == "true"


def _split_list(value: str) -> list[str]:
    return [item.strip() for item in value.split(";") if item.strip()]


def current_desktops() -> list[str]:
    """Return ``$XDG_CURRENT_DESKTOP`` as a list of desktop names."""
    return [name for name in os.environ.get("XDG_CURRENT_DESKTOP", "").split(":") if name]


def clean_exec(exec_line: str) -> str:
    """Strip field codes (``%f``, ``%U``...) and unescape ``%%`` in an ``Exec`` value."""
    without_codes = _FIELD_CODE_RE.sub("", exec_line)
    return " ".join(without_codes.replace("%%", "%").split())


def _visible_on_desktop(entry: configparser.SectionProxy, desktops: list[str]) -> bool:
    only_show_in = _split_list(entry.get("OnlyShowIn", ""))
    if only_show_in and not any(name in only_show_in for name in desktops):
        return False
    not_show_in = _split_list(entry.get("NotShowIn", ""))
    return not any(name in not_show_in for name in desktops)


def parse_desktop_file(
    path: Path,
    terminal: str = DEFAULT_TERMINAL,
    desktops: list[str] | None = None,
) -> Entry:
    """Parse ``path`` into an application ``Entry``.

    Raises ``DesktopEntryError`` for unreadable or malformed files, and for
    entries that are hidden, not applications, or excluded from the current
    desktop.
    """
    parser = configparser.ConfigParser(interpolation=None, strict=False)
    parser.optionxform = str
    try:
        with path.open(encoding="utf-8") as handle:
            parser.read_file(handle, source=str(path))
    except (OSError, UnicodeDecodeError, configparser.Error) as exc:
        raise DesktopEntryError(f"cannot read {path}: {exc}") from exc

    if not parser.has_section(DESKTOP_ENTRY_SECTION):
        raise DesktopEntryError(f"{path} has no [{DESKTOP_ENTRY_SECTION}] section")
    entry = parser[DESKTOP_ENTRY_SECTION]

    if entry.get("Type", "") != "Application":
        raise DesktopEntryError(f"{path} is not an application entry")
    if _is_true(entry.get("NoDisplay", "")) or _is_true(entry.get("Hidden", "")):
        raise DesktopEntryError(f"{path} is hidden")
    if not _visible_on_desktop(entry, current_desktops() if desktops is None else desktops):
        raise DesktopEntryError(f"{path} is not shown on this desktop")

    name = entry.get("Name", "").strip()
    if not name:
        raise DesktopEntryError(f"{path} has no Name")
    command = clean_exec(entry.get("Exec", ""))
    if not command:
        raise DesktopEntryError(f"{path} has no Exec")
    if _is_true(entry.get("Terminal", "")):
        command = f"{terminal} {command}"

    return Entry(
        icon=entry.get("Icon", "").strip() or DEFAULT_APP_ICON,
        label=Label.plain(name),
        completion_text=name,
        command=command,
        search_key=name.lower(),
        source=path,
    )


__all__ = [
    "DEFAULT_APP_ICON",
    "DEFAULT_TERMINAL",
    "DesktopEntryError",
    "clean_exec",
    "current_desktops",
    "parse_desktop_file",
]
