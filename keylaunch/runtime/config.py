"""Persistent JSON config helpers.

Stores which result categories are enabled, extra application directories,
and the terminal used for ``Terminal=true`` applications.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from ..entries.desktop import DEFAULT_TERMINAL

logger = logging.getLogger(__name__)

APP_NAME = "keylaunch"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

CATEGORIES = ("apps", "files", "commands")


@dataclass(frozen=True)
class LauncherSettings:
    """Normalized launcher options read from the config file."""

    enabled_categories: frozenset[str] = frozenset(CATEGORIES)
    application_dirs: tuple[Path, ...] = ()
    terminal: str = DEFAULT_TERMINAL

    def is_enabled(self, category: str) -> bool:
        return category in self.enabled_categories


def load_config() -> dict[str, object]:
    """Read the config file as a JSON object.

    A missing file is the normal first-run case and yields ``{}`` silently;
    unreadable or malformed files, and non-object documents, are logged and
    also yield ``{}``.
    """
    try:
        raw = CONFIG_PATH.read_text(encoding="utf-8")
    except FileNotFoundError:
        return {}
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    try:
        data = json.loads(raw)
    except ValueError as exc:
        logger.warning("ignoring malformed config %s: %s", CONFIG_PATH, exc)
        return {}
    if not isinstance(data, dict):
        logger.warning("ignoring config %s: top level is not an object", CONFIG_PATH)
        return {}
    return data


def save_config(data: dict[str, object]) -> bool:
    """Write ``data`` to the config file, creating its directory when needed.

    Returns whether the write succeeded; failures are logged, never raised,
    so a read-only config location cannot break a search.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except (OSError, TypeError, ValueError) as exc:
        logger.warning("could not save config %s: %s", CONFIG_PATH, exc)
        return False
    return True


def _load_enabled_categories(value: object) -> frozenset[str]:
    """Read ``{"apps": bool, ...}``; unknown keys and non-bool values are ignored."""
    enabled = set(CATEGORIES)
    if not isinstance(value, dict):
        return frozenset(enabled)
    for category in CATEGORIES:
        flag = value.get(category)
        if flag is False:
            enabled.discard(category)
    return frozenset(enabled)


def _load_application_dirs(value: object) -> tuple[Path, ...]:
    if not isinstance(value, list):
        return ()
    dirs: list[Path] = []
    for raw in value:
        if not isinstance(raw, str) or not raw.strip():
            continue
        dirs.append(Path(raw.strip()).expanduser())
    return tuple(dirs)


def load_launcher_settings() -> LauncherSettings:
    """Return launcher settings, falling back to defaults for invalid values."""
    data = load_config()
    terminal = data.get("terminal")
    if not isinstance(terminal, str) or not terminal.strip():
        terminal = DEFAULT_TERMINAL
    return LauncherSettings(
        enabled_categories=_load_enabled_categories(data.get("enabled_categories")),
        application_dirs=_load_application_dirs(data.get("application_dirs")),
        terminal=terminal.strip(),
    )


def save_enabled_categories(enabled: dict[str, bool]) -> bool:
    """Persist category toggles; only known categories with bool values are written."""
    config = load_config()
    config["enabled_categories"] = {
        category: bool(enabled[category])
        for category in CATEGORIES
        if isinstance(enabled.get(category), bool)
    }
    return save_config(config)


__all__ = [
    "APP_NAME",
    "CATEGORIES",
    "CONFIG_PATH",
    "LauncherSettings",
    "load_config",
    "load_launcher_settings",
    "save_config",
    "save_enabled_categories",
]
