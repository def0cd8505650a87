"""Runtime support: persisted launcher configuration."""

from __future__ import annotations

from .config import LauncherSettings, load_launcher_settings

__all__ = ["LauncherSettings", "load_launcher_settings"]
