"""
Calendar settings management for user preferences.

Tracks the list limits used by the agenda views, the deep link given to newly
created events, and the timezone that defines "local" calendar days.
Settings are persisted to a per-user settings directory so the choices
survive across sessions.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Optional, TypedDict

from dateutil import tz as dateutil_tz

from vendrom_calendar.logging_helper import Log


class SettingsSchema(TypedDict, total=False):
    upcoming_limit: int
    summary_limit: int
    panel_upcoming_limit: int
    month_cell_max_visible: int
    default_event_link: str
    timezone: Optional[str]


SETTINGS_DIR = Path(
    os.environ.get("VENDROM_CALENDAR_HOME", Path.home() / ".config" / "vendrom-calendar")
)
SETTINGS_FILE = SETTINGS_DIR / "settings.json"

DEFAULT_SETTINGS: SettingsSchema = {
    "upcoming_limit": 8,
    "summary_limit": 3,
    "panel_upcoming_limit": 5,
    "month_cell_max_visible": 2,
    "default_event_link": "/dashboard/briefboard",
    "timezone": None,
}

_LIMIT_KEYS = ("upcoming_limit", "summary_limit", "panel_upcoming_limit", "month_cell_max_visible")


def _ensure_settings_dir() -> None:
    try:
        SETTINGS_DIR.mkdir(parents=True, exist_ok=True)
    except OSError as err:
        Log.warn(f"Unable to create settings directory {SETTINGS_DIR}: {err}")


def load_settings() -> SettingsSchema:
    """
    Load settings from disk, falling back to defaults if anything fails.
    """
    if not SETTINGS_FILE.exists():
        Log.info(f"Settings file not found, using defaults: {SETTINGS_FILE}")
        return DEFAULT_SETTINGS.copy()

    try:
        data = json.loads(SETTINGS_FILE.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError("Settings data is not a JSON object")
    except (OSError, ValueError) as err:
        Log.warn(f"Failed to read settings file ({SETTINGS_FILE}): {err}")
        return DEFAULT_SETTINGS.copy()

    merged: SettingsSchema = DEFAULT_SETTINGS.copy()
    # Merge only known keys
    for key in DEFAULT_SETTINGS:
        if key in data:
            merged[key] = data[key]  # type: ignore[literal-required]
    return merged


def save_settings(settings: SettingsSchema) -> None:
    """
    Persist settings to disk.
    """
    _ensure_settings_dir()
    try:
        SETTINGS_FILE.write_text(
            json.dumps(settings, indent=2, sort_keys=True),
            encoding="utf-8",
        )
    except OSError as err:
        Log.warn(f"Failed to write settings file ({SETTINGS_FILE}): {err}")


def _is_valid_limit(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def get_limit(key: str, settings: Optional[SettingsSchema] = None) -> int:
    if key not in _LIMIT_KEYS:
        raise KeyError(key)
    settings = settings if settings is not None else load_settings()
    value = settings.get(key, DEFAULT_SETTINGS[key])  # type: ignore[literal-required]
    if not _is_valid_limit(value):
        Log.warn(f"Invalid {key} value '{value}', defaulting to {DEFAULT_SETTINGS[key]}")  # type: ignore[literal-required]
        return DEFAULT_SETTINGS[key]  # type: ignore[literal-required]
    return value


def set_limit(key: str, value: int) -> None:
    if key not in _LIMIT_KEYS:
        raise KeyError(key)
    if not _is_valid_limit(value):
        raise ValueError(f"Invalid {key}: {value}")
    settings = load_settings()
    settings[key] = value  # type: ignore[literal-required]
    save_settings(settings)
    Log.info(f"Saved {key} setting: {value}")


def get_default_event_link(settings: Optional[SettingsSchema] = None) -> str:
    settings = settings if settings is not None else load_settings()
    link = settings.get("default_event_link", DEFAULT_SETTINGS["default_event_link"])
    if not isinstance(link, str) or not link:
        Log.warn(f"Invalid default_event_link value '{link}', using default")
        return DEFAULT_SETTINGS["default_event_link"]
    return link


def get_timezone_name(settings: Optional[SettingsSchema] = None) -> Optional[str]:
    """
    Configured IANA timezone name, or None to use the system timezone.
    """
    settings = settings if settings is not None else load_settings()
    name = settings.get("timezone")
    if name is None:
        return None
    if not isinstance(name, str) or dateutil_tz.gettz(name) is None:
        Log.warn(f"Unknown timezone '{name}', falling back to system timezone")
        return None
    return name


def set_timezone_name(name: Optional[str]) -> None:
    if name is not None and dateutil_tz.gettz(name) is None:
        raise ValueError(f"Unknown timezone: {name}")
    settings = load_settings()
    settings["timezone"] = name
    save_settings(settings)
    Log.info(f"Saved timezone setting: {name}")
