"""
Shared fixtures for the calendar engine tests.

Log files go to a per-test temporary directory and settings are read from
and written to a temporary file, never the user's real settings.
"""

import itertools
from datetime import datetime
from typing import Optional

import pytest

from vendrom_calendar import logging_helper, settings_manager
from vendrom_calendar.event_models import CalendarEvent, EventType, MeetingDetails
from vendrom_calendar.time_formatting import time_label

FIXED_NOW = datetime(2026, 3, 10, 8, 0)


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    logging_helper.configure(log_dir=tmp_path / "logs", file_logging=True)
    settings_dir = tmp_path / "settings"
    monkeypatch.setattr(settings_manager, "SETTINGS_DIR", settings_dir)
    monkeypatch.setattr(settings_manager, "SETTINGS_FILE", settings_dir / "settings.json")
    yield
    logging_helper.configure(file_logging=False)


@pytest.fixture
def clock():
    return lambda: FIXED_NOW


@pytest.fixture
def id_factory():
    counter = itertools.count(1)
    return lambda: f"new-{next(counter)}"


def _make_event(
    event_id: str,
    start: datetime,
    end: Optional[datetime] = None,
    source: str = "vendrom",
    event_type: EventType = EventType.EVENT,
    title: Optional[str] = None,
    details: Optional[MeetingDetails] = None,
) -> CalendarEvent:
    return CalendarEvent(
        id=event_id,
        title=title or f"Event {event_id}",
        start=start,
        end=end,
        time_label=time_label(start, end),
        type=event_type,
        source=source,
        details=details,
    )


@pytest.fixture
def make_event():
    return _make_event
