"""
Read-only agenda views over the event collection.
All views sort by start time; events starting at the same moment keep
collection order.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Dict, Iterable, List, Optional, Union

from vendrom_calendar.event_models import CalendarEvent
from vendrom_calendar.event_store import index_by_date
from vendrom_calendar.time_formatting import date_key

FIRST_SLOT_HOUR = 7
SLOT_COUNT = 12
DEFAULT_MAX_VISIBLE = 2


@dataclass
class DayCellSummary:
    """What a month-grid cell shows: the first few events and how many are hidden."""
    day: date
    visible: List[CalendarEvent] = field(default_factory=list)
    overflow: int = 0


def _by_start(events: Iterable[CalendarEvent]) -> List[CalendarEvent]:
    return sorted(events, key=lambda event: event.start)


def day_agenda(
    events: Union[Iterable[CalendarEvent], Dict[str, List[CalendarEvent]]],
    day: Optional[date],
) -> List[CalendarEvent]:
    """
    All events on `day`, earliest first.

    Args:
        events: Event collection, or an index built by index_by_date
        day: Selected day; None yields an empty agenda
    """
    if day is None:
        return []
    index = events if isinstance(events, dict) else index_by_date(events)
    return _by_start(index.get(date_key(day), []))


def upcoming(events: Iterable[CalendarEvent], now: datetime, limit: int) -> List[CalendarEvent]:
    """Events starting at or after `now`, earliest first, at most `limit` of them."""
    return _by_start(event for event in events if event.start >= now)[:limit]


def month_cell_summary(
    events: Union[Iterable[CalendarEvent], Dict[str, List[CalendarEvent]]],
    day: date,
    max_visible: int = DEFAULT_MAX_VISIBLE,
) -> DayCellSummary:
    day_events = day_agenda(events, day)
    visible = day_events[:max_visible]
    return DayCellSummary(day=day, visible=visible, overflow=len(day_events) - len(visible))


def days_with_events(events: Iterable[CalendarEvent]) -> List[date]:
    """Distinct days that have at least one event, in ascending order."""
    return sorted(date.fromisoformat(key) for key in index_by_date(events))


def time_slots() -> List[int]:
    """Hours shown as rows in the day and week grids (7 AM to 6 PM)."""
    return list(range(FIRST_SLOT_HOUR, FIRST_SLOT_HOUR + SLOT_COUNT))


def events_for_slot(
    events: Union[Iterable[CalendarEvent], Dict[str, List[CalendarEvent]]],
    day: date,
    hour: int,
) -> List[CalendarEvent]:
    return [event for event in day_agenda(events, day) if event.start.hour == hour]
