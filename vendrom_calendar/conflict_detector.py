"""
Interval-overlap conflict detection between calendar events.

Events without an explicit end occupy DEFAULT_DURATION_MINUTES. Overlap is
strict: an event ending at 10:00 does not conflict with one starting at 10:00.
"""

from datetime import datetime, timedelta
from typing import Collection, Iterable, List, Tuple

from vendrom_calendar.event_models import CalendarEvent
from vendrom_calendar.time_formatting import date_key

DEFAULT_DURATION_MINUTES = 60


def effective_window(event: CalendarEvent) -> Tuple[datetime, datetime]:
    """(start, end) of an event, substituting the default duration for a missing end."""
    end = event.end if event.end is not None else event.start + timedelta(minutes=DEFAULT_DURATION_MINUTES)
    return event.start, end


def _has_overlap(first: Tuple[datetime, datetime], second: Tuple[datetime, datetime]) -> bool:
    return first[0] < second[1] and first[1] > second[0]


def find_conflicts(
    candidate: CalendarEvent,
    events: Iterable[CalendarEvent],
    ignore_ids: Collection[str] = (),
) -> List[CalendarEvent]:
    """
    Events on the candidate's day whose windows overlap the candidate's.

    Args:
        candidate: Event being checked; never reported against itself
        events: Collection to check against
        ignore_ids: Further ids to leave out, e.g. the event a copy was made from

    Returns:
        Conflicting events in collection order
    """
    window = effective_window(candidate)
    day = date_key(candidate.start)
    conflicts = []
    for other in events:
        if other.id == candidate.id or other.id in ignore_ids:
            continue
        if date_key(other.start) != day:
            continue
        if _has_overlap(window, effective_window(other)):
            conflicts.append(other)
    return conflicts
