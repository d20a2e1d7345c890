"""
Event store owning the canonical collection of calendar events.

The date index is derived state: every mutation invalidates it and the next
read rebuilds it, so readers never see an index computed before a write.
"""

from datetime import date, datetime
from typing import Dict, Iterable, List, Optional, Union

from vendrom_calendar.event_models import CalendarEvent
from vendrom_calendar.logging_helper import Log
from vendrom_calendar.time_formatting import date_key


def index_by_date(events: Iterable[CalendarEvent]) -> Dict[str, List[CalendarEvent]]:
    """
    Group events by the date key of their start.
    Within a day, events keep the order of the source collection.
    """
    index: Dict[str, List[CalendarEvent]] = {}
    for event in events:
        index.setdefault(date_key(event.start), []).append(event)
    return index


def upsert(events: List[CalendarEvent], event: CalendarEvent) -> List[CalendarEvent]:
    """
    Return a new collection with `event` written into it.
    An unknown id is inserted at the head; a known id replaces that entry in place.
    """
    if any(existing.id == event.id for existing in events):
        return [event if existing.id == event.id else existing for existing in events]
    return [event] + list(events)


class EventStore:
    """Single owner of the event collection and its per-day index."""

    def __init__(self, events: Optional[Iterable[CalendarEvent]] = None):
        self._events: List[CalendarEvent] = list(events or [])
        self._index: Optional[Dict[str, List[CalendarEvent]]] = None

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self):
        return iter(list(self._events))

    def __contains__(self, event_id: str) -> bool:
        return self.get(event_id) is not None

    @property
    def events(self) -> List[CalendarEvent]:
        return list(self._events)

    def get(self, event_id: str) -> Optional[CalendarEvent]:
        for event in self._events:
            if event.id == event_id:
                return event
        return None

    def upsert(self, event: CalendarEvent) -> CalendarEvent:
        replacing = event.id in self
        self._events = upsert(self._events, event)
        self._index = None
        Log.kv({"stage": "store", "op": "replace" if replacing else "insert", "id": event.id, "size": len(self._events)})
        return event

    def index(self) -> Dict[str, List[CalendarEvent]]:
        if self._index is None:
            self._index = index_by_date(self._events)
        return self._index

    def on_day(self, day: Union[date, datetime]) -> List[CalendarEvent]:
        """Events starting on `day`, in collection order."""
        return list(self.index().get(date_key(day), []))
