"""
Data models for the calendar scheduling engine.
Defines CalendarEvent (owned or surfaced), EventDraft (create/edit input),
CalendarIntegration, Notice and the navigation state.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Optional, Union

OWNED_SOURCE = "vendrom"


class EventType(str, Enum):
    MEETING = "meeting"
    DEADLINE = "deadline"
    EVENT = "event"
    BOOKING = "booking"
    REMINDER = "reminder"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class MeetingMode(str, Enum):
    VIRTUAL = "virtual"
    PHYSICAL = "physical"


class CalendarView(str, Enum):
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


class NoticeTone(str, Enum):
    SUCCESS = "success"
    WARNING = "warning"
    INFO = "info"


@dataclass(frozen=True)
class MeetingDetails:
    """
    Meeting-only attributes. A link is only meaningful for virtual meetings,
    so a physical meeting carrying one is rejected.
    """
    mode: MeetingMode = MeetingMode.VIRTUAL
    link: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "mode", MeetingMode(self.mode))
        if self.mode is MeetingMode.PHYSICAL and self.link:
            raise ValueError("meeting link is only valid for virtual meetings")


@dataclass(frozen=True)
class CalendarEvent:
    """
    A calendar entry. `source` is OWNED_SOURCE for events on the user's own
    calendar and a provider tag (e.g. "google") for surfaced ones.
    `time_label` is computed when the event is written, never lazily.
    """
    id: str
    title: str
    start: datetime
    time_label: str
    type: EventType = EventType.EVENT
    source: str = OWNED_SOURCE
    end: Optional[datetime] = None
    all_day: bool = False
    description: Optional[str] = None
    location: Optional[str] = None
    link: Optional[str] = None
    details: Optional[MeetingDetails] = None

    def __post_init__(self):
        object.__setattr__(self, "type", EventType(self.type))
        if self.details is not None and self.type is not EventType.MEETING:
            raise ValueError(f"meeting details are only valid for meetings, not '{self.type.value}'")

    @property
    def is_owned(self) -> bool:
        return self.source == OWNED_SOURCE

    @property
    def meeting_mode(self) -> Optional[MeetingMode]:
        return self.details.mode if self.details else None

    @property
    def meeting_link(self) -> Optional[str]:
        return self.details.link if self.details else None


@dataclass
class EventDraft:
    """
    Create/edit input as collected from a form.

    `start` may be a date (all-day), a datetime, or text such as
    "2026-03-10T09:00". `end` may be a datetime or text; a bare clock time
    like "09:30" lands on the start's day. When editing, None keeps the
    prior value; use `clear_end` to drop an existing end.
    """
    title: Optional[str] = None
    start: Union[date, datetime, str, None] = None
    end: Union[datetime, str, None] = None
    type: Optional[EventType] = None
    location: Optional[str] = None
    description: Optional[str] = None
    meeting_mode: Optional[MeetingMode] = None
    meeting_link: Optional[str] = None
    link: Optional[str] = None
    clear_end: bool = False


@dataclass
class CalendarIntegration:
    id: str
    name: str
    connected: bool = False
    last_sync: Optional[str] = None


@dataclass(frozen=True)
class Notice:
    tone: NoticeTone
    message: str


@dataclass
class NavigationState:
    view: CalendarView = CalendarView.MONTH
    current_date: date = field(default_factory=date.today)
    selected_date: Optional[date] = field(default_factory=date.today)
