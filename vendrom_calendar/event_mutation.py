"""
Event mutation service: create, edit and adopt.

Field rules shared by create and edit:
- meetings default to virtual mode; a meeting link survives only in virtual mode
- non-meetings never carry meeting attributes
- the time label is computed here, at write time

Required fields (title, start) are gated by the caller via can_submit();
the service itself does not re-validate them.
"""

import itertools
import time
from dataclasses import replace
from datetime import timedelta, tzinfo
from typing import Callable, List, Optional, Tuple

from vendrom_calendar.conflict_detector import find_conflicts
from vendrom_calendar.event_models import (
    OWNED_SOURCE,
    CalendarEvent,
    EventDraft,
    EventType,
    MeetingDetails,
    MeetingMode,
    Notice,
    NoticeTone,
)
from vendrom_calendar.event_store import EventStore
from vendrom_calendar.logging_helper import Log
from vendrom_calendar.navigation import NavigationController
from vendrom_calendar.notifications import NoticeBoard, notification_on_adopted, notification_on_already_owned
from vendrom_calendar.settings_manager import DEFAULT_SETTINGS
from vendrom_calendar.time_formatting import parse_point, resolve_end, time_label, to_local

_id_counter = itertools.count(1)


def generate_event_id() -> str:
    """Timestamp-based id; unique only while a single writer creates events."""
    return f"event-{int(time.time() * 1000)}-{next(_id_counter)}"


def can_submit(draft: EventDraft) -> bool:
    """True when the draft has a non-blank title and a start."""
    if not draft.title or not draft.title.strip():
        return False
    if draft.start is None:
        return False
    if isinstance(draft.start, str) and not draft.start.strip():
        return False
    return True


def localize_event(event: CalendarEvent, zone: Optional[tzinfo] = None) -> CalendarEvent:
    """
    Return `event` with start and end in naive local wall-clock time.
    Events that are already naive come back unchanged; converted events get
    a fresh time label since their clock times moved.
    """
    if event.start.tzinfo is None and (event.end is None or event.end.tzinfo is None):
        return event
    start = to_local(event.start, zone)
    end = to_local(event.end, zone) if event.end is not None else None
    return replace(
        event,
        start=start,
        end=end,
        time_label=time_label(start, end, all_day=event.all_day),
    )


def _meeting_details(
    event_type: EventType,
    mode: Optional[MeetingMode],
    link: Optional[str],
) -> Optional[MeetingDetails]:
    if event_type is not EventType.MEETING:
        return None
    mode = MeetingMode(mode or MeetingMode.VIRTUAL)
    if mode is not MeetingMode.VIRTUAL:
        link = None
    return MeetingDetails(mode=mode, link=link or None)


class EventMutationService:
    """Writes events into the store and reports the outcome to the user."""

    def __init__(
        self,
        store: EventStore,
        navigation: Optional[NavigationController] = None,
        notices: Optional[NoticeBoard] = None,
        id_factory: Callable[[], str] = generate_event_id,
        default_link: str = DEFAULT_SETTINGS["default_event_link"],
        zone: Optional[tzinfo] = None,
    ):
        """
        Args:
            zone: Zone whose calendar days events are kept in; None for the system zone
        """
        self.store = store
        self.navigation = navigation or NavigationController()
        self.notices = notices or NoticeBoard()
        self._id_factory = id_factory
        self._default_link = default_link
        self.zone = zone

    def _notify_conflicts(self, event: CalendarEvent, verb: str) -> List[CalendarEvent]:
        conflicts = find_conflicts(event, self.store.events)
        if conflicts:
            plural = "" if len(conflicts) == 1 else "s"
            self.notices.show(Notice(
                NoticeTone.WARNING,
                f"{verb}, but this overlaps with {len(conflicts)} event{plural}.",
            ))
        return conflicts

    def create(self, draft: EventDraft, notify_conflicts: bool = False) -> CalendarEvent:
        """
        Create an owned event from a form draft and insert it at the head of the store.

        Args:
            draft: Form input; title and start must be present (see can_submit)
            notify_conflicts: Show a warning notice if the new event overlaps others

        Returns:
            The stored event
        """
        Log.section("Create Event")
        start, has_time = parse_point(draft.start, zone=self.zone)
        end = resolve_end(draft.end, start, zone=self.zone)
        event_type = EventType(draft.type or EventType.MEETING)
        location = draft.location or None
        description = draft.description or (f"Location: {location}" if location else None)

        event = CalendarEvent(
            id=self._id_factory(),
            title=draft.title,
            start=start,
            end=end,
            all_day=not has_time,
            time_label=time_label(start, end, all_day=not has_time),
            type=event_type,
            source=OWNED_SOURCE,
            description=description,
            location=location,
            link=draft.link or self._default_link,
            details=_meeting_details(event_type, draft.meeting_mode, draft.meeting_link),
        )
        self.store.upsert(event)
        Log.kv({
            "stage": "create",
            "id": event.id,
            "type": event.type.value,
            "start": event.start.isoformat(),
            "label": event.time_label,
        })
        if notify_conflicts:
            self._notify_conflicts(event, "Saved")
        return event

    def edit(self, event_id: str, draft: EventDraft, notify_conflicts: bool = False) -> Optional[CalendarEvent]:
        """
        Merge a draft into an existing event and replace it in place.
        Draft fields left as None keep the prior value.

        Returns:
            The updated event, or None if no event has that id
        """
        Log.section("Edit Event")
        prior = self.store.get(event_id)
        if prior is None:
            Log.warn(f"No event with id {event_id} - nothing to edit")
            Log.kv({"stage": "edit", "result": "failed", "reason": "unknown_id", "id": event_id})
            return None

        if draft.start is not None:
            start, has_time = parse_point(draft.start, zone=self.zone)
        else:
            start, has_time = prior.start, not prior.all_day

        if draft.clear_end:
            end = None
        elif draft.end is not None:
            end = resolve_end(draft.end, start, zone=self.zone)
        elif prior.end is not None:
            # Keep the end's clock time, moved by as many days as the start moved
            end = prior.end + timedelta(days=(start.date() - prior.start.date()).days)
        else:
            end = None

        event_type = EventType(draft.type) if draft.type else prior.type
        meeting_mode = draft.meeting_mode or prior.meeting_mode
        meeting_link = draft.meeting_link if draft.meeting_link is not None else prior.meeting_link

        updated = replace(
            prior,
            title=draft.title or prior.title,
            start=start,
            end=end,
            all_day=not has_time,
            time_label=time_label(start, end, all_day=not has_time),
            type=event_type,
            location=(draft.location or None) if draft.location is not None else prior.location,
            description=draft.description if draft.description is not None else prior.description,
            link=draft.link if draft.link is not None else prior.link,
            details=_meeting_details(event_type, meeting_mode, meeting_link),
        )
        self.store.upsert(updated)
        Log.kv({
            "stage": "edit",
            "result": "success",
            "id": updated.id,
            "type": updated.type.value,
            "start": updated.start.isoformat(),
            "label": updated.time_label,
        })
        if notify_conflicts:
            self._notify_conflicts(updated, "Saved")
        return updated

    def adopt(self, external: CalendarEvent) -> Tuple[CalendarEvent, List[CalendarEvent]]:
        """
        Copy a surfaced event onto the user's own calendar.

        An event that is already owned is not copied again: its day is shown
        and an info notice is raised. Otherwise the copy gets a new id and the
        owned source, is inserted, and a success or warning notice reports
        how many events it overlaps. The event the copy was made from is left
        out of that count, so a surfaced event that also sits in the store does
        not overlap its own copy.

        Timezone-aware start/end are converted to local wall-clock time in
        the service zone before anything is stored.

        Returns:
            (owned event, conflicting events)
        """
        Log.section("Adopt Event")
        local = localize_event(external, self.zone)
        if external.is_owned:
            Log.info(f"Event {external.id} is already owned - not copying")
            self.navigation.focus(local.start.date())
            self.notices.show(notification_on_already_owned())
            Log.kv({"stage": "adopt", "result": "already_owned", "id": external.id})
            return external, []

        adopted = replace(local, id=self._id_factory(), source=OWNED_SOURCE)
        self.store.upsert(adopted)
        conflicts = find_conflicts(adopted, self.store.events, ignore_ids=(external.id,))
        self.navigation.focus(adopted.start.date())
        self.notices.show(notification_on_adopted(len(conflicts)))
        Log.kv({
            "stage": "adopt",
            "result": "success",
            "id": adopted.id,
            "from": external.id,
            "source": external.source,
            "conflicts": len(conflicts),
        })
        return adopted, conflicts
