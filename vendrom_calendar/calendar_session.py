"""
Calendar session: everything the Calendar page and the dashboard side panel
need for one user, wired together.

Navigation requests go to `navigation`, mutations to `mutations`, and the
agenda views always read the store's current index.
"""

from datetime import date, datetime
from typing import Callable, Iterable, List, Optional

from vendrom_calendar import agenda
from vendrom_calendar.event_mutation import EventMutationService, can_submit, generate_event_id, localize_event
from vendrom_calendar.event_models import CalendarEvent, CalendarIntegration, EventDraft, Notice
from vendrom_calendar.event_store import EventStore
from vendrom_calendar.integrations import IntegrationRegistry, IntegrationTransport
from vendrom_calendar.logging_helper import Log
from vendrom_calendar.navigation import NavigationController
from vendrom_calendar.notifications import NoticeBoard
from vendrom_calendar.seed_data import seed_events, seed_integrations
from vendrom_calendar.settings_manager import (
    SettingsSchema,
    get_default_event_link,
    get_limit,
    get_timezone_name,
    load_settings,
)
from vendrom_calendar.time_formatting import local_timezone, now_local


class CalendarSession:
    def __init__(
        self,
        events: Optional[Iterable[CalendarEvent]] = None,
        integrations: Optional[Iterable[CalendarIntegration]] = None,
        settings: Optional[SettingsSchema] = None,
        clock: Optional[Callable[[], datetime]] = None,
        id_factory: Callable[[], str] = generate_event_id,
        transport: Optional[IntegrationTransport] = None,
    ):
        """
        Args:
            events: Starting events; defaults to the sample events
            integrations: Provider integrations; defaults to the sample providers
            settings: Settings mapping; defaults to the saved settings
            clock: Returns the current local time; defaults to the system clock
            id_factory: Produces ids for created and adopted events
            transport: Provider connect/disconnect transport
        """
        self.settings = settings if settings is not None else load_settings()
        self.zone = local_timezone(get_timezone_name(self.settings))
        self._clock = clock or (lambda: now_local(self.zone))

        starting_events = seed_events() if events is None else events
        self.store = EventStore(localize_event(event, self.zone) for event in starting_events)
        self.navigation = NavigationController(today_provider=lambda: self._clock().date())
        self.notices = NoticeBoard()
        self.integrations = IntegrationRegistry(
            seed_integrations() if integrations is None else integrations,
            transport=transport,
        )
        self.mutations = EventMutationService(
            self.store,
            navigation=self.navigation,
            notices=self.notices,
            id_factory=id_factory,
            default_link=get_default_event_link(self.settings),
            zone=self.zone,
        )
        self.panel_open = False
        Log.info(f"Calendar session started with {len(self.store)} events")

    def now(self) -> datetime:
        return self._clock()

    @property
    def notice(self) -> Optional[Notice]:
        return self.notices.current

    def dismiss_notice(self) -> None:
        self.notices.dismiss()

    # Mutations

    def submit_create(self, draft: EventDraft, notify_conflicts: bool = False) -> Optional[CalendarEvent]:
        if not can_submit(draft):
            Log.warn("Create refused - title and start date are required")
            return None
        return self.mutations.create(draft, notify_conflicts=notify_conflicts)

    def submit_edit(
        self,
        event_id: str,
        draft: EventDraft,
        notify_conflicts: bool = False,
    ) -> Optional[CalendarEvent]:
        if draft.title is not None and not draft.title.strip():
            Log.warn("Edit refused - title cannot be blank")
            return None
        return self.mutations.edit(event_id, draft, notify_conflicts=notify_conflicts)

    def adopt(self, event: CalendarEvent):
        return self.mutations.adopt(event)

    def view_on_calendar(self, event: CalendarEvent) -> None:
        self.navigation.focus(event.start.date())

    # Agenda views

    def selected_agenda(self) -> List[CalendarEvent]:
        return agenda.day_agenda(self.store.index(), self.navigation.selected_date)

    def upcoming(self, limit: Optional[int] = None) -> List[CalendarEvent]:
        if limit is None:
            limit = get_limit("upcoming_limit", self.settings)
        return agenda.upcoming(self.store.events, self.now(), limit)

    def summary_upcoming(self) -> List[CalendarEvent]:
        return self.upcoming(get_limit("summary_limit", self.settings))

    def panel_upcoming(self) -> List[CalendarEvent]:
        return self.upcoming(get_limit("panel_upcoming_limit", self.settings))

    def month_cell(self, day: date) -> agenda.DayCellSummary:
        return agenda.month_cell_summary(
            self.store.index(),
            day,
            max_visible=get_limit("month_cell_max_visible", self.settings),
        )

    def slot_events(self, day: date, hour: int) -> List[CalendarEvent]:
        return agenda.events_for_slot(self.store.index(), day, hour)

    def days_with_events(self) -> List[date]:
        return agenda.days_with_events(self.store.events)

    # Integrations

    def toggle_integration(self, provider_id: str) -> CalendarIntegration:
        return self.integrations.toggle(provider_id)

    # Dashboard side panel

    def open_panel(self) -> None:
        self.panel_open = True

    def close_panel(self) -> None:
        self.panel_open = False

    def toggle_panel(self) -> None:
        self.panel_open = not self.panel_open
