from datetime import date, datetime

from vendrom_calendar.agenda import (
    day_agenda,
    days_with_events,
    events_for_slot,
    month_cell_summary,
    time_slots,
    upcoming,
)
from vendrom_calendar.event_store import index_by_date


def test_day_agenda_is_time_ascending(make_event):
    events = [
        make_event("late", datetime(2026, 3, 10, 15, 0)),
        make_event("other", datetime(2026, 3, 11, 8, 0)),
        make_event("early", datetime(2026, 3, 10, 9, 0)),
    ]
    assert [e.id for e in day_agenda(events, date(2026, 3, 10))] == ["early", "late"]
    assert [e.id for e in day_agenda(index_by_date(events), date(2026, 3, 10))] == ["early", "late"]
    assert day_agenda(events, None) == []


def test_upcoming_filters_sorts_and_truncates(make_event):
    now = datetime(2026, 3, 10, 9, 0)
    events = [
        make_event("past", datetime(2026, 3, 9, 9, 0)),
        make_event("c", datetime(2026, 3, 12, 9, 0)),
        make_event("now", now),
        make_event("b", datetime(2026, 3, 11, 9, 0)),
    ]
    assert [e.id for e in upcoming(events, now, 8)] == ["now", "b", "c"]
    assert [e.id for e in upcoming(events, now, 2)] == ["now", "b"]


def test_month_cell_summary_caps_visible_and_counts_overflow(make_event):
    day = date(2026, 3, 10)
    events = [make_event(f"e{hour}", datetime(2026, 3, 10, hour, 0)) for hour in (14, 9, 11, 16)]

    summary = month_cell_summary(events, day)

    assert [e.id for e in summary.visible] == ["e9", "e11"]
    assert summary.overflow == 2
    assert summary.day == day

    empty = month_cell_summary(events, date(2026, 3, 11))
    assert empty.visible == [] and empty.overflow == 0


def test_month_cell_summary_custom_cap(make_event):
    events = [make_event("a", datetime(2026, 3, 10, 9, 0))]
    summary = month_cell_summary(events, date(2026, 3, 10), max_visible=3)
    assert len(summary.visible) == 1
    assert summary.overflow == 0


def test_days_with_events_and_slots(make_event):
    events = [
        make_event("a", datetime(2026, 3, 12, 9, 15)),
        make_event("b", datetime(2026, 3, 10, 9, 0)),
        make_event("c", datetime(2026, 3, 10, 10, 0)),
    ]
    assert days_with_events(events) == [date(2026, 3, 10), date(2026, 3, 12)]
    assert time_slots() == list(range(7, 19))
    assert [e.id for e in events_for_slot(events, date(2026, 3, 10), 9)] == ["b"]
    assert events_for_slot(events, date(2026, 3, 10), 7) == []
