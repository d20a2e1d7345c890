from datetime import datetime

from vendrom_calendar.event_store import EventStore, index_by_date, upsert


def test_index_groups_by_day_in_collection_order(make_event):
    late = make_event("late", datetime(2026, 3, 10, 15, 0))
    early = make_event("early", datetime(2026, 3, 10, 9, 0))
    other_day = make_event("other", datetime(2026, 3, 11, 9, 0))

    index = index_by_date([late, early, other_day])

    assert [event.id for event in index["2026-03-10"]] == ["late", "early"]
    assert [event.id for event in index["2026-03-11"]] == ["other"]


def test_upsert_inserts_new_events_at_head(make_event):
    first = make_event("a", datetime(2026, 3, 10, 9, 0))
    second = make_event("b", datetime(2026, 3, 11, 9, 0))

    events = upsert([first], second)

    assert [event.id for event in events] == ["b", "a"]


def test_upsert_replaces_matching_id_in_place(make_event):
    events = [
        make_event("a", datetime(2026, 3, 10, 9, 0)),
        make_event("b", datetime(2026, 3, 11, 9, 0)),
        make_event("c", datetime(2026, 3, 12, 9, 0)),
    ]
    edited = make_event("b", datetime(2026, 3, 20, 9, 0), title="Moved")

    result = upsert(events, edited)

    assert [event.id for event in result] == ["a", "b", "c"]
    assert result[1].title == "Moved"
    assert result[0] is events[0] and result[2] is events[2]


def test_store_index_is_rebuilt_after_every_upsert(make_event):
    store = EventStore([make_event("a", datetime(2026, 3, 10, 9, 0))])
    stale = store.index()
    assert "2026-03-12" not in stale

    store.upsert(make_event("b", datetime(2026, 3, 12, 9, 0)))
    assert [event.id for event in store.on_day(datetime(2026, 3, 12))] == ["b"]

    store.upsert(make_event("a", datetime(2026, 3, 12, 7, 0)))
    assert store.on_day(datetime(2026, 3, 10)) == []
    assert {event.id for event in store.on_day(datetime(2026, 3, 12))} == {"a", "b"}


def test_store_lookup_and_copies(make_event):
    event = make_event("a", datetime(2026, 3, 10, 9, 0))
    store = EventStore([event])

    assert store.get("a") is event
    assert store.get("missing") is None
    assert "a" in store
    assert len(store) == 1

    store.events.clear()
    assert len(store) == 1
