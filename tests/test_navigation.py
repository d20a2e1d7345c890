from datetime import date

import pytest

from vendrom_calendar.event_models import CalendarView
from vendrom_calendar.navigation import NavigationController, start_of_week

TODAY = date(2026, 3, 10)


def make_controller(view=CalendarView.MONTH, current=TODAY):
    return NavigationController(view=view, current_date=current, today_provider=lambda: TODAY)


@pytest.mark.parametrize("view, direction, expected", [
    (CalendarView.DAY, "next", date(2026, 3, 11)),
    (CalendarView.DAY, "prev", date(2026, 3, 9)),
    (CalendarView.WEEK, "next", date(2026, 3, 17)),
    (CalendarView.WEEK, "prev", date(2026, 3, 3)),
    (CalendarView.MONTH, "next", date(2026, 4, 10)),
    (CalendarView.MONTH, "prev", date(2026, 2, 10)),
    (CalendarView.YEAR, "next", date(2027, 3, 10)),
    (CalendarView.YEAR, "prev", date(2025, 3, 10)),
])
def test_step_moves_one_unit_and_selects_new_anchor(view, direction, expected):
    nav = make_controller(view=view)
    nav.step(direction)
    assert nav.current_date == expected
    assert nav.selected_date == expected
    assert nav.view is view


def test_step_month_clamps_to_shorter_month():
    nav = make_controller(current=date(2026, 1, 31))
    nav.step("next")
    assert nav.current_date == date(2026, 2, 28)


def test_step_rejects_unknown_direction():
    with pytest.raises(ValueError):
        make_controller().step("sideways")


def test_today_resets_both_dates_and_keeps_view():
    nav = make_controller(view=CalendarView.WEEK, current=date(2024, 1, 1))
    nav.select_date(date(2024, 1, 3))
    nav.today()
    assert nav.current_date == TODAY
    assert nav.selected_date == TODAY
    assert nav.view is CalendarView.WEEK


@pytest.mark.parametrize("year, expected_day", [(2026, 28), (2028, 29)])
def test_select_february_from_day_31_clamps(year, expected_day):
    nav = make_controller(current=date(year, 1, 31))
    nav.select_month(2)
    assert nav.current_date == date(year, 2, expected_day)
    assert nav.selected_date == nav.current_date
    assert nav.view is CalendarView.MONTH


def test_select_month_into_thirty_day_month():
    nav = make_controller(current=date(2026, 5, 31))
    nav.select_month(6)
    assert nav.current_date == date(2026, 6, 30)


def test_select_year_clamps_leap_day():
    nav = make_controller(current=date(2028, 2, 29))
    nav.select_year(2027)
    assert nav.current_date == date(2027, 2, 28)


def test_select_month_rejects_out_of_range():
    with pytest.raises(ValueError):
        make_controller().select_month(13)


def test_day_click_in_month_view_drills_into_day():
    nav = make_controller(view=CalendarView.MONTH)
    nav.select_date(date(2026, 3, 20))
    assert nav.view is CalendarView.DAY
    assert nav.current_date == date(2026, 3, 20)
    assert nav.selected_date == date(2026, 3, 20)


def test_select_date_outside_month_view_keeps_view():
    nav = make_controller(view=CalendarView.DAY)
    nav.select_date(date(2026, 3, 20))
    assert nav.view is CalendarView.DAY


def test_clearing_selection_keeps_anchor():
    nav = make_controller()
    nav.select_date(None)
    assert nav.selected_date is None
    assert nav.current_date == TODAY
    assert nav.view is CalendarView.MONTH


def test_week_header_click_drills_into_day():
    nav = make_controller(view=CalendarView.WEEK)
    nav.select_week_day(date(2026, 3, 12))
    assert nav.view is CalendarView.DAY
    assert nav.current_date == date(2026, 3, 12)


def test_year_tile_click_switches_to_month():
    nav = make_controller(view=CalendarView.YEAR)
    tile = nav.year_months()[6]
    nav.select_month_tile(tile)
    assert nav.view is CalendarView.MONTH
    assert nav.current_date == date(2026, 7, 10)


def test_year_months_clamp_day_of_month():
    nav = make_controller(current=date(2026, 1, 31))
    months = nav.year_months()
    assert len(months) == 12
    assert months[1] == date(2026, 2, 28)
    assert months[3] == date(2026, 4, 30)


def test_week_starts_on_monday():
    assert start_of_week(date(2026, 3, 10)) == date(2026, 3, 9)
    assert start_of_week(date(2026, 3, 9)) == date(2026, 3, 9)
    assert start_of_week(date(2026, 3, 15)) == date(2026, 3, 9)

    nav = make_controller(view=CalendarView.WEEK)
    days = nav.week_days()
    assert days[0] == date(2026, 3, 9)
    assert days[-1] == date(2026, 3, 15)


@pytest.mark.parametrize("view, expected", [
    (CalendarView.DAY, (date(2026, 3, 10), date(2026, 3, 10))),
    (CalendarView.WEEK, (date(2026, 3, 9), date(2026, 3, 15))),
    (CalendarView.MONTH, (date(2026, 3, 1), date(2026, 3, 31))),
    (CalendarView.YEAR, (date(2026, 1, 1), date(2026, 12, 31))),
])
def test_visible_range(view, expected):
    assert make_controller(view=view).visible_range() == expected


@pytest.mark.parametrize("view, expected", [
    (CalendarView.DAY, "Tuesday, March 10, 2026"),
    (CalendarView.WEEK, "Mar 9 - Mar 15, 2026"),
    (CalendarView.MONTH, "March 2026"),
    (CalendarView.YEAR, "2026"),
])
def test_label(view, expected):
    assert make_controller(view=view).label() == expected


def test_pick_options():
    nav = make_controller()
    assert nav.month_options()[0] == (1, "January")
    assert nav.month_options()[-1] == (12, "December")
    assert nav.year_options() == [2023, 2024, 2025, 2026, 2027, 2028, 2029]


def test_state_snapshot_is_detached():
    nav = make_controller()
    snapshot = nav.state
    nav.step("next")
    assert snapshot.current_date == TODAY
