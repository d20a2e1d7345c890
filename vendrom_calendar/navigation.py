"""
Navigation controller for the calendar page.
Owns the active view, the anchor (current) date and the selected date, and
implements stepping, jump-to-today, month/year picks and per-view drill-down.
"""

import calendar
from datetime import date, timedelta
from typing import Callable, List, Optional, Tuple

from dateutil.relativedelta import relativedelta, MO

from vendrom_calendar.event_models import CalendarView, NavigationState
from vendrom_calendar.logging_helper import Log

YEAR_OPTION_SPAN = 3


def start_of_week(day: date) -> date:
    """Monday of the ISO week containing `day`."""
    return day + relativedelta(weekday=MO(-1))


class NavigationController:
    """
    View granularity plus anchor/selected dates for one session.

    Month and year picks keep the day of month and clamp it to the last valid
    day of the target month (Jan 31 -> Feb 28/29), never rolling forward.
    """

    def __init__(
        self,
        view: CalendarView = CalendarView.MONTH,
        current_date: Optional[date] = None,
        today_provider: Callable[[], date] = date.today,
    ):
        self._today = today_provider
        anchor = current_date or self._today()
        self._state = NavigationState(view=CalendarView(view), current_date=anchor, selected_date=anchor)

    @property
    def state(self) -> NavigationState:
        return NavigationState(
            view=self._state.view,
            current_date=self._state.current_date,
            selected_date=self._state.selected_date,
        )

    @property
    def view(self) -> CalendarView:
        return self._state.view

    @property
    def current_date(self) -> date:
        return self._state.current_date

    @property
    def selected_date(self) -> Optional[date]:
        return self._state.selected_date

    def _move_to(self, day: date, view: Optional[CalendarView] = None) -> None:
        self._state.current_date = day
        self._state.selected_date = day
        if view is not None:
            self._state.view = view
        Log.kv({"stage": "navigate", "view": self._state.view.value, "current": day.isoformat()})

    def set_view(self, view: CalendarView) -> None:
        self._state.view = CalendarView(view)
        Log.info(f"Calendar view set to {self._state.view.value}")

    def today(self) -> None:
        self._move_to(self._today())

    def step(self, direction: str) -> None:
        """
        Move the anchor one unit of the active view.

        Args:
            direction: 'prev' or 'next'
        """
        if direction not in ("prev", "next"):
            raise ValueError(f"Invalid direction: {direction}")
        delta = -1 if direction == "prev" else 1
        view = self._state.view
        if view is CalendarView.DAY:
            offset = relativedelta(days=delta)
        elif view is CalendarView.WEEK:
            offset = relativedelta(weeks=delta)
        elif view is CalendarView.YEAR:
            offset = relativedelta(years=delta)
        else:
            offset = relativedelta(months=delta)
        self._move_to(self._state.current_date + offset)

    def select_month(self, month: int) -> None:
        """Jump to `month` (1-12) of the anchor year, clamping the day."""
        if not 1 <= month <= 12:
            raise ValueError(f"Invalid month: {month}")
        self._move_to(self._state.current_date + relativedelta(month=month))

    def select_year(self, year: int) -> None:
        """Jump to `year` keeping month and day, clamping Feb 29."""
        if not date.min.year <= year <= date.max.year:
            raise ValueError(f"Invalid year: {year}")
        self._move_to(self._state.current_date + relativedelta(year=year))

    def select_date(self, day: Optional[date]) -> None:
        """
        Day click from the month grid or date picker.
        Clicking a day while in month view drills into day view.
        """
        self._state.selected_date = day
        if day is None:
            return
        self._state.current_date = day
        if self._state.view is CalendarView.MONTH:
            self._state.view = CalendarView.DAY
        Log.kv({"stage": "navigate", "view": self._state.view.value, "selected": day.isoformat()})

    def select_week_day(self, day: date) -> None:
        self._move_to(day, CalendarView.DAY)

    def select_month_tile(self, day: date) -> None:
        self._move_to(day, CalendarView.MONTH)

    def focus(self, day: date) -> None:
        """Show `day` in day view, e.g. after adding an event on it."""
        self._move_to(day, CalendarView.DAY)

    def visible_range(self) -> Tuple[date, date]:
        anchor = self._state.current_date
        view = self._state.view
        if view is CalendarView.DAY:
            return anchor, anchor
        if view is CalendarView.WEEK:
            first = start_of_week(anchor)
            return first, first + timedelta(days=6)
        if view is CalendarView.YEAR:
            return date(anchor.year, 1, 1), date(anchor.year, 12, 31)
        last_day = calendar.monthrange(anchor.year, anchor.month)[1]
        return anchor.replace(day=1), anchor.replace(day=last_day)

    def week_days(self) -> List[date]:
        first = start_of_week(self._state.current_date)
        return [first + timedelta(days=offset) for offset in range(7)]

    def year_months(self) -> List[date]:
        anchor = self._state.current_date
        return [anchor + relativedelta(month=month) for month in range(1, 13)]

    def label(self) -> str:
        anchor = self._state.current_date
        view = self._state.view
        if view is CalendarView.DAY:
            return (
                f"{calendar.day_name[anchor.weekday()]}, "
                f"{calendar.month_name[anchor.month]} {anchor.day}, {anchor.year}"
            )
        if view is CalendarView.WEEK:
            first, last = self.visible_range()
            return (
                f"{calendar.month_abbr[first.month]} {first.day} - "
                f"{calendar.month_abbr[last.month]} {last.day}, {last.year}"
            )
        if view is CalendarView.YEAR:
            return str(anchor.year)
        return f"{calendar.month_name[anchor.month]} {anchor.year}"

    @staticmethod
    def month_options() -> List[Tuple[int, str]]:
        return [(month, calendar.month_name[month]) for month in range(1, 13)]

    def year_options(self) -> List[int]:
        year = self._state.current_date.year
        return list(range(year - YEAR_OPTION_SPAN, year + YEAR_OPTION_SPAN + 1))
