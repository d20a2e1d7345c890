"""
Notice helper for showing one-off messages to the user.
A NoticeBoard holds at most one Notice: showing a new one replaces the old,
dismissing clears it. Notices are never stored with calendar events.
"""

from typing import Optional

from vendrom_calendar.event_models import Notice, NoticeTone
from vendrom_calendar.logging_helper import Log


class NoticeBoard:
    """One-slot mailbox for the page's current notice."""

    def __init__(self):
        self._current: Optional[Notice] = None

    @property
    def current(self) -> Optional[Notice]:
        return self._current

    def show(self, notice: Notice) -> Notice:
        if self._current is not None:
            Log.info(f"Replacing notice: {self._current.message}")
        self._current = notice
        Log.kv({"stage": "notice", "tone": notice.tone.value, "message": notice.message})
        return notice

    def dismiss(self) -> None:
        self._current = None


def notification_on_already_owned() -> Notice:
    return Notice(NoticeTone.INFO, "This event is already on your Vendrom calendar.")


def notification_on_adopted(conflict_count: int) -> Notice:
    """Success when the added event is clear, warning with the overlap count otherwise."""
    if conflict_count == 0:
        return Notice(NoticeTone.SUCCESS, "Added to your calendar.")
    plural = "" if conflict_count == 1 else "s"
    return Notice(
        NoticeTone.WARNING,
        f"Added, but this overlaps with {conflict_count} event{plural}.",
    )
