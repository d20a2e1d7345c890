"""
Sample events and provider integrations that a new calendar session starts with.
"""

from datetime import datetime
from typing import List

from vendrom_calendar.event_models import (
    CalendarEvent,
    CalendarIntegration,
    EventType,
    MeetingDetails,
    MeetingMode,
)
from vendrom_calendar.time_formatting import time_label


def seed_integrations() -> List[CalendarIntegration]:
    return [
        CalendarIntegration(id="google", name="Google Calendar", connected=True, last_sync="Today, 09:15"),
        CalendarIntegration(id="microsoft", name="Microsoft Outlook", connected=False),
    ]


def seed_events() -> List[CalendarEvent]:
    investor_start = datetime(2026, 2, 5, 15, 0)
    booking_start = datetime(2026, 2, 6, 11, 30)
    deadline_start = datetime(2026, 2, 7, 17, 0)
    summit_start = datetime(2026, 3, 15, 10, 0)
    review_start = datetime(2026, 2, 10, 14, 0)

    return [
        CalendarEvent(
            id="event-1",
            title="Investor Coffee Chat",
            description="Follow-up with Horizon Ventures",
            location="Downtown Cafe",
            start=investor_start,
            end=datetime(2026, 2, 5, 16, 0),
            time_label=time_label(investor_start),
            type=EventType.MEETING,
            source="google",
            link="/dashboard/briefboard",
            details=MeetingDetails(mode=MeetingMode.PHYSICAL),
        ),
        CalendarEvent(
            id="event-2",
            title="Marketplace Booking",
            description="Product demo with Vendorly",
            location="Virtual",
            start=booking_start,
            end=datetime(2026, 2, 6, 12, 30),
            time_label=time_label(booking_start),
            type=EventType.BOOKING,
            link="/dashboard/marketplace",
        ),
        CalendarEvent(
            id="event-3",
            title="Funding Application Deadline",
            description="SME Growth Fund submission",
            start=deadline_start,
            time_label=time_label(deadline_start),
            type=EventType.DEADLINE,
            source="microsoft",
            link="/dashboard/investments",
        ),
        CalendarEvent(
            id="event-4",
            title="Vendrome Networking Summit",
            description="Annual virtual networking event",
            location="https://meet.vendrom.com/summit",
            start=summit_start,
            end=datetime(2026, 3, 15, 12, 0),
            time_label=time_label(summit_start),
            type=EventType.EVENT,
            link="/dashboard/feed",
        ),
        CalendarEvent(
            id="event-5",
            title="Marketing Campaign Review",
            description="Quarterly performance review",
            start=review_start,
            end=datetime(2026, 2, 10, 15, 0),
            time_label=time_label(review_start),
            type=EventType.REMINDER,
            link="/dashboard/marketing",
        ),
    ]
