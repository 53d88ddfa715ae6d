"""Shared test fixtures for Jarvis tests.

This module provides common fixtures used across all test modules:
- A fixed reference moment for calendar bucketing
- Preferences at each summary length
- Builders for emails and calendar events
- In-memory and failing email/calendar sources

Usage:
    def test_something(make_email, medium_prefs):
        email = make_email(subject="Hello")
        ...
"""

from datetime import datetime, timedelta
from typing import Callable

import pytest

from jarvis.config_models import Preferences
from jarvis.office.models import Attendee, CalendarEvent, Email, EmailAddress
from jarvis.office.providers.base import CalendarSource, EmailSource, SourceError


# ─────────────────────────────────────────────────────────────────────────────
# Time Fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def now() -> datetime:
    """Monday morning, 2026-10-19 08:00 local time."""
    return datetime(2026, 10, 19, 8, 0)


@pytest.fixture
def today(now: datetime) -> datetime:
    return now.replace(hour=0, minute=0)


@pytest.fixture
def tomorrow(today: datetime) -> datetime:
    return today + timedelta(days=1)


# ─────────────────────────────────────────────────────────────────────────────
# Preference Fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def concise_prefs() -> Preferences:
    return Preferences(summary_length="concise")


@pytest.fixture
def medium_prefs() -> Preferences:
    return Preferences(summary_length="medium")


@pytest.fixture
def detailed_prefs() -> Preferences:
    return Preferences(summary_length="detailed")


@pytest.fixture
def everything_prefs() -> Preferences:
    return Preferences(summary_length="everything")


# ─────────────────────────────────────────────────────────────────────────────
# Item Builders
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def make_email(now: datetime) -> Callable[..., Email]:
    """Build an Email with sensible defaults; override any field by keyword."""
    counter = {"n": 0}

    def _make(
        subject: str = "Hello",
        sender: str = "Dana Smith <dana@example.com>",
        minutes_ago: int = 0,
        **overrides,
    ) -> Email:
        counter["n"] += 1
        fields = {
            "id": f"email-{counter['n']}",
            "subject": subject,
            "sender": EmailAddress.from_string(sender),
            "received_at": now - timedelta(minutes=minutes_ago),
            "body": "",
            "is_read": True,
        }
        fields.update(overrides)
        return Email(**fields)

    return _make


@pytest.fixture
def make_event(today: datetime) -> Callable[..., CalendarEvent]:
    """Build a CalendarEvent from clock times on the fixture day.

    ``day_offset`` moves it to tomorrow (1), yesterday (-1), etc.
    """
    counter = {"n": 0}

    def _make(
        title: str,
        start: tuple[int, int],
        end: tuple[int, int],
        day_offset: int = 0,
        **overrides,
    ) -> CalendarEvent:
        counter["n"] += 1
        day = today + timedelta(days=day_offset)
        fields = {
            "id": f"event-{counter['n']}",
            "title": title,
            "start_time": day.replace(hour=start[0], minute=start[1]),
            "end_time": day.replace(hour=end[0], minute=end[1]),
        }
        fields.update(overrides)
        return CalendarEvent(**fields)

    return _make


@pytest.fixture
def organizer() -> Callable[[str], Attendee]:
    return lambda email: Attendee(email=email, is_organizer=True, status="accepted")


# ─────────────────────────────────────────────────────────────────────────────
# Source Fixtures
# ─────────────────────────────────────────────────────────────────────────────


class StaticEmailSource(EmailSource):
    def __init__(self, emails):
        self.emails = list(emails)
        self.calls = 0

    async def fetch_emails(self, preferences):
        self.calls += 1
        return list(self.emails)


class StaticCalendarSource(CalendarSource):
    def __init__(self, events):
        self.events = list(events)
        self.calls = 0

    async def fetch_events(self, preferences):
        self.calls += 1
        return list(self.events)


class FailingEmailSource(EmailSource):
    async def fetch_emails(self, preferences):
        raise SourceError("mail server unreachable", source="emails")


class FailingCalendarSource(CalendarSource):
    async def fetch_events(self, preferences):
        raise SourceError("calendar API timed out", source="events")


@pytest.fixture
def static_email_source() -> Callable[..., StaticEmailSource]:
    return StaticEmailSource


@pytest.fixture
def static_calendar_source() -> Callable[..., StaticCalendarSource]:
    return StaticCalendarSource


@pytest.fixture
def failing_email_source() -> FailingEmailSource:
    return FailingEmailSource()


@pytest.fixture
def failing_calendar_source() -> FailingCalendarSource:
    return FailingCalendarSource()
