"""Email and calendar sources."""

from jarvis.office.providers.base import CalendarSource, EmailSource, SourceError
from jarvis.office.providers.fixture import FixtureCalendarSource, FixtureEmailSource

__all__ = [
    "CalendarSource",
    "EmailSource",
    "FixtureCalendarSource",
    "FixtureEmailSource",
    "SourceError",
]
