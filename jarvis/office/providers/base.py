"""
Tool: Office Source Base
Purpose: Interfaces for the email and calendar sources Jarvis reads from

Transport, OAuth and retries live in the concrete sources. The core only
awaits ``fetch_emails`` / ``fetch_events`` and treats any exception as a
failed fetch.

Usage:
    from jarvis.office.providers.base import EmailSource, CalendarSource

    class GmailSource(EmailSource):
        async def fetch_emails(self, preferences):
            ...
"""

from abc import ABC, abstractmethod

from jarvis.config_models import Preferences
from jarvis.office.models import CalendarEvent, Email


class SourceError(Exception):
    """A source could not deliver its items."""

    def __init__(self, message: str, source: str = ""):
        super().__init__(message)
        self.source = source


class EmailSource(ABC):
    """Supplies inbox messages."""

    @property
    def source_name(self) -> str:
        return type(self).__name__

    @abstractmethod
    async def fetch_emails(self, preferences: Preferences) -> list[Email]:
        """
        Fetch the messages to summarize.

        Args:
            preferences: Session preferences

        Returns:
            list of Email

        Raises:
            SourceError: when the messages cannot be fetched
        """
        pass


class CalendarSource(ABC):
    """Supplies calendar events."""

    @property
    def source_name(self) -> str:
        return type(self).__name__

    @abstractmethod
    async def fetch_events(self, preferences: Preferences) -> list[CalendarEvent]:
        """
        Fetch upcoming events.

        Args:
            preferences: Session preferences

        Returns:
            list of CalendarEvent

        Raises:
            SourceError: when the events cannot be fetched
        """
        pass
