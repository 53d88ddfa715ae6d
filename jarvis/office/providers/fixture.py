"""
Tool: Fixture Sources
Purpose: Email and calendar sources backed by a YAML file

Useful for demos, the CLI and tests. The file holds two lists:

    emails:
      - id: e1
        subject: Quarterly report
        sender: "Dana Smith <dana@example.com>"
        received_at: "2026-10-19T08:15:00"
        is_important: true
    events:
      - id: ev1
        title: Standup
        start_time: "2026-10-19T09:30:00"
        end_time: "2026-10-19T10:00:00"
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from jarvis.config_models import Preferences
from jarvis.office.models import CalendarEvent, Email
from jarvis.office.providers.base import CalendarSource, EmailSource, SourceError

logger = logging.getLogger(__name__)


def load_fixture(path: Path | str, section: str) -> list[dict[str, Any]]:
    """Read one list section from a fixture file."""
    fixture_path = Path(path)
    try:
        with open(fixture_path) as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise SourceError(f"Could not read fixture {fixture_path}: {e}", source=section) from e

    items = data.get(section) or []
    if not isinstance(items, list):
        raise SourceError(f"Fixture section '{section}' must be a list", source=section)
    return items


class FixtureEmailSource(EmailSource):
    """Emails from the ``emails`` section of a fixture file."""

    def __init__(self, path: Path | str):
        self.path = Path(path)

    async def fetch_emails(self, preferences: Preferences) -> list[Email]:
        rows = load_fixture(self.path, "emails")
        try:
            emails = [Email.from_dict(row) for row in rows]
        except (TypeError, ValueError) as e:
            raise SourceError(f"Malformed email in {self.path}: {e}", source="emails") from e
        logger.debug(f"Loaded {len(emails)} emails from {self.path}")
        return emails


class FixtureCalendarSource(CalendarSource):
    """Events from the ``events`` section of a fixture file."""

    def __init__(self, path: Path | str):
        self.path = Path(path)

    async def fetch_events(self, preferences: Preferences) -> list[CalendarEvent]:
        rows = load_fixture(self.path, "events")
        try:
            events = [CalendarEvent.from_dict(row) for row in rows]
        except (TypeError, ValueError) as e:
            raise SourceError(f"Malformed event in {self.path}: {e}", source="events") from e
        logger.debug(f"Loaded {len(events)} events from {self.path}")
        return events
