"""
Tool: Office Models
Purpose: Data structures for the inbox and calendar items Jarvis reads out

Usage:
    from jarvis.office.models import Email, CalendarEvent, ScheduleConflict

Items are owned by the email/calendar sources. The core only reads them:
ranking and summarizing build new ordered lists, never mutate in place.
"""

from __future__ import annotations

import json
import re
from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Any, Optional, Protocol, runtime_checkable


def _parse_datetime(value: Any) -> Any:
    if isinstance(value, str):
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    return value


@runtime_checkable
class SummarizableItem(Protocol):
    """Anything the priority ranker can order."""

    id: str

    @property
    def timestamp(self) -> datetime: ...

    @property
    def is_important(self) -> bool: ...

    @property
    def participant_email(self) -> Optional[str]: ...


@dataclass(frozen=True)
class EmailAddress:
    """
    Email address with display name.
    """

    address: str
    name: str | None = None

    def __str__(self) -> str:
        if self.name:
            return f"{self.name} <{self.address}>"
        return self.address

    @property
    def display_name(self) -> str:
        return self.name or self.address

    def to_dict(self) -> dict[str, Any]:
        return {"address": self.address, "name": self.name}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "EmailAddress":
        return cls(**data)

    @classmethod
    def from_string(cls, s: str) -> "EmailAddress":
        """Parse 'Name <email>' or plain 'email' format."""
        match = re.match(r"^(.+?)\s*<([^>]+)>$", s.strip())
        if match:
            return cls(address=match.group(2), name=match.group(1).strip())
        return cls(address=s.strip())


@dataclass(frozen=True)
class Email:
    """
    An inbox message as handed over by an email source.
    """

    id: str
    subject: str = ""
    sender: EmailAddress | None = None
    received_at: datetime = field(default_factory=datetime.now)
    body: str = ""

    is_read: bool = False
    is_important: bool = False
    has_attachments: bool = False

    @property
    def timestamp(self) -> datetime:
        return self.received_at

    @property
    def participant_email(self) -> Optional[str]:
        return self.sender.address if self.sender else None

    @property
    def sender_name(self) -> str:
        return self.sender.display_name if self.sender else "an unknown sender"

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        d = asdict(self)
        d["received_at"] = self.received_at.isoformat()
        d["sender"] = self.sender.to_dict() if self.sender else None
        return d

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Email":
        """Create from dict. Accepts ISO strings and 'Name <addr>' senders."""
        data = data.copy()
        data["received_at"] = _parse_datetime(data.get("received_at", datetime.now()))
        sender = data.get("sender")
        if isinstance(sender, dict):
            data["sender"] = EmailAddress.from_dict(sender)
        elif isinstance(sender, str):
            data["sender"] = EmailAddress.from_string(sender)
        return cls(**data)

    def to_json(self) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), default=str)


@dataclass(frozen=True)
class Attendee:
    """
    Calendar event attendee.
    """

    email: str
    name: str | None = None
    status: str = "needsAction"  # needsAction, accepted, declined, tentative
    is_organizer: bool = False

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Attendee":
        return cls(**data)


@dataclass(frozen=True)
class CalendarEvent:
    """
    A calendar entry as handed over by a calendar source.

    ``response_status`` is the user's own answer to the invitation.
    """

    id: str
    title: str = ""
    description: str = ""
    location: str = ""

    # Timing
    start_time: datetime = field(default_factory=datetime.now)
    end_time: datetime = field(default_factory=datetime.now)

    # Participants
    organizer: Attendee | None = None
    attendees: tuple[Attendee, ...] = ()

    # Status
    response_status: str = "accepted"  # needsAction, accepted, declined, tentative
    importance: str = "medium"  # low, medium, high

    @property
    def timestamp(self) -> datetime:
        return self.start_time

    @property
    def is_important(self) -> bool:
        return self.importance == "high"

    @property
    def participant_email(self) -> Optional[str]:
        return self.organizer.email if self.organizer else None

    @property
    def needs_response(self) -> bool:
        return self.response_status == "needsAction"

    @property
    def duration_minutes(self) -> int:
        """Get event duration in minutes."""
        delta = self.end_time - self.start_time
        return int(delta.total_seconds() / 60)

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        d = asdict(self)
        d["start_time"] = self.start_time.isoformat()
        d["end_time"] = self.end_time.isoformat()
        d["organizer"] = self.organizer.to_dict() if self.organizer else None
        d["attendees"] = [a.to_dict() for a in self.attendees]
        return d

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CalendarEvent":
        """Create from dict. Attendees may be dicts or bare email strings."""
        data = data.copy()
        for time_field in ("start_time", "end_time"):
            if time_field in data:
                data[time_field] = _parse_datetime(data[time_field])
        if isinstance(data.get("organizer"), dict):
            data["organizer"] = Attendee.from_dict(data["organizer"])
        data["attendees"] = tuple(
            Attendee.from_dict(a) if isinstance(a, dict)
            else Attendee(email=a) if isinstance(a, str)
            else a
            for a in data.get("attendees") or ()
        )
        return cls(**data)

    def to_json(self) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), default=str)


@dataclass(frozen=True)
class ScheduleConflict:
    """Two events whose time ranges overlap. Derived, never stored."""

    first: Any
    second: Any
    overlap_start: datetime
    overlap_end: datetime

    @property
    def duration_minutes(self) -> int:
        return int((self.overlap_end - self.overlap_start).total_seconds() / 60)
