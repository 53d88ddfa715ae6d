"""Voice interface data models.

Defines intents, entities, and result types for the voice command pipeline:
    Transcript → ParsedCommand → CommandResult
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping


class IntentType(str, Enum):
    """Voice command intent types. The set is closed."""

    # Briefings
    READ_EMAILS = "read_emails"
    READ_AGENDA = "read_agenda"

    # Email follow-ups
    IGNORE = "ignore"
    RESPOND = "respond"
    RESPOND_LATER = "respond_later"
    SET_IMPORTANT = "set_important"
    REPRIORITIZE = "reprioritize"

    # Calendar
    CALENDAR_RESPONSE = "calendar_response"
    SCHEDULE = "schedule"

    # Meta
    UNKNOWN = "unknown"


class EntityType(str, Enum):
    """Names of entities captured from a transcript."""

    MESSAGE = "message"
    TIME = "time"
    IS_IMPORTANT = "is_important"
    RESPONSE = "response"
    WHAT = "what"
    WHEN = "when"
    WITH_WHOM = "with_whom"
    WHERE = "where"
    ITEM_ID = "id"


class CalendarReply(str, Enum):
    """Answers the user can give to a meeting invitation."""

    ACCEPT = "accept"
    DECLINE = "decline"
    MAYBE = "maybe"
    RESCHEDULE = "reschedule"


@dataclass(frozen=True)
class ParsedCommand:
    """A parsed voice command with intent and entities."""

    intent: IntentType
    entities: Mapping[str, Any] = field(default_factory=dict)
    raw_transcript: str = ""

    def __post_init__(self) -> None:
        # Read-only view so a command cannot be altered after parsing
        object.__setattr__(self, "entities", MappingProxyType(dict(self.entities)))

    def get_entity(self, entity_type: EntityType | str, default: Any = None) -> Any:
        """Get an entity value by name."""
        key = entity_type.value if isinstance(entity_type, EntityType) else entity_type
        return self.entities.get(key, default)

    def has_entity(self, entity_type: EntityType | str) -> bool:
        key = entity_type.value if isinstance(entity_type, EntityType) else entity_type
        return key in self.entities

    def to_dict(self) -> dict[str, Any]:
        return {
            "intent": self.intent.value,
            "entities": dict(self.entities),
            "raw_transcript": self.raw_transcript,
        }


@dataclass
class CommandResult:
    """Result from executing a voice command."""

    success: bool
    message: str
    intent: IntentType = IntentType.UNKNOWN
    data: dict[str, Any] = field(default_factory=dict)
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": self.success,
            "message": self.message,
            "intent": self.intent.value,
            "data": self.data,
            "error": self.error,
        }
