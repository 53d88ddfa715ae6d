"""Entity extraction from voice command transcripts.

Each regex-backed entity is an ``EntityPattern`` that can be exercised on
its own. ``extract_entities`` runs the extractor registered for an intent
and returns a plain ``{name: value}`` dict.

Input is expected to be lower-cased and trimmed already.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Callable, Container, Optional

from jarvis.voice.models import CalendarReply, EntityType, IntentType


@dataclass(frozen=True)
class EntityPattern:
    """A named capture: group 1 of ``pattern`` is the entity value."""

    name: EntityType
    pattern: str
    default: Optional[str] = ""
    _compiled: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_compiled", re.compile(self.pattern, re.IGNORECASE))

    def search(self, text: str, skip_starts: Container[int] = ()) -> Optional[re.Match]:
        """First match whose start is not in ``skip_starts``."""
        pos = 0
        while pos <= len(text):
            match = self._compiled.search(text, pos)
            if match is None or match.start() not in skip_starts:
                return match
            pos = match.start() + 1
        return None

    def extract(self, text: str, skip_starts: Container[int] = ()) -> Optional[str]:
        match = self.search(text, skip_starts)
        if match is None:
            return self.default
        return match.group(1).strip()


MESSAGE_PATTERN = EntityPattern(EntityType.MESSAGE, r"respond:?\s*(.*)")
REMINDER_TIME_PATTERN = EntityPattern(
    EntityType.TIME, r"later\s+at\s+(\d+(?::\d+)?(?:\s*[ap]m)?)", default=None
)
ITEM_ID_PATTERN = EntityPattern(EntityType.ITEM_ID, r"reprioritize\s+(.*)")

SCHEDULE_WHAT_PATTERN = EntityPattern(
    EntityType.WHAT, r"schedule\s+(.*?)(?=\s+(?:at|on|with|tomorrow|today|in|for))"
)
SCHEDULE_WHEN_PATTERN = EntityPattern(
    EntityType.WHEN, r"(?:at|on)\s+(.*?)(?=\s+(?:with|at|in|for)|$)"
)
SCHEDULE_WITH_PATTERN = EntityPattern(
    EntityType.WITH_WHOM, r"with\s+(.*?)(?=\s+(?:at|in|for)|$)"
)
SCHEDULE_WHERE_PATTERN = EntityPattern(EntityType.WHERE, r"(?:at|in)\s+(.*?)(?=\s+for|$)")

# Checked in order; the first phrase present decides the reply
CALENDAR_REPLY_CHAIN: tuple[tuple[str, CalendarReply], ...] = (
    ("decline", CalendarReply.DECLINE),
    ("maybe", CalendarReply.MAYBE),
    ("find me a new time", CalendarReply.RESCHEDULE),
)


def extract_message(text: str) -> dict[str, Any]:
    return {EntityType.MESSAGE.value: MESSAGE_PATTERN.extract(text)}


def extract_reminder_time(text: str) -> dict[str, Any]:
    """``time`` is only present when the user named one."""
    time = REMINDER_TIME_PATTERN.extract(text)
    return {EntityType.TIME.value: time} if time else {}


def extract_importance(text: str) -> dict[str, Any]:
    return {EntityType.IS_IMPORTANT.value: "not important" not in text}


def extract_calendar_reply(text: str) -> dict[str, Any]:
    reply = CalendarReply.ACCEPT
    for phrase, candidate in CALENDAR_REPLY_CHAIN:
        if phrase in text:
            reply = candidate
            break
    return {EntityType.RESPONSE.value: reply.value}


def extract_schedule_details(text: str) -> dict[str, Any]:
    """Pull what/when/with/where out of a scheduling request.

    ``when`` claims the first "at"/"on" clause; ``where`` then takes the
    first "at"/"in" clause that ``when`` did not already claim.
    """
    when_match = SCHEDULE_WHEN_PATTERN.search(text)
    claimed = {when_match.start()} if when_match else set()

    return {
        EntityType.WHAT.value: SCHEDULE_WHAT_PATTERN.extract(text),
        EntityType.WHEN.value: when_match.group(1).strip() if when_match else "",
        EntityType.WITH_WHOM.value: SCHEDULE_WITH_PATTERN.extract(text),
        EntityType.WHERE.value: SCHEDULE_WHERE_PATTERN.extract(text, skip_starts=claimed),
    }


def extract_item_id(text: str) -> dict[str, Any]:
    return {EntityType.ITEM_ID.value: ITEM_ID_PATTERN.extract(text)}


ENTITY_EXTRACTORS: dict[IntentType, Callable[[str], dict[str, Any]]] = {
    IntentType.RESPOND: extract_message,
    IntentType.RESPOND_LATER: extract_reminder_time,
    IntentType.SET_IMPORTANT: extract_importance,
    IntentType.CALENDAR_RESPONSE: extract_calendar_reply,
    IntentType.SCHEDULE: extract_schedule_details,
    IntentType.REPRIORITIZE: extract_item_id,
}


def extract_entities(
    text: str,
    intent: IntentType = IntentType.UNKNOWN,
) -> dict[str, Any]:
    """Extract the entities that belong to ``intent`` from a transcript."""
    extractor = ENTITY_EXTRACTORS.get(intent)
    if extractor is None:
        return {}
    return extractor(text.lower().strip())
