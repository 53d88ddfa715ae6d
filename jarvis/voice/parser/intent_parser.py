"""Intent parsing for voice commands.

A flat decision list: rules are tried in ``order`` and the first match wins.
The order is part of the behavior. An utterance such as "ignore the
schedule" hits several rules and resolves to the earliest one, so rules
must not be reordered.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable

from jarvis.voice.models import IntentType, ParsedCommand
from jarvis.voice.parser.entity_extractor import extract_entities

DEFAULT_WAKE_PHRASE = "hey jarvis"


@dataclass(frozen=True)
class IntentRule:
    """One entry in the decision list."""

    order: int
    intent: IntentType
    matches: Callable[[str], bool]
    description: str = ""


def _contains_any(*phrases: str) -> Callable[[str], bool]:
    return lambda text: any(phrase in text for phrase in phrases)


INTENT_RULES: tuple[IntentRule, ...] = (
    IntentRule(
        1, IntentType.READ_EMAILS,
        _contains_any("read me my emails", "read my emails"),
        "read me my emails",
    ),
    IntentRule(
        2, IntentType.READ_AGENDA,
        _contains_any(
            "tell me what i have to do today",
            "what do i have to do today",
            "read my agenda",
            "read my calendar",
        ),
        "read my agenda",
    ),
    IntentRule(3, IntentType.IGNORE, _contains_any("ignore"), "ignore"),
    IntentRule(
        4, IntentType.RESPOND,
        lambda text: "respond" in text and "respond later" not in text,
        "respond: <message>",
    ),
    IntentRule(
        5, IntentType.RESPOND_LATER,
        _contains_any("respond later"),
        "respond later [at <time>]",
    ),
    IntentRule(
        6, IntentType.SET_IMPORTANT,
        lambda text: "mark" in text and ("important" in text or "not important" in text),
        "mark as (not) important",
    ),
    IntentRule(
        7, IntentType.CALENDAR_RESPONSE,
        _contains_any("accept", "decline", "maybe", "find me a new time"),
        "accept / decline / maybe / find me a new time",
    ),
    IntentRule(
        8, IntentType.SCHEDULE,
        _contains_any("schedule"),
        "schedule <what> at <when> with <whom> in <where>",
    ),
    IntentRule(
        9, IntentType.REPRIORITIZE,
        _contains_any("reprioritize"),
        "reprioritize <item>",
    ),
)


def normalize(text: str) -> str:
    return text.lower().strip()


def detect_wake_phrase(text: str, wake_phrase: str = DEFAULT_WAKE_PHRASE) -> bool:
    return bool(wake_phrase) and wake_phrase.lower() in text.lower()


def strip_wake_phrase(text: str, wake_phrase: str = DEFAULT_WAKE_PHRASE) -> str:
    """Remove the first occurrence of the wake phrase and trim."""
    if not wake_phrase:
        return text.strip()
    return re.sub(re.escape(wake_phrase), "", text, count=1, flags=re.IGNORECASE).strip()


def parse_intent(text: str) -> IntentType:
    """Classify a transcript without extracting entities."""
    text = normalize(text)
    if not text:
        return IntentType.UNKNOWN

    for rule in INTENT_RULES:
        if rule.matches(text):
            return rule.intent

    return IntentType.UNKNOWN


def parse_command(text: str) -> ParsedCommand:
    """Parse a voice transcript into a full command with entities.

    This is the main entry point for the voice command pipeline.
    """
    normalized = normalize(text)
    intent = parse_intent(normalized)

    return ParsedCommand(
        intent=intent,
        entities=extract_entities(normalized, intent),
        raw_transcript=normalized,
    )
