"""Caller-facing entry point: utterance in, spoken response out.

    text → strip wake phrase → parse_command → CommandRouter → CommandResult

Nothing is kept between calls. The caller serializes commands; a new
utterance should not be interpreted while a previous one is in flight.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from jarvis.config_models import AssistantConfig, Preferences, load_config
from jarvis.office.email.summarizer import DEFAULT_PREVIEW_CHARS
from jarvis.office.providers.base import CalendarSource, EmailSource
from jarvis.voice.models import CommandResult
from jarvis.voice.parser.command_router import (
    CommandContext,
    CommandRouter,
    create_default_router,
)
from jarvis.voice.parser.intent_parser import (
    DEFAULT_WAKE_PHRASE,
    parse_command,
    strip_wake_phrase,
)

logger = logging.getLogger(__name__)


async def interpret(
    utterance: str,
    preferences: Preferences,
    *,
    email_source: Optional[EmailSource] = None,
    calendar_source: Optional[CalendarSource] = None,
    now: Optional[datetime] = None,
    wake_phrase: str = DEFAULT_WAKE_PHRASE,
    router: Optional[CommandRouter] = None,
    preview_chars: int = DEFAULT_PREVIEW_CHARS,
) -> CommandResult:
    """Interpret one utterance and produce the response to speak.

    Never raises for a bad utterance or a failing source; the result's
    ``message`` always holds something to say.
    """
    command = parse_command(strip_wake_phrase(utterance, wake_phrase))
    logger.debug(f"Parsed {command.intent.value} with entities {dict(command.entities)}")

    context = CommandContext(
        preferences=preferences,
        email_source=email_source,
        calendar_source=calendar_source,
        now=now,
        preview_chars=preview_chars,
    )
    return await (router or create_default_router()).route_command(command, context)


class Assistant:
    """Binds the sources and configuration once for repeated use."""

    def __init__(
        self,
        email_source: Optional[EmailSource] = None,
        calendar_source: Optional[CalendarSource] = None,
        config: Optional[AssistantConfig] = None,
    ):
        self.email_source = email_source
        self.calendar_source = calendar_source
        self.config = config or load_config()
        self.router = create_default_router()

    async def interpret(
        self,
        utterance: str,
        preferences: Optional[Preferences] = None,
        now: Optional[datetime] = None,
    ) -> CommandResult:
        return await interpret(
            utterance,
            preferences or self.config.preferences,
            email_source=self.email_source,
            calendar_source=self.calendar_source,
            now=now,
            wake_phrase=self.config.wake_phrase,
            router=self.router,
            preview_chars=self.config.summaries.preview_chars,
        )
