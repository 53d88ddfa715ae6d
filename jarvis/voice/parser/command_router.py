"""Route parsed voice commands to appropriate handlers.

The router holds one handler per intent and nothing else; every call is
independent. Handlers receive the parsed command and a ``CommandContext``
carrying the caller's preferences and the email/calendar sources.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from datetime import datetime
from typing import Awaitable, Callable, Mapping, Optional

from jarvis.config_models import Preferences
from jarvis.office.email.summarizer import DEFAULT_PREVIEW_CHARS
from jarvis.office.providers.base import CalendarSource, EmailSource
from jarvis.voice.models import (
    CommandResult,
    IntentType,
    ParsedCommand,
)

logger = logging.getLogger(__name__)

GENERIC_FAILURE_MESSAGE = "Sorry, I encountered an error processing your request."


@dataclass(frozen=True)
class CommandContext:
    """Everything a handler may use besides the command itself."""

    preferences: Preferences
    email_source: Optional[EmailSource] = None
    calendar_source: Optional[CalendarSource] = None
    now: Optional[datetime] = None
    preview_chars: int = DEFAULT_PREVIEW_CHARS


# Handler type: async function(parsed_command, context) -> CommandResult
HandlerFn = Callable[[ParsedCommand, CommandContext], Awaitable[CommandResult]]


class CommandRouter:
    """Routes parsed voice commands to registered handlers."""

    def __init__(self, handlers: Mapping[IntentType, HandlerFn] | None = None):
        self._handlers: dict[IntentType, HandlerFn] = dict(handlers or {})

    def register(self, intent: IntentType, handler: HandlerFn) -> None:
        """Register a handler for an intent type."""
        self._handlers[intent] = handler

    @property
    def intents(self) -> frozenset[IntentType]:
        return frozenset(self._handlers)

    def missing_intents(self) -> set[IntentType]:
        return set(IntentType) - set(self._handlers)

    async def route_command(
        self,
        command: ParsedCommand,
        context: CommandContext,
    ) -> CommandResult:
        """Route a parsed command to its handler.

        Handlers turn expected failures into spoken messages themselves;
        anything that still escapes is logged and answered generically.
        """
        start = time.monotonic()
        try:
            handler = self._handlers[command.intent]
            result = await handler(command, context)
            result.intent = command.intent
        except Exception as e:
            logger.exception(f"Voice command handler failed for {command.intent.value}: {e}")
            result = CommandResult(
                success=False,
                message=GENERIC_FAILURE_MESSAGE,
                intent=command.intent,
                error=str(e),
            )

        elapsed_ms = int((time.monotonic() - start) * 1000)
        logger.info(
            f"Handled {command.intent.value} in {elapsed_ms}ms "
            f"(success={result.success})"
        )
        return result


def create_default_router() -> CommandRouter:
    """Create a router with a handler for every intent.

    Raises:
        KeyError: if an intent has no handler
    """
    from jarvis.voice.commands.calendar_commands import (
        handle_calendar_response,
        handle_read_agenda,
        handle_schedule,
    )
    from jarvis.voice.commands.control_commands import handle_unknown
    from jarvis.voice.commands.email_commands import (
        handle_ignore,
        handle_read_emails,
        handle_reprioritize,
        handle_respond,
        handle_respond_later,
        handle_set_important,
    )

    router = CommandRouter()

    # Email commands
    router.register(IntentType.READ_EMAILS, handle_read_emails)
    router.register(IntentType.IGNORE, handle_ignore)
    router.register(IntentType.RESPOND, handle_respond)
    router.register(IntentType.RESPOND_LATER, handle_respond_later)
    router.register(IntentType.SET_IMPORTANT, handle_set_important)
    router.register(IntentType.REPRIORITIZE, handle_reprioritize)

    # Calendar commands
    router.register(IntentType.READ_AGENDA, handle_read_agenda)
    router.register(IntentType.CALENDAR_RESPONSE, handle_calendar_response)
    router.register(IntentType.SCHEDULE, handle_schedule)

    # Control commands
    router.register(IntentType.UNKNOWN, handle_unknown)

    missing = router.missing_intents()
    if missing:
        raise KeyError(f"No handler for intents: {sorted(i.value for i in missing)}")

    return router
