"""Calendar voice command handlers.

Reads the agenda through the calendar source; invitation replies and
scheduling requests are acknowledged for confirmation only.
"""

from __future__ import annotations

import logging

from jarvis.office.calendar.summarizer import (
    align_events,
    reference_now,
    summarize_events,
)
from jarvis.office.prioritizer import rank
from jarvis.voice.models import (
    CalendarReply,
    CommandResult,
    EntityType,
    ParsedCommand,
)
from jarvis.voice.parser.command_router import CommandContext

logger = logging.getLogger(__name__)

READ_AGENDA_FAILURE = (
    "I'm sorry, I couldn't read your agenda at this time. Please try again later."
)

CALENDAR_REPLY_MESSAGES: dict[str, str] = {
    CalendarReply.ACCEPT.value: "I've accepted the meeting invitation.",
    CalendarReply.DECLINE.value: "I've declined the meeting invitation.",
    CalendarReply.MAYBE.value: "I've tentatively accepted the meeting invitation.",
    CalendarReply.RESCHEDULE.value: "I'll look for alternative times for this meeting.",
}


async def handle_read_agenda(command: ParsedCommand, context: CommandContext) -> CommandResult:
    """Fetch, rank and summarize today's and tomorrow's events."""
    try:
        if context.calendar_source is None:
            raise RuntimeError("No calendar source configured")
        events = await context.calendar_source.fetch_events(context.preferences)
    except Exception as e:
        logger.exception(f"Error reading agenda: {e}")
        return CommandResult(success=False, message=READ_AGENDA_FAILURE, error=str(e))

    # rank compares start times; they must share one clock
    reference = context.now or reference_now(events)
    ranked = rank(align_events(events, reference), context.preferences)
    summary = summarize_events(
        ranked,
        context.preferences,
        now=reference,
        preview_chars=context.preview_chars,
    )

    return CommandResult(
        success=True,
        message=summary,
        data={"total": len(ranked), "event_ids": [e.id for e in ranked]},
    )


async def handle_calendar_response(command: ParsedCommand, context: CommandContext) -> CommandResult:
    reply = command.get_entity(EntityType.RESPONSE, CalendarReply.ACCEPT.value)
    return CommandResult(
        success=True,
        message=CALENDAR_REPLY_MESSAGES.get(reply, "I've processed your calendar response."),
        data={"response": reply},
    )


def build_schedule_message(what: str, when: str, with_whom: str, where: str) -> str:
    """Confirmation sentence; each detail is read back only if it was heard."""
    fragments = [
        (what, f'"{what}" '),
        (when, f"for {when} "),
        (with_whom, f"with {with_whom} "),
        (where, f"at {where} "),
    ]
    details = "".join(text for value, text in fragments if value)
    return f"I'm scheduling {details}. Is that correct?"


async def handle_schedule(command: ParsedCommand, context: CommandContext) -> CommandResult:
    details = {
        key.value: command.get_entity(key, "")
        for key in (EntityType.WHAT, EntityType.WHEN, EntityType.WITH_WHOM, EntityType.WHERE)
    }
    return CommandResult(
        success=True,
        message=build_schedule_message(
            details["what"], details["when"], details["with_whom"], details["where"]
        ),
        data=details,
    )
