"""Email voice command handlers.

Reading the inbox is the only handler that talks to a source. The
follow-ups (ignore, respond, mark important, ...) only acknowledge; the
actual mailbox change belongs to the email source's owner.
"""

from __future__ import annotations

import logging

from jarvis.office.email.summarizer import summarize_emails
from jarvis.office.prioritizer import rank
from jarvis.voice.models import CommandResult, EntityType, ParsedCommand
from jarvis.voice.parser.command_router import CommandContext

logger = logging.getLogger(__name__)

READ_EMAILS_FAILURE = (
    "I'm sorry, I couldn't read your emails at this time. Please try again later."
)


async def handle_read_emails(command: ParsedCommand, context: CommandContext) -> CommandResult:
    """Fetch, rank and summarize the inbox."""
    try:
        if context.email_source is None:
            raise RuntimeError("No email source configured")
        emails = await context.email_source.fetch_emails(context.preferences)
    except Exception as e:
        logger.exception(f"Error reading emails: {e}")
        return CommandResult(success=False, message=READ_EMAILS_FAILURE, error=str(e))

    ranked = rank(emails, context.preferences)
    summary = summarize_emails(ranked, context.preferences, preview_chars=context.preview_chars)

    return CommandResult(
        success=True,
        message=summary,
        data={
            "total": len(ranked),
            "email_ids": [e.id for e in ranked],
        },
    )


async def handle_ignore(command: ParsedCommand, context: CommandContext) -> CommandResult:
    return CommandResult(success=True, message="I'll ignore that item.")


async def handle_respond(command: ParsedCommand, context: CommandContext) -> CommandResult:
    """Echo the drafted reply back for confirmation."""
    message = command.get_entity(EntityType.MESSAGE, "")
    return CommandResult(
        success=True,
        message=f'I\'ve drafted your response: "{message}". Would you like me to send it now?',
        data={"draft": message},
    )


async def handle_respond_later(command: ParsedCommand, context: CommandContext) -> CommandResult:
    """Acknowledge a reminder, falling back to the default delay."""
    time = command.get_entity(EntityType.TIME)
    when = f"at {time}" if time else f"in {context.preferences.reminder_default_time} minutes"
    return CommandResult(
        success=True,
        message=f"I'll remind you to respond to this {when}.",
        data={"time": time, "default_minutes": None if time else context.preferences.reminder_default_time},
    )


async def handle_set_important(command: ParsedCommand, context: CommandContext) -> CommandResult:
    is_important = bool(command.get_entity(EntityType.IS_IMPORTANT, True))
    status = "important" if is_important else "not important"
    return CommandResult(
        success=True,
        message=f"I've marked this as {status}.",
        data={"is_important": is_important},
    )


async def handle_reprioritize(command: ParsedCommand, context: CommandContext) -> CommandResult:
    item_id = command.get_entity(EntityType.ITEM_ID, "")
    return CommandResult(
        success=True,
        message=f"I've reprioritized item {item_id}.",
        data={"id": item_id},
    )
