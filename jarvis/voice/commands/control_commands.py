"""Control voice command handlers."""

from __future__ import annotations

from jarvis.voice.models import CommandResult, ParsedCommand
from jarvis.voice.parser.command_router import CommandContext

UNKNOWN_COMMAND_MESSAGE = "I'm sorry, I didn't understand that command. Please try again."


async def handle_unknown(command: ParsedCommand, context: CommandContext) -> CommandResult:
    return CommandResult(
        success=False,
        message=UNKNOWN_COMMAND_MESSAGE,
        error="unrecognized_command",
    )
