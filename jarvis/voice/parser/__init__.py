"""Voice command parsing: intent detection, entity extraction, routing."""

from jarvis.voice.parser.command_router import CommandContext, CommandRouter
from jarvis.voice.parser.entity_extractor import extract_entities
from jarvis.voice.parser.intent_parser import parse_command, parse_intent

__all__ = [
    "CommandContext",
    "CommandRouter",
    "extract_entities",
    "parse_command",
    "parse_intent",
]
