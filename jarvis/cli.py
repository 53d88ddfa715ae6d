#!/usr/bin/env python3
"""
Jarvis Command Line Interface

Main entry point for the `jarvis` command. Interprets one utterance
against email/calendar fixtures and prints the spoken response.

Usage:
    jarvis "hey jarvis read me my emails" --fixtures inbox.yaml
    jarvis "read my agenda" --fixtures inbox.yaml --summary-length detailed
    jarvis "schedule lunch with sam at noon"
    jarvis --version
"""

import argparse
import asyncio
import json
import sys

from jarvis import __version__
from jarvis.config_models import load_config
from jarvis.logging_config import get_logger, setup_logging

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jarvis",
        description="Jarvis - voice-first email and calendar assistant",
    )
    parser.add_argument("utterance", nargs="?", help="What you said, e.g. \"read my agenda\"")
    parser.add_argument(
        "--version", "-V", action="store_true", help="Show version and exit"
    )
    parser.add_argument(
        "--fixtures", "-f", help="YAML file with 'emails' and 'events' lists"
    )
    parser.add_argument(
        "--config", help="Assistant config file (default: args/assistant.yaml)"
    )
    parser.add_argument(
        "--summary-length",
        choices=["concise", "medium", "detailed", "everything"],
        help="Override the configured summary length",
    )
    parser.add_argument(
        "--priority-contact",
        action="append",
        default=None,
        metavar="EMAIL",
        help="Priority contact address (repeatable)",
    )
    parser.add_argument(
        "--json", action="store_true", help="Print the full result as JSON"
    )
    return parser


def cmd_interpret(args) -> int:
    """Interpret a single utterance and print the response."""
    from jarvis.office.providers.fixture import FixtureCalendarSource, FixtureEmailSource
    from jarvis.voice.assistant import Assistant

    config = load_config(args.config)

    overrides = {}
    if args.summary_length:
        overrides["summary_length"] = args.summary_length
    if args.priority_contact:
        overrides["priority_contacts"] = args.priority_contact
    preferences = config.preferences.model_validate(
        {**config.preferences.model_dump(), **overrides}
    )

    assistant = Assistant(
        email_source=FixtureEmailSource(args.fixtures) if args.fixtures else None,
        calendar_source=FixtureCalendarSource(args.fixtures) if args.fixtures else None,
        config=config,
    )
    result = asyncio.run(assistant.interpret(args.utterance, preferences))
    logger.info(
        "utterance_interpreted",
        intent=result.intent.value,
        success=result.success,
    )

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print(result.message)
    return 0


def main(argv=None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(f"jarvis {__version__}")
        return 0

    if not args.utterance:
        parser.print_help()
        return 1

    setup_logging()
    return cmd_interpret(args)


if __name__ == "__main__":
    sys.exit(main())
