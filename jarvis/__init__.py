"""Jarvis - voice-first email and calendar assistant.

Turns a spoken command into an intent, routes it to a handler, and
answers with a spoken-style summary of the inbox or the calendar.

Components:
    voice/: Intent parsing, entity capture, command routing, entry point
    office/: Email and calendar models, ranking, summaries, sources
    config_models.py: Assistant configuration and per-session preferences
    logging_config.py: structlog setup
    cli.py: Command line entry point

Usage:
    from jarvis.voice.assistant import interpret

    result = await interpret(
        "hey jarvis read me my emails",
        preferences,
        email_source=source,
        calendar_source=calendar,
    )
    print(result.message)
"""

from pathlib import Path

# Path constants
PROJECT_ROOT = Path(__file__).parent.parent
ARGS_DIR = PROJECT_ROOT / "args"
CONFIG_PATH = ARGS_DIR / "assistant.yaml"

__version__ = "0.1.0"

__all__ = [
    "ARGS_DIR",
    "CONFIG_PATH",
    "PROJECT_ROOT",
    "__version__",
]
