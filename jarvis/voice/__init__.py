"""Voice Interface - spoken commands for the inbox and calendar

Components:
    models.py: IntentType, EntityType, ParsedCommand, CommandResult
    parser/: Intent rules, entity patterns, command routing
    commands/: One handler per intent (email, calendar, control)
    assistant.py: ``interpret`` entry point and the ``Assistant`` wrapper

Usage:
    from jarvis.voice.parser.intent_parser import parse_command
    from jarvis.voice.assistant import interpret

    parsed = parse_command("schedule team sync at 3pm with marketing")
    result = await interpret("hey jarvis read my agenda", preferences,
                             calendar_source=source)
"""
