"""Tests for voice entity extraction.

Each entity pattern is exercised on its own, independent of intent
detection.
"""

import pytest

from jarvis.voice.models import IntentType
from jarvis.voice.parser.entity_extractor import (
    ITEM_ID_PATTERN,
    MESSAGE_PATTERN,
    REMINDER_TIME_PATTERN,
    SCHEDULE_WHAT_PATTERN,
    SCHEDULE_WHEN_PATTERN,
    SCHEDULE_WHERE_PATTERN,
    SCHEDULE_WITH_PATTERN,
    extract_calendar_reply,
    extract_entities,
    extract_importance,
    extract_schedule_details,
)


class TestMessagePattern:

    @pytest.mark.parametrize("text,expected", [
        ("respond: sounds great", "sounds great"),
        ("respond sounds great", "sounds great"),
        ("please respond:yes", "yes"),
        ("respond", ""),
    ])
    def test_extract(self, text, expected):
        assert MESSAGE_PATTERN.extract(text) == expected


class TestReminderTimePattern:

    @pytest.mark.parametrize("text,expected", [
        ("respond later at 5", "5"),
        ("respond later at 5pm", "5pm"),
        ("respond later at 10:15 am", "10:15 am"),
    ])
    def test_extract(self, text, expected):
        assert REMINDER_TIME_PATTERN.extract(text) == expected

    @pytest.mark.parametrize("text", ["respond later", "respond later tonight"])
    def test_absent(self, text):
        assert REMINDER_TIME_PATTERN.extract(text) is None


class TestSchedulePatterns:

    def test_what_needs_a_following_keyword(self):
        assert SCHEDULE_WHAT_PATTERN.extract("schedule dentist tomorrow") == "dentist"
        assert SCHEDULE_WHAT_PATTERN.extract("schedule dentist") == ""

    def test_when(self):
        assert SCHEDULE_WHEN_PATTERN.extract("schedule review on friday with ops") == "friday"
        assert SCHEDULE_WHEN_PATTERN.extract("schedule review at 10am") == "10am"

    def test_with(self):
        assert SCHEDULE_WITH_PATTERN.extract("schedule lunch with sam at noon") == "sam"
        assert SCHEDULE_WITH_PATTERN.extract("schedule lunch with sam") == "sam"

    def test_where(self):
        assert SCHEDULE_WHERE_PATTERN.extract("schedule lunch in the park") == "the park"

    def test_keywords_inside_words(self):
        details = extract_schedule_details("schedule planning on monday with martin")
        assert details["what"] == "planning"
        assert details["when"] == "monday"
        assert details["with_whom"] == "martin"
        assert details["where"] == ""

    def test_full_sentence(self):
        assert extract_schedule_details("schedule team sync at 3pm with marketing in room b") == {
            "what": "team sync",
            "when": "3pm",
            "with_whom": "marketing",
            "where": "room b",
        }

    def test_at_clause_claimed_by_when(self):
        details = extract_schedule_details("schedule lunch with sam at noon")
        assert details["what"] == "lunch"
        assert details["when"] == "noon"
        assert details["with_whom"] == "sam"
        assert details["where"] == ""

    def test_second_at_clause_is_location(self):
        details = extract_schedule_details("schedule demo at 2pm at the office")
        assert details["when"] == "2pm"
        assert details["where"] == "the office"

    def test_reschedule_still_captures_what(self):
        assert extract_schedule_details("reschedule lunch with sam") == {
            "what": "lunch",
            "when": "",
            "with_whom": "sam",
            "where": "",
        }

    def test_keyword_inside_a_name(self):
        details = extract_schedule_details("schedule standup with nathan at noon")
        assert details["what"] == "standup"
        assert details["when"] == "noon"
        assert details["with_whom"] == "nathan"
        assert details["where"] == ""

    def test_with_clause_runs_past_on(self):
        details = extract_schedule_details("schedule sync with ops on friday")
        assert details["with_whom"] == "ops on friday"
        assert details["when"] == "friday"


class TestItemIdPattern:

    def test_trailing_text(self):
        assert ITEM_ID_PATTERN.extract("reprioritize 42") == "42"

    def test_missing(self):
        assert ITEM_ID_PATTERN.extract("reprioritize") == ""


class TestKeywordEntities:

    def test_importance(self):
        assert extract_importance("mark as important") == {"is_important": True}
        assert extract_importance("mark as not important") == {"is_important": False}

    @pytest.mark.parametrize("text,expected", [
        ("accept it", "accept"),
        ("decline", "decline"),
        ("maybe", "maybe"),
        ("find me a new time", "reschedule"),
        ("maybe decline", "decline"),
    ])
    def test_calendar_reply(self, text, expected):
        assert extract_calendar_reply(text) == {"response": expected}


class TestExtractEntities:

    def test_unregistered_intent_returns_empty(self):
        assert extract_entities("read my emails", IntentType.READ_EMAILS) == {}
        assert extract_entities("anything", IntentType.UNKNOWN) == {}

    def test_normalizes_input(self):
        assert extract_entities("  Reprioritize ABC  ", IntentType.REPRIORITIZE) == {"id": "abc"}
