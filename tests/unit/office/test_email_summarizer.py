"""Tests for the spoken inbox summary."""

import re

import pytest

from jarvis.office.email.summarizer import (
    select_emails,
    spoken_list,
    summarize_emails,
    truncate_preview,
)

CLOSING = (
    'You can say "ignore", "respond now", "respond later", or '
    '"mark as important" after each email.'
)


def narrated_subjects(summary: str) -> list[str]:
    return re.findall(r"subject: ([^(.\n]+?)(?: \(|\.\n)", summary)


@pytest.fixture
def five_emails(make_email):
    return [
        make_email("Budget", minutes_ago=10, is_read=False, is_important=True),
        make_email("Lunch?", minutes_ago=20, is_read=False),
        make_email("Newsletter", minutes_ago=30),
        make_email("Receipt", minutes_ago=40),
        make_email("Invoice", minutes_ago=50),
    ]


class TestOpening:

    def test_counts_sentence(self, five_emails, medium_prefs):
        summary = summarize_emails(five_emails, medium_prefs)
        assert summary.startswith(
            "You have 5 emails in your inbox, 2 unread, with 1 marked as important."
        )

    def test_no_important_clause_when_none(self, make_email, medium_prefs):
        summary = summarize_emails([make_email(is_read=False)], medium_prefs)
        assert summary.startswith(
            "You have 1 emails in your inbox, 1 unread. Would you like to hear about them?\n\n"
        )

    def test_empty_inbox(self, medium_prefs):
        summary = summarize_emails([], medium_prefs)
        assert summary.startswith("You have 0 emails in your inbox, 0 unread.")
        assert summary.endswith(CLOSING)

    def test_closing_hint(self, five_emails, medium_prefs):
        assert summarize_emails(five_emails, medium_prefs).endswith(CLOSING)


class TestSelection:

    @pytest.mark.parametrize("prefs_name,expected", [
        ("concise_prefs", 3),
        ("medium_prefs", 5),
        ("detailed_prefs", 7),
        ("everything_prefs", 10),
    ])
    def test_limits(self, request, make_email, prefs_name, expected):
        prefs = request.getfixturevalue(prefs_name)
        emails = [make_email(f"Mail {i}", minutes_ago=i) for i in range(10)]

        assert len(select_emails(emails, prefs)) == expected
        assert len(narrated_subjects(summarize_emails(emails, prefs))) == expected

    def test_concise_picks_important_then_recent(self, make_email, concise_prefs):
        emails = [make_email(f"Mail {i}", minutes_ago=i) for i in range(10)]
        emails[7] = make_email("Old but important", minutes_ago=300, is_important=True)

        summary = summarize_emails(emails, concise_prefs)

        assert narrated_subjects(summary) == ["Old but important", "Mail 0", "Mail 1"]

    def test_reorders_regardless_of_input_order(self, make_email, everything_prefs):
        old = make_email("Old", minutes_ago=90)
        new = make_email("New", minutes_ago=5)
        assert narrated_subjects(summarize_emails([old, new], everything_prefs)) == ["New", "Old"]


class TestItemLines:

    def test_markers_in_fixed_order(self, make_email, medium_prefs):
        email = make_email(
            "Contract",
            sender="Lee Park <lee@example.com>",
            is_important=True,
            is_read=False,
            has_attachments=True,
        )
        summary = summarize_emails([email], medium_prefs)
        assert (
            "1. From Lee Park at 8:00am, subject: Contract "
            "(Important) (Unread) (Has attachments).\n"
        ) in summary

    def test_no_markers(self, make_email, medium_prefs):
        summary = summarize_emails([make_email("Hi", minutes_ago=65)], medium_prefs)
        assert "1. From Dana Smith at 6:55am, subject: Hi.\n\n" in summary

    def test_sender_without_name_uses_address(self, make_email, medium_prefs):
        summary = summarize_emails([make_email(sender="ops@example.com")], medium_prefs)
        assert "From ops@example.com at" in summary

    def test_no_preview_in_medium(self, make_email, medium_prefs):
        summary = summarize_emails([make_email(body="Secret body")], medium_prefs)
        assert "Preview" not in summary

    @pytest.mark.parametrize("prefs_name", ["detailed_prefs", "everything_prefs"])
    def test_preview_in_detailed_modes(self, request, make_email, prefs_name):
        prefs = request.getfixturevalue(prefs_name)
        summary = summarize_emails([make_email(body="See attached.")], prefs)
        assert "   Preview: See attached.\n" in summary

    def test_long_preview_truncated(self, make_email, detailed_prefs):
        body = "x" * 150
        summary = summarize_emails([make_email(body=body)], detailed_prefs)
        assert f"   Preview: {'x' * 100}...\n" in summary


class TestHelpers:

    def test_truncate_exact_length_not_marked(self):
        assert truncate_preview("a" * 100) == "a" * 100

    def test_truncate_custom_limit(self):
        assert truncate_preview("abcdef", 3) == "abc..."

    def test_spoken_list(self):
        assert spoken_list(["a"]) == '"a"'
        assert spoken_list(["a", "b"]) == '"a" or "b"'
        assert spoken_list(["a", "b", "c"]) == '"a", "b", or "c"'
