"""
Tool: Email Summarizer
Purpose: Turn an inbox into a short spoken briefing

The briefing opens with counts, narrates the most pressing messages for the
user's chosen verbosity, and closes with the follow-up commands the user can
say next.

Usage:
    from jarvis.office.email.summarizer import summarize_emails
    text = summarize_emails(emails, preferences)
"""

from __future__ import annotations

from typing import Sequence

from jarvis.config_models import Preferences
from jarvis.office.models import Email
from jarvis.office.time_utils import format_clock_time

EMAIL_FOLLOW_UP_COMMANDS = ("ignore", "respond now", "respond later", "mark as important")

DEFAULT_PREVIEW_CHARS = 100


def truncate_preview(text: str, limit: int = DEFAULT_PREVIEW_CHARS) -> str:
    """Cut ``text`` to ``limit`` characters, marking the cut with an ellipsis."""
    if len(text) > limit:
        return text[:limit] + "..."
    return text


def spoken_list(options: Sequence[str]) -> str:
    """Quote and join options the way they are read aloud: "a", "b", or "c"."""
    quoted = [f'"{option}"' for option in options]
    if len(quoted) <= 2:
        return " or ".join(quoted)
    return ", ".join(quoted[:-1]) + f", or {quoted[-1]}"


def select_emails(emails: Sequence[Email], preferences: Preferences) -> list[Email]:
    """Pick the emails to narrate: important first, then newest, then truncate."""
    ordered = sorted(emails, key=lambda e: e.received_at, reverse=True)
    ordered.sort(key=lambda e: not e.is_important)

    limit = preferences.summary_length.item_limit
    if limit is not None:
        ordered = ordered[:limit]
    return ordered


def describe_email(index: int, email_obj: Email) -> str:
    """One numbered line for an email, with its status markers."""
    markers = [
        (email_obj.is_important, " (Important)"),
        (not email_obj.is_read, " (Unread)"),
        (email_obj.has_attachments, " (Has attachments)"),
    ]
    marker_text = "".join(text for flag, text in markers if flag)

    return (
        f"{index}. From {email_obj.sender_name} at "
        f"{format_clock_time(email_obj.received_at)}, "
        f"subject: {email_obj.subject}{marker_text}.\n"
    )


def summarize_emails(
    emails: Sequence[Email],
    preferences: Preferences,
    preview_chars: int = DEFAULT_PREVIEW_CHARS,
) -> str:
    """
    Generate the spoken inbox summary.

    Args:
        emails: Messages from the email source (any order)
        preferences: Session preferences; ``summary_length`` sets how many
            messages are narrated and whether body previews are read
        preview_chars: Body preview length in detailed modes

    Returns:
        Summary text
    """
    unread_count = sum(1 for e in emails if not e.is_read)
    important_count = sum(1 for e in emails if e.is_important)

    summary = f"You have {len(emails)} emails in your inbox, {unread_count} unread"
    if important_count > 0:
        summary += f", with {important_count} marked as important"
    summary += ". Would you like to hear about them?\n\n"

    show_preview = preferences.summary_length.includes_details

    for index, email_obj in enumerate(select_emails(emails, preferences), start=1):
        summary += describe_email(index, email_obj)
        if show_preview:
            summary += f"   Preview: {truncate_preview(email_obj.body, preview_chars)}\n"
        summary += "\n"

    summary += (
        f"You can say {spoken_list(EMAIL_FOLLOW_UP_COMMANDS)} after each email."
    )
    return summary
