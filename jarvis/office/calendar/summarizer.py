"""
Tool: Calendar Summarizer
Purpose: Spoken briefing of today's and tomorrow's calendar

Reads out today's events in order, tomorrow's when the user wants more
detail, any double-bookings, and the high-importance items for today.

Usage:
    from jarvis.office.calendar.summarizer import summarize_events
    text = summarize_events(events, preferences)
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timedelta
from typing import NamedTuple, Optional, Sequence

from jarvis.config_models import Preferences, SummaryLength
from jarvis.office.email.summarizer import (
    DEFAULT_PREVIEW_CHARS,
    spoken_list,
    truncate_preview,
)
from jarvis.office.models import CalendarEvent
from jarvis.office.time_utils import find_overlaps, format_clock_time, format_duration

CALENDAR_FOLLOW_UP_COMMANDS = ("accept", "decline", "maybe", "find me a new time")

NEEDS_RESPONSE_NOTE = " (You haven't responded to this invitation yet)"


class DayWindow(NamedTuple):
    """Midnight-aligned boundaries used to bucket events."""

    today: datetime
    tomorrow: datetime
    day_after: datetime

    @classmethod
    def around(cls, now: datetime) -> "DayWindow":
        today = now.replace(hour=0, minute=0, second=0, microsecond=0)
        return cls(today, today + timedelta(days=1), today + timedelta(days=2))


def reference_now(events: Sequence[CalendarEvent]) -> datetime:
    """Current local time, offset-aware when any event carries an offset."""
    if any(e.start_time.tzinfo is not None for e in events):
        return datetime.now().astimezone()
    return datetime.now()


def _align(ts: datetime, reference: datetime) -> datetime:
    """Express ``ts`` on the same clock as ``reference``.

    A naive value is local wall-clock time.
    """
    if reference.tzinfo is None:
        return ts.astimezone().replace(tzinfo=None) if ts.tzinfo else ts
    if ts.tzinfo is None:
        return ts.replace(tzinfo=reference.tzinfo)
    return ts.astimezone(reference.tzinfo)


def align_events(events: Sequence[CalendarEvent], reference: datetime) -> list[CalendarEvent]:
    """Copies of ``events`` with start and end on the clock of ``reference``."""
    return [
        replace(
            e,
            start_time=_align(e.start_time, reference),
            end_time=_align(e.end_time, reference),
        )
        for e in events
    ]


def _events_noun(count: int) -> str:
    return f"{count} event{'' if count == 1 else 's'}"


def _location_suffix(event: CalendarEvent) -> str:
    return f" at {event.location}" if event.location else ""


def _today_block(
    events: list[CalendarEvent],
    detailed: bool,
    preview_chars: int,
) -> str:
    if not events:
        return "You have no events scheduled for today.\n\n"

    text = f"You have {_events_noun(len(events))} scheduled for today.\n\n"

    for index, event in enumerate(events, start=1):
        note = NEEDS_RESPONSE_NOTE if event.needs_response else ""
        text += (
            f"{index}. At {format_clock_time(event.start_time)}: {event.title}"
            f"{_location_suffix(event)}, "
            f"for {format_duration(event.start_time, event.end_time)}{note}.\n"
        )

        if detailed:
            if event.attendees:
                names = ", ".join(a.name or a.email for a in event.attendees)
                text += f"   With: {names}\n"
            if event.description:
                text += f"   Details: {truncate_preview(event.description, preview_chars)}\n"

        text += "\n"

    return text


def _tomorrow_block(events: list[CalendarEvent], detailed: bool) -> str:
    text = f"For tomorrow, you have {_events_noun(len(events))} scheduled.\n\n"

    if detailed:
        for index, event in enumerate(events, start=1):
            text += (
                f"{index}. At {format_clock_time(event.start_time)}: "
                f"{event.title}{_location_suffix(event)}.\n"
            )
        text += "\n"

    return text


def _conflicts_block(events: list[CalendarEvent]) -> str:
    conflicts = find_overlaps(events)
    if not conflicts:
        return ""

    text = "Attention: I found the following schedule conflicts:\n"
    for index, conflict in enumerate(conflicts, start=1):
        text += (
            f'{index}. "{conflict.first.title}" and "{conflict.second.title}" '
            f"overlap at {format_clock_time(conflict.overlap_start)}.\n"
        )
    return text + "\n"


def _priorities_block(events: list[CalendarEvent], cutoff: datetime) -> str:
    priorities = [e for e in events if e.is_important and e.start_time < cutoff]
    if not priorities:
        return ""

    text = "Top priorities for today:\n"
    for index, event in enumerate(priorities, start=1):
        text += f"{index}. {event.title} at {format_clock_time(event.start_time)}.\n"
    return text + "\n"


def summarize_events(
    events: Sequence[CalendarEvent],
    preferences: Preferences,
    now: Optional[datetime] = None,
    preview_chars: int = DEFAULT_PREVIEW_CHARS,
) -> str:
    """
    Generate the spoken calendar summary.

    Args:
        events: Events from the calendar source (any order)
        preferences: Session preferences; ``summary_length`` controls
            whether tomorrow and the priority list are read out
        now: Reference moment for the today/tomorrow split (defaults to
            the current local time). Event times are converted to its
            clock before bucketing, so naive and offset-aware inputs mix.
        preview_chars: Description preview length in detailed modes

    Returns:
        Summary text
    """
    reference = now or reference_now(events)
    window = DayWindow.around(reference)
    length = preferences.summary_length
    detailed = length.includes_details

    ordered = sorted(align_events(events, reference), key=lambda e: e.start_time)
    today_events = [e for e in ordered if window.today <= e.start_time < window.tomorrow]
    tomorrow_events = [e for e in ordered if window.tomorrow <= e.start_time < window.day_after]
    in_scope = [e for e in ordered if window.today <= e.start_time < window.day_after]

    summary = _today_block(today_events, detailed, preview_chars)

    if length != SummaryLength.CONCISE and tomorrow_events:
        summary += _tomorrow_block(tomorrow_events, detailed)

    summary += _conflicts_block(in_scope)

    if length != SummaryLength.CONCISE:
        summary += _priorities_block(ordered, window.tomorrow)

    summary += (
        f"You can say {spoken_list(CALENDAR_FOLLOW_UP_COMMANDS)} "
        "for any meeting that needs a response."
    )
    return summary
