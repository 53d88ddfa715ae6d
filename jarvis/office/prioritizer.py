"""Deterministic priority ordering for emails and calendar events.

Order, most significant first:
    1. Sender/organizer is one of the user's priority contacts
    2. Item is flagged important
    3. More recent timestamp

Ties on all three keep their input order.
"""

from __future__ import annotations

from typing import Sequence, TypeVar

from jarvis.config_models import Preferences
from jarvis.office.models import SummarizableItem

T = TypeVar("T", bound=SummarizableItem)


def is_priority_contact(item: SummarizableItem, preferences: Preferences) -> bool:
    email = item.participant_email
    return bool(email) and email.strip().lower() in preferences.priority_contacts


def rank(items: Sequence[T], preferences: Preferences) -> list[T]:
    """Return a new list of ``items`` in priority order."""
    # Python's sort is stable, so sorting by the least significant key
    # first and the most significant last yields the combined ordering.
    ranked = sorted(items, key=lambda item: item.timestamp, reverse=True)
    ranked.sort(key=lambda item: (
        not is_priority_contact(item, preferences),
        not item.is_important,
    ))
    return ranked
