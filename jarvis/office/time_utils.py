"""Clock formatting, durations and interval overlap.

Pure helpers shared by the summarizers. Nothing here reads the wall
clock; every value comes from the items passed in.
"""

from __future__ import annotations

import math
from datetime import datetime
from typing import Sequence

from jarvis.office.models import ScheduleConflict


class InvalidIntervalError(ValueError):
    """Raised when an interval ends before it starts."""


def format_clock_time(ts: datetime) -> str:
    """Render a timestamp as spoken clock time, e.g. ``9:05am``."""
    hours12 = ts.hour % 12 or 12
    ampm = "pm" if ts.hour >= 12 else "am"
    return f"{hours12}:{ts.minute:02d}{ampm}"


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'' if count == 1 else 's'}"


def format_duration(start: datetime, end: datetime) -> str:
    """Describe the length of ``[start, end]`` in hours and minutes.

    Minutes are rounded half-up. Anything under an hour is always
    reported as ``"N minutes"``.
    """
    if end < start:
        raise InvalidIntervalError(
            f"Interval ends before it starts: {start.isoformat()} > {end.isoformat()}"
        )

    total_minutes = math.floor((end - start).total_seconds() / 60 + 0.5)

    if total_minutes < 60:
        return f"{total_minutes} minutes"

    hours, minutes = divmod(total_minutes, 60)
    if minutes == 0:
        return _plural(hours, "hour")
    return f"{_plural(hours, 'hour')} and {_plural(minutes, 'minute')}"


def find_overlaps(items: Sequence) -> list[ScheduleConflict]:
    """Report every pair of items whose ``[start_time, end_time)`` ranges intersect.

    Pairs come out in traversal order: by the first item's position, then
    the second's. Each pair is reported once. Touching ranges do not overlap.
    """
    conflicts: list[ScheduleConflict] = []

    for i, first in enumerate(items):
        for second in items[i + 1:]:
            if first.start_time < second.end_time and second.start_time < first.end_time:
                conflicts.append(ScheduleConflict(
                    first=first,
                    second=second,
                    overlap_start=max(first.start_time, second.start_time),
                    overlap_end=min(first.end_time, second.end_time),
                ))

    return conflicts
