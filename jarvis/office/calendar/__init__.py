"""Calendar summaries."""

from jarvis.office.calendar.summarizer import summarize_events

__all__ = ["summarize_events"]
