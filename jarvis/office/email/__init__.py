"""Email summaries."""

from jarvis.office.email.summarizer import summarize_emails

__all__ = ["summarize_emails"]
