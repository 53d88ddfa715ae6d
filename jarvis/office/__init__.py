"""Office - email and calendar items, ranking and spoken summaries

Components:
    models.py: Email, CalendarEvent, ScheduleConflict
    time_utils.py: Clock formatting, durations, overlap detection
    prioritizer.py: Priority-contact / importance / recency ranking
    email/: Inbox summary
    calendar/: Agenda summary
    providers/: Source interfaces and YAML fixture sources
"""
