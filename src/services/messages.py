"""
Target window calculation and notification message formatting.
"""

from datetime import datetime, timedelta, tzinfo

from core.config import (
    ALL_DAY_MARKER,
    END_LABEL,
    JST,
    LOCATION_LABEL,
    MENTION,
    MESSAGE_TIME_FORMAT,
    START_LABEL,
    TITLE_LABEL,
)
from models.events import Event, TargetWindow


def compute_target_window(now: datetime, tz: tzinfo = JST) -> TargetWindow:
    """
    Calculate tomorrow's window in the given zone.

    Returns:
        TargetWindow from local midnight of tomorrow to 24 hours later.
    """
    local_now = now.astimezone(tz)
    start = datetime(local_now.year, local_now.month, local_now.day, tzinfo=tz) + timedelta(days=1)
    return TargetWindow(start=start, end=start + timedelta(hours=24))


def is_in_window(event: Event, window: TargetWindow, tz: tzinfo = JST) -> bool:
    """Check whether the event starts strictly inside the window."""
    return window.contains(event.start_instant(tz))


def format_message(event: Event, tz: tzinfo = JST) -> str:
    """Build the chat message for an event."""
    lines = [
        MENTION,
        f"{TITLE_LABEL}: {event.title}",
        f"{LOCATION_LABEL}: {event.location}",
    ]
    if event.is_all_day:
        lines.append(ALL_DAY_MARKER)
    else:
        lines.append(f"{START_LABEL}: {event.start_instant(tz).strftime(MESSAGE_TIME_FORMAT)}")
        lines.append(f"{END_LABEL}: {event.end_instant(tz).strftime(MESSAGE_TIME_FORMAT)}")
    return "\n".join(lines)
