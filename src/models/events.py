"""
Data models for calendar events and the notification window.

An event's start/end is either a pair of timestamps or a pair of calendar
dates; Event.span holds exactly one of the two variants.
"""

from dataclasses import dataclass
from datetime import date, datetime, time, timezone, tzinfo


@dataclass(frozen=True)
class TimedSpan:
    """Event with exact start and end timestamps."""
    start: datetime
    end: datetime


@dataclass(frozen=True)
class AllDaySpan:
    """Event covering whole calendar days."""
    start: date
    end: date


@dataclass(frozen=True)
class Event:
    """Parsed calendar event."""
    id: str
    title: str
    description: str
    location: str
    span: TimedSpan | AllDaySpan

    @property
    def is_all_day(self) -> bool:
        return isinstance(self.span, AllDaySpan)

    def start_instant(self, tz: tzinfo) -> datetime:
        """Start of the event in the given zone."""
        return _to_instant(self.span.start, tz)

    def end_instant(self, tz: tzinfo) -> datetime:
        """End of the event in the given zone."""
        return _to_instant(self.span.end, tz)


@dataclass(frozen=True)
class TargetWindow:
    """Interval [start, end) covering one local day."""
    start: datetime
    end: datetime

    def contains(self, instant: datetime) -> bool:
        """True if instant lies strictly between start and end."""
        return self.start < instant < self.end


def _to_instant(value: date | datetime, tz: tzinfo) -> datetime:
    # All-day dates are read as UTC midnight before conversion
    if not isinstance(value, datetime):
        value = datetime.combine(value, time.min, tzinfo=timezone.utc)
    return value.astimezone(tz)
