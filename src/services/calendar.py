"""
Upcoming event fetching and parsing from Google Calendar.
"""

from datetime import date, datetime

import httplib2
from google.auth.exceptions import GoogleAuthError
from googleapiclient.errors import HttpError

from core.config import EVENT_ORDER_BY
from core.exceptions import CalendarProviderError, EventParseError
from models.events import AllDaySpan, Event, TimedSpan


def fetch_upcoming_events(service, calendar_id: str, now: datetime) -> list[dict]:
    """
    Fetch non-deleted events starting at or after now, ordered by start time.

    Recurring events are expanded into single occurrences. Only the first
    page returned by the API is read.

    Raises:
        CalendarProviderError: If the list call fails.
    """
    time_min = now.isoformat()
    try:
        response = service.events().list(
            calendarId=calendar_id,
            showDeleted=False,
            singleEvents=True,
            timeMin=time_min,
            orderBy=EVENT_ORDER_BY,
        ).execute()
    except (HttpError, httplib2.HttpLib2Error, GoogleAuthError, OSError) as e:
        raise CalendarProviderError(f"Unable to retrieve events: {e}") from e

    return response.get("items", [])


def parse_timestamp(value: str) -> datetime:
    """Parse an RFC3339 timestamp; the offset is required."""
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        raise ValueError(f"timestamp has no UTC offset: {value!r}")
    return parsed


def parse_event(item: dict) -> Event:
    """
    Parse a Calendar API event resource into an Event.

    Both start and end must carry dateTime (timed event) or both must carry
    date (all-day event).

    Raises:
        EventParseError: If the markers are missing, mixed, or unparsable.
    """
    title = item.get("summary") or ""
    start = item.get("start") or {}
    end = item.get("end") or {}

    try:
        if start.get("dateTime") and end.get("dateTime"):
            span = TimedSpan(
                start=parse_timestamp(start["dateTime"]),
                end=parse_timestamp(end["dateTime"]),
            )
        elif start.get("date") and end.get("date"):
            span = AllDaySpan(
                start=date.fromisoformat(start["date"]),
                end=date.fromisoformat(end["date"]),
            )
        else:
            raise EventParseError(
                f"No valid start time found for event: {title}", event_title=title
            )
    except ValueError as e:
        raise EventParseError(
            f"Unable to parse start/end of event {title!r}: {e}", event_title=title
        ) from e

    return Event(
        id=item.get("id") or "",
        title=title,
        description=item.get("description") or "",
        location=item.get("location") or "",
        span=span,
    )
