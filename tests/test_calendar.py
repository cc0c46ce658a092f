"""
Tests for event fetching and parsing.
"""

from datetime import date, datetime, timedelta, timezone
from unittest.mock import Mock

import httplib2
import pytest
from googleapiclient.errors import HttpError

from core.exceptions import CalendarProviderError, EventParseError
from models.events import AllDaySpan, TimedSpan
from services.calendar import fetch_upcoming_events, parse_event, parse_timestamp


def make_service(response=None, error=None):
    service = Mock()
    request = service.events.return_value.list.return_value
    if error is not None:
        request.execute.side_effect = error
    else:
        request.execute.return_value = response
    return service


# =============================================================================
# FETCHING
# =============================================================================


def test_fetch_upcoming_events_query(now, timed_item):
    service = make_service({"items": [timed_item]})

    items = fetch_upcoming_events(service, "team@example.com", now)

    assert items == [timed_item]
    service.events.return_value.list.assert_called_once_with(
        calendarId="team@example.com",
        showDeleted=False,
        singleEvents=True,
        timeMin="2025-11-06T15:00:00+09:00",
        orderBy="startTime",
    )


def test_fetch_upcoming_events_without_items(now):
    service = make_service({"kind": "calendar#events"})

    assert fetch_upcoming_events(service, "team@example.com", now) == []


def test_fetch_upcoming_events_http_error(now):
    error = HttpError(Mock(status=404, reason="Not Found"), b"not found")
    service = make_service(error=error)

    with pytest.raises(CalendarProviderError, match="Unable to retrieve events"):
        fetch_upcoming_events(service, "missing@example.com", now)


def test_fetch_upcoming_events_transport_error(now):
    service = make_service(error=TimeoutError("timed out"))

    with pytest.raises(CalendarProviderError):
        fetch_upcoming_events(service, "team@example.com", now)


def test_fetch_upcoming_events_dns_failure(now):
    service = make_service(
        error=httplib2.ServerNotFoundError("Unable to find the server at www.googleapis.com")
    )

    with pytest.raises(CalendarProviderError, match="Unable to find the server"):
        fetch_upcoming_events(service, "team@example.com", now)


# =============================================================================
# PARSING
# =============================================================================


def test_parse_timed_event(timed_item):
    event = parse_event(timed_item)

    assert event.id == "evt-timed"
    assert event.title == "Standup"
    assert event.description == "Daily sync"
    assert event.location == "Room A"
    assert isinstance(event.span, TimedSpan)
    assert not event.is_all_day
    assert event.span.start == datetime(2025, 11, 7, 1, 0, tzinfo=timezone.utc)


def test_parse_all_day_event(all_day_item):
    event = parse_event(all_day_item)

    assert event.is_all_day
    assert event.span == AllDaySpan(start=date(2025, 11, 7), end=date(2025, 11, 8))
    assert event.description == ""


def test_parse_utc_designator():
    parsed = parse_timestamp("2025-11-07T01:00:00Z")

    assert parsed.utcoffset() == timedelta(0)
    assert parsed.hour == 1


def test_parse_missing_fields_default_to_empty():
    event = parse_event(
        {"start": {"date": "2025-11-07"}, "end": {"date": "2025-11-08"}}
    )

    assert (event.id, event.title, event.location) == ("", "", "")


def test_event_without_markers_is_rejected():
    with pytest.raises(EventParseError, match="No valid start time") as exc_info:
        parse_event({"summary": "Ghost", "start": {}, "end": {}})

    assert exc_info.value.event_title == "Ghost"


def test_mixed_markers_are_rejected():
    item = {
        "summary": "Mixed",
        "start": {"dateTime": "2025-11-07T10:00:00+09:00"},
        "end": {"date": "2025-11-08"},
    }

    with pytest.raises(EventParseError):
        parse_event(item)


@pytest.mark.parametrize(
    "start, end",
    [
        ({"dateTime": "tomorrow at ten"}, {"dateTime": "2025-11-07T11:00:00+09:00"}),
        ({"dateTime": "2025-11-07T10:00:00"}, {"dateTime": "2025-11-07T11:00:00"}),
        ({"date": "2025-13-40"}, {"date": "2025-11-08"}),
    ],
)
def test_unparsable_markers_are_rejected(start, end):
    with pytest.raises(EventParseError, match="Unable to parse"):
        parse_event({"summary": "Bad", "start": start, "end": end})
