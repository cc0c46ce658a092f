"""
Tomorrow's event notification run: filter, format, and post each event.
"""

import logging
from collections.abc import Callable
from datetime import datetime

from core.config import (
    ALL_DAY_MARKER,
    DESCRIPTION_LABEL,
    END_LABEL,
    JST,
    LOCATION_LABEL,
    LOG_TIME_FORMAT,
    START_LABEL,
    TITLE_LABEL,
    Settings,
)
from core.exceptions import EventParseError, NotificationError
from models.events import Event
from services.calendar import parse_event
from services.messages import compute_target_window, format_message, is_in_window
from services.webhook import send_webhook_notification

logger = logging.getLogger(__name__)


def log_event_details(event: Event) -> None:
    """Log the fields of an event about to be notified."""
    logger.info("%s: %s", TITLE_LABEL, event.title)
    logger.info("%s: %s", DESCRIPTION_LABEL, event.description)
    logger.info("%s: %s", LOCATION_LABEL, event.location)
    if event.is_all_day:
        logger.info("%s: %s", ALL_DAY_MARKER, event.title)
    else:
        logger.info("%s: %s", START_LABEL, event.start_instant(JST).strftime(LOG_TIME_FORMAT))
        logger.info("%s: %s", END_LABEL, event.end_instant(JST).strftime(LOG_TIME_FORMAT))


def notify_tomorrow_events(
    settings: Settings,
    items: list[dict],
    now: datetime | None = None,
    send: Callable[[str, str], None] = send_webhook_notification,
) -> int:
    """
    Post a notification for each event starting tomorrow (JST).

    Events are handled one at a time; a malformed event or a failed POST is
    logged and the run moves on to the next event.

    Args:
        settings: Run configuration.
        items: Raw event resources from the Calendar API.
        now: Current instant. Uses the current time if None.
        send: Callable taking (webhook_url, message).

    Returns:
        Number of notifications delivered.
    """
    if now is None:
        now = datetime.now(JST)
    window = compute_target_window(now, JST)
    logger.debug("Target window: %s - %s", window.start, window.end)

    sent = 0
    for item in items:
        try:
            event = parse_event(item)
        except EventParseError as e:
            logger.warning("%s", e)
            continue

        if not is_in_window(event, window, JST):
            continue

        log_event_details(event)
        message = format_message(event, JST)

        try:
            send(settings.webhook_url, message)
        except NotificationError as e:
            logger.error("Error sending notification for event %r: %s", event.title, e)
            continue

        logger.info("Notification sent for event: %s", event.title)
        sent += 1

    return sent
