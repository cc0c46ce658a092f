#!/usr/bin/env python3
"""
Post tomorrow's Google Calendar events to a Discord webhook.

Reads GOOGLE_CREDENTIALS, GOOGLE_CALENDAR_ID and DISCORD_WEBHOOK_URL from the
environment (or .env), fetches upcoming events, and sends one message per
event starting tomorrow in JST. Meant to be run once a day from cron.

Usage:
    uv run python src/scripts/notify_tomorrow_events.py
"""

import logging
import sys
from datetime import datetime
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.calendar_client import get_calendar_service
from core.config import JST, LOG_LEVEL, load_settings
from core.exceptions import CalendarNotifyError
from services.calendar import fetch_upcoming_events
from services.notifications import notify_tomorrow_events

logger = logging.getLogger("notify_tomorrow_events")


def main():
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = load_settings()
        service = get_calendar_service(settings)
        now = datetime.now(JST)
        items = fetch_upcoming_events(service, settings.calendar_id, now)
    except CalendarNotifyError as e:
        logger.error("%s", e)
        sys.exit(1)

    logger.info("Fetched %d upcoming event(s)", len(items))
    sent = notify_tomorrow_events(settings, items, now=now)
    logger.info("Done! %d notification(s) sent", sent)


if __name__ == "__main__":
    main()
