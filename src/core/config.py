"""
Configuration constants and environment setup.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import timedelta, timezone

from dotenv import load_dotenv

from core.exceptions import ConfigurationError

load_dotenv()

# =============================================================================
# TIME ZONE
# =============================================================================

JST = timezone(timedelta(hours=9), "JST")

# =============================================================================
# GOOGLE CALENDAR CONFIGURATION
# =============================================================================

CALENDAR_SCOPES = ["https://www.googleapis.com/auth/calendar.readonly"]
EVENT_ORDER_BY = "startTime"

# =============================================================================
# NOTIFICATION FORMAT
# =============================================================================

MENTION = "@here"
TITLE_LABEL = "イベント名"
LOCATION_LABEL = "場所"
DESCRIPTION_LABEL = "説明"
START_LABEL = "開始時間"
END_LABEL = "終了時間"
ALL_DAY_MARKER = "終日イベント"

MESSAGE_TIME_FORMAT = "%Y-%m-%d %H:%M"
LOG_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"

# =============================================================================
# WEBHOOK
# =============================================================================

WEBHOOK_CONTENT_FIELD = "content"
WEBHOOK_SUCCESS_STATUSES = {200, 204}

# =============================================================================
# ENVIRONMENT VARIABLES
# =============================================================================

CREDENTIALS_ENV = "GOOGLE_CREDENTIALS"
CALENDAR_ID_ENV = "GOOGLE_CALENDAR_ID"
WEBHOOK_URL_ENV = "DISCORD_WEBHOOK_URL"

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def resolve_log_level(value: str | None) -> str:
    """Normalize a LOG_LEVEL value, falling back to INFO if unrecognized."""
    level = (value or "").strip().upper()
    return level if level in LOG_LEVELS else "INFO"


LOG_LEVEL = resolve_log_level(os.environ.get("LOG_LEVEL"))


@dataclass(frozen=True)
class Settings:
    """Run configuration, built once at startup."""

    credentials_json: str
    calendar_id: str
    webhook_url: str


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """
    Build Settings from the environment.

    Args:
        environ: Mapping to read from. Uses os.environ if None.

    Raises:
        ConfigurationError: If any required variable is unset or empty.
    """
    if environ is None:
        environ = os.environ

    values = {}
    for name in (CREDENTIALS_ENV, CALENDAR_ID_ENV, WEBHOOK_URL_ENV):
        value = environ.get(name, "").strip()
        if not value:
            raise ConfigurationError(f"{name} environment variable not set")
        values[name] = value

    return Settings(
        credentials_json=values[CREDENTIALS_ENV],
        calendar_id=values[CALENDAR_ID_ENV],
        webhook_url=values[WEBHOOK_URL_ENV],
    )
