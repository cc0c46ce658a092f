"""
Google Calendar client setup from a service account credential blob.
"""

import json

from google.auth.exceptions import GoogleAuthError
from google.oauth2 import service_account
from googleapiclient.discovery import build

from core.config import CALENDAR_SCOPES, Settings
from core.exceptions import CalendarProviderError, ConfigurationError


def parse_credentials(credentials_json: str) -> dict:
    """Decode the credential blob, which must be a JSON object."""
    if not credentials_json:
        raise ConfigurationError("GOOGLE_CREDENTIALS environment variable not set")
    try:
        info = json.loads(credentials_json)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Unable to parse GOOGLE_CREDENTIALS: {e}") from e
    if not isinstance(info, dict):
        raise ConfigurationError("Unable to parse GOOGLE_CREDENTIALS: expected a JSON object")
    return info


def get_calendar_service(settings: Settings):
    """
    Create a Calendar v3 service for the configured service account.

    The credential blob is validated before anything touches the network.

    Raises:
        ConfigurationError: If the credential blob is absent or malformed.
        CalendarProviderError: If the API client cannot be built.
    """
    info = parse_credentials(settings.credentials_json)

    try:
        credentials = service_account.Credentials.from_service_account_info(
            info, scopes=CALENDAR_SCOPES
        )
    except (ValueError, KeyError) as e:
        raise ConfigurationError(f"Invalid service account credentials: {e}") from e

    try:
        return build("calendar", "v3", credentials=credentials, cache_discovery=False)
    except (GoogleAuthError, OSError, ValueError) as e:
        raise CalendarProviderError(f"Unable to create Calendar client: {e}") from e
