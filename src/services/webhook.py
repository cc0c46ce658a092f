"""
Webhook notification delivery.
"""

import requests

from core.config import WEBHOOK_CONTENT_FIELD, WEBHOOK_SUCCESS_STATUSES
from core.exceptions import NotificationError


def build_payload(message: str) -> dict[str, str]:
    """Wrap the message in the webhook's JSON envelope."""
    return {WEBHOOK_CONTENT_FIELD: message}


def send_webhook_notification(webhook_url: str, message: str) -> None:
    """
    POST a message to the webhook as JSON.

    Raises:
        NotificationError: On transport failure or a status other than 200/204.
    """
    try:
        response = requests.post(webhook_url, json=build_payload(message))
    except requests.RequestException as e:
        raise NotificationError(f"Failed to send notification: {e}") from e

    if response.status_code not in WEBHOOK_SUCCESS_STATUSES:
        raise NotificationError(
            f"Failed to send notification: {response.status_code} {response.reason}",
            status_code=response.status_code,
        )
