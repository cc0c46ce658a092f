"""
Exception classes for calendar notifications.
"""


class CalendarNotifyError(Exception):
    """Base exception for all calendar notification errors."""
    pass


class ConfigurationError(CalendarNotifyError):
    """Raised when settings or credentials are missing or malformed."""
    pass


class CalendarProviderError(CalendarNotifyError):
    """Raised when the calendar client cannot be created or the list call fails."""
    pass


class EventParseError(CalendarNotifyError):
    """Raised when an event's start/end markers are missing, mixed, or unparsable."""

    def __init__(self, message: str, event_title: str = ""):
        super().__init__(message)
        self.event_title = event_title


class NotificationError(CalendarNotifyError):
    """Raised when a webhook POST fails or returns a non-success status."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code
