"""
Pytest configuration and shared fixtures.
"""

import sys
from datetime import datetime
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from core.config import JST, Settings


@pytest.fixture
def settings():
    """Settings with a placeholder credential and webhook."""
    return Settings(
        credentials_json='{"type": "service_account"}',
        calendar_id="team@example.com",
        webhook_url="https://discord.com/api/webhooks/123/abc",
    )


@pytest.fixture
def now():
    """Fixed current instant: 2025-11-06 15:00 JST (window is 2025-11-07)."""
    return datetime(2025, 11, 6, 15, 0, tzinfo=JST)


@pytest.fixture
def timed_item():
    """Calendar API resource for a timed event tomorrow 10:00-11:00 JST."""
    return {
        "id": "evt-timed",
        "summary": "Standup",
        "description": "Daily sync",
        "location": "Room A",
        "start": {"dateTime": "2025-11-07T10:00:00+09:00"},
        "end": {"dateTime": "2025-11-07T11:00:00+09:00"},
    }


@pytest.fixture
def all_day_item():
    """Calendar API resource for an all-day event tomorrow."""
    return {
        "id": "evt-all-day",
        "summary": "Holiday",
        "location": "Office",
        "start": {"date": "2025-11-07"},
        "end": {"date": "2025-11-08"},
    }
