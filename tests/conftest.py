"""Shared fixtures for moonphase tests."""

import datetime
from typing import Any, Dict, List
from zoneinfo import ZoneInfo

import pytest

from moonphase.phases import NamedPhase, PhaseEvent
from moonphase.providers.base import DataProvider


class FakeProvider(DataProvider):
    """Provider returning canned events and recording requests."""

    def __init__(self, events: List[PhaseEvent]):
        super().__init__()
        self.events = events
        self.calls: List[Any] = []

    def fetch_events(self, start: datetime.date, count: int) -> List[PhaseEvent]:
        self.calls.append((start, count))
        return self.events


@pytest.fixture
def tz() -> datetime.tzinfo:
    """Get a fixed timezone for the local calendar."""
    return ZoneInfo("America/New_York")


@pytest.fixture
def january_events() -> List[PhaseEvent]:
    """Get the major phases of January 2024."""
    return [
        PhaseEvent(datetime.date(2024, 1, 3), NamedPhase.LAST_QUARTER, "22:30"),
        PhaseEvent(datetime.date(2024, 1, 11), NamedPhase.NEW_MOON, "11:57"),
        PhaseEvent(datetime.date(2024, 1, 18), NamedPhase.FIRST_QUARTER, "03:53"),
        PhaseEvent(datetime.date(2024, 1, 25), NamedPhase.FULL_MOON, "17:54"),
    ]


@pytest.fixture
def phases_payload() -> Dict[str, Any]:
    """Get a moon phases API response."""
    return {
        "apiversion": "4.0.1",
        "day": 4,
        "month": 1,
        "year": 2024,
        "numphases": 4,
        "phasedata": [
            {"day": 11, "month": 1, "phase": "New Moon", "time": "11:57", "year": 2024},
            {
                "day": 18,
                "month": 1,
                "phase": "First Quarter",
                "time": "03:53",
                "year": 2024,
            },
            {
                "day": 25,
                "month": 1,
                "phase": "Full Moon",
                "time": "17:54",
                "year": 2024,
            },
            {
                "day": 2,
                "month": 2,
                "phase": "Last Quarter",
                "time": "23:18",
                "year": 2024,
            },
        ],
    }


@pytest.fixture
def fake_provider(january_events: List[PhaseEvent]) -> FakeProvider:
    """Get a provider serving the January 2024 phases."""
    return FakeProvider(january_events)
