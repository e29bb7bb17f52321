"""Shared pytest fixtures for all test suites."""

from collections.abc import Callable

import pytest

from tripengine.models import Activity, Coordinate, UserPreferences


@pytest.fixture
def walking_prefs() -> UserPreferences:
    """Moderate pace, walking, 09:00 start, 10 hour day."""
    return UserPreferences(
        day_start_time="09:00",
        day_length_hours=10,
        default_pace="moderate",
        default_transport_mode="walking",
    )


@pytest.fixture
def make_activity() -> Callable[..., Activity]:
    """Factory for activities at a given coordinate."""

    def _make(activity_id: str, lat: float, lon: float, rating: int = 2) -> Activity:
        return Activity(
            id=activity_id,
            name=activity_id.title(),
            description=f"Visit {activity_id}",
            rating=rating,
            location=Coordinate(latitude=lat, longitude=lon),
        )

    return _make
