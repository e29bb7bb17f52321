"""Fixture-based content payloads for local runs and tests."""

from pathlib import Path

from tripengine.adapters.content import load_json, parse_activities, parse_trip_plan
from tripengine.models.activity import Activity
from tripengine.models.trip import TripPlan

FIXTURES_DIR = Path(__file__).parent.parent / "fixtures"


def fetch_activities(city: str) -> list[Activity]:
    """Load the discovery activities fixture for a city (empty if unknown)."""
    fixtures_path = FIXTURES_DIR / "activities.json"
    data = load_json(fixtures_path)
    return parse_activities(data.get(city.lower(), []))


def fetch_trip(name: str) -> TripPlan:
    """Load a stored trip plan fixture by name, e.g. "lisbon_3_days"."""
    return parse_trip_plan(load_json(FIXTURES_DIR / f"{name}.json"))
