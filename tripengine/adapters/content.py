"""Adapters for content-generation service payloads.

The content service returns JSON-shaped activity lists, day themes and full
trip plans. These helpers validate them into typed models without relying on
any field the engine does not use.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter, ValidationError

from tripengine.models.activity import Activity, DayTheme
from tripengine.models.trip import TripPlan

logger = logging.getLogger(__name__)

_activities_adapter = TypeAdapter(list[Activity])
_themes_adapter = TypeAdapter(list[DayTheme])


class ContentPayloadError(ValueError):
    """Raised when a content service payload does not match the expected shape."""


def _unwrap(payload: Any, key: str) -> Any:
    """Accept either {key: [...]} or a bare list."""
    if isinstance(payload, dict):
        if key not in payload:
            raise ContentPayloadError(f"Payload is missing '{key}'")
        return payload[key]
    return payload


def parse_activities(payload: Any) -> list[Activity]:
    """Validate a discovery response into activities.

    Args:
        payload: {"activities": [...]} or a bare list of activity objects

    Returns:
        Activities in payload order

    Raises:
        ContentPayloadError: If the payload or any activity is malformed
    """
    try:
        activities = _activities_adapter.validate_python(_unwrap(payload, "activities"))
    except ValidationError as e:
        raise ContentPayloadError(f"Invalid activities payload: {e}") from e

    logger.info(f"[parse_activities] Parsed {len(activities)} activities")
    return activities


def parse_day_themes(payload: Any) -> list[DayTheme]:
    """Validate day theme previews, sorted by day number."""
    try:
        themes = _themes_adapter.validate_python(_unwrap(payload, "days"))
    except ValidationError as e:
        raise ContentPayloadError(f"Invalid day themes payload: {e}") from e
    return sorted(themes, key=lambda t: t.day)


def parse_trip_plan(payload: Any) -> TripPlan:
    """Validate a full trip plan document."""
    try:
        return TripPlan.model_validate(payload)
    except ValidationError as e:
        raise ContentPayloadError(f"Invalid trip plan payload: {e}") from e


def load_json(path: str | Path) -> Any:
    """Read a JSON document from disk."""
    with open(path, encoding="utf-8") as f:
        return json.load(f)
