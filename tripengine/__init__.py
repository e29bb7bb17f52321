"""Itinerary scheduling and cross-day optimization engine."""

from tripengine.adapters.content import (
    ContentPayloadError,
    load_json,
    parse_activities,
    parse_day_themes,
    parse_trip_plan,
)
from tripengine.geo.metrics import centroid, distance_km, travel_minutes
from tripengine.optimization.optimizer import apply_suggestion, suggest_move
from tripengine.scheduling.builder import (
    build_day_schedule,
    default_activity_duration,
    default_preferences,
    resolve_travel_mode,
    schedule_with_durations,
)
from tripengine.scheduling.clock import FormatError, format_duration, format_time, parse_time
from tripengine.scheduling.day_plans import (
    approve_day,
    build_day_plan,
    move_stop,
    reschedule_day,
    reschedule_days,
    summarize_day,
)

__all__ = [
    # Geo
    "distance_km",
    "travel_minutes",
    "centroid",
    # Clock
    "FormatError",
    "parse_time",
    "format_time",
    "format_duration",
    # Scheduling
    "build_day_schedule",
    "default_activity_duration",
    "default_preferences",
    "resolve_travel_mode",
    "schedule_with_durations",
    "build_day_plan",
    "reschedule_day",
    "reschedule_days",
    "move_stop",
    "approve_day",
    "summarize_day",
    # Optimization
    "suggest_move",
    "apply_suggestion",
    # Content
    "ContentPayloadError",
    "load_json",
    "parse_activities",
    "parse_day_themes",
    "parse_trip_plan",
]
