"""Single-day schedule builder.

Turns an ordered list of activities into timed itinerary items and the travel
segments between them, keeping the day within the traveler's day-length
budget.
"""

import logging
from collections.abc import Mapping, Sequence

from tripengine.config import get_settings
from tripengine.geo.metrics import distance_km, round_half_up, travel_minutes
from tripengine.models.activity import Activity
from tripengine.models.common import ItemType, Pace, TransportPreference, TravelMode
from tripengine.models.itinerary import DaySchedule, ItineraryItem, TravelSegment
from tripengine.models.trip import UserPreferences
from tripengine.scheduling.clock import format_time, parse_time
from tripengine.utils.logging import StructuredPlanLogger

logger = logging.getLogger(__name__)

BASE_DURATION_BY_RATING: dict[int, int] = {3: 120, 2: 90, 1: 60}

PACE_FACTOR: dict[Pace, float] = {
    Pace.leisurely: 1.2,
    Pace.moderate: 1.0,
    Pace.fast: 0.8,
}

_plan_logger = StructuredPlanLogger()


def default_preferences() -> UserPreferences:
    """Process-wide default preferences from Settings."""
    settings = get_settings()
    return UserPreferences(
        day_start_time=settings.default_day_start_time,
        day_length_hours=settings.default_day_length_hours,
        default_pace=Pace(settings.default_pace),
        default_transport_mode=TransportPreference(settings.default_transport_mode),
    )


def resolve_travel_mode(preference: TransportPreference | str) -> TravelMode:
    """Map a transport preference onto the mode used for every segment."""
    preference = TransportPreference(preference)
    if preference == TransportPreference.walking:
        return TravelMode.walk
    if preference == TransportPreference.transit:
        return TravelMode.transit
    return TravelMode.drive


def default_activity_duration(rating: int, pace: Pace | str) -> int:
    """Default visit length in minutes from rating and pace."""
    base = BASE_DURATION_BY_RATING.get(rating, BASE_DURATION_BY_RATING[1])
    return round_half_up(base * PACE_FACTOR[Pace(pace)])


def build_day_schedule(
    activities: Sequence[Activity],
    preferences: UserPreferences,
    duration_overrides: Mapping[str, int] | None = None,
    start_override: str | None = None,
) -> DaySchedule:
    """Build the timed schedule for one day.

    Args:
        activities: Activities in visiting order
        preferences: Start time, day length, pace and transport preference
        duration_overrides: Optional minutes per activity id, replacing the default
        start_override: Optional "HH:MM" start replacing preferences.day_start_time

    Returns:
        DaySchedule with one item per activity and one segment per consecutive pair

    Raises:
        FormatError: If the start time is not a valid HH:MM string
    """
    overrides = duration_overrides or {}
    durations = [overrides.get(activity.id) for activity in activities]
    return schedule_with_durations(activities, preferences, durations, start_override)


def schedule_with_durations(
    activities: Sequence[Activity],
    preferences: UserPreferences,
    durations: Sequence[int | None],
    start_override: str | None = None,
) -> DaySchedule:
    """Build a day schedule with one optional duration per stop position.

    Used when the same activity occurs more than once in a day and each
    occurrence keeps its own length. None means the rating/pace default.
    """
    mode = resolve_travel_mode(preferences.default_transport_mode)

    start_minutes = parse_time(start_override or preferences.day_start_time)
    end_of_day = start_minutes + round_half_up(preferences.day_length_hours * 60)

    items: list[ItineraryItem] = []
    segments: list[TravelSegment] = []
    clock = start_minutes

    for i, activity in enumerate(activities):
        if i > 0:
            prev = activities[i - 1]
            dist = distance_km(prev.location, activity.location)
            minutes = travel_minutes(dist, mode)
            segments.append(
                TravelSegment(
                    from_activity_id=prev.id,
                    to_activity_id=activity.id,
                    minutes=minutes,
                    mode=mode,
                    distance_km=dist,
                    description=_segment_description(minutes, mode),
                    transport_details="Public transport" if mode == TravelMode.transit else None,
                )
            )
            clock += minutes

        duration = durations[i] if i < len(durations) else None
        if duration is not None and duration <= 0:
            logger.warning(
                f"[build_day_schedule] Ignoring non-positive duration override "
                f"{duration} for activity {activity.id}"
            )
            duration = None
        if duration is None:
            duration = default_activity_duration(activity.rating, preferences.default_pace)

        start_time = format_time(clock)
        clock += duration
        items.append(
            ItineraryItem(
                id=f"{activity.id}-{i}",
                activity_id=activity.id,
                name=activity.name,
                description=activity.description,
                type=ItemType.attraction,
                duration_minutes=duration,
                start_time=start_time,
                end_time=format_time(clock),
                location=activity.location,
                rating=activity.rating,
                image_url=activity.image_url,
            )
        )

    overflow = 0
    if clock > end_of_day and items:
        overflow = clock - end_of_day
        last = items[-1]
        new_duration = max(
            get_settings().overflow_min_duration_minutes, last.duration_minutes - overflow
        )
        last_start = parse_time(last.start_time)
        items[-1] = last.model_copy(
            update={
                "duration_minutes": new_duration,
                "end_time": format_time(last_start + new_duration),
            }
        )

    schedule = DaySchedule(items=items, segments=segments)
    _plan_logger.log_schedule(schedule, start_minutes, end_of_day, overflow)
    return schedule
