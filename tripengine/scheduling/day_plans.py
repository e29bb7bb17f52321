"""DayPlan-level helpers built on the schedule builder.

The builder works on activities; these helpers work on the DayPlan and
TripPlan records callers actually hold, re-deriving times and segments after
edits such as reordering stops or applying an optimizer suggestion.
"""

import logging
from collections import defaultdict
from collections.abc import Iterable, Mapping, Sequence

from tripengine.models.activity import Activity
from tripengine.models.common import TravelMode
from tripengine.models.itinerary import DaySummary, ItineraryItem
from tripengine.models.trip import DayPlan, TripPlan, UserPreferences
from tripengine.scheduling.builder import build_day_schedule, schedule_with_durations
from tripengine.scheduling.clock import format_duration

logger = logging.getLogger(__name__)


def build_day_plan(
    day: int,
    activities: Sequence[Activity],
    preferences: UserPreferences,
    duration_overrides: Mapping[str, int] | None = None,
    start_override: str | None = None,
    theme: str | None = None,
    summary: str | None = None,
) -> DayPlan:
    """Schedule activities and wrap the result as an unapproved DayPlan."""
    schedule = build_day_schedule(
        activities,
        preferences,
        duration_overrides=duration_overrides,
        start_override=start_override,
    )
    return DayPlan(
        day=day,
        theme=theme,
        summary=summary,
        items=schedule.items,
        segments=schedule.segments,
    )


def _activity_from_item(item: ItineraryItem) -> Activity:
    return Activity(
        id=item.activity_id,
        name=item.name,
        description=item.description,
        rating=item.rating or 1,  # unrated items always carry an explicit duration
        location=item.location,
        image_url=item.image_url,
    )


def reschedule_day(
    day_plan: DayPlan,
    preferences: UserPreferences,
    keep_durations: bool = True,
    start_override: str | None = None,
) -> DayPlan:
    """Re-derive times and segments from the day's current item order.

    Items are visited in list order, so an item appended by an optimizer move
    becomes the last stop of the day. Each occurrence keeps its own duration,
    so an activity visited twice may have two different lengths. Item type,
    notes and rating are carried over. Unrated items (food, breaks) have no
    rating-based default, so they always keep their current duration.

    Args:
        day_plan: Day whose schedule may be stale
        preferences: Preferences to schedule with
        keep_durations: Reuse each rated item's current duration instead of the default
        start_override: Optional "HH:MM" start time

    Returns:
        New DayPlan; approval, theme and summary are preserved
    """
    activities = [_activity_from_item(item) for item in day_plan.items]
    durations = [
        item.duration_minutes if keep_durations or item.rating is None else None
        for item in day_plan.items
    ]
    schedule = schedule_with_durations(activities, preferences, durations, start_override)

    items = [
        new.model_copy(update={"type": old.type, "notes": old.notes, "rating": old.rating})
        for old, new in zip(day_plan.items, schedule.items)
    ]
    return day_plan.model_copy(update={"items": items, "segments": schedule.segments})


def reschedule_days(trip: TripPlan, day_numbers: Iterable[int]) -> TripPlan:
    """Reschedule the named days of a trip with the trip's preferences.

    Unknown day numbers are skipped. Untouched days are shared with the input.
    """
    wanted = set(day_numbers)
    days = []
    for plan in trip.days:
        if plan.day in wanted:
            days.append(reschedule_day(plan, trip.preferences))
        else:
            days.append(plan)

    missing = wanted - {plan.day for plan in trip.days}
    if missing:
        logger.warning(f"[reschedule_days] Skipping unknown days: {sorted(missing)}")
    return trip.model_copy(update={"days": days})


def move_stop(
    day_plan: DayPlan,
    index: int,
    offset: int,
    preferences: UserPreferences,
) -> DayPlan:
    """Move the stop at index by offset positions and re-derive the schedule.

    Out-of-range source or target positions leave the day unchanged.
    """
    target = index + offset
    if not (0 <= index < len(day_plan.items)) or not (0 <= target < len(day_plan.items)):
        return day_plan

    items = list(day_plan.items)
    moved = items.pop(index)
    items.insert(target, moved)
    return reschedule_day(day_plan.model_copy(update={"items": items}), preferences)


def approve_day(day_plan: DayPlan) -> DayPlan:
    """Mark a day as finished by the traveler."""
    return day_plan.model_copy(update={"approved": True})


def summarize_day(day_plan: DayPlan) -> DaySummary:
    """Total travel time, activity time and distance for a day."""
    travel = sum(segment.minutes for segment in day_plan.segments)
    activity = sum(item.duration_minutes for item in day_plan.items)

    by_mode: dict[TravelMode, float] = defaultdict(float)
    for segment in day_plan.segments:
        by_mode[segment.mode] += segment.distance_km

    return DaySummary(
        total_travel_minutes=travel,
        total_activity_minutes=activity,
        total_distance_km=round(sum(by_mode.values()), 2),
        distance_by_mode={mode: round(km, 2) for mode, km in by_mode.items()},
        total_travel_time=format_duration(travel),
        total_activity_time=format_duration(activity),
    )
