"""Cross-day optimizer: find and apply a single beneficial activity move.

Each day is represented by the centroid of its items. An item that sits much
closer to another day's centroid than to its own is a candidate to move there.
This is a greedy single-step heuristic; callers may repeat it after
rescheduling but convergence to a global optimum is not guaranteed.
"""

import logging

from tripengine.config import get_settings
from tripengine.geo.metrics import centroid, distance_km
from tripengine.models.common import Coordinate
from tripengine.models.optimization import OptimizationSuggestion
from tripengine.models.trip import TripPlan
from tripengine.utils.logging import StructuredPlanLogger

logger = logging.getLogger(__name__)

_plan_logger = StructuredPlanLogger()


def _day_centroids(trip: TripPlan) -> dict[int, Coordinate]:
    centroids: dict[int, Coordinate] = {}
    for plan in trip.days_in_order():
        center = centroid(item.location for item in plan.items)
        if center is not None:
            centroids[plan.day] = center
    return centroids


def suggest_move(
    trip: TripPlan,
    minutes_per_km: float | None = None,
    min_saving_minutes: float | None = None,
) -> OptimizationSuggestion | None:
    """Find the single most beneficial move of an activity to another day.

    Args:
        trip: Trip to inspect (not modified)
        minutes_per_km: Override for the distance-to-minutes conversion
        min_saving_minutes: Override for the acceptance threshold

    Returns:
        Best suggestion saving more than the threshold, or None

    Days are scanned by ascending day number, items in list order and target
    days by ascending day number; the first maximum found wins.
    """
    settings = get_settings()
    if minutes_per_km is None:
        minutes_per_km = settings.optimizer_minutes_per_km
    if min_saving_minutes is None:
        min_saving_minutes = settings.optimizer_min_saving_minutes

    threshold = max(min_saving_minutes, 0.0)
    centroids = _day_centroids(trip)
    best: OptimizationSuggestion | None = None
    candidates = 0

    for plan in trip.days_in_order():
        own_center = centroids.get(plan.day)
        if own_center is None:
            continue

        for item in plan.items:
            to_own = distance_km(item.location, own_center)

            for other_day, other_center in centroids.items():
                if other_day == plan.day:
                    continue
                candidates += 1

                delta_km = to_own - distance_km(item.location, other_center)
                saving = delta_km * minutes_per_km
                if saving <= threshold:
                    continue
                if best is not None and saving <= best.saving_minutes:
                    continue

                best = OptimizationSuggestion(
                    activity_id=item.activity_id,
                    activity_name=item.name,
                    from_day=plan.day,
                    to_day=other_day,
                    saving_minutes=saving,
                )

    _plan_logger.log_suggestion(best, candidates, threshold)
    return best


def apply_suggestion(trip: TripPlan, suggestion: OptimizationSuggestion) -> TripPlan:
    """Move the suggested activity to the end of its destination day.

    The returned trip shares untouched days with the input; the two affected
    days are fresh copies. Start/end times and segments are left as they were,
    so both affected days must be rescheduled afterwards.

    Returns:
        New TripPlan, or the input trip unchanged when the activity is not on
        the origin day or either day does not exist
    """
    origin = trip.get_day(suggestion.from_day)
    target = trip.get_day(suggestion.to_day)
    if origin is None or target is None or origin.day == target.day:
        logger.warning(
            f"[apply_suggestion] Day {suggestion.from_day} or {suggestion.to_day} "
            "not usable, leaving trip unchanged"
        )
        return trip

    index = next(
        (i for i, item in enumerate(origin.items) if item.activity_id == suggestion.activity_id),
        None,
    )
    if index is None:
        logger.info(
            f"[apply_suggestion] Activity {suggestion.activity_id} not on day "
            f"{suggestion.from_day}, leaving trip unchanged"
        )
        return trip

    new_origin = origin.model_copy(deep=True)
    moved = new_origin.items.pop(index)
    new_target = target.model_copy(deep=True)
    new_target.items.append(moved)

    days = []
    for plan in trip.days:
        if plan.day == origin.day:
            days.append(new_origin)
        elif plan.day == target.day:
            days.append(new_target)
        else:
            days.append(plan)

    return trip.model_copy(update={"days": days})
