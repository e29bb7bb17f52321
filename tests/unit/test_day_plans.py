"""Tests for DayPlan-level scheduling helpers."""

from collections.abc import Callable

import pytest

from tripengine.adapters.fixtures import fetch_activities, fetch_trip
from tripengine.models import Activity, ItemType, TravelMode, UserPreferences
from tripengine.optimization.optimizer import apply_suggestion, suggest_move
from tripengine.scheduling.day_plans import (
    approve_day,
    build_day_plan,
    move_stop,
    reschedule_day,
    reschedule_days,
    summarize_day,
)


def test_build_day_plan_wraps_schedule(walking_prefs: UserPreferences) -> None:
    """Test that a built DayPlan is consistent and unapproved."""
    activities = fetch_activities("lisbon")[:3]

    plan = build_day_plan(2, activities, walking_prefs, theme="Baixa")

    assert plan.day == 2
    assert plan.theme == "Baixa"
    assert plan.approved is False
    assert [i.activity_id for i in plan.items] == [a.id for a in activities]
    assert len(plan.segments) == 2
    assert not plan.schedule_is_stale


def test_reschedule_days_after_apply_restores_consistency() -> None:
    """Test both affected days get fresh times and segments after a move."""
    trip = fetch_trip("lisbon_3_days")
    suggestion = suggest_move(trip)
    assert suggestion is not None

    moved = apply_suggestion(trip, suggestion)
    fixed = reschedule_days(moved, [suggestion.from_day, suggestion.to_day])

    origin = fixed.get_day(1)
    target = fixed.get_day(2)
    assert origin is not None and target is not None
    assert not origin.schedule_is_stale
    assert not target.schedule_is_stale
    assert [i.activity_id for i in target.items][-1] == "belem-tower"
    assert target.segments[-1].to_activity_id == "belem-tower"
    assert target.items[-1].start_time > target.items[-2].end_time
    assert fixed.get_day(3) is moved.get_day(3)


def test_reschedule_keeps_durations_by_default(make_activity: Callable[..., Activity]) -> None:
    """Test that rescheduling reuses the current item durations."""
    prefs = UserPreferences()
    plan = build_day_plan(
        1, [make_activity("a", 0, 0), make_activity("b", 0, 0)], prefs, duration_overrides={"a": 40}
    )

    again = reschedule_day(plan, prefs)

    assert [i.duration_minutes for i in again.items] == [40, 90]
    assert again.items[1].start_time == "09:45"


def test_reschedule_can_reset_durations(make_activity: Callable[..., Activity]) -> None:
    """Test keep_durations=False falls back to rating defaults."""
    prefs = UserPreferences()
    plan = build_day_plan(1, [make_activity("a", 0, 0)], prefs, duration_overrides={"a": 40})

    again = reschedule_day(plan, prefs, keep_durations=False)

    assert again.items[0].duration_minutes == 90


def test_reschedule_preserves_day_metadata(make_activity: Callable[..., Activity]) -> None:
    """Test approval, theme, item type and notes survive rescheduling."""
    prefs = UserPreferences()
    plan = build_day_plan(1, [make_activity("a", 0, 0)], prefs, theme="Old town")
    item = plan.items[0].model_copy(update={"type": ItemType.food, "notes": "Book ahead"})
    plan = approve_day(plan.model_copy(update={"items": [item]}))

    again = reschedule_day(plan, prefs, start_override="10:00")

    assert again.approved is True
    assert again.theme == "Old town"
    assert again.items[0].type == ItemType.food
    assert again.items[0].notes == "Book ahead"
    assert again.items[0].start_time == "10:00"


def test_reschedule_days_skips_unknown_days() -> None:
    """Test unknown day numbers are ignored."""
    trip = fetch_trip("lisbon_3_days")
    fixed = reschedule_days(trip, [7])
    assert [d.model_dump() for d in fixed.days] == [d.model_dump() for d in trip.days]


def test_move_stop_reorders_and_reschedules(
    walking_prefs: UserPreferences, make_activity: Callable[..., Activity]
) -> None:
    """Test moving a stop changes the visiting order and times."""
    activities = [make_activity(n, 0, i * 0.01) for i, n in enumerate(("a", "b", "c"))]
    plan = build_day_plan(1, activities, walking_prefs)

    moved = move_stop(plan, 2, -2, walking_prefs)

    assert [i.activity_id for i in moved.items] == ["c", "a", "b"]
    assert moved.items[0].start_time == "09:00"
    assert moved.segments[0].from_activity_id == "c"
    assert not moved.schedule_is_stale


@pytest.mark.parametrize(("index", "offset"), [(0, -1), (2, 1), (5, -1)])
def test_move_stop_out_of_range_is_noop(
    walking_prefs: UserPreferences,
    make_activity: Callable[..., Activity],
    index: int,
    offset: int,
) -> None:
    """Test moves past either end leave the day unchanged."""
    activities = [make_activity(n, 0, 0) for n in ("a", "b", "c")]
    plan = build_day_plan(1, activities, walking_prefs)
    assert move_stop(plan, index, offset, walking_prefs) is plan


def test_approve_day_returns_copy(walking_prefs: UserPreferences) -> None:
    """Test finishing a day flips approval on a copy."""
    plan = build_day_plan(1, [], walking_prefs)
    approved = approve_day(plan)
    assert approved.approved is True
    assert plan.approved is False


def test_summarize_day_totals(walking_prefs: UserPreferences) -> None:
    """Test summary totals match the day's items and segments."""
    plan = build_day_plan(1, fetch_activities("lisbon")[:3], walking_prefs)

    summary = summarize_day(plan)

    assert summary.total_activity_minutes == sum(i.duration_minutes for i in plan.items)
    assert summary.total_travel_minutes == sum(s.minutes for s in plan.segments)
    assert summary.total_distance_km == pytest.approx(
        sum(s.distance_km for s in plan.segments), abs=0.01
    )
    assert set(summary.distance_by_mode) == {TravelMode.walk}
    assert summary.total_activity_time == "5 hours"


def test_summarize_empty_day(walking_prefs: UserPreferences) -> None:
    """Test an empty day summarizes to zeros."""
    summary = summarize_day(build_day_plan(1, [], walking_prefs))
    assert summary.total_travel_minutes == 0
    assert summary.total_activity_minutes == 0
    assert summary.distance_by_mode == {}
    assert summary.total_travel_time == "0 minutes"


def test_reschedule_keeps_duration_per_occurrence(
    walking_prefs: UserPreferences, make_activity: Callable[..., Activity]
) -> None:
    """Test a repeated activity keeps each occurrence's own duration."""
    x = make_activity("x", 0, 0)
    y = make_activity("y", 0, 0.001)
    plan = build_day_plan(1, [x, y, x], walking_prefs)
    edited = plan.items[0].model_copy(update={"duration_minutes": 45})
    plan = plan.model_copy(update={"items": [edited, *plan.items[1:]]})

    again = reschedule_day(plan, walking_prefs)

    assert [i.activity_id for i in again.items] == ["x", "y", "x"]
    assert [i.duration_minutes for i in again.items] == [45, 90, 90]
    assert again.items[1].start_time == "09:50"


def test_reschedule_unrated_item_keeps_duration(
    walking_prefs: UserPreferences, make_activity: Callable[..., Activity]
) -> None:
    """Test an unrated item keeps its length and stays unrated when defaults are reset."""
    plan = build_day_plan(1, [make_activity("a", 0, 0), make_activity("lunch", 0, 0)], walking_prefs)
    lunch = plan.items[1].model_copy(
        update={"type": ItemType.food, "rating": None, "duration_minutes": 40}
    )
    plan = plan.model_copy(update={"items": [plan.items[0], lunch]})

    again = reschedule_day(plan, walking_prefs, keep_durations=False)

    assert again.items[1].duration_minutes == 40
    assert again.items[1].rating is None
    assert again.items[1].type == ItemType.food
