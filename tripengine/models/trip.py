"""Trip models - multi-day plan and the preferences that shape it."""

from pydantic import ConfigDict, Field, field_validator, model_validator

from tripengine.models.common import TIME_PATTERN, CamelModel, Pace, TransportPreference
from tripengine.models.itinerary import ItineraryItem, TravelSegment
from tripengine.scheduling.clock import parse_time


class UserPreferences(CamelModel):
    """Traveler preferences that influence scheduling."""

    model_config = ConfigDict(frozen=True)

    day_start_time: str = Field(default="09:00", pattern=TIME_PATTERN)
    day_length_hours: float = Field(default=10, ge=4, le=16)
    default_pace: Pace = Pace.moderate
    default_transport_mode: TransportPreference = TransportPreference.walking

    @field_validator("day_start_time")
    @classmethod
    def validate_day_start_time(cls, v: str) -> str:
        """Ensure the start time is a real wall-clock time."""
        parse_time(v)
        return v


class DayPlan(CamelModel):
    """Plan for a single day of the trip."""

    day: int = Field(..., ge=1)
    theme: str | None = None
    summary: str | None = None
    items: list[ItineraryItem] = Field(default_factory=list)
    segments: list[TravelSegment] = Field(default_factory=list)
    approved: bool = False

    @property
    def schedule_is_stale(self) -> bool:
        """True when segments no longer connect consecutive items."""
        if len(self.segments) != max(len(self.items) - 1, 0):
            return True
        for segment, (prev, nxt) in zip(self.segments, zip(self.items, self.items[1:])):
            if segment.from_activity_id != prev.activity_id:
                return True
            if segment.to_activity_id != nxt.activity_id:
                return True
        return False


class TripPlan(CamelModel):
    """Full trip: one DayPlan per day number."""

    destination: str
    duration_days: int = Field(..., ge=1)
    days: list[DayPlan] = Field(default_factory=list)
    preferences: UserPreferences = Field(default_factory=UserPreferences)

    @model_validator(mode="after")
    def validate_day_numbers(self) -> "TripPlan":
        """Ensure day numbers are unique and within 1..duration_days."""
        seen: set[int] = set()
        for plan in self.days:
            if plan.day in seen:
                raise ValueError(f"Duplicate day number: {plan.day}")
            if plan.day > self.duration_days:
                raise ValueError(
                    f"Day {plan.day} is outside trip duration of {self.duration_days} days"
                )
            seen.add(plan.day)
        return self

    def get_day(self, day: int) -> DayPlan | None:
        """Return the DayPlan for a day number, if present."""
        for plan in self.days:
            if plan.day == day:
                return plan
        return None

    def days_in_order(self) -> list[DayPlan]:
        """Days sorted by ascending day number."""
        return sorted(self.days, key=lambda d: d.day)

    def total_items(self) -> int:
        """Number of scheduled items across all days."""
        return sum(len(plan.items) for plan in self.days)
