"""Itinerary models - timed schedule produced for a single day."""

from pydantic import Field

from tripengine.models.common import TIME_PATTERN, CamelModel, Coordinate, ItemType, TravelMode


class ItineraryItem(CamelModel):
    """One scheduled occurrence of an activity."""

    id: str
    activity_id: str
    name: str = ""
    description: str = ""
    type: ItemType = ItemType.attraction
    duration_minutes: int = Field(..., gt=0)
    start_time: str = Field(..., pattern=TIME_PATTERN)
    end_time: str = Field(..., pattern=TIME_PATTERN)
    location: Coordinate
    rating: int | None = Field(default=None, ge=1, le=3)
    image_url: str | None = None
    notes: str | None = None


class TravelSegment(CamelModel):
    """Travel between two consecutive scheduled items."""

    from_activity_id: str
    to_activity_id: str
    minutes: int = Field(..., ge=0)
    mode: TravelMode
    distance_km: float = Field(..., ge=0)
    description: str
    transport_details: str | None = None


class DaySchedule(CamelModel):
    """Timed items plus the segments connecting them."""

    items: list[ItineraryItem] = Field(default_factory=list)
    segments: list[TravelSegment] = Field(default_factory=list)


class DaySummary(CamelModel):
    """Aggregate travel and activity time for a day."""

    total_travel_minutes: int
    total_activity_minutes: int
    total_distance_km: float
    distance_by_mode: dict[TravelMode, float] = Field(default_factory=dict)
    total_travel_time: str
    total_activity_time: str
