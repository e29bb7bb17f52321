"""Common types and enums shared across all models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# "HH:MM" wall-clock string (validated strictly by scheduling.clock.parse_time)
TIME_PATTERN = r"^\d{1,2}:\d{2}$"


class CamelModel(BaseModel):
    """Base model serialized with camelCase JSON field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Coordinate(CamelModel):
    """Geographic coordinates in decimal degrees (WGS84)."""

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)


class ItemType(str, Enum):
    """Kind of scheduled itinerary item."""

    attraction = "attraction"
    food = "food"
    break_ = "break"
    transport = "transport"
    hostel = "hostel"


class TravelMode(str, Enum):
    """Mode used for a single travel segment."""

    walk = "walk"
    transit = "transit"
    drive = "drive"


class Pace(str, Enum):
    """Traveler pace, scales default activity durations."""

    leisurely = "leisurely"
    moderate = "moderate"
    fast = "fast"


class TransportPreference(str, Enum):
    """Traveler's preferred way of getting around."""

    walking = "walking"
    transit = "transit"
    mixed = "mixed"
