"""Models package - re-exports for convenience."""

from tripengine.models.activity import Activity, DayTheme
from tripengine.models.common import (
    CamelModel,
    Coordinate,
    ItemType,
    Pace,
    TransportPreference,
    TravelMode,
)
from tripengine.models.itinerary import DaySchedule, DaySummary, ItineraryItem, TravelSegment
from tripengine.models.optimization import OptimizationSuggestion
from tripengine.models.trip import DayPlan, TripPlan, UserPreferences

__all__ = [
    # Common
    "CamelModel",
    "Coordinate",
    "ItemType",
    "TravelMode",
    "Pace",
    "TransportPreference",
    # Content
    "Activity",
    "DayTheme",
    # Itinerary
    "ItineraryItem",
    "TravelSegment",
    "DaySchedule",
    "DaySummary",
    # Trip
    "UserPreferences",
    "DayPlan",
    "TripPlan",
    # Optimization
    "OptimizationSuggestion",
]
