"""Activity models - content service output consumed by the scheduler."""

from typing import Literal

from pydantic import ConfigDict, Field

from tripengine.models.common import CamelModel, Coordinate


class Activity(CamelModel):
    """Point of interest proposed by the content service.

    Only id, rating and location drive scheduling. Any extra fields the
    content service sends are kept as-is.
    """

    model_config = ConfigDict(extra="allow")

    id: str = Field(..., min_length=1)
    name: str = ""
    description: str = ""
    rating: Literal[1, 2, 3]
    location: Coordinate
    image_url: str | None = None


class DayTheme(CamelModel):
    """Day preview offered to the traveler before a day is planned."""

    model_config = ConfigDict(extra="allow")

    day: int = Field(..., ge=1)
    theme: str
    summary: str = ""
    preview_activities: list[Activity] = Field(default_factory=list)
