"""Optimization models - cross-day move proposals."""

from pydantic import Field

from tripengine.models.common import CamelModel


class OptimizationSuggestion(CamelModel):
    """Proposal to move one activity from one day to another."""

    activity_id: str
    activity_name: str
    from_day: int = Field(..., ge=1)
    to_day: int = Field(..., ge=1)
    saving_minutes: float = Field(..., gt=0)
