"""Structured logging for scheduling and optimization runs."""

import logging
from typing import Any

from tripengine.models.itinerary import DaySchedule
from tripengine.models.optimization import OptimizationSuggestion

logger = logging.getLogger(__name__)


class StructuredPlanLogger:
    """Structured logger for engine operations."""

    def log_schedule(
        self,
        schedule: DaySchedule,
        start_minutes: int,
        end_of_day_minutes: int,
        overflow_minutes: int = 0,
    ) -> None:
        """Log a built day schedule with structured data."""
        log_data: dict[str, Any] = {
            "operation": "build_day_schedule",
            "items": len(schedule.items),
            "segments": len(schedule.segments),
            "travel_minutes": sum(s.minutes for s in schedule.segments),
            "start_minutes": start_minutes,
            "end_of_day_minutes": end_of_day_minutes,
        }

        if overflow_minutes:
            log_data["overflow_minutes"] = overflow_minutes
            logger.warning(
                f"Day schedule exceeds budget by {overflow_minutes} min",
                extra={"structured": log_data},
            )
        else:
            logger.info("Day schedule built", extra={"structured": log_data})

    def log_suggestion(
        self,
        suggestion: OptimizationSuggestion | None,
        candidates: int,
        threshold_minutes: float,
    ) -> None:
        """Log the outcome of a cross-day optimization scan."""
        log_data: dict[str, Any] = {
            "operation": "suggest_move",
            "candidates": candidates,
            "threshold_minutes": threshold_minutes,
        }

        if suggestion is None:
            logger.info("No beneficial move found", extra={"structured": log_data})
            return

        log_data.update(
            {
                "activity_id": suggestion.activity_id,
                "from_day": suggestion.from_day,
                "to_day": suggestion.to_day,
                "saving_minutes": round(suggestion.saving_minutes, 2),
            }
        )
        logger.info(
            f"Suggest moving {suggestion.activity_id} "
            f"from day {suggestion.from_day} to day {suggestion.to_day}",
            extra={"structured": log_data},
        )
