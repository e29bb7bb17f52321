"""Typed settings configuration - single source of truth."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Engine settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Default traveler preferences
    default_day_start_time: str = "09:00"
    default_day_length_hours: float = 10
    default_pace: str = "moderate"
    default_transport_mode: str = "walking"

    # Travel speeds (km/h)
    walk_speed_kmh: float = 4.5
    transit_speed_kmh: float = 20.0
    drive_speed_kmh: float = 30.0

    # Cross-day optimizer heuristics: distance-to-minutes factor, acceptance threshold
    optimizer_minutes_per_km: float = 12.0
    optimizer_min_saving_minutes: float = 20.0

    # Overflow correction floor (minutes)
    overflow_min_duration_minutes: int = 30


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
