"""Application configuration loaded from environment variables."""

import os
from functools import lru_cache
from pydantic import BaseModel

from hifz.srs.profiles import ScheduleProfile, get_profile


class AppSettings(BaseModel):
    """Application settings loaded from environment variables."""

    default_profile: str = "IIMK"  # Ladder used when a request names none
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:5173"]
    log_level: str = "INFO"

    def schedule_profile(self) -> ScheduleProfile:
        """Resolve the configured default profile (raises InvalidArgumentError if unknown)."""
        return get_profile(self.default_profile)


@lru_cache()
def get_app_settings() -> AppSettings:
    """Get cached application settings from environment variables."""
    cors_origins = os.getenv("CORS_ORIGINS", "http://localhost:3000,http://localhost:5173")

    return AppSettings(
        default_profile=os.getenv("SRS_PROFILE", "IIMK"),
        cors_origins=[origin.strip() for origin in cors_origins.split(",") if origin.strip()],
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
