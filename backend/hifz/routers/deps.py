"""Shared router dependencies."""

from fastapi import Header

from hifz.config import get_app_settings
from hifz.srs.profiles import ScheduleProfile, get_profile
from hifz.srs.time import Clock, utc_now


def get_user_id(x_user_id: str = Header(..., min_length=1, description="User ID header")) -> str:
    """Extract user ID from header."""
    return x_user_id


def get_clock() -> Clock:
    """Clock used to timestamp reviews (overridden in tests)."""
    return utc_now


def resolve_profile(name: str | None, stored: str | None = None) -> ScheduleProfile:
    """Named profile, else the ayah's stored profile, else the configured default.

    Raises:
        InvalidArgumentError: If the name (or SRS_PROFILE) is not a known profile
    """
    if name is None:
        name = stored
    if name is None:
        return get_app_settings().schedule_profile()
    return get_profile(name)
