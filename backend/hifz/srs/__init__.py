"""SRS helpers (ladder scheduling + due selection)."""

from .calculator import compute_next
from .errors import InvalidArgumentError
from .profiles import (
    DEFAULT_PROFILE,
    SCHEDULE_PROFILES,
    ScheduleProfile,
    get_profile,
    ladder_index,
    list_profiles,
    milestone_days,
)
from .selector import DueItem, days_overdue, earliest_due_date, is_due, select_due
from .state import (
    MAX_STRENGTH_FACTOR,
    MIN_STRENGTH_FACTOR,
    QUALITIES,
    Quality,
    ScheduleState,
    initial_state,
    validate_quality,
    validate_state,
)
from .streaks import best_streak, current_streak
from .time import (
    Clock,
    utc_now,
    utc_datetime_to_iso_z,
    parse_iso_z,
    utc_date,
    date_to_iso,
    parse_iso_date,
    add_days,
)

__all__ = [
    "compute_next",
    "InvalidArgumentError",
    "DEFAULT_PROFILE",
    "SCHEDULE_PROFILES",
    "ScheduleProfile",
    "get_profile",
    "ladder_index",
    "list_profiles",
    "milestone_days",
    "DueItem",
    "days_overdue",
    "earliest_due_date",
    "is_due",
    "select_due",
    "MAX_STRENGTH_FACTOR",
    "MIN_STRENGTH_FACTOR",
    "QUALITIES",
    "Quality",
    "ScheduleState",
    "initial_state",
    "validate_quality",
    "validate_state",
    "best_streak",
    "current_streak",
    "Clock",
    "utc_now",
    "utc_datetime_to_iso_z",
    "parse_iso_z",
    "utc_date",
    "date_to_iso",
    "parse_iso_date",
    "add_days",
]
