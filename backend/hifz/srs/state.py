"""Schedule state for one tracked item."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Literal, get_args

from .errors import InvalidArgumentError
from .profiles import ScheduleProfile, get_profile
from .time import add_days, utc_date


Quality = Literal["hard", "good", "easy"]
QUALITIES: tuple[str, ...] = get_args(Quality)

DEFAULT_STRENGTH_FACTOR = 2.5
MIN_STRENGTH_FACTOR = 1.3
MAX_STRENGTH_FACTOR = 3.0
HARD_PENALTY = 0.2
EASY_BONUS = 0.15

# Reviews after this many completed cycles scale the ladder value by the strength factor.
GROWTH_AFTER_REVIEWS = 2


@dataclass(frozen=True)
class ScheduleState:
    strength_factor: float
    interval_days: int
    review_count: int
    next_due_date: date
    last_quality: Quality | None = None


def validate_quality(quality: str) -> Quality:
    if quality not in QUALITIES:
        raise InvalidArgumentError(
            f"quality must be one of {', '.join(QUALITIES)}, got {quality!r}"
        )
    return quality  # type: ignore[return-value]


def validate_state(state: ScheduleState) -> ScheduleState:
    """Reject a schedule state that violates its bounds.

    Raises:
        InvalidArgumentError: If strength_factor is outside [1.3, 3.0] or
            interval_days/review_count is negative
    """
    if not MIN_STRENGTH_FACTOR <= state.strength_factor <= MAX_STRENGTH_FACTOR:
        raise InvalidArgumentError(
            f"strength_factor must be between {MIN_STRENGTH_FACTOR} and "
            f"{MAX_STRENGTH_FACTOR}, got {state.strength_factor}"
        )
    if state.interval_days < 0:
        raise InvalidArgumentError(f"interval_days must be >= 0, got {state.interval_days}")
    if state.review_count < 0:
        raise InvalidArgumentError(f"review_count must be >= 0, got {state.review_count}")
    if state.last_quality is not None:
        validate_quality(state.last_quality)
    return state


def initial_state(now: datetime | date, profile: ScheduleProfile | None = None) -> ScheduleState:
    """State recorded when an item is first marked learned.

    The first review is due one ladder step after learning. Reviewing this
    state behaves exactly like reviewing an item with no state at all.
    """
    profile = profile or get_profile()
    first_interval = profile.ladder[0]
    return ScheduleState(
        strength_factor=DEFAULT_STRENGTH_FACTOR,
        interval_days=first_interval,
        review_count=0,
        next_due_date=add_days(utc_date(now), first_interval),
    )
