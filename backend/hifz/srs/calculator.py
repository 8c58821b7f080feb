"""Ladder-based review scheduling.

Each tracked item moves along its profile's interval ladder: "hard" steps back,
"good" holds, "easy" steps forward. From the fourth review on, the ladder value
is scaled by the item's strength factor so long-term retention compounds.
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal

from .profiles import ScheduleProfile, get_profile, ladder_index
from .state import (
    DEFAULT_STRENGTH_FACTOR,
    EASY_BONUS,
    GROWTH_AFTER_REVIEWS,
    HARD_PENALTY,
    MAX_STRENGTH_FACTOR,
    MIN_STRENGTH_FACTOR,
    Quality,
    ScheduleState,
    validate_quality,
    validate_state,
)
from .time import add_days, utc_date


def _clamp_strength_factor(factor: float) -> float:
    factor = max(MIN_STRENGTH_FACTOR, min(MAX_STRENGTH_FACTOR, factor))
    return round(factor, 2)


def _round_half_up(value: Decimal) -> int:
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def _grown_interval(ladder_days: int, factor: float) -> int:
    return _round_half_up(Decimal(ladder_days) * Decimal(str(factor)))


def compute_next(
    current: ScheduleState | None,
    quality: Quality,
    now: datetime | date,
    profile: ScheduleProfile | None = None,
) -> ScheduleState:
    """Compute the schedule state that follows one review.

    quality: "hard" | "good" | "easy"

    Rules:
    - index = min(review_count, last ladder index)
    - hard: index -= 1 (>= 0), factor -= 0.2 (>= 1.3)
    - good: index and factor unchanged
    - easy: index += 1 (<= last), factor += 0.15 (<= 3.0)
    - interval = ladder[index]; if review_count > 2:
        interval = round(interval * factor)
    - review_count += 1, next_due_date = today + interval

    A None `current` is a never-reviewed item (review_count 0, factor 2.5).
    The input state is never mutated.

    Raises:
        InvalidArgumentError: If quality is not a known rating or `current`
            violates the schedule state bounds
    """
    validate_quality(quality)
    profile = profile or get_profile()

    if current is None:
        review_count = 0
        factor = DEFAULT_STRENGTH_FACTOR
    else:
        validate_state(current)
        review_count = current.review_count
        factor = current.strength_factor

    index = ladder_index(profile, review_count)
    if quality == "hard":
        index = max(0, index - 1)
        factor = _clamp_strength_factor(factor - HARD_PENALTY)
    elif quality == "easy":
        index = min(profile.last_index, index + 1)
        factor = _clamp_strength_factor(factor + EASY_BONUS)

    interval = profile.ladder[index]
    if review_count > GROWTH_AFTER_REVIEWS:
        interval = _grown_interval(interval, factor)
    interval = max(1, interval)

    return ScheduleState(
        strength_factor=factor,
        interval_days=interval,
        review_count=review_count + 1,
        next_due_date=add_days(utc_date(now), interval),
        last_quality=quality,
    )
