"""Daily activity streaks."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, timedelta


def current_streak(days: Iterable[date], today: date) -> int:
    """Consecutive days with activity ending at `today` (0 if none today)."""
    active = set(days)
    streak = 0
    day = today
    while day in active:
        streak += 1
        day -= timedelta(days=1)
    return streak


def best_streak(days: Iterable[date]) -> int:
    """Longest run of consecutive calendar days with activity."""
    ordered = sorted(set(days))
    best = 0
    run = 0
    previous: date | None = None
    for day in ordered:
        if previous is not None and (day - previous).days == 1:
            run += 1
        else:
            run = 1
        best = max(best, run)
        previous = day
    return best
