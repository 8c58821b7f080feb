"""Unit tests for activity streaks."""

from datetime import date, timedelta

from hifz.srs.streaks import best_streak, current_streak

TODAY = date(2026, 1, 2)


def _days_ago(*offsets: int) -> list[date]:
    return [TODAY - timedelta(days=n) for n in offsets]


def test_current_streak_counts_back_from_today():
    assert current_streak(_days_ago(0, 1, 2, 4), TODAY) == 3


def test_current_streak_is_zero_without_activity_today():
    assert current_streak(_days_ago(1, 2, 3), TODAY) == 0


def test_streaks_ignore_duplicates_and_order():
    days = _days_ago(2, 0, 1, 0, 1)
    assert current_streak(days, TODAY) == 3
    assert best_streak(days) == 3


def test_best_streak_finds_longest_run():
    days = _days_ago(0, 1, 5, 6, 7, 8, 20)
    assert best_streak(days) == 4


def test_best_streak_across_month_boundary():
    days = [date(2025, 12, 30), date(2025, 12, 31), date(2026, 1, 1)]
    assert best_streak(days) == 3


def test_empty_activity():
    assert current_streak([], TODAY) == 0
    assert best_streak([]) == 0
