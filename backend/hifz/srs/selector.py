"""Due-item selection.

Items are compared at day granularity: an item due today is due at any hour of
today. "now" is always supplied by the caller.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime

from .state import ScheduleState
from .time import utc_date


@dataclass(frozen=True)
class DueItem:
    item_id: str
    state: ScheduleState
    days_overdue: int


def is_due(state: ScheduleState, now: datetime | date) -> bool:
    return state.next_due_date <= utc_date(now)


def days_overdue(state: ScheduleState, now: datetime | date) -> int:
    """Whole days since the item became due; 0 when due today or not yet due."""
    return max(0, (utc_date(now) - state.next_due_date).days)


def select_due(items: Mapping[str, ScheduleState], now: datetime | date) -> list[DueItem]:
    """Return the due items, most overdue first.

    Items that are not yet due are excluded. Ties keep the mapping's iteration
    order, so a fixed input always yields the same output.
    """
    today = utc_date(now)
    due = [
        DueItem(item_id=item_id, state=state, days_overdue=days_overdue(state, today))
        for item_id, state in items.items()
        if is_due(state, today)
    ]
    # sorted() is stable
    return sorted(due, key=lambda item: item.days_overdue, reverse=True)


def earliest_due_date(items: Mapping[str, ScheduleState]) -> date | None:
    """Earliest next_due_date across items (None if there are no items)."""
    return min((state.next_due_date for state in items.values()), default=None)
