"""Progress API router."""

from datetime import timedelta
from typing import Annotated

from fastapi import APIRouter, Depends

from hifz.models import ProgressStats
from hifz.repositories import get_ayah_repository, get_session_repository
from hifz.routers.deps import get_clock, get_user_id
from hifz.srs.selector import select_due
from hifz.srs.streaks import best_streak, current_streak
from hifz.srs.time import Clock, parse_iso_date, utc_date

# Sessions further back than this do not count towards streaks.
STREAK_WINDOW_DAYS = 365

router = APIRouter(prefix="/progress", tags=["progress"])


@router.get("", response_model=ProgressStats)
async def get_progress(
    user_id: Annotated[str, Depends(get_user_id)],
    clock: Annotated[Clock, Depends(get_clock)],
) -> ProgressStats:
    """Summarize memorization progress and activity streaks."""
    now = clock()
    today = utc_date(now)

    ayah_repo = get_ayah_repository()
    schedules = ayah_repo.load_schedules(user_id)
    sessions = get_session_repository().list_since(user_id, today - timedelta(days=STREAK_WINDOW_DAYS))

    active_days = [
        parse_iso_date(session.sessionDate)
        for session in sessions
        if session.ayahsMemorized or session.ayahsReviewed
    ]
    reviewed_today = sum(
        session.ayahsReviewed for session in sessions if parse_iso_date(session.sessionDate) == today
    )

    return ProgressStats(
        totalMemorized=len(schedules),
        pagesMemorized=len(ayah_repo.list_pages(user_id)),
        dueReviews=len(select_due(schedules, now)),
        reviewedToday=reviewed_today,
        currentStreak=current_streak(active_days, today),
        bestStreak=best_streak(active_days),
    )
