"""Reviews (SRS) API router."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from hifz.config import get_app_settings
from hifz.models import (
    DueReview,
    DueReviewListResponse,
    MemorizedAyah,
    MemorizedAyahResponse,
    ReviewRequest,
    ReviewResponse,
    ScheduleProfileListResponse,
    ScheduleProfileResponse,
)
from hifz.repositories import (
    AyahNotFoundError,
    AyahRepository,
    SessionRepository,
    get_ayah_repository,
    get_session_repository,
)
from hifz.routers.deps import get_clock, get_user_id, resolve_profile
from hifz.srs.calculator import compute_next
from hifz.srs.errors import InvalidArgumentError
from hifz.srs.profiles import ScheduleProfile, list_profiles, milestone_days
from hifz.srs.selector import earliest_due_date, select_due
from hifz.srs.state import Quality
from hifz.srs.time import Clock, date_to_iso, utc_date

logger = logging.getLogger(__name__)


router = APIRouter(prefix="/reviews", tags=["reviews"])


def apply_review(
    ayah: MemorizedAyah,
    quality: Quality,
    now: datetime,
    profile: ScheduleProfile,
    ayah_repo: AyahRepository,
    session_repo: SessionRepository,
) -> MemorizedAyah:
    """Apply one review to a loaded memorized ayah and persist the result.

    Computes the next state from the ayah's schedule state and writes it
    back with the profile used, then counts the review in today's session.

    Raises:
        AyahNotFoundError: If the ayah was deleted before the write
        InvalidArgumentError: If the stored state is out of bounds
    """
    new_state = compute_next(ayah.schedule_state(), quality, now, profile)

    updated = ayah_repo.save_schedule(ayah, new_state, reviewed_at=now, profile=profile)
    session_repo.record_activity(ayah.userId, utc_date(now), reviewed=1)

    logger.info(
        "Review applied: user=%s, ayah=%s, quality=%s, profile=%s, "
        "interval_days=%d, strength_factor=%.2f, next_due=%s",
        ayah.userId,
        ayah.id,
        quality,
        profile.name,
        new_state.interval_days,
        new_state.strength_factor,
        updated.nextDueDate,
    )
    return updated


@router.get("/due", response_model=DueReviewListResponse)
async def list_due_reviews(
    user_id: Annotated[str, Depends(get_user_id)],
    clock: Annotated[Clock, Depends(get_clock)],
) -> DueReviewListResponse:
    """Return the ayahs due for review, most overdue first."""
    ayah_repo = get_ayah_repository()
    ayahs = {ayah.id: ayah for ayah in ayah_repo.list_by_user(user_id)}
    schedules = {ayah_id: ayah.schedule_state() for ayah_id, ayah in ayahs.items()}

    reviews = []
    for item in select_due(schedules, clock()):
        ayah = ayahs[item.item_id]
        try:
            profile = resolve_profile(None, ayah.profile)
        except InvalidArgumentError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
        reviews.append(
            DueReview(
                id=item.item_id,
                surahNumber=ayah.surahNumber,
                ayahNumber=ayah.ayahNumber,
                pageNumber=ayah.pageNumber,
                daysOverdue=item.days_overdue,
                nextDueDate=date_to_iso(item.state.next_due_date),
                reviewCount=item.state.review_count,
                nextMilestoneDays=milestone_days(profile, item.state.review_count),
            )
        )

    next_due = None
    if not reviews:
        earliest = earliest_due_date(schedules)
        next_due = date_to_iso(earliest) if earliest is not None else None

    return DueReviewListResponse(reviews=reviews, count=len(reviews), nextDueDate=next_due)


@router.get("/profiles", response_model=ScheduleProfileListResponse)
async def get_schedule_profiles() -> ScheduleProfileListResponse:
    """List the available schedule profiles."""
    settings = get_app_settings()
    return ScheduleProfileListResponse(
        profiles=[
            ScheduleProfileResponse(name=p.name, label=p.label, ladder=list(p.ladder))
            for p in list_profiles()
        ],
        default=settings.schedule_profile().name,
    )


@router.post("/{ayah_id}", response_model=ReviewResponse)
async def submit_review(
    ayah_id: str,
    req: ReviewRequest,
    user_id: Annotated[str, Depends(get_user_id)],
    clock: Annotated[Clock, Depends(get_clock)],
) -> ReviewResponse:
    """Record a review rating for an ayah and reschedule it."""
    ayah_repo = get_ayah_repository()
    try:
        ayah = ayah_repo.get_by_id(ayah_id, user_id)
        profile = resolve_profile(req.profile, ayah.profile)
        updated = apply_review(
            ayah,
            req.quality,
            clock(),
            profile,
            ayah_repo,
            get_session_repository(),
        )
    except AyahNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Memorized ayah with ID {ayah_id} not found",
        )
    except InvalidArgumentError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    return ReviewResponse(ayah=MemorizedAyahResponse(**updated.model_dump()), profile=profile.name)
