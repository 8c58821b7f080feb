"""Memorized ayahs API router."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from hifz.models import MemorizedAyahCreate, MemorizedAyahResponse, MemorizedAyahListResponse
from hifz.repositories import (
    get_ayah_repository,
    get_session_repository,
    AyahNotFoundError,
    AyahAlreadyMemorizedError,
)
from hifz.routers.deps import get_clock, get_user_id, resolve_profile
from hifz.srs.errors import InvalidArgumentError
from hifz.srs.time import Clock, utc_date

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/ayahs", tags=["ayahs"])


@router.get("", response_model=MemorizedAyahListResponse)
async def list_ayahs(user_id: Annotated[str, Depends(get_user_id)]) -> MemorizedAyahListResponse:
    """List all memorized ayahs."""
    repo = get_ayah_repository()
    ayahs = repo.list_by_user(user_id)
    return MemorizedAyahListResponse(
        ayahs=[MemorizedAyahResponse(**ayah.model_dump()) for ayah in ayahs],
        count=len(ayahs),
    )


@router.get("/{ayah_id}", response_model=MemorizedAyahResponse)
async def get_ayah(ayah_id: str, user_id: Annotated[str, Depends(get_user_id)]) -> MemorizedAyahResponse:
    """Get a specific memorized ayah by ID."""
    repo = get_ayah_repository()
    try:
        ayah = repo.get_by_id(ayah_id, user_id)
        return MemorizedAyahResponse(**ayah.model_dump())
    except AyahNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Memorized ayah with ID {ayah_id} not found",
        )


@router.post("", response_model=MemorizedAyahResponse, status_code=status.HTTP_201_CREATED)
async def memorize_ayah(
    ayah_create: MemorizedAyahCreate,
    user_id: Annotated[str, Depends(get_user_id)],
    clock: Annotated[Clock, Depends(get_clock)],
) -> MemorizedAyahResponse:
    """Mark an ayah as learned and schedule its first review."""
    now = clock()
    try:
        profile = resolve_profile(ayah_create.profile)
        ayah = get_ayah_repository().create(user_id, ayah_create, now, profile)
    except InvalidArgumentError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except AyahAlreadyMemorizedError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))

    get_session_repository().record_activity(user_id, utc_date(now), memorized=1)
    logger.info(
        "Ayah memorized: user=%s, ayah=%s:%s, profile=%s, first_review=%s",
        user_id,
        ayah.surahNumber,
        ayah.ayahNumber,
        ayah.profile,
        ayah.nextDueDate,
    )
    return MemorizedAyahResponse(**ayah.model_dump())


@router.delete("/{ayah_id}", status_code=status.HTTP_204_NO_CONTENT)
async def unlearn_ayah(ayah_id: str, user_id: Annotated[str, Depends(get_user_id)]) -> None:
    """Stop tracking an ayah, discarding its schedule."""
    repo = get_ayah_repository()
    try:
        repo.delete(ayah_id, user_id)
    except AyahNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Memorized ayah with ID {ayah_id} not found",
        )
