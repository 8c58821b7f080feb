"""Models for review endpoints."""

from __future__ import annotations

from pydantic import BaseModel, Field

from hifz.models.ayah import AyahReference, MemorizedAyahResponse
from hifz.srs.state import Quality


class ReviewRequest(BaseModel):
    """Body for POST /reviews/{ayah_id}."""

    quality: Quality = Field(..., description="Self-reported recall quality")
    profile: str | None = Field(None, description="Schedule profile (defaults to SRS_PROFILE)")


class ReviewResponse(BaseModel):
    """Result of applying one review."""

    ayah: MemorizedAyahResponse
    profile: str


class DueReview(AyahReference):
    """One ayah due for review."""

    id: str
    daysOverdue: int
    nextDueDate: str
    reviewCount: int
    nextMilestoneDays: int = Field(..., description="Ladder interval a \"good\" rating would reach")


class DueReviewListResponse(BaseModel):
    """Response for GET /reviews/due."""

    reviews: list[DueReview]
    count: int
    nextDueDate: str | None = Field(
        None,
        description="Earliest upcoming review date when nothing is due now",
    )


class ScheduleProfileResponse(BaseModel):
    name: str
    label: str
    ladder: list[int]


class ScheduleProfileListResponse(BaseModel):
    profiles: list[ScheduleProfileResponse]
    default: str
