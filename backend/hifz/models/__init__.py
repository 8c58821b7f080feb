"""Models module for Pydantic schemas."""

from .ayah import (
    AyahReference,
    MemorizedAyah,
    MemorizedAyahCreate,
    MemorizedAyahResponse,
    MemorizedAyahListResponse,
)
from .review import (
    DueReview,
    DueReviewListResponse,
    ReviewRequest,
    ReviewResponse,
    ScheduleProfileResponse,
    ScheduleProfileListResponse,
)
from .progress import (
    DailySession,
    ProgressStats,
)

__all__ = [
    "AyahReference",
    "MemorizedAyah",
    "MemorizedAyahCreate",
    "MemorizedAyahResponse",
    "MemorizedAyahListResponse",
    "DueReview",
    "DueReviewListResponse",
    "ReviewRequest",
    "ReviewResponse",
    "ScheduleProfileResponse",
    "ScheduleProfileListResponse",
    "DailySession",
    "ProgressStats",
]
