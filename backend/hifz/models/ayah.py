"""Memorized ayah models for API requests, responses and storage."""

from datetime import datetime
from pydantic import BaseModel, Field
from uuid import uuid4

from hifz.srs.state import Quality, ScheduleState, initial_state
from hifz.srs.profiles import DEFAULT_PROFILE, ScheduleProfile
from hifz.srs.time import date_to_iso, parse_iso_date, utc_datetime_to_iso_z


def generate_uuid() -> str:
    """Generate a new UUID string."""
    return str(uuid4())


class AyahReference(BaseModel):
    """Position of an ayah in the mushaf."""

    surahNumber: int = Field(..., ge=1, le=114, description="Surah number (1-114)")
    ayahNumber: int = Field(..., ge=1, le=286, description="Ayah number within the surah")
    pageNumber: int = Field(..., ge=1, le=604, description="Mushaf page number (1-604)")


class MemorizedAyahCreate(AyahReference):
    """Model for marking an ayah as learned."""

    profile: str | None = Field(None, description="Schedule profile for this ayah (defaults to SRS_PROFILE)")


class MemorizedAyah(AyahReference):
    """Full memorized ayah document as stored in the database."""

    id: str = Field(default_factory=generate_uuid, description="Unique identifier")
    userId: str = Field(..., description="Owner user ID (partition key)")
    memorizedAt: str = Field(..., description="When the ayah was marked learned (UTC ISO Z)")
    updatedAt: str = Field(..., description="Last update timestamp (UTC ISO Z)")

    # Schedule fields (persisted)
    strengthFactor: float = Field(2.5, description="Retention strength factor (1.3-3.0)")
    intervalDays: int = Field(0, description="Days between the last update and the next review")
    reviewCount: int = Field(0, description="Completed review cycles")
    nextDueDate: str = Field(..., description="Next review date (YYYY-MM-DD, UTC)")
    lastQuality: Quality | None = Field(None, description="Most recent quality rating")
    lastReviewedAt: str | None = Field(None, description="Last review timestamp (UTC ISO Z)")
    profile: str | None = Field(
        None, description="Schedule profile the ayah is reviewed on (None: SRS_PROFILE)"
    )

    @classmethod
    def learned(
        cls,
        user_id: str,
        reference: AyahReference,
        now: datetime,
        profile: ScheduleProfile | None = None,
    ) -> "MemorizedAyah":
        """Build a freshly learned ayah carrying the initial schedule state."""
        now_iso = utc_datetime_to_iso_z(now)
        state = initial_state(now, profile)
        ayah = cls(
            userId=user_id,
            surahNumber=reference.surahNumber,
            ayahNumber=reference.ayahNumber,
            pageNumber=reference.pageNumber,
            memorizedAt=now_iso,
            updatedAt=now_iso,
            nextDueDate=date_to_iso(state.next_due_date),
            profile=(profile or DEFAULT_PROFILE).name,
        )
        ayah.apply_schedule(state)
        return ayah

    def schedule_state(self) -> ScheduleState:
        return ScheduleState(
            strength_factor=self.strengthFactor,
            interval_days=self.intervalDays,
            review_count=self.reviewCount,
            next_due_date=parse_iso_date(self.nextDueDate),
            last_quality=self.lastQuality,
        )

    def apply_schedule(self, state: ScheduleState) -> None:
        self.strengthFactor = state.strength_factor
        self.intervalDays = state.interval_days
        self.reviewCount = state.review_count
        self.nextDueDate = date_to_iso(state.next_due_date)
        self.lastQuality = state.last_quality


class MemorizedAyahResponse(AyahReference):
    """Memorized ayah returned by API."""

    id: str
    userId: str
    memorizedAt: str
    updatedAt: str

    strengthFactor: float
    intervalDays: int
    reviewCount: int
    nextDueDate: str
    lastQuality: Quality | None
    lastReviewedAt: str | None
    profile: str | None = None


class MemorizedAyahListResponse(BaseModel):
    """Response containing a list of memorized ayahs."""

    ayahs: list[MemorizedAyahResponse]
    count: int
