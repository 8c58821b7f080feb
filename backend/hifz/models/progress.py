"""Progress models."""

from pydantic import BaseModel, Field


class DailySession(BaseModel):
    """Activity counters for one user and day, as stored in the database."""

    id: str = Field(..., description="'<userId>:<sessionDate>'")
    userId: str = Field(..., description="Owner user ID (partition key)")
    sessionDate: str = Field(..., description="Calendar day (YYYY-MM-DD, UTC)")
    ayahsMemorized: int = Field(0, ge=0)
    ayahsReviewed: int = Field(0, ge=0)


class ProgressStats(BaseModel):
    """Response for GET /progress."""

    totalMemorized: int
    pagesMemorized: int = Field(
        ..., description="Distinct mushaf pages with at least one memorized ayah"
    )
    dueReviews: int
    reviewedToday: int
    currentStreak: int
    bestStreak: int
