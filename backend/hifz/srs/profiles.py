"""Named interval ladders.

A profile is an ordered sequence of day-counts indexed by review count. The
scheduling algorithm is identical for every profile; only the ladder differs.
"""

from __future__ import annotations

from dataclasses import dataclass

from .errors import InvalidArgumentError


@dataclass(frozen=True)
class ScheduleProfile:
    name: str
    label: str
    ladder: tuple[int, ...]

    def __post_init__(self) -> None:
        if not self.ladder:
            raise InvalidArgumentError(f"profile {self.name!r} has an empty ladder")
        if any(days < 1 for days in self.ladder):
            raise InvalidArgumentError(f"profile {self.name!r} ladder entries must be >= 1 day")

    @property
    def last_index(self) -> int:
        return len(self.ladder) - 1


IIMK = ScheduleProfile(name="IIMK", label="IIMK Method", ladder=(3, 7, 15, 30, 60, 120, 240))
ANKI = ScheduleProfile(name="ANKI", label="Anki Style", ladder=(1, 4, 10, 25, 60, 150))
CUSTOM = ScheduleProfile(name="CUSTOM", label="Custom", ladder=(1, 3, 7, 14, 30, 90))

DEFAULT_PROFILE = IIMK

SCHEDULE_PROFILES: dict[str, ScheduleProfile] = {
    profile.name: profile for profile in (IIMK, ANKI, CUSTOM)
}


def get_profile(name: str | None = None) -> ScheduleProfile:
    """Look up a built-in profile by name (case-insensitive).

    None returns the default profile.

    Raises:
        InvalidArgumentError: If no profile has that name
    """
    if name is None:
        return DEFAULT_PROFILE
    try:
        return SCHEDULE_PROFILES[name.strip().upper()]
    except KeyError:
        known = ", ".join(SCHEDULE_PROFILES)
        raise InvalidArgumentError(f"Unknown schedule profile {name!r} (expected one of: {known})")


def list_profiles() -> list[ScheduleProfile]:
    return list(SCHEDULE_PROFILES.values())


def ladder_index(profile: ScheduleProfile, review_count: int) -> int:
    """Position in the ladder for an item that has completed `review_count` reviews."""
    return min(max(0, review_count), profile.last_index)


def milestone_days(profile: ScheduleProfile, review_count: int) -> int:
    """Days to the next milestone for an item reviewed `review_count` times."""
    return profile.ladder[ladder_index(profile, review_count)]
