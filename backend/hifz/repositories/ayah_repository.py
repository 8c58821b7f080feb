"""Repository for memorized ayahs and their schedule state."""

from datetime import datetime
from azure.cosmos import ContainerProxy
from azure.cosmos.exceptions import CosmosResourceNotFoundError

from hifz.db import get_ayahs_container
from hifz.models import MemorizedAyah, MemorizedAyahCreate
from hifz.srs.profiles import ScheduleProfile
from hifz.srs.state import ScheduleState
from hifz.srs.time import utc_datetime_to_iso_z


class AyahNotFoundError(Exception):
    """Raised when a memorized ayah is not found."""

    pass


class AyahAlreadyMemorizedError(Exception):
    """Raised when an ayah is marked learned twice by the same user."""

    pass


class AyahRepository:
    """Repository for MemorizedAyah database operations."""

    def __init__(self, container: ContainerProxy | None = None):
        """Initialize the repository with an optional container."""
        self._container = container

    @property
    def container(self) -> ContainerProxy:
        """Get the container, lazily initializing if needed."""
        if self._container is None:
            self._container = get_ayahs_container()
        return self._container

    def list_by_user(self, user_id: str) -> list[MemorizedAyah]:
        """List all memorized ayahs of a user, oldest first."""
        query = "SELECT * FROM c WHERE c.userId = @userId ORDER BY c.memorizedAt ASC"
        parameters = [{"name": "@userId", "value": user_id}]

        items = list(
            self.container.query_items(
                query=query,
                parameters=parameters,
                partition_key=user_id,
            )
        )
        return [MemorizedAyah(**item) for item in items]

    def get_by_id(self, ayah_id: str, user_id: str) -> MemorizedAyah:
        """Get a memorized ayah by ID and user ID."""
        try:
            item = self.container.read_item(item=ayah_id, partition_key=user_id)
            return MemorizedAyah(**item)
        except CosmosResourceNotFoundError:
            raise AyahNotFoundError(f"Memorized ayah with ID {ayah_id} not found")

    def find_by_reference(self, user_id: str, surah_number: int, ayah_number: int) -> MemorizedAyah | None:
        """Return the user's record for surah:ayah, if any."""
        query = (
            "SELECT TOP 1 * FROM c "
            "WHERE c.userId = @userId AND c.surahNumber = @surah AND c.ayahNumber = @ayah"
        )
        parameters = [
            {"name": "@userId", "value": user_id},
            {"name": "@surah", "value": surah_number},
            {"name": "@ayah", "value": ayah_number},
        ]

        items = list(
            self.container.query_items(
                query=query,
                parameters=parameters,
                partition_key=user_id,
            )
        )
        if not items:
            return None
        return MemorizedAyah(**items[0])

    def create(
        self,
        user_id: str,
        ayah_create: MemorizedAyahCreate,
        now: datetime,
        profile: ScheduleProfile | None = None,
    ) -> MemorizedAyah:
        """Mark an ayah as learned, storing its initial schedule state."""
        existing = self.find_by_reference(user_id, ayah_create.surahNumber, ayah_create.ayahNumber)
        if existing is not None:
            raise AyahAlreadyMemorizedError(
                f"Ayah {ayah_create.surahNumber}:{ayah_create.ayahNumber} is already memorized"
            )

        ayah = MemorizedAyah.learned(user_id, ayah_create, now, profile)
        created_item = self.container.create_item(body=ayah.model_dump())
        return MemorizedAyah(**created_item)

    def replace(self, ayah: MemorizedAyah) -> MemorizedAyah:
        """Replace (persist) a full memorized ayah document."""
        try:
            updated_item = self.container.replace_item(
                item=ayah.id,
                body=ayah.model_dump(),
            )
        except CosmosResourceNotFoundError:
            raise AyahNotFoundError(f"Memorized ayah with ID {ayah.id} not found")
        return MemorizedAyah(**updated_item)

    def load_schedules(self, user_id: str) -> dict[str, ScheduleState]:
        """Return every tracked ayah's schedule state keyed by ayah ID."""
        return {ayah.id: ayah.schedule_state() for ayah in self.list_by_user(user_id)}

    def list_pages(self, user_id: str) -> list[int]:
        """Distinct mushaf pages on which the user has memorized ayahs."""
        query = "SELECT DISTINCT VALUE c.pageNumber FROM c WHERE c.userId = @userId"
        parameters = [{"name": "@userId", "value": user_id}]

        pages = self.container.query_items(
            query=query,
            parameters=parameters,
            partition_key=user_id,
        )
        return sorted(pages)

    def save_schedule(
        self,
        ayah: MemorizedAyah,
        state: ScheduleState,
        reviewed_at: datetime,
        profile: ScheduleProfile | None = None,
    ) -> MemorizedAyah:
        """Persist a new schedule state onto an already loaded ayah.

        `profile`, when given, becomes the ayah's stored profile.
        """
        ayah = ayah.model_copy()
        ayah.apply_schedule(state)
        if profile is not None:
            ayah.profile = profile.name

        reviewed_iso = utc_datetime_to_iso_z(reviewed_at)
        ayah.lastReviewedAt = reviewed_iso
        ayah.updatedAt = reviewed_iso
        return self.replace(ayah)

    def delete(self, ayah_id: str, user_id: str) -> None:
        """Delete (unlearn) a memorized ayah by ID."""
        try:
            self.container.delete_item(item=ayah_id, partition_key=user_id)
        except CosmosResourceNotFoundError:
            raise AyahNotFoundError(f"Memorized ayah with ID {ayah_id} not found")


# Singleton instance
_ayah_repository: AyahRepository | None = None


def get_ayah_repository() -> AyahRepository:
    """Get the memorized ayah repository singleton."""
    global _ayah_repository
    if _ayah_repository is None:
        _ayah_repository = AyahRepository()
    return _ayah_repository
