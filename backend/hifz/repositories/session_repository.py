"""Repository for per-day activity counters."""

from datetime import date
from azure.cosmos import ContainerProxy
from azure.cosmos.exceptions import CosmosResourceNotFoundError

from hifz.db import get_sessions_container
from hifz.models import DailySession
from hifz.srs.time import date_to_iso


def session_id(user_id: str, day: date) -> str:
    return f"{user_id}:{date_to_iso(day)}"


class SessionRepository:
    """Repository for DailySession database operations."""

    def __init__(self, container: ContainerProxy | None = None):
        """Initialize the repository with an optional container."""
        self._container = container

    @property
    def container(self) -> ContainerProxy:
        """Get the container, lazily initializing if needed."""
        if self._container is None:
            self._container = get_sessions_container()
        return self._container

    def get_for_day(self, user_id: str, day: date) -> DailySession | None:
        try:
            item = self.container.read_item(item=session_id(user_id, day), partition_key=user_id)
        except CosmosResourceNotFoundError:
            return None
        return DailySession(**item)

    def record_activity(
        self, user_id: str, day: date, memorized: int = 0, reviewed: int = 0
    ) -> DailySession:
        """Add to the user's counters for `day`, creating the day's document if needed."""
        session = self.get_for_day(user_id, day)
        if session is None:
            session = DailySession(
                id=session_id(user_id, day),
                userId=user_id,
                sessionDate=date_to_iso(day),
            )

        session.ayahsMemorized += memorized
        session.ayahsReviewed += reviewed

        upserted = self.container.upsert_item(body=session.model_dump())
        return DailySession(**upserted)

    def list_since(self, user_id: str, start_day: date) -> list[DailySession]:
        """List sessions on or after `start_day`, newest first."""
        query = (
            "SELECT * FROM c WHERE c.userId = @userId AND c.sessionDate >= @startDate "
            "ORDER BY c.sessionDate DESC"
        )
        parameters = [
            {"name": "@userId", "value": user_id},
            {"name": "@startDate", "value": date_to_iso(start_day)},
        ]

        items = list(
            self.container.query_items(
                query=query,
                parameters=parameters,
                partition_key=user_id,
            )
        )
        return [DailySession(**item) for item in items]


# Singleton instance
_session_repository: SessionRepository | None = None


def get_session_repository() -> SessionRepository:
    """Get the session repository singleton."""
    global _session_repository
    if _session_repository is None:
        _session_repository = SessionRepository()
    return _session_repository
