"""Repositories module for data access layer."""

from .ayah_repository import (
    AyahRepository,
    AyahNotFoundError,
    AyahAlreadyMemorizedError,
    get_ayah_repository,
)
from .session_repository import (
    SessionRepository,
    get_session_repository,
)

__all__ = [
    "AyahRepository",
    "AyahNotFoundError",
    "AyahAlreadyMemorizedError",
    "get_ayah_repository",
    "SessionRepository",
    "get_session_repository",
]
