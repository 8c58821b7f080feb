"""API routers module."""

from .ayahs import router as ayahs_router
from .reviews import router as reviews_router
from .progress import router as progress_router

__all__ = [
    "ayahs_router",
    "reviews_router",
    "progress_router",
]
