import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

from hifz.config import get_app_settings
from hifz.db import get_settings, verify_connection, close_client
from hifz.routers import ayahs_router, reviews_router, progress_router

load_dotenv()

app_settings = get_app_settings()
logging.basicConfig(
    level=app_settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    settings = get_settings()

    # Fails fast on an unknown SRS_PROFILE
    profile = app_settings.schedule_profile()
    logger.info("Default schedule profile: %s %s", profile.name, list(profile.ladder))

    if settings.is_configured():
        if verify_connection():
            logger.info("Connected to Cosmos DB")
        else:
            logger.error("Failed to connect to Cosmos DB - check configuration")
    else:
        logger.warning("Cosmos DB not configured (COSMOS_ENDPOINT/COSMOS_EMULATOR not set)")

    yield

    # Shutdown
    close_client()
    logger.info("Cosmos DB connection closed")


app = FastAPI(
    title="Hifz API",
    description="Spaced-repetition review scheduling for Quran memorization",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=app_settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(ayahs_router)
app.include_router(reviews_router)
app.include_router(progress_router)


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": "Hifz API",
        "version": "1.0.0",
        "endpoints": {
            "health": "/healthz",
            "ayahs": "/ayahs",
            "due": "/reviews/due",
            "review": "/reviews/{ayah_id}",
            "profiles": "/reviews/profiles",
            "progress": "/progress",
        },
    }


@app.get("/healthz")
async def healthz():
    """Health check endpoint."""
    return {"status": "healthy"}
