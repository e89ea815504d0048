"""FastAPI application for the pace table."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .config import get_settings
from .api.routes import pace_table, preferences
from .api.exception_handlers import register_exception_handlers
from .models.distances import OFFICIAL_DISTANCES, TRAINING_DISTANCES

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())
    logger.info(f"Starting Pace Table API v{__version__}")
    logger.info(
        f"Catalogs: {len(OFFICIAL_DISTANCES)} official, {len(TRAINING_DISTANCES)} training distances"
    )
    logger.info(f"Preferences DB: {settings.preferences_db_path or 'in memory'}")
    yield
    logger.info("Shutting down Pace Table API")


app = FastAPI(
    title="Pace Table API",
    description="Pace and split time reference tables for runners",
    version=__version__,
    lifespan=lifespan,
)

# CORS middleware
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(pace_table.router, prefix="/api/v1/pace-table", tags=["pace-table"])
app.include_router(preferences.router, prefix="/api/v1/preferences", tags=["preferences"])


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": "Pace Table API",
        "version": __version__,
        "status": "healthy",
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
