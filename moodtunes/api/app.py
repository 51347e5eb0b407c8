"""
FastAPI application factory for MoodTunes.
"""
from datetime import datetime, timezone
from typing import List, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .routes import router
from .schemas import RootResponse

ROOT_ENDPOINTS = {
    "health": "/api/health",
    "status": "/api/status",
    "generateTrack": "POST /api/generate-track",
    "narrate": "POST /api/narrate"
}


DESCRIPTION = """
**MoodTunes API**

Describe how you feel and get a track from the catalog that fits.

## Quick Start

1. Check API health: `GET /health`
2. Get a track: `POST /generate-track` with `{"mood": "..."}`
3. Get a motivational message: `POST /narrate` with `{"mood": "..."}`

## Energy levels

`very low`, `low`, `medium`, `high`, `very high`
"""


def create_app(version: str = "1.0.0", cors_origins: Optional[List[str]] = None) -> FastAPI:
    """Build the FastAPI application with routes mounted at ``/api`` and ``/``."""
    app = FastAPI(
        title="MoodTunes",
        description=DESCRIPTION,
        version=version,
        license_info={
            "name": "MIT",
        }
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins or ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/", response_model=RootResponse, tags=["System"], summary="Server information")
    async def root():
        return RootResponse(
            message="MoodTunes API Server",
            version=version,
            status="running",
            timestamp=datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            endpoints=ROOT_ENDPOINTS,
            documentation="Visit /api/health for server health information"
        )

    app.include_router(router, prefix="/api")
    app.include_router(router)
    return app
