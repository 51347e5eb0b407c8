"""
API module for MoodTunes REST API.
"""
from .routes import router
from .app import create_app
from .schemas import (
    GenerateTrackRequest,
    TrackResponse,
    NarrateRequest,
    NarrateResponse,
    HealthResponse,
    StatusResponse,
    RootResponse
)

__all__ = [
    "router",
    "create_app",
    "GenerateTrackRequest",
    "TrackResponse",
    "NarrateRequest",
    "NarrateResponse",
    "HealthResponse",
    "StatusResponse",
    "RootResponse"
]
