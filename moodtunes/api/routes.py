"""
FastAPI routes for MoodTunes REST API.
"""
from fastapi import APIRouter, Depends, HTTPException, status

from .schemas import (
    GenerateTrackRequest,
    TrackResponse,
    NarrateRequest,
    NarrateResponse,
    HealthResponse,
    StatusResponse,
    ErrorResponse
)
from .dependencies import AppState, get_app_state
from ..recommendation.engine import EmptyCatalogError
from ..recommendation.schemas import MoodQuery


router = APIRouter()

ENDPOINTS = [
    "GET /health",
    "GET /status",
    "POST /generate-track",
    "POST /narrate"
]


@router.get(
    "/health",
    response_model=HealthResponse,
    tags=["System"],
    summary="Health check endpoint"
)
async def health_check(state: AppState = Depends(get_app_state)):
    """
    Check the health status of the API.

    Reports how many tracks are loaded and which optional features are on.
    """
    return HealthResponse(
        status="ok",
        version=state.config.versioning.api_version,
        tracks_loaded=len(state.catalog),
        features={
            "trackGeneration": True,
            "trackEnhancement": state.config.enhancement.enabled,
            "narration": True
        }
    )


@router.get(
    "/status",
    response_model=StatusResponse,
    tags=["System"],
    summary="API status"
)
async def api_status(state: AppState = Depends(get_app_state)):
    return StatusResponse(
        api="MoodTunes API",
        version=state.config.versioning.api_version,
        status="operational",
        endpoints=ENDPOINTS
    )


@router.post(
    "/generate-track",
    response_model=TrackResponse,
    responses={
        500: {"model": ErrorResponse, "description": "Track generation failed"},
        503: {"model": ErrorResponse, "description": "Music library unavailable"}
    },
    tags=["Tracks"],
    summary="Pick a track for a mood"
)
def generate_track(
    request: GenerateTrackRequest,
    state: AppState = Depends(get_app_state)
):
    """
    Pick a track from the catalog that matches your mood.

    **Parameters:**
    - **mood**: how you feel, in your own words (required)
    - **genre**: preferred genre (optional)
    - **energy**: very low, low, medium, high or very high (optional)

    Repeating a request may return a different track among the best matches.
    """
    try:
        query = MoodQuery(
            mood=request.mood,
            genre=request.genre,
            energy=request.energy,
            max_length=state.config.api.max_mood_length
        )
    except ValueError as e:
        raise HTTPException(
            status_code=422,
            detail=str(e)
        )

    state.logger.info(
        "Generating track",
        mood=query.mood,
        genre=query.genre,
        energy=query.energy
    )
    try:
        result = state.recommendation_engine.select(query)
    except EmptyCatalogError:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Music library is currently unavailable. Please try again later."
        )
    except Exception as e:
        state.logger.error("Track generation failed", exc_info=True, error_type=type(e).__name__)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to generate track"
        )

    state.logger.info(
        "Track selected",
        track_id=result.track.id,
        score=round(result.score, 4),
        source=result.source
    )
    return TrackResponse.from_track(result.track)


@router.post(
    "/narrate",
    response_model=NarrateResponse,
    tags=["Narration"],
    summary="Motivational message for a mood"
)
def narrate(
    request: NarrateRequest,
    state: AppState = Depends(get_app_state)
):
    """
    Get a short motivational message for how you feel.
    """
    max_length = state.config.api.max_narration_mood_length
    if len(request.mood) > max_length:
        raise HTTPException(
            status_code=422,
            detail=f"Mood description is too long (max {max_length} characters)"
        )
    return NarrateResponse(mood=request.mood, message=state.messages.for_mood(request.mood))
