"""
Pydantic schemas for MoodTunes REST API.
"""
from typing import Optional, List, Dict
from pydantic import BaseModel, Field, field_validator

from ..data.schemas import Track


def _strip_optional(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


class GenerateTrackRequest(BaseModel):
    """Request body for the track generation endpoint."""
    mood: str = Field(description="Free-text description of how you feel")
    genre: Optional[str] = Field(
        default=None,
        description="Preferred genre (exact, case-insensitive match)"
    )
    energy: Optional[str] = Field(
        default=None,
        description="Energy level: very low, low, medium, high or very high"
    )

    @field_validator('mood')
    @classmethod
    def mood_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Mood is required and must be a non-empty string")
        return value

    @field_validator('genre', 'energy')
    @classmethod
    def strip_hints(cls, value: Optional[str]) -> Optional[str]:
        return _strip_optional(value)


class TrackResponse(BaseModel):
    """Selected track."""
    id: str
    title: str
    description: str
    mood: str
    genre: str
    energy: str
    duration: str
    audioUrl: str = Field(description="Location of the track audio")
    url: str = Field(description="Same as audioUrl")

    @classmethod
    def from_track(cls, track: Track) -> 'TrackResponse':
        return cls(
            id=track.id,
            title=track.title,
            description=track.description,
            mood=track.mood,
            genre=track.genre,
            energy=track.energy,
            duration=track.duration,
            audioUrl=track.audio_url,
            url=track.audio_url
        )


class NarrateRequest(BaseModel):
    """Request body for the narration endpoint."""
    mood: str = Field(description="Free-text description of how you feel")

    @field_validator('mood')
    @classmethod
    def mood_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Mood is required and must be a non-empty string")
        return value


class NarrateResponse(BaseModel):
    mood: str
    message: str = Field(description="Motivational message for the mood")


class HealthResponse(BaseModel):
    """Health check response."""
    status: str = Field(description="API status")
    version: str = Field(description="API version")
    tracks_loaded: int = Field(ge=0, description="Number of tracks in the catalog")
    features: Dict[str, bool] = Field(description="Which optional features are enabled")


class StatusResponse(BaseModel):
    api: str
    version: str
    status: str
    endpoints: List[str]


class ErrorResponse(BaseModel):
    """Error body sent with HTTPException."""
    detail: str = Field(description="Error message")


class RootResponse(BaseModel):
    """Server information returned at ``/``."""
    message: str
    version: str
    status: str
    timestamp: str = Field(description="Current server time, ISO 8601 UTC")
    endpoints: Dict[str, str]
    documentation: str
