"""
Recommendation schemas for the MoodTunes system.
"""
from dataclasses import dataclass, field
from typing import Optional
from ..data.schemas import Track

MAX_MOOD_LENGTH = 500

SOURCE_RANKED = "ranked"
SOURCE_CATALOG_FALLBACK = "catalog_fallback"
SOURCE_BUILTIN_FALLBACK = "builtin_fallback"


def _clean_optional(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


@dataclass(frozen=True)
class MoodQuery:
    """A request for a track matching a mood description."""
    mood: str
    genre: Optional[str] = None
    energy: Optional[str] = None
    max_length: int = field(default=MAX_MOOD_LENGTH, compare=False, repr=False)

    def __post_init__(self):
        if not isinstance(self.mood, str):
            raise ValueError("Mood must be a string")
        mood = self.mood.strip()
        if not mood:
            raise ValueError("Mood is required and must be a non-empty string")
        if len(mood) > self.max_length:
            raise ValueError(f"Mood description is too long (max {self.max_length} characters)")
        object.__setattr__(self, 'mood', mood)
        object.__setattr__(self, 'genre', _clean_optional(self.genre))
        object.__setattr__(self, 'energy', _clean_optional(self.energy))


@dataclass(frozen=True)
class ScoredTrack:
    """A track with its composite score for one query. Only lives during ranking."""
    track: Track
    score: float


@dataclass(frozen=True)
class SelectionResult:
    """The selected track, the score it was picked with, and where it came from."""
    track: Track
    score: float
    source: str

    @property
    def is_fallback(self) -> bool:
        return self.source != SOURCE_RANKED
