"""
Post-selection track enhancement.

Enhancers rewrite display fields of an already selected track. They never
influence which track is selected.
"""
from dataclasses import replace
from typing import Optional
from ..data.schemas import Track


class TrackEnhancer:
    """Interface for rewriting a selected track's title and description."""

    def enhance(self, track: Track, mood: str, genre: Optional[str] = None,
                energy: Optional[str] = None) -> Track:
        raise NotImplementedError


class TemplateEnhancer(TrackEnhancer):
    """Personalizes title and description from the query without any external service."""

    def enhance(self, track: Track, mood: str, genre: Optional[str] = None,
                energy: Optional[str] = None) -> Track:
        """Return a copy of ``track`` with a personalized title and description.

        Args:
            track: The selected track
            mood: User mood description
            genre: Genre hint, the track's genre when omitted
            energy: Energy hint, the track's energy when omitted

        Returns:
            New Track; the catalog entry is left untouched
        """
        return replace(
            track,
            title=f"{track.title} (Enhanced)",
            description=(
                f"A personalized {genre or track.genre} track crafted for your "
                f"\"{mood}\" mood with {energy or track.energy} energy."
            )
        )
