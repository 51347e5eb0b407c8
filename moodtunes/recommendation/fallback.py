"""
Fallback track supply for MoodTunes.
"""
from typing import Optional, Sequence, Tuple
import logging
import numpy as np
from ..data.schemas import Track

BUILTIN_FALLBACK_TRACK = Track(
    id='fallback',
    title='Peaceful Moments',
    mood='calm',
    genre='Ambient',
    energy='low',
    duration='3:24',
    description='A gentle, calming track to help you find peace.',
    audio_url='/tracks/peaceful-moments.mp3'
)


class FallbackSupplier:
    """Supplies a calm track when nothing in the catalog matches a query."""

    def __init__(self, fallback_moods: Sequence[str] = ('calm', 'peaceful'),
                 rng: Optional[np.random.Generator] = None,
                 builtin: Track = BUILTIN_FALLBACK_TRACK):
        """
        Args:
            fallback_moods: Mood words a track must contain to be a fallback candidate
            rng: Random source used to pick among candidates
            builtin: Track returned when the catalog has no candidate
        """
        self.fallback_moods: Tuple[str, ...] = tuple(m.lower() for m in fallback_moods)
        self.rng = rng if rng is not None else np.random.default_rng()
        self.builtin = builtin
        self.logger = logging.getLogger(__name__)

    def candidates(self, catalog: Sequence[Track]) -> list:
        return [
            track for track in catalog
            if any(word in track.mood.lower() for word in self.fallback_moods)
        ]

    def fallback(self, catalog: Sequence[Track]) -> Track:
        """Pick a random calm/peaceful catalog track, or the built-in track if there is none.

        Args:
            catalog: Tracks to search

        Returns:
            A catalog track whose mood contains one of the fallback words,
            otherwise the built-in "Peaceful Moments" track
        """
        candidates = self.candidates(catalog)
        if not candidates:
            self.logger.info("No calm tracks in catalog, using built-in fallback track")
            return self.builtin
        track = candidates[int(self.rng.integers(len(candidates)))]
        self.logger.info(f"Using fallback track: {track.title!r}")
        return track

    def is_builtin(self, track: Track) -> bool:
        return track is self.builtin
