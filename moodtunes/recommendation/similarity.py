"""
Similarity calculation module for MoodTunes.
"""
from typing import Mapping, Optional, Tuple
from ..data.schemas import EnergyLevel
from .synonyms import MOOD_SYNONYMS

EXACT_MATCH = 1.0
SYNONYM_MATCH = 0.8
PARTIAL_MATCH = 0.5
NO_MATCH = 0.0

_ENERGY_SPAN = EnergyLevel.VERY_HIGH.value - EnergyLevel.VERY_LOW.value


class SimilarityCalculator:
    """Scores how well a track's mood, genre and energy fit a query."""

    def __init__(self, synonyms: Optional[Mapping[str, Tuple[str, ...]]] = None):
        self.synonyms = synonyms if synonyms is not None else MOOD_SYNONYMS

    def mood_similarity(self, track_mood: str, user_mood: str) -> float:
        """Score a track mood tag against free-text mood.

        Rules are tried in order and the first match wins:
        substring containment (1.0), synonym group match (0.8),
        partial word overlap (0.5), otherwise 0.0.

        Args:
            track_mood: Mood tag of the catalog track
            user_mood: The user's mood description

        Returns:
            Similarity score in [0, 1]
        """
        user = user_mood.lower()
        track = track_mood.lower()

        if track in user or user in track:
            return EXACT_MATCH

        if self._synonym_match(track, user):
            return SYNONYM_MATCH

        if self._partial_word_match(track, user):
            return PARTIAL_MATCH

        return NO_MATCH

    def _synonym_match(self, track: str, user: str) -> bool:
        for base_mood, synonyms in self.synonyms.items():
            if track == base_mood or track in synonyms:
                if base_mood in user or any(syn in user for syn in synonyms):
                    return True
        return False

    def _partial_word_match(self, track: str, user: str) -> bool:
        match_count = 0
        for user_word in user.split():
            for track_word in track.split():
                if track_word in user_word or user_word in track_word:
                    match_count += 1
        return match_count > 0

    def energy_similarity(self, track_energy: Optional[str], user_energy: Optional[str]) -> float:
        """Similarity between two energy labels on the five-level scale.

        Unknown or missing labels count as medium. Adjacent levels score
        0.75 and opposite ends score 0.0.
        """
        track_level = EnergyLevel.from_label(track_energy).value
        user_level = EnergyLevel.from_label(user_energy).value
        difference = abs(track_level - user_level)
        return max(0.0, 1.0 - difference / _ENERGY_SPAN)

    def genre_match(self, track_genre: Optional[str], user_genre: Optional[str]) -> float:
        """1.0 on a case-insensitive exact match, else 0.0."""
        if not track_genre or not user_genre:
            return 0.0
        return 1.0 if track_genre.lower() == user_genre.lower() else 0.0
