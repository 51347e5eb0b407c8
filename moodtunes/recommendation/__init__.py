"""
Recommendation module for MoodTunes.

This module provides mood-to-track matching: similarity scoring, ranking,
bounded-random selection and fallback supply.
"""

from .engine import RecommendationEngine, RecommendationError, EmptyCatalogError, select_track
from .enhancement import TrackEnhancer, TemplateEnhancer
from .fallback import FallbackSupplier, BUILTIN_FALLBACK_TRACK
from .similarity import SimilarityCalculator
from .synonyms import MOOD_SYNONYMS
from .schemas import MoodQuery, ScoredTrack, SelectionResult

__all__ = [
    'RecommendationEngine',
    'RecommendationError',
    'EmptyCatalogError',
    'select_track',
    'TrackEnhancer',
    'TemplateEnhancer',
    'FallbackSupplier',
    'BUILTIN_FALLBACK_TRACK',
    'SimilarityCalculator',
    'MOOD_SYNONYMS',
    'MoodQuery',
    'ScoredTrack',
    'SelectionResult'
]
