"""
Recommendation engine for MoodTunes.
"""
from typing import List, Optional, Sequence, Union
import logging
import numpy as np
from ..config.settings import RecommendationConfig
from ..data.schemas import Track
from ..persistence.catalog import Catalog, CatalogHandle
from .enhancement import TrackEnhancer
from .fallback import FallbackSupplier
from .similarity import SimilarityCalculator
from .schemas import (
    MoodQuery,
    ScoredTrack,
    SelectionResult,
    SOURCE_RANKED,
    SOURCE_CATALOG_FALLBACK,
    SOURCE_BUILTIN_FALLBACK
)

CatalogSource = Union[Catalog, CatalogHandle, Sequence[Track]]


class RecommendationError(Exception):
    """Base class for recommendation failures."""
    pass


class EmptyCatalogError(RecommendationError):
    """Raised when a selection is requested from a catalog with no tracks."""

    def __init__(self, message: str = "Music library is currently unavailable"):
        super().__init__(message)


class RecommendationEngine:
    """Scores the catalog against a mood query and picks one track."""

    def __init__(self, catalog: CatalogSource,
                 similarity_calculator: Optional[SimilarityCalculator] = None,
                 config: Optional[RecommendationConfig] = None,
                 rng: Optional[np.random.Generator] = None,
                 fallback_supplier: Optional[FallbackSupplier] = None,
                 enhancer: Optional[TrackEnhancer] = None):
        """Initialize the recommendation engine.

        Args:
            catalog: Catalog, CatalogHandle, or plain sequence of tracks
            similarity_calculator: Calculator for similarity scores (optional)
            config: Weights, top-k and fallback settings (optional)
            rng: Random source for top-k sampling; seeded from config when omitted
            fallback_supplier: Supplier consulted when the pick scores 0 (optional)
            enhancer: Post-selection track rewriter (optional)
        """
        if isinstance(catalog, CatalogHandle):
            self.catalog_handle = catalog
        elif isinstance(catalog, Catalog):
            self.catalog_handle = CatalogHandle(catalog)
        else:
            self.catalog_handle = CatalogHandle(Catalog(catalog))
        self.config = config or RecommendationConfig()
        self.similarity_calculator = similarity_calculator or SimilarityCalculator()
        self.rng = rng if rng is not None else np.random.default_rng(self.config.seed)
        self.fallback_supplier = fallback_supplier or FallbackSupplier(
            self.config.fallback_moods, rng=self.rng
        )
        self.enhancer = enhancer
        self.logger = logging.getLogger(__name__)

    @property
    def catalog(self) -> Catalog:
        return self.catalog_handle.current

    def score_track(self, track: Track, mood: str,
                    genre: Optional[str] = None, energy: Optional[str] = None) -> float:
        """Compute the composite score of one track for a query.

        The genre and energy terms are only added when the query supplies
        them, so without hints the best attainable score is the mood weight
        alone unless ``normalize_weights`` is set.

        Args:
            track: Catalog track
            mood: User mood description
            genre: Optional genre hint
            energy: Optional energy hint

        Returns:
            Composite score
        """
        calc = self.similarity_calculator
        cfg = self.config
        score = calc.mood_similarity(track.mood, mood) * cfg.mood_weight
        applied = cfg.mood_weight
        if genre:
            if track.genre:
                score += calc.genre_match(track.genre, genre) * cfg.genre_weight
            applied += cfg.genre_weight
        if energy:
            if track.energy:
                score += calc.energy_similarity(track.energy, energy) * cfg.energy_weight
            applied += cfg.energy_weight
        if cfg.normalize_weights:
            return score / applied if applied > 0 else 0.0
        return score

    def rank(self, mood: str, genre: Optional[str] = None,
             energy: Optional[str] = None) -> List[ScoredTrack]:
        """Score every catalog track and sort by score, highest first.

        Ties keep catalog order.
        """
        return self._rank_catalog(self.catalog, mood, genre, energy)

    def _rank_catalog(self, catalog: Catalog, mood: str, genre: Optional[str],
                      energy: Optional[str]) -> List[ScoredTrack]:
        tracks = catalog.tracks
        if not tracks:
            return []
        scores = np.array([self.score_track(t, mood, genre, energy) for t in tracks], dtype=float)
        order = np.argsort(-scores, kind='stable')
        return [ScoredTrack(track=tracks[i], score=float(scores[i])) for i in order]

    def select(self, query: MoodQuery) -> SelectionResult:
        """Select a track for a validated query. See ``select_for``."""
        return self.select_for(query.mood, query.genre, query.energy)

    def select_for(self, mood: str, genre: Optional[str] = None,
                   energy: Optional[str] = None) -> SelectionResult:
        """Rank the catalog and pick one of the top-k tracks at random.

        If the picked track scores exactly 0 the fallback supplier is
        consulted instead. The enhancer, when configured, runs after the
        decision is made.

        Args:
            mood: User mood description
            genre: Optional genre hint
            energy: Optional energy hint

        Returns:
            SelectionResult with the chosen track

        Raises:
            EmptyCatalogError: If the catalog has no tracks
        """
        catalog = self.catalog
        if not catalog:
            self.logger.error("Track selection requested from an empty catalog")
            raise EmptyCatalogError()

        ranked = self._rank_catalog(catalog, mood, genre, energy)
        top_k = min(self.config.top_k, len(ranked))
        picked = ranked[int(self.rng.integers(top_k))]

        if picked.score == 0:
            track = self.fallback_supplier.fallback(catalog)
            if self.fallback_supplier.is_builtin(track):
                return SelectionResult(track=track, score=0.0, source=SOURCE_BUILTIN_FALLBACK)
            result = SelectionResult(track=track, score=0.0, source=SOURCE_CATALOG_FALLBACK)
        else:
            result = SelectionResult(track=picked.track, score=picked.score, source=SOURCE_RANKED)
            self.logger.info(f"Selected track: {picked.track.title!r} (score: {picked.score:.2f})")

        if self.enhancer is not None:
            result = SelectionResult(
                track=self.enhancer.enhance(result.track, mood, genre, energy),
                score=result.score,
                source=result.source
            )
        return result

    def select_track(self, mood: str, genre: Optional[str] = None,
                     energy: Optional[str] = None) -> Track:
        """Select a track and return it without its score."""
        return self.select_for(mood, genre, energy).track


def select_track(catalog: CatalogSource, mood: str, genre: Optional[str] = None,
                 energy: Optional[str] = None,
                 rng: Optional[np.random.Generator] = None) -> Track:
    """Select one track from ``catalog`` for a mood with default settings.

    Raises:
        EmptyCatalogError: If the catalog has no tracks
    """
    return RecommendationEngine(catalog, rng=rng).select_track(mood, genre, energy)
