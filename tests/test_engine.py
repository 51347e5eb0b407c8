"""Tests for the ranking and selection engine."""

import numpy as np
import pytest

from moodtunes.config.settings import RecommendationConfig
from moodtunes.persistence.catalog import Catalog, CatalogHandle
from moodtunes.recommendation.engine import (
    RecommendationEngine,
    EmptyCatalogError,
    RecommendationError,
    select_track
)
from moodtunes.recommendation.enhancement import TemplateEnhancer
from moodtunes.recommendation.fallback import BUILTIN_FALLBACK_TRACK, FallbackSupplier
from moodtunes.recommendation.schemas import MoodQuery

from conftest import FixedRng, make_track


class TestCompositeScore:

    def test_full_match_scores_one(self):
        track = make_track("a", "calm", genre="Ambient", energy="low")
        engine = RecommendationEngine([track])
        assert engine.score_track(track, "calm", "ambient", "low") == pytest.approx(1.0)

    def test_mood_only_caps_at_mood_weight(self):
        track = make_track("a", "calm")
        engine = RecommendationEngine([track])
        assert engine.score_track(track, "calm") == pytest.approx(0.6)

    def test_genre_hint_without_energy(self):
        track = make_track("a", "calm", genre="Ambient")
        engine = RecommendationEngine([track])
        assert engine.score_track(track, "calm", genre="Ambient") == pytest.approx(0.8)

    def test_genre_mismatch_adds_nothing(self):
        track = make_track("a", "calm", genre="Ambient", energy="low")
        engine = RecommendationEngine([track])
        assert engine.score_track(track, "calm", "Rock", "low") == pytest.approx(0.8)

    def test_energy_term_uses_ordinal_distance(self):
        track = make_track("a", "calm", energy="medium")
        engine = RecommendationEngine([track])
        assert engine.score_track(track, "calm", energy="high") == pytest.approx(0.6 + 0.2 * 0.75)

    def test_synonym_mood_weighting(self):
        track = make_track("a", "peaceful", energy="low")
        engine = RecommendationEngine([track])
        assert engine.score_track(track, "I am so calm", energy="very low") == pytest.approx(
            0.6 * 0.8 + 0.2 * 0.75
        )

    def test_empty_hints_are_not_supplied(self):
        track = make_track("a", "calm", genre="Ambient", energy="low")
        engine = RecommendationEngine([track])
        assert engine.score_track(track, "calm", genre="", energy="") == pytest.approx(0.6)

    def test_normalized_weights_reach_one_without_hints(self):
        track = make_track("a", "calm")
        engine = RecommendationEngine([track], config=RecommendationConfig(normalize_weights=True))
        assert engine.score_track(track, "calm") == pytest.approx(1.0)
        assert engine.score_track(track, "calm", genre="Rock") == pytest.approx(0.6 / 0.8)

    def test_custom_weights(self):
        track = make_track("a", "calm", genre="Ambient")
        config = RecommendationConfig(mood_weight=0.5, genre_weight=0.5, energy_weight=0.0)
        engine = RecommendationEngine([track], config=config)
        assert engine.score_track(track, "calm", genre="ambient") == pytest.approx(1.0)


class TestRanking:

    def test_sorted_descending(self, catalog):
        engine = RecommendationEngine(catalog)
        ranked = engine.rank("I am so happy", energy="high")
        scores = [s.score for s in ranked]
        assert scores == sorted(scores, reverse=True)
        assert ranked[0].track.id == "happy-1"
        assert len(ranked) == len(catalog)

    def test_ties_keep_catalog_order(self):
        tracks = [make_track(str(i), "calm") for i in range(6)]
        engine = RecommendationEngine(tracks)
        ranked = engine.rank("calm")
        assert [s.track.id for s in ranked] == [str(i) for i in range(6)]

    def test_tie_order_after_higher_scores(self):
        tracks = [
            make_track("x", "rock"),
            make_track("calm-a", "calm"),
            make_track("y", "rock"),
            make_track("calm-b", "calm"),
        ]
        ranked = RecommendationEngine(tracks).rank("calm")
        assert [s.track.id for s in ranked] == ["calm-a", "calm-b", "x", "y"]

    def test_empty_catalog_ranks_nothing(self):
        assert RecommendationEngine([]).rank("calm") == []


class TestSelection:

    def test_pinned_pick_is_top_ranked(self, catalog):
        engine = RecommendationEngine(catalog, rng=FixedRng(0))
        track = engine.select_track("I am so happy")
        assert track.id == "happy-1"

    def test_pinned_pick_within_top_k(self, catalog):
        rng = FixedRng(1)
        engine = RecommendationEngine(catalog, rng=rng)
        result = engine.select_for("I feel calm", energy="low")
        ranked = engine.rank("I feel calm", energy="low")
        assert result.track == ranked[1].track
        assert rng.bounds == [5]

    def test_top_k_is_bounded_by_catalog_size(self):
        rng = FixedRng(0)
        engine = RecommendationEngine([make_track("a", "calm"), make_track("b", "calm")], rng=rng)
        engine.select_track("calm")
        assert rng.bounds == [2]

    def test_configured_top_k(self, catalog):
        rng = FixedRng(0)
        engine = RecommendationEngine(catalog, config=RecommendationConfig(top_k=3), rng=rng)
        engine.select_track("calm")
        assert rng.bounds[0] == 3

    def test_select_with_query(self, catalog):
        engine = RecommendationEngine(catalog, rng=FixedRng(0))
        result = engine.select(MoodQuery(mood="  romantic evening  ", genre="smooth jazz"))
        assert result.track.id == "romantic-1"
        assert result.source == "ranked"
        assert not result.is_fallback
        assert result.score == pytest.approx(0.8)

    def test_returned_track_has_no_score(self, catalog):
        engine = RecommendationEngine(catalog, rng=np.random.default_rng(3))
        track = engine.select_track("happy")
        assert not hasattr(track, "score")
        assert "score" not in track.to_dict()

    def test_same_seed_same_pick(self, catalog):
        first = RecommendationEngine(catalog, rng=np.random.default_rng(42)).select_track("calm")
        second = RecommendationEngine(catalog, rng=np.random.default_rng(42)).select_track("calm")
        assert first == second

    def test_seed_from_config(self, catalog):
        config = RecommendationConfig(seed=7)
        picks = {RecommendationEngine(catalog, config=config).select_track("calm").id for _ in range(5)}
        assert len(picks) == 1

    def test_selected_track_always_in_top_k(self, catalog):
        vocabulary = [
            "calm", "happy", "sad", "worried", "pumped", "tender", "focused",
            "blue", "quiet", "xyz", "very", "tired", "I", "feel", "so", "today"
        ]
        energies = [None, "very low", "low", "medium", "high", "very high", "loud"]
        genres = [None, "Ambient", "Pop", "Rock", "Lo-Fi"]
        query_rng = np.random.default_rng(1234)
        engine = RecommendationEngine(catalog, rng=np.random.default_rng(99))

        for _ in range(1000):
            words = query_rng.choice(vocabulary, size=int(query_rng.integers(1, 5)))
            mood = " ".join(words)
            genre = genres[int(query_rng.integers(len(genres)))]
            energy = energies[int(query_rng.integers(len(energies)))]

            track = engine.select_track(mood, genre, energy)
            ranked = engine.rank(mood, genre, energy)
            kth_score = ranked[min(5, len(ranked)) - 1].score

            assert catalog.get_track(track.id) is not None
            assert engine.score_track(track, mood, genre, energy) >= kth_score

    @pytest.mark.parametrize("mood", [
        "",
        "   ",
        "x" * 10000,
        "très heureux 😊",
        "悲しい",
        "\n\t",
    ])
    def test_total_over_any_mood(self, catalog, mood):
        track = RecommendationEngine(catalog).select_track(mood)
        assert track is not None
        assert track.id

    def test_module_level_select_track(self, tracks):
        track = select_track(tracks, "I feel so happy", rng=FixedRng(0))
        assert track.id == "happy-1"


class TestFallbackSelection:

    def test_builtin_fallback_when_no_calm_tracks(self):
        tracks = [make_track(f"e{i}", "excited") for i in range(6)]
        engine = RecommendationEngine(tracks, rng=np.random.default_rng(0))
        result = engine.select_for("zzzz qqqq")
        assert result.track == BUILTIN_FALLBACK_TRACK
        assert result.source == "builtin_fallback"
        assert result.track.title == "Peaceful Moments"
        assert result.score == 0.0

    def test_calm_catalog_track_used_as_fallback(self):
        tracks = [make_track(f"e{i}", "excited") for i in range(6)]
        tracks.append(make_track("quiet", "Calm Waters"))
        tracks.append(make_track("evening", "peaceful evening"))
        engine = RecommendationEngine(tracks, rng=np.random.default_rng(0))
        for _ in range(50):
            result = engine.select_for("zzzz qqqq")
            assert result.track.id in {"quiet", "evening"}
            assert result.source == "catalog_fallback"

    def test_zero_score_pick_triggers_fallback_even_if_others_match(self):
        tracks = [
            make_track("happy", "happy"),
            make_track("rock", "rock"),
            make_track("calm", "calm"),
        ]
        # Index 1 lands on a zero-scoring track.
        engine = RecommendationEngine(
            tracks, rng=FixedRng(1), fallback_supplier=FallbackSupplier(rng=FixedRng(0))
        )
        result = engine.select_for("joyful")
        assert result.is_fallback
        assert result.track.id == "calm"

    def test_builtin_fallback_is_not_enhanced(self):
        tracks = [make_track("e", "excited")]
        engine = RecommendationEngine(tracks, enhancer=TemplateEnhancer())
        track = engine.select_track("zzzz qqqq")
        assert track.title == "Peaceful Moments"


class TestEmptyCatalog:

    def test_raises_empty_catalog_error(self):
        with pytest.raises(EmptyCatalogError):
            RecommendationEngine([]).select_track("calm")

    def test_is_a_recommendation_error(self):
        with pytest.raises(RecommendationError):
            select_track(Catalog(), "calm")

    def test_swapped_in_empty_catalog(self, catalog):
        handle = CatalogHandle(catalog)
        engine = RecommendationEngine(handle)
        assert engine.select_track("calm")
        handle.swap(Catalog())
        with pytest.raises(EmptyCatalogError):
            engine.select_track("calm")


class TestEnhancement:

    def test_enhancer_runs_after_selection(self, catalog):
        engine = RecommendationEngine(catalog, rng=FixedRng(0), enhancer=TemplateEnhancer())
        track = engine.select_track("I am so happy", energy="high")
        assert track.id == "happy-1"
        assert track.title == "Track happy-1 (Enhanced)"
        assert track.description == (
            'A personalized Pop track crafted for your "I am so happy" mood with high energy.'
        )
        assert catalog.get_track("happy-1").title == "Track happy-1"
