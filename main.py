import argparse
import sys
from typing import Optional
import numpy as np
from moodtunes.config.settings import ConfigManager, AppConfig, DEFAULT_CONFIG_PATH
from moodtunes.utils.logging import StructuredLogger
from moodtunes.narration.messages import MotivationalMessages
from moodtunes.persistence.catalog import Catalog, CatalogLoader
from moodtunes.recommendation.engine import RecommendationEngine
from moodtunes.recommendation.enhancement import TemplateEnhancer
from moodtunes.recommendation.similarity import SimilarityCalculator
from moodtunes.recommendation.schemas import MoodQuery, SelectionResult


class MoodTunesApp:
    def __init__(self, config_path: str = DEFAULT_CONFIG_PATH):
        self.config_manager = ConfigManager()
        self.config: Optional[AppConfig] = None
        self.logger: Optional[StructuredLogger] = None
        self.config_path = config_path

    def initialize(self) -> None:
        try:
            self.config = self.config_manager.load(self.config_path)
            self.logger = StructuredLogger(
                "moodtunes.main",
                level=self.config.logging.level,
                fmt=self.config.logging.format
            )
            self.logger.log_config(self.config.to_dict())
            self.logger.info("MoodTunes initialized successfully")
        except Exception as e:
            print(f"Failed to initialize MoodTunes: {e}")
            sys.exit(1)

    def load_catalog(self, catalog_path: Optional[str] = None) -> Catalog:
        path = catalog_path or self.config.catalog.path
        return CatalogLoader().load(path)

    def recommend(self,
                  mood: str,
                  genre: Optional[str] = None,
                  energy: Optional[str] = None,
                  catalog_path: Optional[str] = None,
                  seed: Optional[int] = None,
                  enhance: bool = False) -> SelectionResult:
        with self.logger.operation_context("MoodTunesApp", "recommend") as log:
            catalog = self.load_catalog(catalog_path)
            log.info("Loaded catalog", num_tracks=len(catalog))
            seed = seed if seed is not None else self.config.recommendation.seed
            engine = RecommendationEngine(
                catalog,
                SimilarityCalculator(),
                config=self.config.recommendation,
                rng=np.random.default_rng(seed),
                enhancer=TemplateEnhancer() if enhance or self.config.enhancement.enabled else None
            )
            query = MoodQuery(
                mood=mood,
                genre=genre,
                energy=energy,
                max_length=self.config.api.max_mood_length
            )
            log.info("Selecting track", mood=query.mood, genre=query.genre, energy=query.energy)
            result = engine.select(query)
            log.info("Track selected",
                     track_id=result.track.id,
                     score=result.score,
                     source=result.source)
            self._display_selection(query, result)
            return result

    def validate_catalog(self, catalog_path: Optional[str] = None) -> bool:
        path = catalog_path or self.config.catalog.path
        with self.logger.operation_context("MoodTunesApp", "validate_catalog", path=path) as log:
            loader = CatalogLoader()
            records = loader.read_records(path)
            result = loader.validate(records) if records else None
            print(f"\nCatalog: {path}")
            print(f"Tracks: {len(records)}")
            if result is None:
                print("Catalog is empty.")
                return True
            for error in result.errors:
                print(f"  ERROR   {error}")
            for warning in result.warnings:
                print(f"  WARNING {warning}")
            print("Valid." if result.is_valid else "Invalid.")
            log.info("Catalog validated",
                     is_valid=result.is_valid,
                     errors=len(result.errors),
                     warnings=len(result.warnings))
            return result.is_valid

    def narrate(self, mood: str) -> str:
        mood = mood.strip()
        max_length = self.config.api.max_narration_mood_length
        if not mood:
            raise ValueError("Mood is required and must be a non-empty string")
        if len(mood) > max_length:
            raise ValueError(f"Mood description is too long (max {max_length} characters)")
        message = MotivationalMessages().for_mood(mood)
        print(f"\n{message}\n")
        return message

    def _display_selection(self, query: MoodQuery, result: SelectionResult) -> None:
        track = result.track
        print("\n" + "=" * 60)
        print("MOODTUNES")
        print("=" * 60)
        print(f"\nMood: {query.mood}")
        if query.genre:
            print(f"Genre: {query.genre}")
        if query.energy:
            print(f"Energy: {query.energy}")
        print(f"\n{track.title}  [{track.duration}]")
        print(f"  {track.description}")
        print(f"  Mood: {track.mood} | Genre: {track.genre} | Energy: {track.energy}")
        print(f"  Audio: {track.audio_url}")
        if result.is_fallback:
            print(f"  (no close match, {result.source.replace('_', ' ')})")
        else:
            print(f"  Score: {result.score:.2f}")
        print()


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="MoodTunes - pick a track for how you feel",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--config",
        default=DEFAULT_CONFIG_PATH,
        help="Path to configuration file"
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    recommend_parser = subparsers.add_parser("recommend", help="Pick a track for a mood")
    recommend_parser.add_argument(
        "--mood",
        required=True,
        help="How you feel, in your own words"
    )
    recommend_parser.add_argument(
        "--genre",
        help="Preferred genre"
    )
    recommend_parser.add_argument(
        "--energy",
        help="Energy level (very low, low, medium, high, very high)"
    )
    recommend_parser.add_argument(
        "--catalog",
        help="Path to catalog JSON file (overrides config)"
    )
    recommend_parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for repeatable picks"
    )
    recommend_parser.add_argument(
        "--enhance",
        action="store_true",
        help="Personalize the title and description of the pick"
    )

    validate_parser = subparsers.add_parser("validate-catalog", help="Validate a catalog file")
    validate_parser.add_argument(
        "--catalog",
        help="Path to catalog JSON file (overrides config)"
    )

    narrate_parser = subparsers.add_parser("narrate", help="Print a motivational message for a mood")
    narrate_parser.add_argument(
        "--mood",
        required=True,
        help="How you feel, in your own words"
    )
    return parser


def main(argv=None):
    parser = create_parser()
    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        sys.exit(1)
    app = MoodTunesApp(args.config)
    app.initialize()
    try:
        if args.command == "recommend":
            app.recommend(
                mood=args.mood,
                genre=args.genre,
                energy=args.energy,
                catalog_path=args.catalog,
                seed=args.seed,
                enhance=args.enhance
            )
        elif args.command == "validate-catalog":
            if not app.validate_catalog(args.catalog):
                sys.exit(1)
        elif args.command == "narrate":
            app.narrate(args.mood)
    except KeyboardInterrupt:
        print("\nOperation cancelled by user.")
        sys.exit(1)
    except Exception as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
