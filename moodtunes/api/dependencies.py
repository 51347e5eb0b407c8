"""
FastAPI dependency injection for MoodTunes.
"""
import os
from functools import lru_cache
from typing import Optional

from ..config.settings import ConfigManager, AppConfig, DEFAULT_CONFIG_PATH
from ..narration.messages import MotivationalMessages
from ..persistence.catalog import Catalog, CatalogError, CatalogHandle, CatalogLoader
from ..recommendation.engine import RecommendationEngine
from ..recommendation.enhancement import TemplateEnhancer
from ..recommendation.similarity import SimilarityCalculator
from ..utils.logging import StructuredLogger


class AppState:
    """Application state shared by the API routes."""

    def __init__(self, config: AppConfig, catalog: Optional[Catalog] = None,
                 catalog_loader: Optional[CatalogLoader] = None):
        self.config = config
        self.logger = StructuredLogger(
            "moodtunes.api",
            level=config.logging.level,
            fmt=config.logging.format
        )
        self.catalog_loader = catalog_loader or CatalogLoader()
        self.catalog_handle = CatalogHandle(catalog)
        self.recommendation_engine = RecommendationEngine(
            self.catalog_handle,
            SimilarityCalculator(),
            config=config.recommendation,
            enhancer=TemplateEnhancer() if config.enhancement.enabled else None
        )
        self.messages = MotivationalMessages()

    @classmethod
    def initialize(cls, config_path: str = DEFAULT_CONFIG_PATH) -> "AppState":
        """Load configuration and the catalog it points to.

        A missing or invalid catalog leaves the catalog empty; track
        generation then answers 503 until a catalog is reloaded.
        """
        config = ConfigManager().load(config_path)
        state = cls(config)
        state.logger.log_config(config.to_dict())
        try:
            state.reload_catalog()
        except (FileNotFoundError, CatalogError) as e:
            state.logger.error("Failed to load catalog", path=config.catalog.path, error_message=str(e))
        state.logger.info("MoodTunes API initialized", tracks_loaded=len(state.catalog))
        return state

    @property
    def catalog(self) -> Catalog:
        return self.catalog_handle.current

    def reload_catalog(self, path: Optional[str] = None) -> Catalog:
        """Reload the catalog from ``path`` (the configured path by default)."""
        path = path or self.config.catalog.path
        with self.logger.operation_context("AppState", "reload_catalog", path=path):
            return self.catalog_handle.reload(self.catalog_loader, path)


@lru_cache()
def get_app_state() -> AppState:
    """Get or create the application state singleton."""
    config_path = os.getenv("MOODTUNES_CONFIG", DEFAULT_CONFIG_PATH)
    return AppState.initialize(config_path)
