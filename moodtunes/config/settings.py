"""
Configuration management for MoodTunes.

Provides centralized configuration loading, validation, and environment variable overrides.
"""

import os
import yaml
from dataclasses import dataclass, field, asdict
from typing import Dict, Any, List, Optional
from pathlib import Path


DEFAULT_CONFIG_PATH = str(Path(__file__).parent / "default_config.yaml")


@dataclass
class CatalogConfig:
    """Where the track catalog is read from."""
    path: str = "data/tracks.json"


@dataclass
class RecommendationConfig:
    """Configuration for the ranking and selection engine."""
    mood_weight: float = 0.6
    genre_weight: float = 0.2
    energy_weight: float = 0.2
    top_k: int = 5
    normalize_weights: bool = False
    fallback_moods: List[str] = field(default_factory=lambda: ["calm", "peaceful"])
    seed: Optional[int] = None


@dataclass
class EnhancementConfig:
    """Configuration for post-selection track enhancement."""
    enabled: bool = False


@dataclass
class ApiConfig:
    """Configuration for the HTTP layer."""
    max_mood_length: int = 500
    max_narration_mood_length: int = 200
    cors_origins: List[str] = field(default_factory=lambda: ["*"])


@dataclass
class LoggingConfig:
    """Configuration for logging parameters."""
    level: str = "INFO"
    format: str = "json"


@dataclass
class VersioningConfig:
    api_version: str = "1.0.0"


@dataclass
class AppConfig:
    """Main application configuration containing all sub-configurations."""
    catalog: CatalogConfig = field(default_factory=CatalogConfig)
    recommendation: RecommendationConfig = field(default_factory=RecommendationConfig)
    enhancement: EnhancementConfig = field(default_factory=EnhancementConfig)
    api: ApiConfig = field(default_factory=ApiConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    versioning: VersioningConfig = field(default_factory=VersioningConfig)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""
    pass


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


class ConfigManager:
    """Manages application configuration loading, validation, and environment overrides."""

    ENV_MAPPINGS = {
        'MOODTUNES_CATALOG_PATH': ['catalog', 'path'],
        'MOODTUNES_TOP_K': ['recommendation', 'top_k'],
        'MOODTUNES_NORMALIZE_WEIGHTS': ['recommendation', 'normalize_weights'],
        'MOODTUNES_SEED': ['recommendation', 'seed'],
        'MOODTUNES_ENHANCEMENT_ENABLED': ['enhancement', 'enabled'],
        'MOODTUNES_LOG_LEVEL': ['logging', 'level'],
        'MOODTUNES_LOG_FORMAT': ['logging', 'format'],
        'MOODTUNES_API_VERSION': ['versioning', 'api_version'],
    }
    INT_KEYS = {'top_k', 'seed'}
    BOOL_KEYS = {'normalize_weights', 'enabled'}

    def __init__(self):
        self._config: Optional[AppConfig] = None

    def load(self, config_path: str = DEFAULT_CONFIG_PATH) -> AppConfig:
        """
        Load configuration from YAML file with environment variable overrides.

        Args:
            config_path: Path to the YAML configuration file

        Returns:
            AppConfig: Loaded and validated configuration

        Raises:
            ConfigValidationError: If configuration is invalid
            FileNotFoundError: If config file doesn't exist
        """
        config_file = Path(config_path)

        if not config_file.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_file, 'r', encoding='utf-8') as f:
            config_data = yaml.safe_load(f) or {}

        if not isinstance(config_data, dict):
            raise ConfigValidationError(f"Configuration root must be a mapping: {config_path}")

        config_data = self._apply_env_overrides(config_data)
        config = self._create_config_from_dict(config_data)
        self.validate(config)

        self._config = config
        return config

    @property
    def config(self) -> AppConfig:
        if self._config is None:
            raise RuntimeError("Configuration not loaded. Call load() first.")
        return self._config

    def _create_config_from_dict(self, config_data: Dict[str, Any]) -> AppConfig:
        """Create AppConfig from dictionary data."""
        catalog_data = config_data.get('catalog') or {}
        recommendation_data = config_data.get('recommendation') or {}
        enhancement_data = config_data.get('enhancement') or {}
        api_data = config_data.get('api') or {}
        logging_data = config_data.get('logging') or {}
        versioning_data = config_data.get('versioning') or {}

        catalog_config = CatalogConfig(
            path=catalog_data.get('path', CatalogConfig().path)
        )

        defaults = RecommendationConfig()
        recommendation_config = RecommendationConfig(
            mood_weight=recommendation_data.get('mood_weight', defaults.mood_weight),
            genre_weight=recommendation_data.get('genre_weight', defaults.genre_weight),
            energy_weight=recommendation_data.get('energy_weight', defaults.energy_weight),
            top_k=recommendation_data.get('top_k', defaults.top_k),
            normalize_weights=recommendation_data.get('normalize_weights', defaults.normalize_weights),
            fallback_moods=recommendation_data.get('fallback_moods', defaults.fallback_moods),
            seed=recommendation_data.get('seed', defaults.seed)
        )

        enhancement_config = EnhancementConfig(
            enabled=enhancement_data.get('enabled', EnhancementConfig().enabled)
        )

        api_config = ApiConfig(
            max_mood_length=api_data.get('max_mood_length', ApiConfig().max_mood_length),
            max_narration_mood_length=api_data.get(
                'max_narration_mood_length', ApiConfig().max_narration_mood_length
            ),
            cors_origins=api_data.get('cors_origins', ApiConfig().cors_origins)
        )

        logging_config = LoggingConfig(
            level=str(logging_data.get('level', LoggingConfig().level)).upper(),
            format=logging_data.get('format', LoggingConfig().format)
        )

        versioning_config = VersioningConfig(
            api_version=str(versioning_data.get('api_version', VersioningConfig().api_version))
        )

        return AppConfig(
            catalog=catalog_config,
            recommendation=recommendation_config,
            enhancement=enhancement_config,
            api=api_config,
            logging=logging_config,
            versioning=versioning_config
        )

    def _apply_env_overrides(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        """Apply environment variable overrides to configuration data."""
        for env_var, config_path in self.ENV_MAPPINGS.items():
            env_value = os.getenv(env_var)
            if env_value is None:
                continue
            current = config_data
            for key in config_path[:-1]:
                if not isinstance(current.get(key), dict):
                    current[key] = {}
                current = current[key]

            final_key = config_path[-1]
            try:
                if final_key in self.INT_KEYS:
                    current[final_key] = int(env_value)
                elif final_key in self.BOOL_KEYS:
                    current[final_key] = _parse_bool(env_value)
                else:
                    current[final_key] = env_value
            except ValueError as e:
                raise ConfigValidationError(f"Invalid value for {env_var}: {env_value!r}") from e

        return config_data

    def validate(self, config: AppConfig) -> bool:
        """
        Validate configuration values.

        Args:
            config: Configuration to validate

        Returns:
            bool: True if valid

        Raises:
            ConfigValidationError: If validation fails
        """
        errors = []

        if not config.catalog.path:
            errors.append("Catalog path cannot be empty")

        rec = config.recommendation
        for name in ('mood_weight', 'genre_weight', 'energy_weight'):
            value = getattr(rec, name)
            if not isinstance(value, (int, float)) or isinstance(value, bool) or value < 0:
                errors.append(f"Recommendation {name} must be a non-negative number")

        if not isinstance(rec.top_k, int) or rec.top_k <= 0:
            errors.append("Recommendation top_k must be a positive integer")

        if not isinstance(rec.normalize_weights, bool):
            errors.append("Recommendation normalize_weights must be a boolean")

        moods = rec.fallback_moods
        if (not isinstance(moods, (list, tuple)) or not moods
                or not all(isinstance(m, str) and m for m in moods)):
            errors.append("Recommendation fallback_moods must be a non-empty list of words")

        if rec.seed is not None and not isinstance(rec.seed, int):
            errors.append("Recommendation seed must be an integer or null")

        if config.api.max_mood_length <= 0:
            errors.append("API max_mood_length must be positive")

        if config.api.max_narration_mood_length <= 0:
            errors.append("API max_narration_mood_length must be positive")

        valid_log_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if config.logging.level not in valid_log_levels:
            errors.append(f"Logging level must be one of: {valid_log_levels}")

        if config.logging.format not in ['json', 'text']:
            errors.append("Logging format must be 'json' or 'text'")

        if not config.versioning.api_version:
            errors.append("API version cannot be empty")

        if errors:
            raise ConfigValidationError(f"Configuration validation failed: {'; '.join(errors)}")

        return True

    def get_with_env_override(self, key: str) -> Any:
        """
        Get configuration value with potential environment variable override.

        Args:
            key: Configuration key in dot notation (e.g., 'recommendation.top_k')

        Returns:
            Configuration value
        """
        env_key = f"MOODTUNES_{key.upper().replace('.', '_')}"
        env_value = os.getenv(env_key)

        if env_value is not None:
            return env_value

        current = self.config
        for k in key.split('.'):
            if hasattr(current, k):
                current = getattr(current, k)
            else:
                raise KeyError(f"Configuration key not found: {key}")

        return current
