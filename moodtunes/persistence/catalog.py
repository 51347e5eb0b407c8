"""
Track catalog module for MoodTunes.

This module provides the immutable in-memory catalog, the loader that
builds it from a JSON file, and the handle used to swap catalogs on reload.
"""
import json
import os
from typing import Dict, Iterator, Optional, Sequence, Tuple, Union
import logging
import pandas as pd
from ..data.schemas import Track, ValidationResult
from ..data.validator import CatalogValidator


class CatalogError(Exception):
    """Raised when a catalog file cannot be read or fails validation."""

    def __init__(self, message: str, validation: Optional[ValidationResult] = None):
        super().__init__(message)
        self.validation = validation


class Catalog:
    """
    Ordered, read-only collection of tracks.

    Iteration order is the file order; ranking ties fall back to it.
    """

    def __init__(self, tracks: Sequence[Track] = ()):
        self._tracks: Tuple[Track, ...] = tuple(tracks)
        self._id_index: Dict[str, Track] = {}
        for track in self._tracks:
            self._id_index.setdefault(track.id, track)

    @property
    def tracks(self) -> Tuple[Track, ...]:
        return self._tracks

    def __len__(self) -> int:
        return len(self._tracks)

    def __iter__(self) -> Iterator[Track]:
        return iter(self._tracks)

    def __getitem__(self, index: int) -> Track:
        return self._tracks[index]

    def __bool__(self) -> bool:
        return bool(self._tracks)

    def get_track(self, track_id: str) -> Optional[Track]:
        """
        Get a track by id.

        Args:
            track_id: Catalog id of the track

        Returns:
            Track if found, None otherwise
        """
        return self._id_index.get(track_id)

    def moods(self) -> Dict[str, int]:
        """Count of tracks per lowercased mood tag."""
        counts: Dict[str, int] = {}
        for track in self._tracks:
            key = track.mood.lower()
            counts[key] = counts.get(key, 0) + 1
        return counts


class CatalogLoader:
    """
    Loads and validates catalog files.

    A catalog file is a JSON array of track objects, as shipped in
    ``data/tracks.json``.
    """

    def __init__(self, validator: Optional[CatalogValidator] = None):
        self.validator = validator or CatalogValidator()
        self.logger = logging.getLogger(__name__)

    def read_records(self, path: Union[str, os.PathLike]) -> list:
        """
        Read raw track records from a JSON file.

        Raises:
            FileNotFoundError: If the catalog file doesn't exist
            CatalogError: If the file is not a JSON array of objects
        """
        if not os.path.exists(path):
            raise FileNotFoundError(f"Catalog file not found: {path}")
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            error_msg = f"JSON corruption in catalog file {path}: {e}"
            self.logger.error(error_msg)
            raise CatalogError(error_msg) from e

        if not isinstance(data, list):
            raise CatalogError(f"Catalog file must contain a JSON array: {path}")
        if not all(isinstance(item, dict) for item in data):
            raise CatalogError(f"Every catalog entry must be a JSON object: {path}")
        return data

    def validate(self, records: list) -> ValidationResult:
        df = pd.DataFrame.from_records(records)
        return self.validator.validate_all(df)

    def build(self, records: list) -> Catalog:
        """
        Validate raw records and build a Catalog.

        Raises:
            CatalogError: If validation reports errors
        """
        if not records:
            self.logger.warning("Catalog is empty")
            return Catalog()

        result = self.validate(records)
        for warning in result.warnings:
            self.logger.warning(f"Catalog validation warning: {warning}")
        if result.has_errors():
            raise CatalogError(
                "Catalog validation failed: " + "; ".join(result.errors),
                validation=result
            )
        return Catalog(Track.from_dict(record) for record in records)

    def load(self, path: Union[str, os.PathLike]) -> Catalog:
        """
        Load a catalog from disk.

        Args:
            path: Path to the catalog JSON file

        Returns:
            Catalog with the file's tracks in file order

        Raises:
            FileNotFoundError: If the catalog file doesn't exist
            CatalogError: If the file is malformed or invalid
        """
        catalog = self.build(self.read_records(path))
        self.logger.info(f"Loaded catalog with {len(catalog)} tracks from {path}")
        return catalog


class CatalogHandle:
    """
    Holds the catalog currently served.

    Readers take ``current`` once per request; ``swap`` replaces the
    reference in a single assignment, so a reader never sees a partially
    updated catalog.
    """

    def __init__(self, catalog: Optional[Catalog] = None):
        self._catalog = catalog if catalog is not None else Catalog()
        self.logger = logging.getLogger(__name__)

    @property
    def current(self) -> Catalog:
        return self._catalog

    def swap(self, catalog: Catalog) -> Catalog:
        """Install a new catalog and return the previous one."""
        previous, self._catalog = self._catalog, catalog
        self.logger.info(f"Catalog swapped: {len(previous)} -> {len(catalog)} tracks")
        return previous

    def reload(self, loader: CatalogLoader, path: Union[str, os.PathLike]) -> Catalog:
        """Load ``path`` and swap it in. The current catalog stays if loading fails."""
        catalog = loader.load(path)
        self.swap(catalog)
        return catalog
