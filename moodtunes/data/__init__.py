"""
Data module for MoodTunes.

This module provides the catalog record schemas and the validation used
when a catalog file is loaded.
"""

from .schemas import (
    Track,
    EnergyLevel,
    ENERGY_LABELS,
    ValidationResult
)
from .validator import CatalogValidator

__all__ = [
    'Track',
    'EnergyLevel',
    'ENERGY_LABELS',
    'ValidationResult',
    'CatalogValidator'
]
