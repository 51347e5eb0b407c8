"""
Persistence layer module for MoodTunes.

Handles loading the track catalog and holding the catalog currently served.
"""

from .catalog import Catalog, CatalogError, CatalogHandle, CatalogLoader

__all__ = ['Catalog', 'CatalogError', 'CatalogHandle', 'CatalogLoader']
