"""Catalog and default price data for the WedSnap estimate engine."""

from wedsnap.data.repository import CatalogRepository
from wedsnap.data.seed import DEFAULT_CATALOG

__all__ = [
    "DEFAULT_CATALOG",
    "CatalogRepository",
]
