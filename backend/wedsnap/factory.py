"""Factory functions for creating pre-configured EstimateEngine instances."""

from __future__ import annotations

from typing import TYPE_CHECKING

from wedsnap.data.repository import CatalogRepository
from wedsnap.data.seed import DEFAULT_CATALOG
from wedsnap.engine import EstimateEngine

if TYPE_CHECKING:
    from wedsnap.models.catalog import ServiceCatalog


def create_default_engine(catalog: ServiceCatalog | None = None) -> EstimateEngine:
    """Create an EstimateEngine wired up with the default package catalog.

    This is the recommended way to create an EstimateEngine. Pass
    ``catalog`` to price against a different package/feature list.

    Example::

        from wedsnap import create_default_engine, EstimateSelection

        engine = create_default_engine()
        result = engine.estimate(selection, SellerEstimateSettings())
    """
    repository = CatalogRepository(catalog if catalog is not None else DEFAULT_CATALOG)
    return EstimateEngine(repository)
