"""WedSnap estimate engine.

Usage::

    from wedsnap import create_default_engine, EstimateSelection, SellerEstimateSettings

    engine = create_default_engine()
    result = engine.estimate(
        EstimateSelection(service_type="photography", selected_package_id="photo-standard"),
        SellerEstimateSettings(),
    )
"""

from wedsnap.engine import (
    EstimateEngine,
    compute_estimate,
    compute_quick_estimate,
    resolve_unit_price,
)
from wedsnap.exceptions import InvalidSelection, WedSnapError
from wedsnap.factory import create_default_engine
from wedsnap.models.catalog import ServiceCatalog, ServiceCatalogEntry
from wedsnap.models.enums import CatalogCategory, LineItemKind, PackageTier, ServiceType
from wedsnap.models.estimate import EstimateLineItem, EstimateMetadata, EstimateResult
from wedsnap.models.selection import EstimateSelection, QuickEstimateSelection
from wedsnap.models.settings import SellerEstimateSettings

__all__ = [
    "CatalogCategory",
    "EstimateEngine",
    "EstimateLineItem",
    "EstimateMetadata",
    "EstimateResult",
    "EstimateSelection",
    "InvalidSelection",
    "LineItemKind",
    "PackageTier",
    "QuickEstimateSelection",
    "SellerEstimateSettings",
    "ServiceCatalog",
    "ServiceCatalogEntry",
    "ServiceType",
    "WedSnapError",
    "compute_estimate",
    "compute_quick_estimate",
    "create_default_engine",
    "resolve_unit_price",
]
