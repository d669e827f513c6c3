"""Domain models for the WedSnap estimate engine."""

from wedsnap.models.catalog import ServiceCatalog, ServiceCatalogEntry
from wedsnap.models.enums import CatalogCategory, LineItemKind, PackageTier, ServiceType
from wedsnap.models.estimate import EstimateLineItem, EstimateMetadata, EstimateResult
from wedsnap.models.selection import EstimateSelection, QuickEstimateSelection
from wedsnap.models.settings import SellerEstimateSettings

__all__ = [
    "CatalogCategory",
    "EstimateLineItem",
    "EstimateMetadata",
    "EstimateResult",
    "EstimateSelection",
    "LineItemKind",
    "PackageTier",
    "QuickEstimateSelection",
    "SellerEstimateSettings",
    "ServiceCatalog",
    "ServiceCatalogEntry",
    "ServiceType",
]
