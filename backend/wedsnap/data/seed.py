"""Default package and feature catalog for the estimate calculator."""

from wedsnap.models.catalog import ServiceCatalog, ServiceCatalogEntry
from wedsnap.models.enums import CatalogCategory, PackageTier

DEFAULT_CATALOG_VERSION = "2025.1"

PHOTOGRAPHY_PACKAGES: tuple[ServiceCatalogEntry, ...] = (
    ServiceCatalogEntry(
        id="photo-basic",
        name="Basic Photography",
        description="Essential coverage for small events",
        unit_price=15_000,
        category=CatalogCategory.PHOTOGRAPHY,
        tier=PackageTier.BASIC,
    ),
    ServiceCatalogEntry(
        id="photo-standard",
        name="Standard Photography",
        description="Complete coverage with premium editing",
        unit_price=25_000,
        category=CatalogCategory.PHOTOGRAPHY,
        tier=PackageTier.STANDARD,
    ),
    ServiceCatalogEntry(
        id="photo-premium",
        name="Premium Photography",
        description="Comprehensive coverage with all premium features",
        unit_price=40_000,
        category=CatalogCategory.PHOTOGRAPHY,
        tier=PackageTier.PREMIUM,
    ),
)

VIDEOGRAPHY_PACKAGES: tuple[ServiceCatalogEntry, ...] = (
    ServiceCatalogEntry(
        id="video-basic",
        name="Basic Videography",
        description="Essential video coverage",
        unit_price=20_000,
        category=CatalogCategory.VIDEOGRAPHY,
        tier=PackageTier.BASIC,
    ),
    ServiceCatalogEntry(
        id="video-standard",
        name="Standard Videography",
        description="Full video coverage with highlights",
        unit_price=35_000,
        category=CatalogCategory.VIDEOGRAPHY,
        tier=PackageTier.STANDARD,
    ),
    ServiceCatalogEntry(
        id="video-premium",
        name="Premium Videography",
        description="Cinematic video with drone shots",
        unit_price=50_000,
        category=CatalogCategory.VIDEOGRAPHY,
        tier=PackageTier.PREMIUM,
    ),
)

ADDITIONAL_FEATURES: tuple[ServiceCatalogEntry, ...] = (
    ServiceCatalogEntry(
        id="feature-drone",
        name="Drone Shots",
        description="Aerial photography and videography",
        unit_price=8_000,
        category=CatalogCategory.FEATURE,
    ),
    ServiceCatalogEntry(
        id="feature-album",
        name="Premium Photo Album",
        description="High-quality printed album (30 pages)",
        unit_price=5_000,
        category=CatalogCategory.FEATURE,
    ),
    ServiceCatalogEntry(
        id="feature-same-day",
        name="Same-Day Edit",
        description="Get a preview of selected photos on the same day",
        unit_price=3_000,
        category=CatalogCategory.FEATURE,
    ),
    ServiceCatalogEntry(
        id="feature-engagement",
        name="Engagement Session",
        description="Pre-wedding photoshoot (2 hours)",
        unit_price=10_000,
        category=CatalogCategory.FEATURE,
    ),
    ServiceCatalogEntry(
        id="feature-extra-photographer",
        name="Additional Photographer",
        description="Add another photographer to your team",
        unit_price=7_000,
        category=CatalogCategory.FEATURE,
    ),
    ServiceCatalogEntry(
        id="feature-extra-hours",
        name="Extended Hours",
        description="Add extra hours of coverage",
        unit_price=2_500,
        category=CatalogCategory.FEATURE,
    ),
)

DEFAULT_CATALOG = ServiceCatalog(
    version=DEFAULT_CATALOG_VERSION,
    photography_packages=PHOTOGRAPHY_PACKAGES,
    videography_packages=VIDEOGRAPHY_PACKAGES,
    features=ADDITIONAL_FEATURES,
)
