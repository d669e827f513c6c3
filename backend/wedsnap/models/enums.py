"""Enums for the WedSnap estimate domain models."""

from enum import StrEnum


class ServiceType(StrEnum):
    """Which services the buyer is pricing."""

    PHOTOGRAPHY = "photography"
    VIDEOGRAPHY = "videography"
    BOTH = "both"


class CatalogCategory(StrEnum):
    """Category of a catalog entry."""

    PHOTOGRAPHY = "photography"
    VIDEOGRAPHY = "videography"
    FEATURE = "feature"


class PackageTier(StrEnum):
    """Package tiers offered by every seller."""

    BASIC = "basic"
    STANDARD = "standard"
    PREMIUM = "premium"


class LineItemKind(StrEnum):
    """Kind of a priced line in an estimate breakdown."""

    PACKAGE = "package"
    FEATURE = "feature"
    SERVICE = "service"
    EXTRA_HOURS = "extra_hours"
    EXPRESS_SURCHARGE = "express_surcharge"
