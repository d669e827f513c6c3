"""Core estimate engine for WedSnap photography/videography bookings.

The EstimateEngine prices a buyer's selection in a fixed order:

1. **Base package**: the chosen photography or videography package. When
   both services are requested the standard tier of each list is used,
   whatever package was picked in single-service mode.
2. **Feature add-ons**: each selected feature's price. Unknown feature ids
   are skipped.
3. **Extra hours**: every hour of coverage above 8 is charged at the
   extra-hour rate (2,500 PKR unless the seller overrides it).
4. **Express surcharge**: a percentage of the subtotal, rounded half up to
   a whole rupee.
5. **Total**: subtotal plus express surcharge.

Every price resolves as seller override first, then catalog or system
default. The engine is a pure function of its inputs: no I/O, no logging,
no state shared between calls.
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import TYPE_CHECKING

from wedsnap.data.defaults import (
    DEFAULT_EXPRESS_SURCHARGE_PERCENT,
    DEFAULT_EXTRA_HOUR_RATE,
    DEFAULT_UNIT_PRICES,
    INCLUDED_COVERAGE_HOURS,
    MAX_COVERAGE_HOURS,
    MIN_COVERAGE_HOURS,
    SERVICE_LABELS,
)
from wedsnap.data.repository import CatalogRepository
from wedsnap.exceptions import InvalidSelection
from wedsnap.models.enums import CatalogCategory, LineItemKind, ServiceType
from wedsnap.models.estimate import EstimateLineItem, EstimateMetadata, EstimateResult
from wedsnap.rounding import round_half_up

if TYPE_CHECKING:
    from wedsnap.models.catalog import ServiceCatalog, ServiceCatalogEntry
    from wedsnap.models.selection import EstimateSelection, QuickEstimateSelection
    from wedsnap.models.settings import SellerEstimateSettings

ENGINE_VERSION = "0.1.0"

_SINGLE_SERVICE_CATEGORIES: dict[ServiceType, CatalogCategory] = {
    ServiceType.PHOTOGRAPHY: CatalogCategory.PHOTOGRAPHY,
    ServiceType.VIDEOGRAPHY: CatalogCategory.VIDEOGRAPHY,
}


def resolve_unit_price(key: str, settings: SellerEstimateSettings, default: int) -> int:
    """Seller override for ``key`` if configured, otherwise ``default``."""
    return settings.resolve_price(key, default)


def express_surcharge_for(subtotal: int, percent: float) -> int:
    """Percentage of ``subtotal`` rounded half up to a whole rupee."""
    raw = Decimal(subtotal) * Decimal(str(percent)) / Decimal(100)
    return round_half_up(raw)


def validate_settings(settings: SellerEstimateSettings) -> None:
    """Reject settings with a negative price, percent or hourly rate.

    Raises:
        InvalidSelection: With reason ``negative_price``.
    """
    for key, price in settings.unit_prices.items():
        if price < 0:
            raise InvalidSelection(
                InvalidSelection.NEGATIVE_PRICE,
                f"Configured price for '{key}' is negative: {price}",
            )
    percent = settings.express_delivery_surcharge_percent
    if percent is not None and not (math.isfinite(percent) and percent >= 0):
        raise InvalidSelection(
            InvalidSelection.NEGATIVE_PRICE,
            f"Express delivery surcharge must be a non-negative percent, got {percent}",
        )
    if settings.extra_hour_rate is not None and settings.extra_hour_rate < 0:
        raise InvalidSelection(
            InvalidSelection.NEGATIVE_PRICE,
            f"Extra hour rate is negative: {settings.extra_hour_rate}",
        )


class EstimateEngine:
    """Converts an EstimateSelection plus seller settings into an EstimateResult.

    Args:
        repository: Catalog lookups for packages and features.

    Example::

        from wedsnap.data import DEFAULT_CATALOG, CatalogRepository

        engine = EstimateEngine(CatalogRepository(DEFAULT_CATALOG))
        result = engine.estimate(selection, SellerEstimateSettings())
    """

    def __init__(self, repository: CatalogRepository) -> None:
        self._repository = repository

    @property
    def repository(self) -> CatalogRepository:
        return self._repository

    def estimate(
        self,
        selection: EstimateSelection,
        settings: SellerEstimateSettings,
    ) -> EstimateResult:
        """Price a calculator selection.

        Raises:
            InvalidSelection: If a configured price is negative, coverage
                hours are outside 4-12, or the package id is not in the
                list for the chosen service type.
        """
        validate_settings(settings)
        self._validate_coverage_hours(selection.coverage_hours)

        line_items: list[EstimateLineItem] = []

        # 1. Base package(s)
        for package in self._packages_for_selection(selection):
            price = resolve_unit_price(package.id, settings, package.unit_price)
            line_items.append(
                EstimateLineItem(
                    key=package.id,
                    label=package.name,
                    kind=LineItemKind.PACKAGE,
                    unit_price=price,
                    amount=price,
                )
            )

        # 2. Feature add-ons
        for feature in self._repository.resolve_features(selection.selected_feature_ids):
            price = resolve_unit_price(feature.id, settings, feature.unit_price)
            line_items.append(
                EstimateLineItem(
                    key=feature.id,
                    label=feature.name,
                    kind=LineItemKind.FEATURE,
                    unit_price=price,
                    amount=price,
                )
            )

        # 3. Hours above the included coverage
        extra_hours = selection.coverage_hours - INCLUDED_COVERAGE_HOURS
        if extra_hours > 0:
            rate = settings.hour_rate(DEFAULT_EXTRA_HOUR_RATE)
            line_items.append(
                EstimateLineItem(
                    key="extra_hours",
                    label="Extra Coverage Hours",
                    kind=LineItemKind.EXTRA_HOURS,
                    quantity=extra_hours,
                    unit_price=rate,
                    amount=extra_hours * rate,
                )
            )

        return self._finalize(
            line_items,
            settings,
            express_requested=selection.express_delivery_requested,
            service_type=selection.service_type,
            coverage_hours=selection.coverage_hours,
        )

    def quick_estimate(
        self,
        selection: QuickEstimateSelection,
        settings: SellerEstimateSettings,
    ) -> EstimateResult:
        """Price a seller widget selection: ticked services plus express.

        Keys with neither a seller price nor a system default are skipped.

        Raises:
            InvalidSelection: If a configured price or percent is negative.
        """
        validate_settings(settings)

        known_keys = list(DEFAULT_UNIT_PRICES)
        known_keys.extend(sorted(k for k in settings.unit_prices if k not in DEFAULT_UNIT_PRICES))

        line_items: list[EstimateLineItem] = []
        for key in known_keys:
            if key not in selection.service_keys:
                continue
            price = resolve_unit_price(key, settings, DEFAULT_UNIT_PRICES.get(key, 0))
            line_items.append(
                EstimateLineItem(
                    key=key,
                    label=SERVICE_LABELS.get(key, key.replace("_", " ").title()),
                    kind=LineItemKind.SERVICE,
                    unit_price=price,
                    amount=price,
                )
            )

        return self._finalize(
            line_items,
            settings,
            express_requested=selection.express_delivery_requested,
        )

    def _packages_for_selection(
        self, selection: EstimateSelection
    ) -> list[ServiceCatalogEntry]:
        if selection.service_type == ServiceType.BOTH:
            packages: list[ServiceCatalogEntry] = []
            for category in (CatalogCategory.PHOTOGRAPHY, CatalogCategory.VIDEOGRAPHY):
                standard = self._repository.get_standard_package(category)
                if standard is None:
                    raise InvalidSelection(
                        InvalidSelection.UNKNOWN_PACKAGE,
                        f"Catalog has no standard {category} package",
                    )
                packages.append(standard)
            return packages

        category = _SINGLE_SERVICE_CATEGORIES[selection.service_type]
        package_id = selection.selected_package_id
        package = (
            self._repository.get_package(category, package_id)
            if package_id is not None
            else None
        )
        if package is None:
            raise InvalidSelection(
                InvalidSelection.UNKNOWN_PACKAGE,
                f"Unknown {category} package '{package_id}'",
            )
        return [package]

    def _finalize(
        self,
        line_items: list[EstimateLineItem],
        settings: SellerEstimateSettings,
        *,
        express_requested: bool,
        service_type: ServiceType | None = None,
        coverage_hours: int | None = None,
    ) -> EstimateResult:
        subtotal = sum(item.amount for item in line_items)
        percent = settings.surcharge_percent(DEFAULT_EXPRESS_SURCHARGE_PERCENT)

        express_surcharge = 0
        if express_requested:
            express_surcharge = express_surcharge_for(subtotal, percent)
            line_items.append(
                EstimateLineItem(
                    key="express_delivery",
                    label="Express Delivery Surcharge",
                    kind=LineItemKind.EXPRESS_SURCHARGE,
                    unit_price=express_surcharge,
                    amount=express_surcharge,
                )
            )

        return EstimateResult(
            service_type=service_type,
            coverage_hours=coverage_hours,
            express_surcharge_percent=percent if express_requested else 0.0,
            subtotal=subtotal,
            express_surcharge=express_surcharge,
            total=subtotal + express_surcharge,
            line_items=tuple(line_items),
            metadata=EstimateMetadata(
                engine_version=ENGINE_VERSION,
                catalog_version=self._repository.version,
            ),
        )

    @staticmethod
    def _validate_coverage_hours(hours: int) -> None:
        if not MIN_COVERAGE_HOURS <= hours <= MAX_COVERAGE_HOURS:
            raise InvalidSelection(
                InvalidSelection.COVERAGE_OUT_OF_RANGE,
                f"Coverage hours must be between {MIN_COVERAGE_HOURS} and "
                f"{MAX_COVERAGE_HOURS}, got {hours}",
            )


def compute_estimate(
    selection: EstimateSelection,
    settings: SellerEstimateSettings,
    catalog: ServiceCatalog | None = None,
) -> EstimateResult:
    """Price ``selection`` against ``catalog`` (the default catalog if None)."""
    if catalog is None:
        from wedsnap.data.seed import DEFAULT_CATALOG

        catalog = DEFAULT_CATALOG
    return EstimateEngine(CatalogRepository(catalog)).estimate(selection, settings)


def compute_quick_estimate(
    selection: QuickEstimateSelection,
    settings: SellerEstimateSettings,
) -> EstimateResult:
    """Price a seller widget selection against the default price table."""
    from wedsnap.data.seed import DEFAULT_CATALOG

    return EstimateEngine(CatalogRepository(DEFAULT_CATALOG)).quick_estimate(
        selection, settings
    )
