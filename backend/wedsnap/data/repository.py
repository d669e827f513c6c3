"""Catalog repository for looking up packages and features."""

from __future__ import annotations

from typing import TYPE_CHECKING

from wedsnap.models.enums import CatalogCategory, PackageTier

if TYPE_CHECKING:
    from collections.abc import Iterable

    from wedsnap.models.catalog import ServiceCatalog, ServiceCatalogEntry


class CatalogRepository:
    """Read-only lookups over an injected ``ServiceCatalog``.

    The catalog is held as given; nothing here mutates it, so one
    repository can serve any number of concurrent estimates.
    """

    def __init__(self, catalog: ServiceCatalog) -> None:
        self._catalog = catalog
        self._features_by_id = {f.id: f for f in catalog.features}

    @property
    def catalog(self) -> ServiceCatalog:
        return self._catalog

    @property
    def version(self) -> str:
        return self._catalog.version

    def packages_for(self, category: CatalogCategory) -> tuple[ServiceCatalogEntry, ...]:
        """Return the package list for a package category."""
        if category == CatalogCategory.PHOTOGRAPHY:
            return self._catalog.photography_packages
        if category == CatalogCategory.VIDEOGRAPHY:
            return self._catalog.videography_packages
        msg = f"'{category}' is not a package category"
        raise ValueError(msg)

    def get_package(
        self, category: CatalogCategory, package_id: str
    ) -> ServiceCatalogEntry | None:
        """Look up a package by id within one category.

        Returns None if the id is not in that category's list, including
        when it names a package of the other category.
        """
        for entry in self.packages_for(category):
            if entry.id == package_id:
                return entry
        return None

    def get_tier_package(
        self, category: CatalogCategory, tier: PackageTier
    ) -> ServiceCatalogEntry | None:
        for entry in self.packages_for(category):
            if entry.tier == tier:
                return entry
        return None

    def get_standard_package(self, category: CatalogCategory) -> ServiceCatalogEntry | None:
        return self.get_tier_package(category, PackageTier.STANDARD)

    def get_feature(self, feature_id: str) -> ServiceCatalogEntry | None:
        return self._features_by_id.get(feature_id)

    def resolve_features(self, feature_ids: Iterable[str]) -> list[ServiceCatalogEntry]:
        """Return the known features among ``feature_ids`` in catalog order.

        Unknown ids are dropped.
        """
        wanted = set(feature_ids)
        return [f for f in self._catalog.features if f.id in wanted]
