"""Service catalog models: packages and add-on features."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from wedsnap.models.enums import CatalogCategory, PackageTier


class ServiceCatalogEntry(BaseModel):
    """A priced package or add-on feature.

    ``unit_price`` is the catalog default in whole PKR. Sellers override it
    through ``SellerEstimateSettings.unit_prices`` keyed by ``id``.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    name: str
    description: str = ""
    unit_price: int = Field(ge=0)
    category: CatalogCategory
    tier: PackageTier | None = None

    @model_validator(mode="after")
    def packages_have_a_tier(self) -> ServiceCatalogEntry:
        if self.category == CatalogCategory.FEATURE:
            if self.tier is not None:
                msg = f"Feature '{self.id}' must not declare a package tier"
                raise ValueError(msg)
        elif self.tier is None:
            msg = f"Package '{self.id}' must declare a tier"
            raise ValueError(msg)
        return self

    @property
    def is_package(self) -> bool:
        return self.category != CatalogCategory.FEATURE


class ServiceCatalog(BaseModel):
    """Immutable bundle of the package lists and the feature list."""

    model_config = ConfigDict(frozen=True)

    version: str = "default"
    photography_packages: tuple[ServiceCatalogEntry, ...]
    videography_packages: tuple[ServiceCatalogEntry, ...]
    features: tuple[ServiceCatalogEntry, ...] = ()

    @model_validator(mode="after")
    def entries_are_consistent(self) -> ServiceCatalog:
        groups = (
            (CatalogCategory.PHOTOGRAPHY, self.photography_packages),
            (CatalogCategory.VIDEOGRAPHY, self.videography_packages),
            (CatalogCategory.FEATURE, self.features),
        )
        seen: set[str] = set()
        for category, entries in groups:
            for entry in entries:
                if entry.category != category:
                    msg = (
                        f"Entry '{entry.id}' has category '{entry.category}' "
                        f"but is listed under '{category}'"
                    )
                    raise ValueError(msg)
                if entry.id in seen:
                    msg = f"Duplicate catalog id '{entry.id}'"
                    raise ValueError(msg)
                seen.add(entry.id)
        return self

    def all_entries(self) -> tuple[ServiceCatalogEntry, ...]:
        return self.photography_packages + self.videography_packages + self.features
