"""Tests for the catalog, settings, selection and result models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from wedsnap.models import (
    CatalogCategory,
    EstimateLineItem,
    EstimateMetadata,
    EstimateResult,
    EstimateSelection,
    LineItemKind,
    PackageTier,
    SellerEstimateSettings,
    ServiceCatalog,
    ServiceCatalogEntry,
    ServiceType,
)


def _metadata() -> EstimateMetadata:
    return EstimateMetadata(engine_version="0.1.0", catalog_version="2025.1")


def _package(entry_id: str = "p", tier: PackageTier = PackageTier.STANDARD) -> ServiceCatalogEntry:
    return ServiceCatalogEntry(
        id=entry_id,
        name="Package",
        unit_price=1_000,
        category=CatalogCategory.PHOTOGRAPHY,
        tier=tier,
    )


# ---------- ServiceCatalogEntry ----------


class TestServiceCatalogEntry:
    def test_valid_package(self) -> None:
        entry = _package()
        assert entry.is_package
        assert entry.description == ""

    def test_negative_catalog_price_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ServiceCatalogEntry(
                id="x", name="X", unit_price=-1, category=CatalogCategory.FEATURE
            )

    def test_package_requires_tier(self) -> None:
        with pytest.raises(ValidationError, match="must declare a tier"):
            ServiceCatalogEntry(
                id="x", name="X", unit_price=1, category=CatalogCategory.VIDEOGRAPHY
            )

    def test_feature_rejects_tier(self) -> None:
        with pytest.raises(ValidationError, match="must not declare a package tier"):
            ServiceCatalogEntry(
                id="x",
                name="X",
                unit_price=1,
                category=CatalogCategory.FEATURE,
                tier=PackageTier.BASIC,
            )

    def test_is_frozen(self) -> None:
        entry = _package()
        with pytest.raises(ValidationError):
            entry.unit_price = 5  # type: ignore[misc]


# ---------- ServiceCatalog ----------


class TestServiceCatalog:
    def test_rejects_misfiled_entry(self) -> None:
        with pytest.raises(ValidationError, match="listed under 'videography'"):
            ServiceCatalog(photography_packages=(), videography_packages=(_package(),))

    def test_rejects_duplicate_ids(self) -> None:
        with pytest.raises(ValidationError, match="Duplicate catalog id 'p'"):
            ServiceCatalog(
                photography_packages=(_package("p"), _package("p", PackageTier.BASIC)),
                videography_packages=(),
            )

    def test_all_entries_order(self) -> None:
        catalog = ServiceCatalog(
            photography_packages=(_package("a"),),
            videography_packages=(),
            features=(
                ServiceCatalogEntry(
                    id="f", name="F", unit_price=1, category=CatalogCategory.FEATURE
                ),
            ),
        )
        assert [e.id for e in catalog.all_entries()] == ["a", "f"]


# ---------- SellerEstimateSettings ----------


class TestSellerEstimateSettings:
    def test_empty_settings_resolve_to_defaults(self) -> None:
        settings = SellerEstimateSettings()
        assert settings.resolve_price("drone_footage", 8_000) == 8_000
        assert settings.surcharge_percent(20.0) == 20.0
        assert settings.hour_rate(2_500) == 2_500

    def test_override_wins(self) -> None:
        settings = SellerEstimateSettings(
            unit_prices={"drone_footage": 9_000},
            express_delivery_surcharge_percent=15,
            extra_hour_rate=3_000,
        )
        assert settings.resolve_price("drone_footage", 8_000) == 9_000
        assert settings.surcharge_percent(20.0) == 15
        assert settings.hour_rate(2_500) == 3_000

    def test_zero_override_is_kept(self) -> None:
        settings = SellerEstimateSettings(
            unit_prices={"drone_footage": 0}, express_delivery_surcharge_percent=0
        )
        assert settings.resolve_price("drone_footage", 8_000) == 0
        assert settings.surcharge_percent(20.0) == 0

    def test_negative_values_are_accepted_by_the_model(self) -> None:
        """Range checks belong to the engine, which raises InvalidSelection."""
        settings = SellerEstimateSettings(unit_prices={"x": -1})
        assert settings.unit_prices["x"] == -1

    def test_from_payload(self) -> None:
        settings = SellerEstimateSettings.from_payload(
            {
                "id": 12,
                "user_id": 7,
                "photography_coverage": 18_000,
                "drone_footage": 9_500,
                "gimbal_stabilizer": None,
                "notes": "call first",
                "express_delivery_surcharge": 25,
                "extra_hour_rate": 3_000,
                "updated_at": "2025-01-01T00:00:00Z",
            }
        )
        assert settings.unit_prices == {"photography_coverage": 18_000, "drone_footage": 9_500}
        assert settings.express_delivery_surcharge_percent == 25.0
        assert settings.extra_hour_rate == 3_000

    def test_from_payload_skips_booleans(self) -> None:
        settings = SellerEstimateSettings.from_payload({"drone_footage": True})
        assert settings.unit_prices == {}

    @pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
    def test_from_payload_skips_non_finite(self, value: float) -> None:
        settings = SellerEstimateSettings.from_payload(
            {
                "drone_footage": value,
                "express_delivery_surcharge": value,
                "extra_hour_rate": value,
            }
        )
        assert settings == SellerEstimateSettings()

    def test_from_payload_rounds_fractional_prices_half_up(self) -> None:
        settings = SellerEstimateSettings.from_payload(
            {
                "drone_footage": 8_000.9,
                "gimbal_stabilizer": 5_000.5,
                "basic_color_correction": 4_000.4,
                "extra_hour_rate": 2_500.5,
            }
        )
        assert settings.unit_prices == {
            "drone_footage": 8_001,
            "gimbal_stabilizer": 5_001,
            "basic_color_correction": 4_000,
        }
        assert settings.extra_hour_rate == 2_501

    def test_to_payload_round_trip(self) -> None:
        original = SellerEstimateSettings(
            unit_prices={"drone_footage": 9_000},
            express_delivery_surcharge_percent=12.5,
        )
        payload = original.to_payload()
        assert payload == {"drone_footage": 9_000, "express_delivery_surcharge": 12.5}
        assert SellerEstimateSettings.from_payload(payload) == original


# ---------- EstimateSelection ----------


class TestEstimateSelection:
    def test_defaults(self) -> None:
        selection = EstimateSelection()
        assert selection.service_type == ServiceType.PHOTOGRAPHY
        assert selection.coverage_hours == 8
        assert selection.selected_feature_ids == frozenset()
        assert selection.express_delivery_requested is False

    def test_feature_ids_deduplicated(self) -> None:
        selection = EstimateSelection.model_validate(
            {"selected_feature_ids": ["feature-drone", "feature-drone"]}
        )
        assert selection.selected_feature_ids == frozenset({"feature-drone"})

    def test_bad_service_type_rejected(self) -> None:
        with pytest.raises(ValidationError):
            EstimateSelection.model_validate({"service_type": "audio"})

    def test_out_of_range_hours_allowed_by_model(self) -> None:
        assert EstimateSelection(coverage_hours=20).coverage_hours == 20


# ---------- EstimateResult ----------


class TestEstimateResult:
    def test_valid_result(self) -> None:
        result = EstimateResult(
            subtotal=100, express_surcharge=20, total=120, metadata=_metadata()
        )
        assert result.total == 120

    def test_total_mismatch_rejected(self) -> None:
        with pytest.raises(ValidationError, match="total == subtotal \\+ express_surcharge"):
            EstimateResult(subtotal=100, express_surcharge=20, total=100, metadata=_metadata())

    def test_negative_amount_rejected(self) -> None:
        with pytest.raises(ValidationError):
            EstimateResult(subtotal=-1, total=-1, metadata=_metadata())

    def test_line_items_must_sum_to_subtotal(self) -> None:
        with pytest.raises(ValidationError, match="Line items sum to 50"):
            EstimateResult(
                subtotal=100,
                total=100,
                line_items=(
                    EstimateLineItem(
                        key="a", label="A", kind=LineItemKind.FEATURE, unit_price=50, amount=50
                    ),
                ),
                metadata=_metadata(),
            )

    def test_surcharge_line_not_counted_in_subtotal(self) -> None:
        result = EstimateResult(
            subtotal=100,
            express_surcharge=20,
            total=120,
            line_items=(
                EstimateLineItem(
                    key="p", label="P", kind=LineItemKind.PACKAGE, unit_price=100, amount=100
                ),
                EstimateLineItem(
                    key="express_delivery",
                    label="Express",
                    kind=LineItemKind.EXPRESS_SURCHARGE,
                    unit_price=20,
                    amount=20,
                ),
            ),
            metadata=_metadata(),
        )
        assert len(result.items_of_kind(LineItemKind.PACKAGE)) == 1

    def test_json_round_trip(self) -> None:
        result = EstimateResult(
            service_type=ServiceType.BOTH,
            coverage_hours=10,
            subtotal=65_000,
            total=65_000,
            line_items=(
                EstimateLineItem(
                    key="p", label="P", kind=LineItemKind.PACKAGE, unit_price=60_000, amount=60_000
                ),
                EstimateLineItem(
                    key="extra_hours",
                    label="Extra Coverage Hours",
                    kind=LineItemKind.EXTRA_HOURS,
                    quantity=2,
                    unit_price=2_500,
                    amount=5_000,
                ),
            ),
            metadata=_metadata(),
        )
        restored = EstimateResult.model_validate_json(result.model_dump_json())
        assert restored == result
