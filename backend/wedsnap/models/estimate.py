"""Estimate output models for the WedSnap estimate engine."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from wedsnap.models.enums import LineItemKind, ServiceType

_SERVICE_TYPE_LABELS: dict[ServiceType, str] = {
    ServiceType.PHOTOGRAPHY: "Photography Only",
    ServiceType.VIDEOGRAPHY: "Videography Only",
    ServiceType.BOTH: "Photography & Videography",
}


class EstimateLineItem(BaseModel):
    """One priced line of an estimate breakdown."""

    model_config = ConfigDict(frozen=True)

    key: str
    label: str
    kind: LineItemKind
    quantity: int = Field(default=1, ge=1)
    unit_price: int = Field(ge=0)
    amount: int = Field(ge=0)


class EstimateMetadata(BaseModel):
    """Metadata about the estimation run."""

    model_config = ConfigDict(frozen=True)

    engine_version: str
    catalog_version: str
    currency: str = "PKR"
    rounding: str = "half_up"


class EstimateResult(BaseModel):
    """Priced breakdown for a selection.

    All amounts are whole PKR. ``total`` always equals ``subtotal`` plus
    ``express_surcharge`` and ``subtotal`` always equals the sum of the
    non-surcharge line items.
    """

    model_config = ConfigDict(frozen=True)

    service_type: ServiceType | None = None
    coverage_hours: int | None = None
    express_surcharge_percent: float = Field(default=0.0, ge=0)
    subtotal: int = Field(ge=0)
    express_surcharge: int = Field(default=0, ge=0)
    total: int = Field(ge=0)
    line_items: tuple[EstimateLineItem, ...] = ()
    metadata: EstimateMetadata

    @model_validator(mode="after")
    def totals_add_up(self) -> EstimateResult:
        if self.total != self.subtotal + self.express_surcharge:
            msg = (
                f"Must satisfy total == subtotal + express_surcharge, "
                f"got {self.total} != {self.subtotal} + {self.express_surcharge}"
            )
            raise ValueError(msg)
        if self.line_items:
            priced = sum(
                item.amount
                for item in self.line_items
                if item.kind != LineItemKind.EXPRESS_SURCHARGE
            )
            if priced != self.subtotal:
                msg = f"Line items sum to {priced} but subtotal is {self.subtotal}"
                raise ValueError(msg)
        return self

    def items_of_kind(self, kind: LineItemKind) -> list[EstimateLineItem]:
        return [item for item in self.line_items if item.kind == kind]

    def to_summary_dict(self) -> dict[str, Any]:
        """Produce a flat summary dict with PKR strings for direct display."""
        from wedsnap.formatting import format_hours, format_percent, format_pkr

        summary: dict[str, Any] = {
            "service_type": self.service_type.value if self.service_type else None,
            "service_type_label": (
                _SERVICE_TYPE_LABELS[self.service_type] if self.service_type else None
            ),
            "coverage_hours_formatted": (
                format_hours(self.coverage_hours)
                if self.coverage_hours is not None
                else None
            ),
            "line_items": [
                {
                    "label": item.label,
                    "kind": item.kind.value,
                    "quantity": item.quantity,
                    "amount_formatted": format_pkr(item.amount),
                }
                for item in self.line_items
                if item.kind != LineItemKind.EXPRESS_SURCHARGE
            ],
            "subtotal_formatted": format_pkr(self.subtotal),
            "total_formatted": format_pkr(self.total),
        }
        if self.express_surcharge > 0 or self.items_of_kind(LineItemKind.EXPRESS_SURCHARGE):
            summary["express_surcharge_formatted"] = format_pkr(self.express_surcharge)
            summary["express_surcharge_percent_formatted"] = format_percent(
                self.express_surcharge_percent
            )
        return summary
