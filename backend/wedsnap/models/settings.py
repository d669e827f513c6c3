"""Per-seller pricing settings consumed by the estimate engine."""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from wedsnap.rounding import round_half_up

# Keys the backend uses for the surcharge/rate fields of a flat settings record
_SURCHARGE_KEYS = ("express_delivery_surcharge_percent", "express_delivery_surcharge")
_EXTRA_HOUR_KEYS = ("extra_hour_rate",)
_RECORD_META_KEYS = frozenset({"id", "user_id", "seller_id", "created_at", "updated_at"})


class SellerEstimateSettings(BaseModel):
    """A snapshot of a seller's price overrides.

    Anything left out falls back to the catalog or system default. Values
    are not range-checked here: the engine rejects negative prices with
    ``InvalidSelection`` so that callers get a single error kind.
    """

    model_config = ConfigDict(frozen=True)

    unit_prices: dict[str, int] = Field(default_factory=dict)
    express_delivery_surcharge_percent: float | None = None
    extra_hour_rate: int | None = None

    def resolve_price(self, key: str, default: int) -> int:
        """Return the seller's price for ``key``, or ``default`` when unset."""
        value = self.unit_prices.get(key)
        return default if value is None else value

    def surcharge_percent(self, default: float) -> float:
        if self.express_delivery_surcharge_percent is None:
            return default
        return self.express_delivery_surcharge_percent

    def hour_rate(self, default: int) -> int:
        return default if self.extra_hour_rate is None else self.extra_hour_rate

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> SellerEstimateSettings:
        """Build settings from the backend's flat settings record.

        The record looks like ``{"drone_footage": 8000, ...,
        "express_delivery_surcharge": 20}``. Null or non-numeric fields,
        NaN and infinities included, are dropped so they resolve to
        defaults. Fractional prices and rates are rounded half up to a whole
        rupee.
        """
        unit_prices: dict[str, int] = {}
        surcharge: float | None = None
        hour_rate: int | None = None

        for key, value in payload.items():
            if key in _RECORD_META_KEYS or value is None or isinstance(value, bool):
                continue
            if not isinstance(value, int | float):
                continue
            if isinstance(value, float) and not math.isfinite(value):
                continue
            if key in _SURCHARGE_KEYS:
                surcharge = float(value)
            elif key in _EXTRA_HOUR_KEYS:
                hour_rate = round_half_up(value)
            else:
                unit_prices[key] = round_half_up(value)

        return cls(
            unit_prices=unit_prices,
            express_delivery_surcharge_percent=surcharge,
            extra_hour_rate=hour_rate,
        )

    def to_payload(self) -> dict[str, Any]:
        """Inverse of ``from_payload``: a flat record for the backend."""
        payload: dict[str, Any] = dict(self.unit_prices)
        if self.express_delivery_surcharge_percent is not None:
            payload["express_delivery_surcharge"] = self.express_delivery_surcharge_percent
        if self.extra_hour_rate is not None:
            payload["extra_hour_rate"] = self.extra_hour_rate
        return payload
