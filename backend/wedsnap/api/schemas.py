"""Request bodies for the WedSnap HTTP API."""

from __future__ import annotations

from pydantic import BaseModel

from wedsnap.models.selection import EstimateSelection, QuickEstimateSelection
from wedsnap.models.settings import SellerEstimateSettings


class EstimateRequest(BaseModel):
    """Body of POST /api/estimate.

    ``settings`` wins over ``seller_id``; with neither, system defaults apply.
    """

    selection: EstimateSelection
    settings: SellerEstimateSettings | None = None
    seller_id: str | None = None


class QuickEstimateRequest(BaseModel):
    selection: QuickEstimateSelection
    settings: SellerEstimateSettings | None = None
    seller_id: str | None = None


class SettingsUpdateRequest(BaseModel):
    """Body of PUT /api/sellers/{seller_id}/estimate-settings."""

    unit_prices: dict[str, int] | None = None
    express_delivery_surcharge_percent: float | None = None
    extra_hour_rate: int | None = None
