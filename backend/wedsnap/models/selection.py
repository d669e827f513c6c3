"""Buyer selections fed into the estimate engine.

Selections are untrusted input. Shape is checked here by pydantic; range
and catalog checks happen in the engine so they surface as
``InvalidSelection``.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from wedsnap.models.enums import ServiceType

DEFAULT_COVERAGE_HOURS = 8


class EstimateSelection(BaseModel):
    """What the buyer picked on the calculator page."""

    model_config = ConfigDict(frozen=True)

    service_type: ServiceType = ServiceType.PHOTOGRAPHY
    selected_package_id: str | None = None
    selected_feature_ids: frozenset[str] = Field(default_factory=frozenset)
    coverage_hours: int = DEFAULT_COVERAGE_HOURS
    express_delivery_requested: bool = False


class QuickEstimateSelection(BaseModel):
    """What the buyer ticked on a seller's embedded estimate widget."""

    model_config = ConfigDict(frozen=True)

    service_keys: frozenset[str] = Field(default_factory=frozenset)
    express_delivery_requested: bool = False
