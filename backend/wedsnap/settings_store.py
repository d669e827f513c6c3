"""In-memory seller settings store backing the HTTP API.

Stands in for the marketplace backend that owns settings persistence: the
first fetch for a seller creates a record with the system defaults, and the
record changes only through an explicit seller update.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from wedsnap.data.defaults import (
    DEFAULT_EXPRESS_SURCHARGE_PERCENT,
    DEFAULT_EXTRA_HOUR_RATE,
    DEFAULT_UNIT_PRICES,
)
from wedsnap.engine import validate_settings
from wedsnap.models.settings import SellerEstimateSettings

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)


def default_seller_settings() -> SellerEstimateSettings:
    """Settings record a seller starts with."""
    return SellerEstimateSettings(
        unit_prices=dict(DEFAULT_UNIT_PRICES),
        express_delivery_surcharge_percent=DEFAULT_EXPRESS_SURCHARGE_PERCENT,
        extra_hour_rate=DEFAULT_EXTRA_HOUR_RATE,
    )


class SellerSettingsStore:
    """Thread-safe mapping of seller id -> SellerEstimateSettings."""

    def __init__(self) -> None:
        self._settings: dict[str, SellerEstimateSettings] = {}
        self._lock = threading.Lock()

    def get(self, seller_id: str) -> SellerEstimateSettings:
        """Return the seller's settings, creating the defaults on first fetch."""
        with self._lock:
            current = self._settings.get(seller_id)
            if current is None:
                current = default_seller_settings()
                self._settings[seller_id] = current
                logger.info("Created default estimate settings for seller %s", seller_id)
            return current

    def peek(self, seller_id: str) -> SellerEstimateSettings | None:
        """Return the stored settings without creating them."""
        with self._lock:
            return self._settings.get(seller_id)

    def update(
        self,
        seller_id: str,
        unit_prices: Mapping[str, int] | None = None,
        express_delivery_surcharge_percent: float | None = None,
        extra_hour_rate: int | None = None,
    ) -> SellerEstimateSettings:
        """Merge an explicit seller update into the stored settings.

        Fields left as None keep their current value. Unit prices are merged
        key by key.

        Raises:
            InvalidSelection: If the merged settings contain a negative value.
                The stored record is left unchanged.
        """
        with self._lock:
            current = self._settings.get(seller_id) or default_seller_settings()
            merged_prices = dict(current.unit_prices)
            if unit_prices:
                merged_prices.update(unit_prices)

            updated = SellerEstimateSettings(
                unit_prices=merged_prices,
                express_delivery_surcharge_percent=(
                    express_delivery_surcharge_percent
                    if express_delivery_surcharge_percent is not None
                    else current.express_delivery_surcharge_percent
                ),
                extra_hour_rate=(
                    extra_hour_rate if extra_hour_rate is not None else current.extra_hour_rate
                ),
            )
            validate_settings(updated)
            self._settings[seller_id] = updated

        logger.info(
            "Updated estimate settings for seller %s (%d price keys)",
            seller_id,
            len(unit_prices or {}),
        )
        return updated

    def reset(self, seller_id: str) -> SellerEstimateSettings:
        """Restore the system defaults for a seller."""
        defaults = default_seller_settings()
        with self._lock:
            self._settings[seller_id] = defaults
        logger.info("Reset estimate settings for seller %s", seller_id)
        return defaults
