"""System default prices used when a seller has not configured their own.

All amounts are whole PKR.
"""

from __future__ import annotations

# Seller widget services -> default unit price.
DEFAULT_UNIT_PRICES: dict[str, int] = {
    "photography_coverage": 18_000,
    "videography_coverage": 25_000,
    "drone_footage": 8_000,
    "gimbal_stabilizer": 5_000,
    "basic_color_correction": 4_000,
    "advanced_editing_package": 7_000,
}

SERVICE_LABELS: dict[str, str] = {
    "photography_coverage": "Photography Coverage",
    "videography_coverage": "Videography Coverage",
    "drone_footage": "Drone Footage",
    "gimbal_stabilizer": "Gimbal/Stabilizer",
    "basic_color_correction": "Basic Color Correction",
    "advanced_editing_package": "Advanced Editing Package",
}

DEFAULT_EXPRESS_SURCHARGE_PERCENT: float = 20.0
DEFAULT_EXTRA_HOUR_RATE: int = 2_500

# Coverage hours are priced per hour above the included amount.
MIN_COVERAGE_HOURS = 4
MAX_COVERAGE_HOURS = 12
INCLUDED_COVERAGE_HOURS = 8
