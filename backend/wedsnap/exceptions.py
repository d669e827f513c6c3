"""Exception hierarchy for the WedSnap estimate engine."""

from __future__ import annotations


class WedSnapError(Exception):
    """Base exception for all WedSnap errors."""


class InvalidSelection(WedSnapError, ValueError):
    """Raised when a selection or settings snapshot cannot be priced.

    ``reason`` is a stable code for API clients: ``unknown_package``,
    ``coverage_out_of_range`` or ``negative_price``.
    """

    UNKNOWN_PACKAGE = "unknown_package"
    COVERAGE_OUT_OF_RANGE = "coverage_out_of_range"
    NEGATIVE_PRICE = "negative_price"

    def __init__(self, reason: str, message: str) -> None:
        super().__init__(message)
        self.reason = reason
        self.message = message
