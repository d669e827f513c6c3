"""Formatting helpers for estimate output.

Amounts are shown the way the calculator pages show them: a ``PKR`` prefix
with comma grouping and no decimals (e.g. 'PKR 39,600').
"""

from __future__ import annotations


def format_pkr(amount: int) -> str:
    """Format a whole-rupee amount as 'PKR 1,234,567'."""
    return f"PKR {amount:,}"


def format_percent(value: float) -> str:
    """Format a percentage, dropping a trailing '.0' (20.0 -> '20%')."""
    if float(value).is_integer():
        return f"{int(value)}%"
    return f"{value:g}%"


def format_hours(hours: int) -> str:
    return f"{hours} hour" if hours == 1 else f"{hours} hours"
