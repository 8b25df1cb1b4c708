"""Display helpers for play counts and chart dates."""

from __future__ import annotations

from typing import Optional

import pandas as pd

INVALID_DATE = "Invalid Date"


def format_streams(num: int) -> str:
    """Abbreviate a play count, e.g. ``2_340_000`` -> ``"2.34M"``.

    Thresholds are checked from the largest unit down, so exactly one billion
    renders as ``"1.00B"``.
    """

    if num >= 1_000_000_000:
        return f"{num / 1_000_000_000:.2f}B"
    if num >= 1_000_000:
        return f"{num / 1_000_000:.2f}M"
    if num >= 1_000:
        return f"{num / 1_000:.2f}K"
    return str(num)


def format_full_number(num: int) -> str:
    return f"{num:,}"


def format_date(value: Optional[str]) -> str:
    """Render a chart date as ``"January 5, 2024"``.

    Anything pandas cannot read as a timestamp yields ``"Invalid Date"``.
    """

    if not value:
        return INVALID_DATE
    try:
        parsed = pd.to_datetime(value, errors="coerce")
    except (TypeError, ValueError):
        return INVALID_DATE
    if pd.isna(parsed):
        return INVALID_DATE
    return f"{parsed.strftime('%B')} {parsed.day}, {parsed.year}"


__all__ = [
    "INVALID_DATE",
    "format_date",
    "format_full_number",
    "format_streams",
]
