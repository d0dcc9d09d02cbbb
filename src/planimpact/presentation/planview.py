"""Presentation helpers shared by report renderers."""

from typing import List, Optional, Sequence
from ..contracts.report import Row

NA = "N/A"
SORT_BY_CO2 = "co2"
SORT_BY_WATER = "water"
SORT_KEYS = (SORT_BY_CO2, SORT_BY_WATER)


def format_kg(value: Optional[float], known: bool) -> str:
    """Format kgCO2e per month, N/A when unknown."""
    if not known or value is None:
        return NA
    return f"{value:.6f}"


def format_water(value: Optional[float], known: bool) -> str:
    """Format m3 of water per month, N/A when unknown."""
    if not known or value is None:
        return NA
    return f"{value:.6f}"


def unknown_impact_note(unknown_rows: int) -> str:
    """Note shown next to partial totals; empty when everything is known."""
    if unknown_rows <= 0:
        return ""
    return f"partial totals: {unknown_rows} row(s) have unknown footprint data"


def sort_rows(rows: Sequence[Row], key: str = SORT_BY_CO2) -> List[Row]:
    """
    Return rows sorted by descending impact, unknown values last.
    
    The sort is stable, so rows with equal values keep plan order. The key
    is case-insensitive; anything but "water" sorts by kgCO2e.
    """
    if (key or "").strip().lower() == SORT_BY_WATER:
        def metric(row: Row):
            return row.m3_water_month, row.m3_water_known
    else:
        def metric(row: Row):
            return row.kgco2e_month, row.kgco2e_known
    
    def sort_key(row: Row):
        value, known = metric(row)
        if not known or value is None:
            return (1, 0.0)
        return (0, -value)
    
    return sorted(rows, key=sort_key)
