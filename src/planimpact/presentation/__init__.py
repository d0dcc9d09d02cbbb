"""Presentation layer - formatting helpers for report output."""

from .planview import format_kg, format_water, unknown_impact_note, sort_rows, SORT_KEYS

__all__ = ["format_kg", "format_water", "unknown_impact_note", "sort_rows", "SORT_KEYS"]
