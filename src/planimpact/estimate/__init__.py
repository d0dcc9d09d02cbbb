"""Footprint estimation from resolved resource changes."""

from .estimator import build_report, row_from_match, summarize_rows, unit_to_month_multiplier, MONTHLY_HOURS
from .transitions import ActionTransition, action_transitions

__all__ = [
    "build_report",
    "row_from_match",
    "summarize_rows",
    "unit_to_month_multiplier",
    "MONTHLY_HOURS",
    "ActionTransition",
    "action_transitions",
]
