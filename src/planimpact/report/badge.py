"""Shields.io endpoint badge built from a JSON estimate report."""

import json
from pathlib import Path
from typing import Any, Dict, Optional, Union
from ..utils.errors import PlanImpactError
from ..utils.logging import get_logger

logger = get_logger("report.badge")

BADGE_LABEL = "impact estimate/month"
BADGE_CACHE_SECONDS = 3600
COLOR_OK = "2e7d32"
COLOR_UNAVAILABLE = "9e9e9e"


def format_badge_value(value: float) -> str:
    """Six significant digits, trailing zeros dropped (0.73 -> '0.73')."""
    return f"{value:.6g}"


def _total(totals: Dict[str, Any], key: str) -> float:
    value = totals.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0.0
    return float(value)


def build_badge(report_data: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Build Shields endpoint JSON from `plan --format json` output.
    
    Missing or null totals count as zero; a missing report yields the grey
    "estimate unavailable" badge.
    
    Args:
        report_data: Decoded JSON report, or None
        
    Returns:
        Badge dictionary (schemaVersion, label, message, color, cacheSeconds)
    """
    badge = {
        "schemaVersion": 1,
        "label": BADGE_LABEL,
        "message": "estimate unavailable",
        "color": COLOR_UNAVAILABLE,
        "cacheSeconds": BADGE_CACHE_SECONDS,
    }
    if report_data is None:
        return badge
    
    totals = report_data.get("totals")
    if not isinstance(totals, dict):
        totals = {}
    
    kg = format_badge_value(_total(totals, "kgco2e_month"))
    m3 = format_badge_value(_total(totals, "m3_water_month"))
    badge["message"] = f"~{kg} kgCO2e | ~{m3} m3"
    badge["color"] = COLOR_OK
    return badge


def read_report_json(input_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Read a JSON estimate report.
    
    Raises:
        PlanImpactError: If the file is missing or not a JSON object
    """
    try:
        with open(input_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except OSError as e:
        raise PlanImpactError(f"Could not read impact report: {e}") from e
    except json.JSONDecodeError as e:
        raise PlanImpactError(f"Could not read impact report: invalid JSON: {e}") from e
    
    if not isinstance(data, dict):
        raise PlanImpactError("Could not read impact report: expected a JSON object")
    return data


def write_badge(output_path: Union[str, Path], badge: Dict[str, Any]) -> None:
    """
    Write badge JSON, creating parent directories.
    
    Raises:
        PlanImpactError: If file write fails
    """
    path = Path(output_path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(json.dumps(badge, indent=2))
            f.write("\n")
    except OSError as e:
        raise PlanImpactError(f"Could not write badge: {e}") from e
    logger.info(f"Wrote badge to {path}")
