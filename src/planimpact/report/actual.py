"""Rendering of measured footprint query results."""

import json
from datetime import datetime
from typing import Optional
from ..footprint.models import ImpactDataResponse
from ..utils.errors import PlanImpactError

ACTUAL_FORMATS = ("table", "json")


def _format_period_bound(value: Optional[datetime]) -> str:
    return value.isoformat() if value is not None else "-"


def render_actual_table(result: ImpactDataResponse) -> str:
    """Period, organization totals and one line per project."""
    total = result.total_impact
    lines = [
        f"Period: {_format_period_bound(result.start_date)} -> {_format_period_bound(result.end_date)}",
        f"Total kgCO2e/month: {total.kg_co2_equivalent:.6f}",
        f"Total m3 water/month: {total.m3_water_usage:.6f}",
        "",
    ]
    for project in result.projects:
        impact = project.total_project_impact
        lines.append(
            f"Project {project.project_id}: "
            f"kgCO2e={impact.kg_co2_equivalent:.6f} m3={impact.m3_water_usage:.6f}"
        )
    return "\n".join(lines)


def render_actual_json(result: ImpactDataResponse) -> str:
    """Full per-project/region/zone/SKU breakdown as indented JSON."""
    return json.dumps(result.model_dump(mode="json"), indent=2)


def render_actual(result: ImpactDataResponse, output_format: str = "table") -> str:
    """Render measured footprint in one of ACTUAL_FORMATS."""
    output_format = (output_format or "").strip().lower()
    if output_format == "table":
        return render_actual_table(result)
    if output_format == "json":
        return render_actual_json(result)
    raise PlanImpactError(
        f"Unsupported output format: {output_format!r} (use {', '.join(ACTUAL_FORMATS)})"
    )
