"""Markdown report generation from an estimate report."""

from pathlib import Path
from ..contracts.report import Report
from ..presentation.planview import (
    SORT_BY_CO2,
    format_kg,
    format_water,
    sort_rows,
    unknown_impact_note,
)
from ..utils.errors import PlanImpactError
from ..utils.logging import get_logger

logger = get_logger("report.markdown")


def render_markdown(report: Report, sort_key: str = SORT_BY_CO2) -> str:
    """Render the report as a Markdown document (e.g., for a PR comment)."""
    totals = report.totals
    sections = []
    
    sections.append("# Environmental Footprint Estimate")
    sections.append("")
    
    sections.append("## Totals")
    sections.append("")
    sections.append(f"- **kgCO2e/month:** {format_kg(totals.kgco2e_month, totals.kgco2e_known)}")
    sections.append(f"- **m3 water/month:** {format_water(totals.m3_water_month, totals.m3_water_known)}")
    note = unknown_impact_note(totals.unknown_rows)
    if note:
        sections.append(f"- **Note:** {note}")
    sections.append("")
    
    sections.append("## Resources")
    sections.append("")
    if report.rows:
        sections.append("| Address | Action | kgCO2e/month | m3/month | SKU |")
        sections.append("|---|---|---:|---:|---|")
        for row in sort_rows(report.rows, sort_key):
            sections.append(
                f"| `{row.address}` | {row.action} "
                f"| {format_kg(row.kgco2e_month, row.kgco2e_known)} "
                f"| {format_water(row.m3_water_month, row.m3_water_known)} "
                f"| `{row.sku}` |"
            )
    else:
        sections.append("No estimated resources.")
    sections.append("")
    
    if report.unsupported:
        sections.append(f"## Unsupported Resources ({len(report.unsupported)})")
        sections.append("")
        for unsupported in report.unsupported:
            sections.append(f"- `{unsupported.address}` ({unsupported.code}): {unsupported.reason}")
        sections.append("")
    
    return "\n".join(sections)


def generate_markdown(report: Report, output_path: Path, sort_key: str = SORT_BY_CO2) -> None:
    """
    Write the Markdown report to a file.
    
    Raises:
        PlanImpactError: If file write fails
    """
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, 'w', encoding='utf-8') as f:
            f.write(render_markdown(report, sort_key))
        logger.info(f"Generated markdown report: {output_path}")
    except OSError as e:
        raise PlanImpactError(f"Failed to write markdown report: {e}") from e
