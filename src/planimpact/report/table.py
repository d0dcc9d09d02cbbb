"""Plain-text table rendering of an estimate report."""

from typing import List
from ..contracts.report import Report
from ..presentation.planview import (
    SORT_BY_CO2,
    format_kg,
    format_water,
    sort_rows,
    unknown_impact_note,
)

HEADERS = ("ADDRESS", "ACTION", "KGCO2E/MO", "M3/MO", "SKU")


def render_table(report: Report, sort_key: str = SORT_BY_CO2) -> str:
    """
    Render totals, the row table and unsupported resources as text.
    
    Args:
        report: Estimate report
        sort_key: Row ordering ("co2" or "water")
        
    Returns:
        Multi-line string ready to print
    """
    totals = report.totals
    lines = [
        "Totals",
        f"  kgCO2e/month: {format_kg(totals.kgco2e_month, totals.kgco2e_known)}",
        f"  m3 water/month: {format_water(totals.m3_water_month, totals.m3_water_known)}",
    ]
    note = unknown_impact_note(totals.unknown_rows)
    if note:
        lines.append(f"  note: {note}")
    lines.append("")
    
    table = [list(HEADERS)]
    for row in sort_rows(report.rows, sort_key):
        table.append([
            row.address,
            row.action,
            format_kg(row.kgco2e_month, row.kgco2e_known),
            format_water(row.m3_water_month, row.m3_water_known),
            row.sku,
        ])
    lines.extend(_format_grid(table))
    
    if report.unsupported:
        lines.append("")
        lines.append(f"Unsupported resources ({len(report.unsupported)}):")
        for unsupported in report.unsupported:
            lines.append(f"  - {unsupported.address}: {unsupported.reason}")
    
    return "\n".join(lines)


def _format_grid(table: List[List[str]]) -> List[str]:
    """Lay out cells in left-aligned columns with a rule under the header."""
    widths = [max(len(r[i]) for r in table) for i in range(len(table[0]))]
    rule = "+" + "+".join("-" * (w + 2) for w in widths) + "+"
    
    def fmt(cells: List[str]) -> str:
        return "| " + " | ".join(c.ljust(w) for c, w in zip(cells, widths)) + " |"
    
    out = [rule, fmt(table[0]), rule]
    out.extend(fmt(cells) for cells in table[1:])
    out.append(rule)
    return out
