"""Report rendering - read-only output surfaces for estimate reports."""

from .table import render_table
from .json_report import render_json
from .markdown import render_markdown, generate_markdown
from .actual import ACTUAL_FORMATS, render_actual
from .badge import build_badge, read_report_json, write_badge
from ..utils.errors import PlanImpactError

FORMATS = ("table", "json", "markdown")


def render(report, output_format: str = "table", sort_key: str = "co2") -> str:
    """Render a report in one of FORMATS."""
    output_format = (output_format or "").strip().lower()
    if output_format == "table":
        return render_table(report, sort_key)
    if output_format == "json":
        return render_json(report)
    if output_format == "markdown":
        return render_markdown(report, sort_key)
    raise PlanImpactError(f"Unsupported output format: {output_format!r} (use {', '.join(FORMATS)})")


__all__ = [
    "FORMATS",
    "render",
    "render_table",
    "render_json",
    "render_markdown",
    "generate_markdown",
    "ACTUAL_FORMATS",
    "render_actual",
    "build_badge",
    "read_report_json",
    "write_badge",
]
