"""JSON rendering of an estimate report."""

import json
from ..contracts.report import Report


def render_json(report: Report) -> str:
    """Serialize the report contract as indented JSON."""
    return json.dumps(report.model_dump(mode="json"), indent=2)
