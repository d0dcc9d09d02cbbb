from .report import Report, Row, Totals, UnsupportedResource

__all__ = [
    "Report",
    "Row",
    "Totals",
    "UnsupportedResource",
]
