"""Infrastructure layer - report formatting and export."""

from .formatters import (
    CostSummaryFormatter,
    CutListFormatter,
    GeometryFormatter,
    JsonExporter,
    LumberPlanFormatter,
    QuoteReportFormatter,
    format_feet,
    format_feet_inches,
    format_inches,
    format_money,
)

__all__ = [
    "CostSummaryFormatter",
    "CutListFormatter",
    "GeometryFormatter",
    "JsonExporter",
    "LumberPlanFormatter",
    "QuoteReportFormatter",
    "format_feet",
    "format_feet_inches",
    "format_inches",
    "format_money",
]
