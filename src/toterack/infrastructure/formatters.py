"""Output formatters and exporters for tote rack quotes."""

from __future__ import annotations

import json
import math
from typing import Any

from toterack.application.dtos import QuoteOutput
from toterack.domain import (
    CostSummary,
    CutSpec,
    LumberChoice,
    LumberPlan,
    MaterialTotals,
    PriceEstimate,
    RackGeometry,
)

# Fractions tried when printing inches, in order of preference
_FRACTIONS: tuple[tuple[int, int], ...] = (
    (1, 2),
    (1, 4),
    (3, 4),
    (1, 8),
    (3, 8),
    (5, 8),
    (7, 8),
    (1, 16),
    (3, 16),
    (5, 16),
    (7, 16),
    (9, 16),
    (11, 16),
    (13, 16),
    (15, 16),
)
_FRACTION_TOLERANCE = 0.02


def _is_number(value: Any) -> bool:
    return (
        isinstance(value, (int, float))
        and not isinstance(value, bool)
        and math.isfinite(value)
    )


def format_inches(value: Any) -> str:
    """Format inches as a mixed fraction to the nearest 1/16.

    Examples:
        >>> format_inches(30.5)
        '30 1/2"'
        >>> format_inches(0.375)
        '3/8"'
        >>> format_inches(12.1)
        '12.10"'
        >>> format_inches(14.01)
        '14.01"'
    """
    if not _is_number(value):
        return '–"'
    whole = math.floor(value)
    frac = value - whole
    if math.isclose(frac, 0.0, abs_tol=1e-9):
        return f'{whole}"'
    best: str | None = None
    best_dist = _FRACTION_TOLERANCE
    for num, den in _FRACTIONS:
        dist = abs(frac - num / den)
        if dist < best_dist:
            best_dist = dist
            best = f"{num}/{den}"
    if best:
        return f'{whole} {best}"' if whole > 0 else f'{best}"'
    return f'{value:.2f}"'


def format_feet_inches(value: Any) -> str:
    """Format inches as feet and inches.

    Examples:
        >>> format_feet_inches(54.375)
        '4\\' 6 3/8"'
        >>> format_feet_inches(96)
        "8'"
    """
    if not _is_number(value):
        return "–"
    feet = math.floor(value / 12)
    rem = value % 12
    if rem < 0.1:
        return f"{feet}'"
    return f"{feet}' {format_inches(rem)}"


def format_money(value: Any) -> str:
    """Format dollars rounded to whole units with thousands separators."""
    amount = math.floor(value + 0.5) if _is_number(value) else 0
    return f"${amount:,}"


def format_feet(stock_length: float) -> str:
    """Board length in inches as whole feet, e.g. 120 -> 10'."""
    return f"{stock_length / 12:g}'"


class GeometryFormatter:
    """Formats overall rack dimensions."""

    def format(self, geometry: RackGeometry) -> str:
        layout = geometry.layout
        lines = [
            f"RACK {layout.columns} x {layout.rows} ({layout.bay_count} totes)",
            "=" * 50,
            f"{'Overall width':<22} {format_inches(geometry.total_width):<14} "
            f"{format_feet_inches(geometry.total_width)}",
            f"{'Overall height':<22} {format_inches(geometry.total_height):<14} "
            f"{format_feet_inches(geometry.total_height)}",
            f"{'Overall depth':<22} {format_inches(geometry.rack_depth):<14} "
            f"{format_feet_inches(geometry.rack_depth)}",
            f"{'Bay width':<22} {format_inches(geometry.bay_width)}",
            f"{'Bay height':<22} {format_inches(geometry.bay_height)}",
            f"{'Runner length':<22} {format_inches(geometry.runner_length)}",
        ]
        return "\n".join(lines)


class CutListFormatter:
    """Formats the cut list as a table."""

    def format(self, cuts: list[CutSpec], totals: MaterialTotals | None = None) -> str:
        if not cuts:
            return "No pieces in cut list."

        lines = [
            "CUT LIST",
            "=" * 78,
            f"{'Piece':<24} {'Qty':<5} {'Length':<12} {'Notes'}",
            "-" * 78,
        ]
        for cut in cuts:
            lines.append(
                f"{cut.label:<24} {cut.quantity:<5} {format_inches(cut.length):<12} "
                f"{cut.note}"
            )
            lines.append(f"{'':<24} {cut.description}")

        if totals is not None:
            lines.append("-" * 78)
            lines.append(
                f"{'TOTAL':<24} {totals.piece_count:<5} "
                f"{totals.total_linear_feet:.1f} lin ft / "
                f"~{totals.board_feet:.1f} bd ft"
            )
        return "\n".join(lines)


class LumberPlanFormatter:
    """Formats per-cut board options and the purchase tally."""

    def format(self, plan: LumberPlan) -> str:
        lines = ["LUMBER PLAN", "=" * 78]
        for choice in plan.choices:
            lines.extend(self._format_choice(choice))
            lines.append("")

        lines.append("ORDER SUMMARY (2x4)")
        lines.append("-" * 78)
        for line in plan.tally.lines:
            lines.append(f"  {line.boards:>3} x {format_feet(line.stock_length)} boards")
        lines.append(f"  {plan.tally.total_boards:>3} boards total")
        lines.append(f"  Estimated lumber cost: {format_money(plan.material_cost)}")
        return "\n".join(lines)

    def _format_choice(self, choice: LumberChoice) -> list[str]:
        cut = choice.cut
        lines = [f"{cut.label}: {cut.quantity} @ {format_inches(cut.length)}"]
        if not choice.options:
            lines.append("  No stock lengths available")
            return lines
        for option in choice.options:
            markers = []
            if option == choice.chosen:
                markers.append("chosen")
            if option == choice.cheapest:
                markers.append("cheapest")
            if not option.covers_cut:
                markers.append("TOO SHORT")
            marker = f" <- {', '.join(markers)}" if markers else ""
            lines.append(
                f"  {format_feet(option.stock_length):>4} board: "
                f"{option.pieces_per_board}/board, {option.boards_needed} boards "
                f"@ ${option.price_per_board:.2f} = ${option.total_cost:.2f}{marker}"
            )
        return lines


class CostSummaryFormatter:
    """Formats price, costs, and profit."""

    def format(
        self,
        summary: CostSummary,
        hours_to_build: float | None = None,
    ) -> str:
        price_note = "" if summary.price_exact else " (extrapolated)"
        lines = [
            "PRICE & PROFIT",
            "=" * 50,
            f"{'Rack price':<26} {format_money(summary.sale_price)}{price_note}",
            f"{'Add-ons':<26} {format_money(summary.addon_revenue)}",
            f"{'Delivery':<26} {format_money(summary.delivery)}",
            f"{'Total to customer':<26} {format_money(summary.total_revenue)}",
            "-" * 50,
            f"{'Lumber':<26} {format_money(summary.material_cost)}",
            f"{'Screws (per build)':<26} {format_money(summary.consumable_cost)}",
            f"{'Add-on parts':<26} {format_money(summary.addon_cost)}",
            f"{'Custom items':<26} {format_money(summary.custom_items_cost)}",
            f"{'Total cost':<26} {format_money(summary.total_cost)}",
            "-" * 50,
            f"{'Profit':<26} {format_money(summary.profit)}",
            f"{'Margin':<26} {summary.margin_percent:.1f}%",
        ]
        if hours_to_build is not None:
            rate = summary.hourly_rate(hours_to_build)
            if rate is not None:
                lines.append(
                    f"{'Hourly rate':<26} {format_money(rate)}/hr "
                    f"over {hours_to_build:g}h"
                )
        return "\n".join(lines)


class QuoteReportFormatter:
    """Formats a complete quote report."""

    def format(self, output: QuoteOutput) -> str:
        sections = [
            GeometryFormatter().format(output.geometry),
            CutListFormatter().format(output.cuts, output.totals),
            LumberPlanFormatter().format(output.lumber),
            CostSummaryFormatter().format(output.summary, output.hours_to_build),
        ]
        if output.warnings:
            sections.append(
                "WARNINGS\n" + "\n".join(f"  - {w}" for w in output.warnings)
            )
        return "\n\n".join(sections)


class JsonExporter:
    """Exports quote data as JSON."""

    def export(self, output: QuoteOutput) -> str:
        """Export a quote as a JSON string."""
        return json.dumps(self.to_dict(output), indent=2)

    def to_dict(self, output: QuoteOutput) -> dict[str, Any]:
        geometry = output.geometry
        return {
            "geometry": {
                "columns": geometry.layout.columns,
                "rows": geometry.layout.rows,
                "bay_width": geometry.bay_width,
                "bay_height": geometry.bay_height,
                "rack_depth": geometry.rack_depth,
                "total_width": geometry.total_width,
                "total_height": geometry.total_height,
                "runner_length": geometry.runner_length,
            },
            "cut_list": [self._format_cut(cut) for cut in output.cuts],
            "totals": {
                "total_linear_feet": output.totals.total_linear_feet,
                "board_feet": output.totals.board_feet,
                "piece_count": output.totals.piece_count,
            },
            "lumber": {
                "choices": [self._format_choice(c) for c in output.lumber.choices],
                "tally": [
                    {"stock_length": line.stock_length, "boards": line.boards}
                    for line in output.lumber.tally.lines
                ],
                "total_boards": output.lumber.tally.total_boards,
                "material_cost": output.lumber.material_cost,
            },
            "price": self._format_price(output.price),
            "summary": self._format_summary(output.summary),
            "hourly_rate": output.hourly_rate,
            "warnings": output.warnings,
        }

    def _format_cut(self, cut: CutSpec) -> dict[str, Any]:
        return {
            "piece_type": cut.piece_type.value,
            "label": cut.label,
            "description": cut.description,
            "quantity": cut.quantity,
            "length": cut.length,
            "note": cut.note,
        }

    def _format_choice(self, choice: LumberChoice) -> dict[str, Any]:
        def option_dict(option: Any) -> dict[str, Any] | None:
            if option is None:
                return None
            return {
                "stock_length": option.stock_length,
                "pieces_per_board": option.pieces_per_board,
                "boards_needed": option.boards_needed,
                "price_per_board": option.price_per_board,
                "total_cost": option.total_cost,
                "covers_cut": option.covers_cut,
            }

        return {
            "label": choice.cut.label,
            "options": [option_dict(o) for o in choice.options],
            "cheapest": option_dict(choice.cheapest),
            "chosen": option_dict(choice.chosen),
            "is_override": choice.is_override,
        }

    def _format_price(self, price: PriceEstimate) -> dict[str, Any]:
        return {"price": price.price, "exact": price.exact}

    def _format_summary(self, summary: CostSummary) -> dict[str, Any]:
        return {
            "sale_price": summary.sale_price,
            "material_cost": summary.material_cost,
            "consumable_cost": summary.consumable_cost,
            "addon_cost": summary.addon_cost,
            "addon_revenue": summary.addon_revenue,
            "custom_items_cost": summary.custom_items_cost,
            "delivery": summary.delivery,
            "total_revenue": summary.total_revenue,
            "total_cost": summary.total_cost,
            "profit": summary.profit,
            "margin_percent": summary.margin_percent,
        }
