"""Application commands (use cases) for tote rack quoting."""

from __future__ import annotations

import logging

from toterack.domain import (
    Layout,
    LumberPlan,
    PriceEstimate,
    derive_geometry,
    estimate_price,
    material_totals,
    optimize_lumber,
    summarize_cost_profit,
)
from toterack.domain.coercion import to_number

from .dtos import QuoteInput, QuoteOutput

logger = logging.getLogger(__name__)


class GenerateQuoteCommand:
    """Command to compute a full quote from one input snapshot.

    Runs geometry, lumber optimization, price estimation, and the cost
    summary in order. Every step is pure, so executing twice with the same
    input gives the same output.
    """

    def execute(self, quote_input: QuoteInput) -> QuoteOutput:
        """Execute the quote command.

        Args:
            quote_input: Container, layout, pricing, and extras.

        Returns:
            QuoteOutput with geometry, cut list, lumber plan, price, and
            cost summary. Degraded results are reported in ``warnings``.
        """
        geometry, cuts = derive_geometry(quote_input.container, quote_input.layout)
        lumber = optimize_lumber(
            cuts,
            quote_input.stock_lengths,
            quote_input.board_prices,
            quote_input.lumber_overrides,
        )
        price = estimate_price(
            geometry.layout.columns, geometry.layout.rows, quote_input.price_table
        )
        summary = summarize_cost_profit(
            lumber,
            price,
            consumables=quote_input.consumables,
            addons=quote_input.addons,
            custom_items=quote_input.custom_items,
            delivery=quote_input.delivery,
            price_override=quote_input.price_override,
            material_override=quote_input.material_override,
        )

        warnings = self._collect_warnings(quote_input, geometry.layout, lumber, price)
        for warning in warnings:
            logger.info(warning)

        return QuoteOutput(
            geometry=geometry,
            cuts=cuts,
            totals=material_totals(cuts),
            lumber=lumber,
            price=price,
            summary=summary,
            hours_to_build=to_number(quote_input.hours_to_build),
            warnings=warnings,
        )

    def _collect_warnings(
        self,
        quote_input: QuoteInput,
        layout: Layout,
        lumber: LumberPlan,
        price: PriceEstimate,
    ) -> list[str]:
        warnings: list[str] = []
        if layout.columns < 1 or layout.rows < 1:
            warnings.append(
                f"Layout {layout.columns}x{layout.rows} has no bays; "
                "columns and rows must be at least 1"
            )
        for label in lumber.infeasible_cuts:
            warnings.append(
                f"{label} are longer than the longest stock board; "
                "board count assumes one piece per board and will not cover the cut"
            )
        for label, length in quote_input.lumber_overrides.items():
            choice = lumber.choice_for(label)
            if choice is not None and choice.chosen is not None and (
                choice.chosen.stock_length != to_number(length)
            ):
                warnings.append(
                    f"{label}: requested board length is not usable, "
                    "using the cheapest option"
                )
        if not price.exact and quote_input.price_override is None:
            warnings.append(
                f"Price for {layout.columns}x{layout.rows} is extrapolated "
                "from the price table"
            )
        return warnings
