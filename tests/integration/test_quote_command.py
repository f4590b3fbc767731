"""Integration tests for GenerateQuoteCommand.

These tests run the whole engine from a QuoteInput: geometry, lumber,
price, and the cost summary, plus the warnings attached to degraded
results.
"""

from __future__ import annotations

import json

import pytest

from toterack.application import GenerateQuoteCommand, QuoteInput
from toterack.application.config import config_to_quote_input, load_config_from_dict
from toterack.application.templates import TemplateManager
from toterack.domain import Addon, ContainerDims, Layout


class TestGenerateQuoteCommand:
    """Tests for the reference 3x3 rack."""

    def test_full_quote(
        self, quote_command: GenerateQuoteCommand, quote_input_3x3: QuoteInput
    ) -> None:
        output = quote_command.execute(quote_input_3x3)

        assert output.geometry.total_width == pytest.approx(67.875)
        assert len(output.cuts) == 4
        assert output.totals.piece_count == 30
        assert output.lumber.material_cost == pytest.approx(51.0)
        assert output.price.price == 200
        assert output.summary.profit == pytest.approx(139.0)
        assert output.hourly_rate == pytest.approx(139.0 / 3)
        assert output.warnings == []

    def test_idempotent(
        self, quote_command: GenerateQuoteCommand, quote_input_3x3: QuoteInput
    ) -> None:
        """Executing twice with the same input gives the same output."""
        assert quote_command.execute(quote_input_3x3) == quote_command.execute(
            quote_input_3x3
        )

    def test_lumber_override(
        self, quote_command: GenerateQuoteCommand, quote_input_3x3: QuoteInput
    ) -> None:
        quote_input_3x3.lumber_overrides = {"Runners": 120.0}
        output = quote_command.execute(quote_input_3x3)

        assert output.lumber.choice_for("Runners").is_override
        assert output.summary.material_cost == pytest.approx(58.5)
        assert output.warnings == []

    def test_unusable_override_warns(
        self, quote_command: GenerateQuoteCommand, quote_input_3x3: QuoteInput
    ) -> None:
        quote_input_3x3.lumber_overrides = {"Runners": 100.0}
        output = quote_command.execute(quote_input_3x3)

        assert output.summary.material_cost == pytest.approx(51.0)
        assert output.warnings == [
            "Runners: requested board length is not usable, using the cheapest option"
        ]

    def test_addons_and_delivery(
        self, quote_command: GenerateQuoteCommand, quote_input_3x3: QuoteInput
    ) -> None:
        quote_input_3x3.addons = (Addon("Wheels", revenue=40, cost=40, enabled=True),)
        quote_input_3x3.delivery = 25
        output = quote_command.execute(quote_input_3x3)

        assert output.summary.total_revenue == pytest.approx(265.0)
        assert output.summary.profit == pytest.approx(139.0 + 25)

    def test_price_override_silences_extrapolation_warning(
        self, quote_command: GenerateQuoteCommand, tote_27gal: ContainerDims
    ) -> None:
        quote_input = QuoteInput(
            container=tote_27gal, layout=Layout(6, 3), price_override=320
        )
        output = quote_command.execute(quote_input)

        assert output.summary.sale_price == 320
        assert output.warnings == []


class TestDegradedQuotes:
    """Tests for quotes that still compute but carry warnings."""

    def test_extrapolated_price(
        self, quote_command: GenerateQuoteCommand, tote_27gal: ContainerDims
    ) -> None:
        output = quote_command.execute(QuoteInput(container=tote_27gal, layout=Layout(6, 3)))

        assert output.price.price == 310
        assert not output.price.exact
        assert output.warnings == ["Price for 6x3 is extrapolated from the price table"]

    def test_no_bays(
        self, quote_command: GenerateQuoteCommand, tote_27gal: ContainerDims
    ) -> None:
        output = quote_command.execute(QuoteInput(container=tote_27gal, layout=Layout(0, 3)))

        assert output.cuts[3].quantity == 0
        assert output.warnings[0].startswith("Layout 0x3 has no bays")

    def test_cut_longer_than_stock(
        self, quote_command: GenerateQuoteCommand, tote_27gal: ContainerDims
    ) -> None:
        output = quote_command.execute(
            QuoteInput(container=tote_27gal, layout=Layout(9, 2), price_override=500)
        )

        assert output.lumber.infeasible_cuts == (
            "Front Horizontal Rails",
            "Back Horizontal Rails",
        )
        assert len(output.warnings) == 2
        assert all("longer than the longest stock board" in w for w in output.warnings)

    def test_garbage_input_still_quotes(self, quote_command: GenerateQuoteCommand) -> None:
        output = quote_command.execute(
            QuoteInput(
                container=ContainerDims(length="", width="abc", height=None),
                layout=Layout(columns="2", rows="2"),
            )
        )
        assert output.price.price == 100
        assert output.geometry.runner_length == 1.0


class TestTemplateQuotes:
    """Tests quoting the bundled templates end to end."""

    def test_wheels_template(self, quote_command: GenerateQuoteCommand) -> None:
        content = TemplateManager().get_template("tote-rack-5x4-wheels")
        config = load_config_from_dict(json.loads(content))
        output = quote_command.execute(config_to_quote_input(config))

        assert output.price.price == 300
        assert output.summary.material_cost == pytest.approx(101.0)
        assert output.summary.addon_revenue == 140
        assert output.summary.addon_cost == 80
        assert output.summary.total_revenue == pytest.approx(465.0)
        assert output.summary.total_cost == pytest.approx(191.0)
        assert output.summary.profit == pytest.approx(274.0)
        assert output.hourly_rate == pytest.approx(274.0 / 5)
