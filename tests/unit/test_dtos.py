"""Unit tests for the application DTOs."""

from __future__ import annotations

import pytest

from toterack.application import QuoteInput
from toterack.domain import DEFAULT_BOARD_PRICES, PRICE_TABLE, ContainerDims, Layout


class TestQuoteInput:
    """Tests for QuoteInput defaults."""

    def test_defaults_use_standard_prices(
        self, tote_27gal: ContainerDims, layout_3x3: Layout
    ) -> None:
        quote_input = QuoteInput(container=tote_27gal, layout=layout_3x3)

        assert quote_input.board_prices == DEFAULT_BOARD_PRICES
        assert quote_input.price_table == PRICE_TABLE
        assert quote_input.lumber_overrides == {}
        assert quote_input.price_override is None

    def test_instances_do_not_share_overrides(
        self, tote_27gal: ContainerDims, layout_3x3: Layout
    ) -> None:
        first = QuoteInput(container=tote_27gal, layout=layout_3x3)
        second = QuoteInput(container=tote_27gal, layout=layout_3x3)

        first.lumber_overrides["Runners"] = 120.0

        assert second.lumber_overrides == {}
        assert second.board_prices == first.board_prices

    def test_custom_prices_replace_defaults(
        self, tote_27gal: ContainerDims, layout_3x3: Layout
    ) -> None:
        prices = {96.0: 4.0, 192.0: 8.0}
        quote_input = QuoteInput(
            container=tote_27gal, layout=layout_3x3, board_prices=prices
        )
        assert quote_input.board_prices[192.0] == pytest.approx(8.0)
        assert DEFAULT_BOARD_PRICES[192.0] == pytest.approx(7.0)
