"""Unit tests for configuration merging and conversion to quote input.

These tests verify:
- CLI args override config values when provided
- CLI args are ignored when None
- Lumber overrides from the CLI add to the configured ones
- The adapter converts feet to inches
"""

from __future__ import annotations

import pytest

from toterack.application.config import (
    ConfigError,
    QuoteConfiguration,
    config_to_quote_input,
    load_config_from_dict,
    merge_config_with_cli,
)
from toterack.domain import ContainerDims, Layout


@pytest.fixture
def base_config() -> QuoteConfiguration:
    """Create a base configuration for testing."""
    return load_config_from_dict(
        {
            "schema_version": "1.0",
            "container": {"length": 30.25, "width": 20.25, "height": 14.125},
            "layout": {"columns": 3, "rows": 3},
            "lumber": {"overrides": {"Vertical Posts": 12}},
            "custom_items": [{"name": "Stain", "quantity": 1, "unit_cost": 12}],
        }
    )


class TestMergeConfigWithCli:
    """Tests for merge_config_with_cli."""

    def test_no_overrides_returns_equivalent_config(
        self, base_config: QuoteConfiguration
    ) -> None:
        merged = merge_config_with_cli(base_config)
        assert merged.model_dump() == base_config.model_dump()

    def test_override_dimensions_and_layout(
        self, base_config: QuoteConfiguration
    ) -> None:
        merged = merge_config_with_cli(base_config, width=18.0, columns=4)

        assert merged.container.width == 18.0
        assert merged.layout.columns == 4
        # Other values unchanged
        assert merged.container.length == 30.25
        assert merged.layout.rows == 3

    def test_override_pricing(self, base_config: QuoteConfiguration) -> None:
        merged = merge_config_with_cli(
            base_config, price_override=250, material_override=0, delivery=30
        )
        assert merged.pricing.price_override == 250
        assert merged.pricing.material_override == 0
        assert merged.pricing.delivery == 30

    def test_addons(self, base_config: QuoteConfiguration) -> None:
        merged = merge_config_with_cli(base_config, wheels=True, plywood_top=False)
        assert merged.addons.wheels.enabled
        assert not merged.addons.plywood_top.enabled
        assert merged.addons.wheels.revenue == 40

    def test_lumber_overrides_are_added(self, base_config: QuoteConfiguration) -> None:
        merged = merge_config_with_cli(base_config, overrides={"Runners": 10})
        assert merged.lumber.overrides == {"Vertical Posts": 12, "Runners": 10}

    def test_lumber_override_replaces_same_label(
        self, base_config: QuoteConfiguration
    ) -> None:
        merged = merge_config_with_cli(base_config, overrides={"Vertical Posts": 16})
        assert merged.lumber.overrides == {"Vertical Posts": 16}

    def test_original_is_unchanged(self, base_config: QuoteConfiguration) -> None:
        merge_config_with_cli(base_config, columns=5, overrides={"Runners": 10})
        assert base_config.layout.columns == 3
        assert "Runners" not in base_config.lumber.overrides

    def test_invalid_cli_value(self, base_config: QuoteConfiguration) -> None:
        with pytest.raises(ConfigError) as exc_info:
            merge_config_with_cli(base_config, rows=0)
        assert exc_info.value.details[0]["path"] == "layout.rows"


class TestConfigToQuoteInput:
    """Tests for config_to_quote_input."""

    def test_dimensions_and_layout(self, base_config: QuoteConfiguration) -> None:
        quote_input = config_to_quote_input(base_config)
        assert quote_input.container == ContainerDims(30.25, 20.25, 14.125)
        assert quote_input.layout == Layout(3, 3)

    def test_lengths_converted_to_inches(self, base_config: QuoteConfiguration) -> None:
        quote_input = config_to_quote_input(base_config)

        assert quote_input.stock_lengths == (96, 120, 144, 192)
        assert quote_input.board_prices == {96: 3.75, 120: 4.75, 144: 5.5, 192: 7.0}
        assert quote_input.lumber_overrides == {"Vertical Posts": 144}

    def test_addons_and_custom_items(self, base_config: QuoteConfiguration) -> None:
        quote_input = config_to_quote_input(base_config)

        assert [a.name for a in quote_input.addons] == ["Wheels", "Plywood top"]
        assert not any(a.enabled for a in quote_input.addons)
        assert len(quote_input.custom_items) == 1
        assert quote_input.custom_items[0].total == 12

    def test_pricing(self, base_config: QuoteConfiguration) -> None:
        merged = merge_config_with_cli(base_config, price_override=300, delivery=20)
        quote_input = config_to_quote_input(merged)

        assert quote_input.price_override == 300
        assert quote_input.material_override is None
        assert quote_input.delivery == 20
        assert quote_input.hours_to_build == 3
        assert quote_input.consumables.builds_per_box == 5
