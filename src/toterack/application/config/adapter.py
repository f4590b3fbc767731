"""Conversion from validated configuration to quote input DTOs."""

from toterack.application.config.schema import AddonConfig, QuoteConfiguration
from toterack.application.dtos import QuoteInput
from toterack.domain import (
    Addon,
    ConsumableSpec,
    ContainerDims,
    CustomLineItem,
    Layout,
)
from toterack.domain.constants import PLYWOOD_TOP_ADDON, WHEELS_ADDON


def feet_to_inches(feet: float) -> float:
    return feet * 12


def _addon(name: str, config: AddonConfig) -> Addon:
    return Addon(
        name=name, revenue=config.revenue, cost=config.cost, enabled=config.enabled
    )


def config_to_quote_input(config: QuoteConfiguration) -> QuoteInput:
    """Convert a QuoteConfiguration into a QuoteInput.

    Board lengths, board price keys, and lumber overrides are converted from
    feet to inches.

    Args:
        config: A validated QuoteConfiguration instance.

    Returns:
        QuoteInput ready for GenerateQuoteCommand.
    """
    lumber = config.lumber
    return QuoteInput(
        container=ContainerDims(
            length=config.container.length,
            width=config.container.width,
            height=config.container.height,
        ),
        layout=Layout(columns=config.layout.columns, rows=config.layout.rows),
        stock_lengths=tuple(feet_to_inches(ft) for ft in lumber.stock_lengths),
        board_prices={
            feet_to_inches(ft): price for ft, price in lumber.board_prices.items()
        },
        lumber_overrides={
            label: feet_to_inches(ft) for label, ft in lumber.overrides.items()
        },
        price_override=config.pricing.price_override,
        material_override=config.pricing.material_override,
        consumables=ConsumableSpec(
            box_cost=config.consumables.box_cost,
            builds_per_box=config.consumables.builds_per_box,
        ),
        addons=(
            _addon(WHEELS_ADDON.name, config.addons.wheels),
            _addon(PLYWOOD_TOP_ADDON.name, config.addons.plywood_top),
        ),
        custom_items=tuple(
            CustomLineItem(name=item.name, quantity=item.quantity, unit_cost=item.unit_cost)
            for item in config.custom_items
        ),
        delivery=config.pricing.delivery,
        hours_to_build=config.pricing.hours_to_build,
    )
