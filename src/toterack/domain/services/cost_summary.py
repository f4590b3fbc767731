"""Revenue, cost, and profit aggregation for a quote."""

from __future__ import annotations

from typing import Any, Iterable

from toterack.domain.coercion import to_count, to_number
from toterack.domain.constants import DEFAULT_CONSUMABLES
from toterack.domain.value_objects import (
    Addon,
    ConsumableSpec,
    CostSummary,
    CustomLineItem,
    LumberPlan,
    PriceEstimate,
)

__all__ = ["summarize_cost_profit"]


def summarize_cost_profit(
    plan: LumberPlan,
    estimate: PriceEstimate,
    consumables: ConsumableSpec = DEFAULT_CONSUMABLES,
    addons: Iterable[Addon] = (),
    custom_items: Iterable[CustomLineItem] = (),
    delivery: Any = 0,
    price_override: Any = None,
    material_override: Any = None,
) -> CostSummary:
    """Combine lumber, extras, and sale price into a profit figure.

    Args:
        plan: Lumber plan whose chosen options give the material cost.
        estimate: Suggested sale price.
        consumables: Screw box cost and how many builds one box covers.
        addons: Optional extras; only enabled ones count.
        custom_items: Extra purchases for this build.
        delivery: Delivery charge added to revenue.
        price_override: Sale price to use instead of the estimate, or None.
        material_override: Material cost to use instead of the lumber plan,
            or None.

    Returns:
        CostSummary with every intermediate figure.
    """
    if price_override is None:
        sale_price = estimate.price
    else:
        sale_price = to_number(price_override)

    if material_override is None:
        material_cost = plan.material_cost
    else:
        material_cost = to_number(material_override)

    consumable_cost = to_number(consumables.box_cost) / to_count(
        consumables.builds_per_box, minimum=1
    )

    enabled = [addon for addon in addons if addon.enabled]
    addon_cost = sum(to_number(addon.cost) for addon in enabled)
    addon_revenue = sum(to_number(addon.revenue) for addon in enabled)

    custom_items_cost = sum(
        to_number(item.quantity) * to_number(item.unit_cost) for item in custom_items
    )
    delivery_amount = to_number(delivery)

    total_revenue = sale_price + addon_revenue + delivery_amount
    total_cost = material_cost + consumable_cost + addon_cost + custom_items_cost

    return CostSummary(
        sale_price=sale_price,
        price_exact=estimate.exact,
        material_cost=material_cost,
        consumable_cost=consumable_cost,
        addon_cost=addon_cost,
        addon_revenue=addon_revenue,
        custom_items_cost=custom_items_cost,
        delivery=delivery_amount,
        total_revenue=total_revenue,
        total_cost=total_cost,
        profit=total_revenue - total_cost,
    )
