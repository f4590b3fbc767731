"""Price and cost value objects."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PriceEstimate:
    """Suggested sale price for a layout.

    Attributes:
        price: Price in dollars, a multiple of 5 and never below 20.
        exact: True when the layout is inside the price table and no
            extrapolation or single-row adjustment was applied.
    """

    price: float
    exact: bool


@dataclass(frozen=True)
class ConsumableSpec:
    """A box of screws shared across several builds."""

    box_cost: float = 50.0
    builds_per_box: int = 5


@dataclass(frozen=True)
class Addon:
    """Optional extra sold with the rack.

    Attributes:
        name: Display name.
        revenue: Amount charged to the customer.
        cost: Amount spent on materials for the extra.
        enabled: Whether the customer asked for it.
    """

    name: str
    revenue: float
    cost: float
    enabled: bool = False


@dataclass(frozen=True)
class CustomLineItem:
    """Arbitrary extra purchase for a build."""

    name: str
    quantity: float
    unit_cost: float

    @property
    def total(self) -> float:
        return self.quantity * self.unit_cost


@dataclass(frozen=True)
class CostSummary:
    """Revenue, cost, and profit for a single build."""

    sale_price: float
    price_exact: bool
    material_cost: float
    consumable_cost: float
    addon_cost: float
    addon_revenue: float
    custom_items_cost: float
    delivery: float
    total_revenue: float
    total_cost: float
    profit: float

    @property
    def margin_percent(self) -> float:
        """Profit as a share of revenue, clamped to [0, 100]."""
        if self.total_revenue <= 0:
            return 0.0
        pct = self.profit / self.total_revenue * 100
        return max(0.0, min(100.0, pct))

    def hourly_rate(self, hours: float) -> float | None:
        """Effective pay per hour of labor, None when not meaningful."""
        if self.profit <= 0 or hours <= 0:
            return None
        return self.profit / hours
