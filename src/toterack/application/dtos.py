"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from toterack.domain import (
    DEFAULT_ADDONS,
    DEFAULT_BOARD_PRICES,
    DEFAULT_CONSUMABLES,
    PRICE_TABLE,
    STANDARD_STOCK_LENGTHS,
    Addon,
    ConsumableSpec,
    ContainerDims,
    CostSummary,
    CustomLineItem,
    CutSpec,
    Layout,
    LumberPlan,
    MaterialTotals,
    PriceEstimate,
    RackGeometry,
)
from toterack.domain.constants import DEFAULT_HOURS_TO_BUILD


@dataclass
class QuoteInput:
    """Snapshot of everything a quote is computed from.

    Owned by the caller and passed in whole on every recomputation.
    """

    container: ContainerDims
    layout: Layout
    stock_lengths: tuple[float, ...] = STANDARD_STOCK_LENGTHS
    board_prices: Mapping[float, float] = field(
        default_factory=lambda: DEFAULT_BOARD_PRICES
    )
    lumber_overrides: dict[str, float] = field(default_factory=dict)
    price_override: float | None = None
    material_override: float | None = None
    consumables: ConsumableSpec = DEFAULT_CONSUMABLES
    addons: tuple[Addon, ...] = DEFAULT_ADDONS
    custom_items: tuple[CustomLineItem, ...] = ()
    delivery: float = 0.0
    hours_to_build: float = DEFAULT_HOURS_TO_BUILD
    price_table: Mapping[int, Mapping[int, float]] = field(
        default_factory=lambda: PRICE_TABLE
    )


@dataclass
class QuoteOutput:
    """Output DTO for a complete quote."""

    geometry: RackGeometry
    cuts: list[CutSpec]
    totals: MaterialTotals
    lumber: LumberPlan
    price: PriceEstimate
    summary: CostSummary
    hours_to_build: float = DEFAULT_HOURS_TO_BUILD
    warnings: list[str] = field(default_factory=list)

    @property
    def hourly_rate(self) -> float | None:
        """Profit per hour of labor, None when there is no profit."""
        return self.summary.hourly_rate(self.hours_to_build)
