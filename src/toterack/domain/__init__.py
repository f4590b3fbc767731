"""Domain layer - the quoting engine."""

from .constants import (
    DEFAULT_ADDONS,
    DEFAULT_BOARD_PRICES,
    DEFAULT_CONSUMABLES,
    PRICE_TABLE,
    STANDARD_STOCK_LENGTHS,
    STOCK_CONSTANTS,
)
from .services import (
    derive_geometry,
    estimate_price,
    material_totals,
    optimize_lumber,
    summarize_cost_profit,
)
from .value_objects import (
    Addon,
    ConsumableSpec,
    ContainerDims,
    CostSummary,
    CustomLineItem,
    CutSpec,
    Layout,
    LumberChoice,
    LumberOption,
    LumberPlan,
    MaterialTotals,
    PieceType,
    PriceEstimate,
    PurchaseTally,
    RackGeometry,
    StockConstants,
)

__all__ = [
    "Addon",
    "ConsumableSpec",
    "ContainerDims",
    "CostSummary",
    "CustomLineItem",
    "CutSpec",
    "DEFAULT_ADDONS",
    "DEFAULT_BOARD_PRICES",
    "DEFAULT_CONSUMABLES",
    "Layout",
    "LumberChoice",
    "LumberOption",
    "LumberPlan",
    "MaterialTotals",
    "PRICE_TABLE",
    "PieceType",
    "PriceEstimate",
    "PurchaseTally",
    "RackGeometry",
    "STANDARD_STOCK_LENGTHS",
    "STOCK_CONSTANTS",
    "StockConstants",
    "derive_geometry",
    "estimate_price",
    "material_totals",
    "optimize_lumber",
    "summarize_cost_profit",
]
