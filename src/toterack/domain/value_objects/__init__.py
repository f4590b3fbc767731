"""Value objects for the tote rack domain.

All classes are immutable and re-exported from sub-modules for convenience.
"""

from __future__ import annotations

# Geometry and cut list
from ._geometry import (
    ContainerDims,
    CutSpec,
    Layout,
    MaterialTotals,
    PieceType,
    RackGeometry,
    StockConstants,
)

# Lumber purchasing
from ._lumber import (
    LumberChoice,
    LumberOption,
    LumberPlan,
    PurchaseTally,
    TallyLine,
)

# Pricing and costs
from ._pricing import (
    Addon,
    ConsumableSpec,
    CostSummary,
    CustomLineItem,
    PriceEstimate,
)

__all__ = [
    "Addon",
    "ConsumableSpec",
    "ContainerDims",
    "CostSummary",
    "CustomLineItem",
    "CutSpec",
    "Layout",
    "LumberChoice",
    "LumberOption",
    "LumberPlan",
    "MaterialTotals",
    "PieceType",
    "PriceEstimate",
    "PurchaseTally",
    "RackGeometry",
    "StockConstants",
    "TallyLine",
]
