"""Domain services for tote rack quoting.

This package provides the calculation engine:
- Geometry derivation and cut list generation
- Per-cut lumber purchase optimization
- Sale price lookup and extrapolation
- Revenue, cost, and profit aggregation
"""

from .cost_summary import summarize_cost_profit
from .geometry import derive_geometry, material_totals
from .lumber_optimizer import (
    build_options,
    optimize_lumber,
    pick_cheapest,
    tally_purchases,
)
from .price_estimator import estimate_price, round_price

__all__ = [
    "build_options",
    "derive_geometry",
    "estimate_price",
    "material_totals",
    "optimize_lumber",
    "pick_cheapest",
    "round_price",
    "summarize_cost_profit",
    "tally_purchases",
]
