"""Fixed reference data for tote rack quoting.

This module provides:
- Physical stock constants (2x4 dimensions and tote clearances)
- Standard purchasable board lengths and their default prices
- The base sale price table keyed by columns and rows
- Default add-ons and consumables
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from toterack.domain.value_objects import Addon, ConsumableSpec, StockConstants

STOCK_CONSTANTS = StockConstants()

# Standard board lengths in inches (8, 10, 12 and 16 ft)
STANDARD_STOCK_LENGTHS: tuple[float, ...] = (96.0, 120.0, 144.0, 192.0)

# Price per board keyed by length in inches
DEFAULT_BOARD_PRICES: Mapping[float, float] = MappingProxyType(
    {
        96.0: 3.75,
        120.0: 4.75,
        144.0: 5.50,
        192.0: 7.00,
    }
)

# Base sale price in dollars
# Key: columns (1-5) -> rows (2-5)
PRICE_TABLE: Mapping[int, Mapping[int, float]] = MappingProxyType(
    {
        1: MappingProxyType({2: 60, 3: 100, 4: 110, 5: 140}),
        2: MappingProxyType({2: 100, 3: 150, 4: 180, 5: 210}),
        3: MappingProxyType({2: 150, 3: 200, 4: 230, 5: 270}),
        4: MappingProxyType({2: 180, 3: 230, 4: 280, 5: 300}),
        5: MappingProxyType({2: 210, 3: 270, 4: 300, 5: 340}),
    }
)

PRICE_TABLE_MIN_COLUMNS = 1
PRICE_TABLE_MAX_COLUMNS = 5
PRICE_TABLE_MIN_ROWS = 2
PRICE_TABLE_MAX_ROWS = 5

# Sale prices are rounded to this step and never drop below the floor
PRICE_ROUNDING_STEP = 5
MINIMUM_PRICE = 20

DEFAULT_CONSUMABLES = ConsumableSpec(box_cost=50.0, builds_per_box=5)

# Add-on revenue is fixed; cost is what the builder pays for parts
WHEELS_ADDON = Addon(name="Wheels", revenue=40.0, cost=40.0)
PLYWOOD_TOP_ADDON = Addon(name="Plywood top", revenue=100.0, cost=40.0)
DEFAULT_ADDONS: tuple[Addon, ...] = (WHEELS_ADDON, PLYWOOD_TOP_ADDON)

DEFAULT_HOURS_TO_BUILD = 3.0

# Nominal 2x4 cross-section used for board-foot estimates
NOMINAL_THICKNESS = 2
NOMINAL_WIDTH = 4
