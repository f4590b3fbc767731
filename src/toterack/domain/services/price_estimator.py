"""Sale price lookup and extrapolation."""

from __future__ import annotations

import logging
import math
from typing import Any, Mapping

from toterack.domain.coercion import to_count
from toterack.domain.constants import (
    MINIMUM_PRICE,
    PRICE_ROUNDING_STEP,
    PRICE_TABLE,
    PRICE_TABLE_MAX_COLUMNS,
    PRICE_TABLE_MAX_ROWS,
    PRICE_TABLE_MIN_COLUMNS,
    PRICE_TABLE_MIN_ROWS,
)
from toterack.domain.value_objects import PriceEstimate

logger = logging.getLogger(__name__)

__all__ = ["estimate_price", "round_price"]


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


def round_price(amount: float) -> float:
    """Round to the nearest multiple of 5 (halves round up), floor at 20."""
    steps = math.floor(amount / PRICE_ROUNDING_STEP + 0.5)
    return max(MINIMUM_PRICE, steps * PRICE_ROUNDING_STEP)


def estimate_price(
    columns: Any,
    rows: Any,
    table: Mapping[int, Mapping[int, float]] = PRICE_TABLE,
) -> PriceEstimate:
    """Look up or extrapolate the sale price for a layout.

    The table covers 1-5 columns and 2-5 rows. Outside that range the price
    starts from the nearest table cell and is extended linearly:

    - more than 5 columns adds the column-4-to-5 step per extra column
    - more than 5 rows adds the row-4-to-5 step per extra row
    - exactly 1 row subtracts the row-2-to-3 step from the 2-row price

    The single-row adjustment applies even when columns were also
    extrapolated.

    Args:
        columns: Number of columns; non-numeric input counts as 0.
        rows: Number of rows; non-numeric input counts as 0.
        table: Base price table keyed by columns then rows.

    Returns:
        PriceEstimate with the rounded price and whether it was a plain
        table lookup.
    """
    columns = to_count(columns)
    rows = to_count(rows)
    max_cols = PRICE_TABLE_MAX_COLUMNS
    max_rows = PRICE_TABLE_MAX_ROWS

    cc = _clamp(columns, PRICE_TABLE_MIN_COLUMNS, max_cols)
    cr = _clamp(rows, PRICE_TABLE_MIN_ROWS, max_rows)
    base = table[cc][cr]

    if columns > max_cols:
        base += (table[max_cols][cr] - table[max_cols - 1][cr]) * (columns - max_cols)
    if rows > max_rows:
        base += (table[cc][max_rows] - table[cc][max_rows - 1]) * (rows - max_rows)
    if rows == 1:
        base -= table[cc][PRICE_TABLE_MIN_ROWS + 1] - table[cc][PRICE_TABLE_MIN_ROWS]

    exact = (
        PRICE_TABLE_MIN_COLUMNS <= columns <= max_cols
        and PRICE_TABLE_MIN_ROWS <= rows <= max_rows
    )
    price = round_price(base)
    if not exact:
        logger.debug(f"Extrapolated price for {columns}x{rows}: {base} -> {price}")
    return PriceEstimate(price=price, exact=exact)
