"""Price lookup endpoint."""

from typing import Annotated

from fastapi import APIRouter, Query

from toterack.domain import estimate_price
from toterack.web.schemas.responses import PriceEstimateSchema

router = APIRouter(prefix="/price", tags=["price"])


@router.get("", response_model=PriceEstimateSchema)
async def get_price(
    columns: Annotated[int, Query(ge=1, description="Bays across")],
    rows: Annotated[int, Query(ge=1, description="Bays stacked")],
) -> PriceEstimateSchema:
    """Look up or extrapolate the sale price for a layout."""
    estimate = estimate_price(columns, rows)
    return PriceEstimateSchema(price=estimate.price, exact=estimate.exact)
