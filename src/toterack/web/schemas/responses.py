"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class GeometrySchema(BaseModel):
    """Overall rack dimensions in inches."""

    columns: int = Field(..., description="Bays across")
    rows: int = Field(..., description="Bays stacked")
    bay_width: float = Field(..., description="Clear width of one bay")
    bay_height: float = Field(..., description="Clear height of one bay")
    rack_depth: float = Field(..., description="Front-to-back depth")
    total_width: float = Field(..., description="Overall width")
    total_height: float = Field(..., description="Overall height")
    runner_length: float = Field(..., description="Length of each runner")


class CutSchema(BaseModel):
    """One line of the cut list."""

    piece_type: str = Field(..., description="Kind of piece")
    label: str = Field(..., description="Cut label")
    description: str = Field(..., description="Where the piece goes")
    quantity: int = Field(..., description="Number of pieces")
    length: float = Field(..., description="Length in inches")
    note: str = Field(default="", description="Additional notes")


class MaterialTotalsSchema(BaseModel):
    """Lumber totals across the cut list."""

    total_linear_feet: float
    board_feet: float
    piece_count: int


class LumberOptionSchema(BaseModel):
    """Cost of cutting one piece group from one board length."""

    stock_length: float = Field(..., description="Board length in inches")
    pieces_per_board: int
    boards_needed: int
    price_per_board: float
    total_cost: float
    covers_cut: bool = Field(..., description="False when the board is too short")


class LumberChoiceSchema(BaseModel):
    """Options and the chosen board for one cut."""

    label: str
    options: list[LumberOptionSchema]
    cheapest: LumberOptionSchema | None
    chosen: LumberOptionSchema | None
    is_override: bool


class TallyLineSchema(BaseModel):
    """Boards to buy of one length."""

    stock_length: float = Field(..., description="Board length in inches")
    boards: int


class LumberPlanSchema(BaseModel):
    """Per-cut choices and the purchase tally."""

    choices: list[LumberChoiceSchema]
    tally: list[TallyLineSchema]
    total_boards: int
    material_cost: float


class PriceEstimateSchema(BaseModel):
    """Sale price for a layout."""

    price: float = Field(..., description="Sale price in dollars")
    exact: bool = Field(..., description="False when extrapolated from the table")


class CostSummarySchema(BaseModel):
    """Revenue, cost, and profit for one build."""

    sale_price: float
    material_cost: float
    consumable_cost: float
    addon_cost: float
    addon_revenue: float
    custom_items_cost: float
    delivery: float
    total_revenue: float
    total_cost: float
    profit: float
    margin_percent: float


class QuoteResponseSchema(BaseModel):
    """Response for quote generation."""

    geometry: GeometrySchema
    cut_list: list[CutSchema]
    totals: MaterialTotalsSchema
    lumber: LumberPlanSchema
    price: PriceEstimateSchema
    summary: CostSummarySchema
    hourly_rate: float | None = Field(
        default=None, description="Profit per labor hour, null without profit"
    )
    warnings: list[str] = Field(default_factory=list, description="Degraded results")


class ValidationResultSchema(BaseModel):
    """Response for configuration validation."""

    is_valid: bool = Field(..., description="Whether configuration is valid")
    errors: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation errors"
    )
    warnings: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation warnings"
    )


class TemplateListItemSchema(BaseModel):
    """Template list item."""

    name: str = Field(..., description="Template name")
    description: str = Field(..., description="Template description")


class TemplateListSchema(BaseModel):
    """Response for template listing."""

    templates: list[TemplateListItemSchema] = Field(..., description="Available templates")


class TemplateContentSchema(BaseModel):
    """Response for template content."""

    name: str = Field(..., description="Template name")
    description: str = Field(..., description="Template description")
    content: dict[str, Any] = Field(..., description="Template configuration JSON")


class ErrorResponseSchema(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error category")
    details: list[dict[str, Any]] | None = Field(
        default=None, description="Additional error details"
    )
