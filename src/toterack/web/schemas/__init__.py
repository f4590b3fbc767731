"""Pydantic schemas for the REST API."""

from toterack.web.schemas.common import ContainerSchema, LayoutSchema
from toterack.web.schemas.requests import (
    ConfigValidateRequest,
    QuoteFromConfigRequest,
    QuoteRequest,
)
from toterack.web.schemas.responses import (
    CostSummarySchema,
    CutSchema,
    ErrorResponseSchema,
    GeometrySchema,
    LumberChoiceSchema,
    LumberOptionSchema,
    LumberPlanSchema,
    MaterialTotalsSchema,
    PriceEstimateSchema,
    QuoteResponseSchema,
    TallyLineSchema,
    TemplateContentSchema,
    TemplateListItemSchema,
    TemplateListSchema,
    ValidationResultSchema,
)

__all__ = [
    # Common
    "ContainerSchema",
    "LayoutSchema",
    # Requests
    "ConfigValidateRequest",
    "QuoteFromConfigRequest",
    "QuoteRequest",
    # Responses
    "CostSummarySchema",
    "CutSchema",
    "ErrorResponseSchema",
    "GeometrySchema",
    "LumberChoiceSchema",
    "LumberOptionSchema",
    "LumberPlanSchema",
    "MaterialTotalsSchema",
    "PriceEstimateSchema",
    "QuoteResponseSchema",
    "TallyLineSchema",
    "TemplateContentSchema",
    "TemplateListItemSchema",
    "TemplateListSchema",
    "ValidationResultSchema",
]
