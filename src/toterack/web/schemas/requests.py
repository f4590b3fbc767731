"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from toterack.web.schemas.common import ContainerSchema, LayoutSchema


class QuoteRequest(BaseModel):
    """Request for a quote with default lumber prices and consumables."""

    container: ContainerSchema = Field(..., description="Tote dimensions")
    layout: LayoutSchema = Field(..., description="Bays across and stacked")
    lumber_overrides: dict[str, float] = Field(
        default_factory=dict,
        description="Forced board length in feet keyed by cut label",
    )
    price_override: float | None = Field(
        default=None, ge=0, description="Sale price instead of the price table"
    )
    material_override: float | None = Field(
        default=None, ge=0, description="Lumber cost instead of the plan"
    )
    delivery: float = Field(default=0.0, ge=0, description="Delivery charge")
    wheels: bool = Field(default=False, description="Include the wheels add-on")
    plywood_top: bool = Field(default=False, description="Include the plywood top add-on")
    hours_to_build: float | None = Field(
        default=None, gt=0, description="Labor hours per build"
    )

    def to_config_dict(self) -> dict[str, Any]:
        """Build the equivalent configuration file contents."""
        pricing: dict[str, Any] = {
            "price_override": self.price_override,
            "material_override": self.material_override,
            "delivery": self.delivery,
        }
        if self.hours_to_build is not None:
            pricing["hours_to_build"] = self.hours_to_build
        return {
            "schema_version": "1.0",
            "container": self.container.model_dump(),
            "layout": self.layout.model_dump(),
            "lumber": {"overrides": dict(self.lumber_overrides)},
            "pricing": pricing,
            "addons": {
                "wheels": {"enabled": self.wheels},
                "plywood_top": {"enabled": self.plywood_top},
            },
        }


class QuoteFromConfigRequest(BaseModel):
    """Request for a quote from a full configuration."""

    config: dict[str, Any] = Field(..., description="Full quote configuration JSON")


class ConfigValidateRequest(BaseModel):
    """Request for validating a configuration."""

    config: dict[str, Any] = Field(..., description="Quote configuration JSON")
