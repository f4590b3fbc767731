"""Pydantic schema for tote rack quote configuration files.

A configuration file describes one quote: the tote, the grid layout,
lumber prices and manual board choices, pricing overrides, consumables,
add-ons, and custom purchases. Lengths are in inches except board
lengths, which are given in feet the way lumber is sold.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from toterack.domain.constants import (
    DEFAULT_BOARD_PRICES,
    DEFAULT_CONSUMABLES,
    DEFAULT_HOURS_TO_BUILD,
    PLYWOOD_TOP_ADDON,
    STANDARD_STOCK_LENGTHS,
    WHEELS_ADDON,
)

# Supported schema versions for configuration files
# Version 1.0: Initial schema
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


def _feet(inches: float) -> float:
    return inches / 12


class ContainerConfig(BaseModel):
    """Tote outside dimensions in inches."""

    model_config = ConfigDict(extra="forbid")

    length: float = Field(..., gt=0, description="Front-to-back length in inches")
    width: float = Field(..., gt=0, description="Side-to-side width in inches")
    height: float = Field(..., gt=0, description="Height including lid in inches")


class LayoutConfig(BaseModel):
    """Grid of bays."""

    model_config = ConfigDict(extra="forbid")

    columns: int = Field(..., ge=1, description="Bays across")
    rows: int = Field(..., ge=1, description="Bays stacked")


class LumberConfig(BaseModel):
    """Board lengths, prices, and manual board choices.

    Attributes:
        stock_lengths: Purchasable board lengths in feet.
        board_prices: Price per board keyed by length in feet.
        overrides: Forced board length in feet keyed by cut label
            (e.g. "Runners").
    """

    model_config = ConfigDict(extra="forbid")

    stock_lengths: list[float] = Field(
        default_factory=lambda: [_feet(length) for length in STANDARD_STOCK_LENGTHS],
        min_length=1,
        description="Board lengths in feet",
    )
    board_prices: dict[float, float] = Field(
        default_factory=lambda: {
            _feet(length): price for length, price in DEFAULT_BOARD_PRICES.items()
        },
        description="Price per board keyed by length in feet",
    )
    overrides: dict[str, float] = Field(
        default_factory=dict,
        description="Forced board length in feet keyed by cut label",
    )

    @field_validator("stock_lengths")
    @classmethod
    def validate_stock_lengths(cls, v: list[float]) -> list[float]:
        """Board lengths must be positive."""
        if any(length <= 0 for length in v):
            raise ValueError("Board lengths must be positive")
        return v

    @field_validator("board_prices")
    @classmethod
    def validate_board_prices(cls, v: dict[float, float]) -> dict[float, float]:
        """Board prices must be non-negative."""
        if any(price < 0 for price in v.values()):
            raise ValueError("Board prices must be non-negative")
        return v


class PricingConfig(BaseModel):
    """Sale price and labor settings."""

    model_config = ConfigDict(extra="forbid")

    price_override: float | None = Field(
        default=None, ge=0, description="Sale price to charge instead of the table"
    )
    material_override: float | None = Field(
        default=None, ge=0, description="Material cost to use instead of the lumber plan"
    )
    delivery: float = Field(default=0.0, ge=0, description="Delivery charge, 0 for pickup")
    hours_to_build: float = Field(
        default=DEFAULT_HOURS_TO_BUILD, gt=0, description="Labor hours per build"
    )


class ConsumablesConfig(BaseModel):
    """Box of screws shared across builds."""

    model_config = ConfigDict(extra="forbid")

    box_cost: float = Field(default=DEFAULT_CONSUMABLES.box_cost, ge=0)
    builds_per_box: int = Field(default=DEFAULT_CONSUMABLES.builds_per_box, ge=1)


class AddonConfig(BaseModel):
    """One optional extra."""

    model_config = ConfigDict(extra="forbid")

    enabled: bool = False
    revenue: float = Field(default=0.0, ge=0, description="Charged to the customer")
    cost: float = Field(default=0.0, ge=0, description="Spent on parts")


class AddonsConfig(BaseModel):
    """Available extras."""

    model_config = ConfigDict(extra="forbid")

    wheels: AddonConfig = Field(
        default_factory=lambda: AddonConfig(
            revenue=WHEELS_ADDON.revenue, cost=WHEELS_ADDON.cost
        )
    )
    plywood_top: AddonConfig = Field(
        default_factory=lambda: AddonConfig(
            revenue=PLYWOOD_TOP_ADDON.revenue, cost=PLYWOOD_TOP_ADDON.cost
        )
    )

    @field_validator("wheels", "plywood_top", mode="before")
    @classmethod
    def fill_addon_defaults(cls, v: Any, info: ValidationInfo) -> Any:
        """Missing revenue or cost falls back to the add-on's default."""
        if not isinstance(v, dict):
            return v
        default = WHEELS_ADDON if info.field_name == "wheels" else PLYWOOD_TOP_ADDON
        return {"revenue": default.revenue, "cost": default.cost, **v}


class CustomItemConfig(BaseModel):
    """Extra purchase for a build."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(default="Item", min_length=1)
    quantity: float = Field(default=1, ge=0)
    unit_cost: float = Field(default=0.0, ge=0)


class QuoteConfiguration(BaseModel):
    """Root configuration for a tote rack quote.

    Example:
        {
            "schema_version": "1.0",
            "container": {"length": 30.25, "width": 20.25, "height": 14.125},
            "layout": {"columns": 3, "rows": 3}
        }
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., description="Configuration schema version")
    container: ContainerConfig
    layout: LayoutConfig
    lumber: LumberConfig = Field(default_factory=LumberConfig)
    pricing: PricingConfig = Field(default_factory=PricingConfig)
    consumables: ConsumablesConfig = Field(default_factory=ConsumablesConfig)
    addons: AddonsConfig = Field(default_factory=AddonsConfig)
    custom_items: list[CustomItemConfig] = Field(default_factory=list)

    @field_validator("schema_version")
    @classmethod
    def validate_schema_version(cls, v: str) -> str:
        """Reject schema versions this release does not understand."""
        if v not in SUPPORTED_VERSIONS:
            supported = ", ".join(sorted(SUPPORTED_VERSIONS))
            raise ValueError(
                f"Unsupported schema version '{v}'. Supported versions: {supported}"
            )
        return v
