"""Common Pydantic schemas shared by requests and responses."""

from pydantic import BaseModel, Field


class ContainerSchema(BaseModel):
    """Tote outside dimensions in inches."""

    length: float = Field(..., gt=0, description="Front-to-back length in inches")
    width: float = Field(..., gt=0, description="Side-to-side width in inches")
    height: float = Field(..., gt=0, description="Height including lid in inches")


class LayoutSchema(BaseModel):
    """Grid of bays."""

    columns: int = Field(..., ge=1, description="Bays across")
    rows: int = Field(..., ge=1, description="Bays stacked")
