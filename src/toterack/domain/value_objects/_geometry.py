"""Rack geometry value objects."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PieceType(str, Enum):
    """Structural piece types cut for a tote rack."""

    VERTICAL_POST = "vertical_post"
    FRONT_RAIL = "front_rail"
    BACK_RAIL = "back_rail"
    RUNNER = "runner"


@dataclass(frozen=True)
class StockConstants:
    """Physical tolerances baked into every rack derivation.

    Attributes:
        board_thickness: Actual thickness of a 2x4 in inches.
        board_width: Actual width of a 2x4 in inches.
        side_clearance: Gap on each side of a tote inside its bay.
        head_clearance: Gap above a tote lid to the rail above.
        front_clearance: Gap between the front post and the tote.
        back_clearance: Gap between the tote and the back post.
    """

    board_thickness: float = 1.5
    board_width: float = 3.5
    side_clearance: float = 0.1875
    head_clearance: float = 2.0
    front_clearance: float = 0.125
    back_clearance: float = 0.125


@dataclass(frozen=True)
class ContainerDims:
    """Outside dimensions of one tote in inches.

    Values are stored as given; coercion of raw user input happens in
    ``derive_geometry``.
    """

    length: float
    width: float
    height: float


@dataclass(frozen=True)
class Layout:
    """Grid of bays: columns across, rows stacked."""

    columns: int
    rows: int

    @property
    def bay_count(self) -> int:
        """Number of totes the rack holds."""
        return self.columns * self.rows


@dataclass(frozen=True)
class RackGeometry:
    """Derived rack dimensions in inches."""

    container: ContainerDims
    layout: Layout
    bay_width: float
    bay_height: float
    rack_depth: float
    total_width: float
    total_height: float
    runner_length: float


@dataclass(frozen=True)
class CutSpec:
    """One required piece type with its quantity and exact length."""

    piece_type: PieceType
    label: str
    description: str
    quantity: int
    length: float
    note: str = ""

    @property
    def linear_inches(self) -> float:
        """Total length of all pieces of this type."""
        return self.quantity * self.length


@dataclass(frozen=True)
class MaterialTotals:
    """Informational lumber totals for a cut list."""

    total_linear_feet: float
    board_feet: float
    piece_count: int
