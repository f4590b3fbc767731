"""Rack geometry derivation and cut list generation."""

from __future__ import annotations

import logging
from typing import Sequence

from toterack.domain.coercion import to_count, to_number
from toterack.domain.constants import (
    NOMINAL_THICKNESS,
    NOMINAL_WIDTH,
    STOCK_CONSTANTS,
)
from toterack.domain.value_objects import (
    ContainerDims,
    CutSpec,
    Layout,
    MaterialTotals,
    PieceType,
    RackGeometry,
    StockConstants,
)

logger = logging.getLogger(__name__)

__all__ = ["derive_geometry", "material_totals"]


def derive_geometry(
    container: ContainerDims,
    layout: Layout,
    constants: StockConstants = STOCK_CONSTANTS,
) -> tuple[RackGeometry, list[CutSpec]]:
    """Derive rack dimensions and the four required cuts.

    The rack is a grid of bays, one tote per bay. Posts stand between and
    outside the columns, front and back rails run the full width at top and
    bottom, and each bay gets two runners that carry the tote lip.

    Inputs are coerced leniently: non-numeric dimensions or counts become 0,
    negative counts become 0. The result is always well formed, possibly
    degenerate.

    Args:
        container: Tote outside dimensions in inches.
        layout: Columns and rows of bays.
        constants: Board and clearance constants.

    Returns:
        Tuple of (RackGeometry, cuts) where cuts are ordered posts, front
        rails, back rails, runners.
    """
    tote = ContainerDims(
        length=to_number(container.length),
        width=to_number(container.width),
        height=to_number(container.height),
    )
    grid = Layout(columns=to_count(layout.columns), rows=to_count(layout.rows))
    t = constants.board_thickness

    bay_width = tote.width + 2 * constants.side_clearance
    bay_height = tote.height + constants.head_clearance + t
    rack_depth = (
        tote.length + constants.front_clearance + constants.back_clearance + 2 * t
    )
    total_width = grid.columns * bay_width + (grid.columns + 1) * t
    total_height = grid.rows * bay_height + t
    runner_length = max(1.0, rack_depth - 2 * t)

    geometry = RackGeometry(
        container=tote,
        layout=grid,
        bay_width=bay_width,
        bay_height=bay_height,
        rack_depth=rack_depth,
        total_width=total_width,
        total_height=total_height,
        runner_length=runner_length,
    )
    cuts = _build_cuts(geometry)

    logger.debug(
        f"Derived {grid.columns}x{grid.rows} rack: "
        f"{total_width:.3f} W x {total_height:.3f} H x {rack_depth:.3f} D"
    )
    return geometry, cuts


def _build_cuts(geometry: RackGeometry) -> list[CutSpec]:
    columns = geometry.layout.columns
    rows = geometry.layout.rows
    return [
        CutSpec(
            piece_type=PieceType.VERTICAL_POST,
            label="Vertical Posts",
            description="Front & back legs",
            quantity=2 * (columns + 1),
            length=geometry.total_height,
            note="Full height",
        ),
        CutSpec(
            piece_type=PieceType.FRONT_RAIL,
            label="Front Horizontal Rails",
            description="Top & bottom frame rails, front face",
            quantity=2,
            length=geometry.total_width,
            note="Full width",
        ),
        CutSpec(
            piece_type=PieceType.BACK_RAIL,
            label="Back Horizontal Rails",
            description="Top & bottom frame rails, back face",
            quantity=2,
            length=geometry.total_width,
            note="Full width",
        ),
        CutSpec(
            piece_type=PieceType.RUNNER,
            label="Runners",
            description="Run front-to-back per bay, tote lips rest on these",
            quantity=2 * columns * rows,
            length=geometry.runner_length,
            note="1 per outer post face, 2 per inner",
        ),
    ]


def material_totals(cuts: Sequence[CutSpec]) -> MaterialTotals:
    """Total linear feet and approximate board feet for a cut list.

    Board feet use the nominal 2x4 cross-section (2" x 4"). These figures
    are informational and do not feed the lumber optimizer.
    """
    linear_inches = sum(cut.linear_inches for cut in cuts)
    board_feet = sum(
        cut.quantity * (NOMINAL_THICKNESS * NOMINAL_WIDTH * (cut.length / 12)) / 12
        for cut in cuts
    )
    return MaterialTotals(
        total_linear_feet=linear_inches / 12,
        board_feet=board_feet,
        piece_count=sum(cut.quantity for cut in cuts),
    )

