"""Lumber purchase value objects."""

from __future__ import annotations

from dataclasses import dataclass

from ._geometry import CutSpec


@dataclass(frozen=True)
class LumberOption:
    """Buying one stock length to cover a single cut type.

    Attributes:
        stock_length: Board length in inches.
        pieces_per_board: Pieces of the cut that one board yields (always >= 1).
        boards_needed: Boards to buy to cover the cut quantity.
        price_per_board: Price of one board of this length.
        total_cost: boards_needed * price_per_board.
        covers_cut: False when the board is shorter than the cut and was only
            offered because no stock length is long enough.
    """

    stock_length: float
    pieces_per_board: int
    boards_needed: int
    price_per_board: float
    total_cost: float
    covers_cut: bool = True

    @property
    def stock_length_ft(self) -> float:
        """Board length in feet."""
        return self.stock_length / 12


@dataclass(frozen=True)
class LumberChoice:
    """Feasible options, cheapest option, and effective choice for one cut.

    ``cheapest`` and ``chosen`` are None only when no stock lengths were
    offered at all.
    """

    cut: CutSpec
    options: tuple[LumberOption, ...]
    cheapest: LumberOption | None
    chosen: LumberOption | None

    @property
    def is_override(self) -> bool:
        """True when a manual override replaced the cheapest option."""
        return self.chosen != self.cheapest

    @property
    def cost(self) -> float:
        return self.chosen.total_cost if self.chosen is not None else 0.0


@dataclass(frozen=True)
class TallyLine:
    """Buy ``boards`` boards of ``stock_length`` inches."""

    stock_length: float
    boards: int

    @property
    def stock_length_ft(self) -> float:
        return self.stock_length / 12


@dataclass(frozen=True)
class PurchaseTally:
    """Boards to buy per stock length, summed across cut types."""

    lines: tuple[TallyLine, ...]

    @property
    def total_boards(self) -> int:
        return sum(line.boards for line in self.lines)

    def boards_for(self, stock_length: float) -> int:
        """Boards of a given length, 0 if none are bought."""
        for line in self.lines:
            if line.stock_length == stock_length:
                return line.boards
        return 0


@dataclass(frozen=True)
class LumberPlan:
    """Output of the lumber optimizer."""

    choices: tuple[LumberChoice, ...]
    tally: PurchaseTally

    @property
    def material_cost(self) -> float:
        """Sum of the chosen option costs."""
        return sum(choice.cost for choice in self.choices)

    @property
    def infeasible_cuts(self) -> tuple[str, ...]:
        """Labels of cuts whose chosen board is shorter than the cut."""
        return tuple(
            choice.cut.label
            for choice in self.choices
            if choice.chosen is not None and not choice.chosen.covers_cut
        )

    def choice_for(self, label: str) -> LumberChoice | None:
        """Look up the choice for a cut label."""
        for choice in self.choices:
            if choice.cut.label == label:
                return choice
        return None
