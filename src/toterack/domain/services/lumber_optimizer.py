"""Lumber purchase optimization.

For each cut type this module lists every standard board length that can
yield the cut, prices each option, and picks the cheapest. Cut types are
optimized independently; pieces of different types are never combined on
one board.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Iterable, Mapping, Sequence

from toterack.domain.coercion import to_number
from toterack.domain.constants import DEFAULT_BOARD_PRICES, STANDARD_STOCK_LENGTHS
from toterack.domain.value_objects import (
    CutSpec,
    LumberChoice,
    LumberOption,
    LumberPlan,
    PurchaseTally,
    TallyLine,
)

logger = logging.getLogger(__name__)

__all__ = ["build_options", "optimize_lumber", "pick_cheapest", "tally_purchases"]


def optimize_lumber(
    cuts: Sequence[CutSpec],
    stock_lengths: Iterable[float] = STANDARD_STOCK_LENGTHS,
    prices: Mapping[float, Any] = DEFAULT_BOARD_PRICES,
    overrides: Mapping[str, float] | None = None,
) -> LumberPlan:
    """Choose a board length for every cut type and tally the purchase.

    Args:
        cuts: Cut specifications to cover.
        stock_lengths: Available board lengths in inches.
        prices: Price per board keyed by length in inches. Missing or
            non-numeric prices count as 0.
        overrides: Optional mapping of cut label to a forced board length in
            inches. An override that names a length not among the cut's
            options is ignored.

    Returns:
        LumberPlan with one LumberChoice per cut, in input order, and the
        aggregate purchase tally.
    """
    lengths = sorted({n for n in map(to_number, stock_lengths) if n > 0})
    overrides = overrides or {}

    choices: list[LumberChoice] = []
    for cut in cuts:
        options = build_options(cut, lengths, prices)
        cheapest = pick_cheapest(options)
        chosen = _apply_override(cut, options, cheapest, overrides.get(cut.label))
        choices.append(
            LumberChoice(
                cut=cut, options=tuple(options), cheapest=cheapest, chosen=chosen
            )
        )

    return LumberPlan(choices=tuple(choices), tally=tally_purchases(choices))


def build_options(
    cut: CutSpec,
    stock_lengths: Sequence[float],
    prices: Mapping[float, Any],
) -> list[LumberOption]:
    """Price every board length long enough for the cut.

    When the cut is longer than every board, the longest board is returned
    as the only option with ``covers_cut=False`` and one piece per board.

    Args:
        cut: The cut to cover.
        stock_lengths: Board lengths in inches, ascending.
        prices: Price per board keyed by length in inches.

    Returns:
        Options in ascending board length. Empty only when there are no
        stock lengths at all.
    """
    feasible = [length for length in stock_lengths if length >= cut.length]
    if feasible:
        return [_price_option(cut, length, prices) for length in feasible]

    if not stock_lengths:
        return []

    longest = stock_lengths[-1]
    logger.warning(
        f"{cut.label}: {cut.length:.3f}\" exceeds the longest board "
        f"({longest:.0f}\"); falling back to one piece per board"
    )
    return [_price_option(cut, longest, prices, covers_cut=False)]


def _price_option(
    cut: CutSpec,
    stock_length: float,
    prices: Mapping[float, Any],
    covers_cut: bool = True,
) -> LumberOption:
    if cut.length > 0:
        pieces_per_board = max(1, math.floor(stock_length / cut.length))
    else:
        pieces_per_board = 1
    boards_needed = math.ceil(max(0, cut.quantity) / pieces_per_board)
    price = to_number(prices.get(stock_length))
    return LumberOption(
        stock_length=stock_length,
        pieces_per_board=pieces_per_board,
        boards_needed=boards_needed,
        price_per_board=price,
        total_cost=boards_needed * price,
        covers_cut=covers_cut,
    )


def pick_cheapest(options: Sequence[LumberOption]) -> LumberOption | None:
    """Lowest total cost; ties go to fewer boards, then to the shorter board."""
    best: LumberOption | None = None
    for option in options:
        if best is None or (option.total_cost, option.boards_needed) < (
            best.total_cost,
            best.boards_needed,
        ):
            best = option
    return best


def _apply_override(
    cut: CutSpec,
    options: Sequence[LumberOption],
    cheapest: LumberOption | None,
    override: float | None,
) -> LumberOption | None:
    if override is None:
        return cheapest
    wanted = to_number(override)
    for option in options:
        if option.stock_length == wanted:
            return option
    logger.debug(
        f"{cut.label}: override {wanted:.0f}\" is not a feasible board length, "
        "using cheapest"
    )
    return cheapest


def tally_purchases(choices: Iterable[LumberChoice]) -> PurchaseTally:
    """Sum chosen boards per length, ascending by length."""
    boards: dict[float, int] = {}
    for choice in choices:
        if choice.chosen is None:
            continue
        length = choice.chosen.stock_length
        boards[length] = boards.get(length, 0) + choice.chosen.boards_needed
    return PurchaseTally(
        lines=tuple(TallyLine(stock_length=k, boards=boards[k]) for k in sorted(boards))
    )
