"""Greedy stock-length optimizer.

Cuts are packed first-fit in descending order: each cut goes into the
earliest opened stock piece with room left, otherwise a new piece of the
shortest stock length that holds it is opened. Purchase quantities are
calibrated to this heuristic.
"""

from __future__ import annotations
import logging
from collections.abc import Sequence

from wallframe.errors import StockError
from wallframe.models import StockBin, StockCount

logger = logging.getLogger(__name__)

FIT_TOLERANCE = 1e-9


def _check_stock(stock_lengths: Sequence[float]) -> list[float]:
    if not stock_lengths:
        raise StockError("At least one stock length is required")
    if any(length <= 0 for length in stock_lengths):
        raise StockError(f"Stock lengths must be positive, got {list(stock_lengths)}")
    return sorted(stock_lengths)


def longest_stock(stock_lengths: Sequence[float]) -> float:
    return _check_stock(stock_lengths)[-1]


def split_oversize_cuts(cuts: Sequence[float], max_length: float) -> list[float]:
    """Break cuts longer than the longest stock into full pieces plus a remainder."""
    if max_length <= 0:
        raise StockError(f"Maximum stock length must be positive, got {max_length}")
    pieces: list[float] = []
    for cut in cuts:
        remaining = cut
        while remaining > max_length:
            pieces.append(max_length)
            remaining -= max_length
        if remaining > 0:
            pieces.append(remaining)
    return pieces


def pack_cuts(cuts: Sequence[float], stock_lengths: Sequence[float]) -> list[StockBin]:
    """Assign every cut to a stock piece; bins are returned in opening order."""
    candidates = _check_stock(stock_lengths)
    bins: list[StockBin] = []

    for cut in sorted(cuts, reverse=True):
        target = next((b for b in bins if cut <= b.remaining + FIT_TOLERANCE), None)
        if target is None:
            length = next((s for s in candidates if cut <= s), candidates[-1])
            target = StockBin(length=length, remaining=length)
            bins.append(target)
        target.cuts.append(cut)
        target.remaining -= cut

    return bins


def optimize_cuts(cuts: Sequence[float], stock_lengths: Sequence[float]) -> list[StockCount]:
    """Count stock pieces per length, in the order each length was first opened."""
    bins = pack_cuts(cuts, stock_lengths)
    counts: dict[float, int] = {}
    for b in bins:
        counts[b.length] = counts.get(b.length, 0) + 1

    if bins:
        used = sum(b.length for b in bins)
        waste = sum(max(0.0, b.remaining) for b in bins)
        logger.debug(
            "Packed %d cut(s) into %d stock piece(s), %.1f in of %.1f in wasted",
            len(cuts), len(bins), waste, used,
        )

    return [StockCount(length=length, count=count) for length, count in counts.items()]
