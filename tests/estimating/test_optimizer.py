# File: tests/estimating/test_optimizer.py

"""Unit tests for the greedy stock-length optimizer."""

import pytest

from wallframe.errors import StockError
from wallframe.estimating.optimizer import optimize_cuts, pack_cuts, split_oversize_cuts


def as_pairs(counts) -> list[tuple[float, int]]:
    return [(c.length, c.count) for c in counts]


class TestOptimizeCuts:
    """Test cases for optimize_cuts."""

    def test_first_fit_opens_second_bin(self) -> None:
        # 96 + 96 fills the first 192, so the 48 needs a new piece
        assert as_pairs(optimize_cuts([96, 96, 48], [192])) == [(192, 2)]

    def test_cuts_are_sorted_descending(self) -> None:
        bins = pack_cuts([48, 96, 96], [192])
        assert [b.cuts for b in bins] == [[96, 96], [48]]
        assert [b.remaining for b in bins] == [0, 144]

    def test_smallest_stock_that_fits(self) -> None:
        stock = [192, 144, 120, 96]
        assert as_pairs(optimize_cuts([85.375, 85.375, 35.875, 35.875, 35.875], stock)) == [(96, 4)]

    def test_earliest_bin_wins(self) -> None:
        bins = pack_cuts([150, 120, 30], [192])
        # 30 fits both open pieces (42 and 72 left); the first one takes it
        assert [b.cuts for b in bins] == [[150, 30], [120]]

    def test_counts_in_opening_order(self) -> None:
        stock = [192, 144, 120, 96]
        assert as_pairs(optimize_cuts([150, 110, 100], stock)) == [(192, 1), (120, 2)]

    def test_oversize_cut_falls_back_to_longest(self) -> None:
        bins = pack_cuts([200], [96, 192])
        assert bins[0].length == 192
        assert bins[0].remaining == -8

    def test_empty_cuts(self) -> None:
        assert optimize_cuts([], [192]) == []

    def test_stock_order_does_not_matter(self) -> None:
        assert optimize_cuts([50], [96, 192, 120]) == optimize_cuts([50], [192, 120, 96])

    @pytest.mark.parametrize("stock", [[], [192, 0], [-96]])
    def test_invalid_stock(self, stock) -> None:
        with pytest.raises(StockError):
            optimize_cuts([10], stock)


class TestSplitOversizeCuts:
    """Test cases for split_oversize_cuts."""

    def test_short_cuts_untouched(self) -> None:
        assert split_oversize_cuts([192, 48], 192) == [192, 48]

    def test_long_cut_split(self) -> None:
        assert split_oversize_cuts([240], 192) == [192, 48]

    def test_very_long_cut(self) -> None:
        assert split_oversize_cuts([400], 192) == [192, 192, 16]

    def test_exact_multiple_has_no_zero_piece(self) -> None:
        assert split_oversize_cuts([384], 192) == [192, 192]

    def test_invalid_max_length(self) -> None:
        with pytest.raises(StockError):
            split_oversize_cuts([10], 0)
