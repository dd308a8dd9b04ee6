"""Tests for half-up rounding helpers."""

from __future__ import annotations

from giftplan.utils.rounding import round_half_up, round_unit


class TestRoundUnit:
    def test_ties_round_up(self) -> None:
        assert round_unit(0.5) == 1
        assert round_unit(2.5) == 3

    def test_below_tie(self) -> None:
        assert round_unit(2.4999) == 2

    def test_returns_int(self) -> None:
        assert isinstance(round_unit(1126.825), int)


class TestRoundHalfUp:
    def test_one_decimal(self) -> None:
        assert round_half_up(6.25, 1) == 6.3
        assert round_half_up(8.863636, 1) == 8.9

    def test_exact_binary_value(self) -> None:
        # 0.15 is stored as 0.1499999...
        assert round_half_up(0.15, 1) == 0.1
