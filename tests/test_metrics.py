"""Tests for summary metrics."""

from __future__ import annotations

import numpy as np
import pytest

from giftplan.analytics.metrics import (
    compute_summary,
    investment_split,
    profit_ratio_percent,
    snapshot_arrays,
)
from giftplan.config.schema import ProjectionInput
from giftplan.core.engine import YearSnapshot, project
from giftplan.utils.exceptions import InvalidInputError


def _snap(asset: int, contributed: int, year: int = 1) -> YearSnapshot:
    return YearSnapshot(
        year=year,
        total_asset=asset,
        total_contributed=contributed,
        profit=asset - contributed,
    )


class TestProfitRatio:
    def test_one_decimal(self) -> None:
        # 195 / 2200 = 8.86%
        assert profit_ratio_percent(_snap(2395, 2200)) == 8.9

    def test_half_rounds_up(self) -> None:
        # 1 / 8 = 12.5% -> 12.5; 1 / 16 = 6.25% -> 6.3
        assert profit_ratio_percent(_snap(9, 8)) == 12.5
        assert profit_ratio_percent(_snap(17, 16)) == 6.3

    def test_zero_contributed(self) -> None:
        assert profit_ratio_percent(_snap(0, 0)) == 0.0


class TestInvestmentSplit:
    def test_fractions(self) -> None:
        contributed, profit = investment_split(_snap(400, 300))
        assert contributed == pytest.approx(0.75)
        assert profit == pytest.approx(0.25)

    def test_fractions_sum_to_one(self) -> None:
        contributed, profit = investment_split(_snap(2395, 2200))
        assert contributed + profit == pytest.approx(1.0)

    def test_empty_account(self) -> None:
        assert investment_split(_snap(0, 0)) == (0.0, 0.0)


class TestComputeSummary:
    def test_uses_final_snapshot(self) -> None:
        summary = compute_summary([_snap(100, 100, year=0), _snap(2395, 2200, year=1)])
        assert summary.final_year == 1
        assert summary.total_asset == 2395
        assert summary.total_contributed == 2200
        assert summary.profit == 195
        assert summary.profit_ratio_percent == 8.9
        assert not summary.is_degenerate

    def test_degenerate(self) -> None:
        summary = compute_summary(project(ProjectionInput(target_age_years=5)))
        assert summary.is_degenerate
        assert summary.profit_ratio_percent == 0.0
        assert summary.contributed_fraction == 0.0
        assert summary.profit_fraction == 0.0

    def test_empty_sequence(self) -> None:
        with pytest.raises(InvalidInputError):
            compute_summary([])


class TestSnapshotArrays:
    def test_columns(self) -> None:
        snaps = project(ProjectionInput(monthly_contribution=10, target_age_years=3))
        cols = snapshot_arrays(snaps)
        np.testing.assert_array_equal(cols["year"], [0, 1, 2, 3])
        np.testing.assert_array_equal(cols["total_contributed"], [0, 120, 240, 360])
        np.testing.assert_array_equal(cols["profit"], [0, 0, 0, 0])
        assert cols["is_gift_year"].dtype == bool
        assert not cols["is_gift_year"].any()
