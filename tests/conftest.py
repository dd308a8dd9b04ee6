"""Shared test fixtures."""

from __future__ import annotations

import pytest

from giftplan.config.schema import ProjectionInput, SecondGift


@pytest.fixture
def simple_input() -> ProjectionInput:
    """1,000 up front, 100 a month at 12% (1% a month) for one year."""
    return ProjectionInput(
        initial_gift=1_000,
        monthly_contribution=100,
        annual_return_rate_percent=12.0,
        target_age_years=1,
    )


@pytest.fixture
def gift_input() -> ProjectionInput:
    """Twenty-year projection with a second gift at year 10."""
    return ProjectionInput(
        initial_gift=20_000_000,
        monthly_contribution=500_000,
        annual_return_rate_percent=7.0,
        target_age_years=20,
        second_gift=SecondGift(at_year=10, amount=31_000_000),
    )
