"""Projection engine: yearly snapshots of a monthly-compounding savings account."""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from giftplan.config.schema import ProjectionInput, validate_input
from giftplan.core.timeline import MONTHS_PER_YEAR, Timeline
from giftplan.utils.exceptions import InvalidInputError
from giftplan.utils.rounding import round_unit

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class YearSnapshot:
    """Account state at the end of one projected year.

    Attributes:
        year: Year index, 0 for the initial deposit.
        total_asset: Balance rounded to a whole unit.
        total_contributed: Everything paid in to date, rounded to a whole unit.
        profit: ``total_asset - total_contributed``.
        is_gift_year: True only for the year the second gift lands.
    """

    year: int
    total_asset: int
    total_contributed: int
    profit: int
    is_gift_year: bool = False

    @classmethod
    def from_totals(
        cls, year: int, asset: float, contributed: float, is_gift_year: bool
    ) -> YearSnapshot:
        """Round full-precision totals into a snapshot."""
        total_asset = round_unit(asset)
        total_contributed = round_unit(contributed)
        return cls(
            year=year,
            total_asset=total_asset,
            total_contributed=total_contributed,
            profit=total_asset - total_contributed,
            is_gift_year=is_gift_year,
        )


def project(inp: ProjectionInput | Mapping[str, Any]) -> list[YearSnapshot]:
    """Project yearly snapshots for a savings account.

    Each year the second gift (if it falls in that year) is added first, then
    twelve months compound: interest accrues on the balance, then the monthly
    contribution lands. Totals are kept at full precision and rounded only when
    a snapshot is emitted.

    Args:
        inp: Projection parameters, or a mapping to validate into them.

    Returns:
        ``target_age_years + 1`` snapshots for years 0 through the horizon.

    Raises:
        InvalidInputError: If any input field is outside its domain. Nothing
            is computed in that case. Also raised when the balance
            overflows a float for a large rate and horizon.
    """
    inp = validate_input(inp)
    timeline = Timeline.from_years(inp.target_age_years, inp.gift_year)
    monthly_rate = inp.monthly_rate
    monthly = inp.monthly_contribution

    asset = inp.initial_gift
    contributed = inp.initial_gift
    snapshots = [YearSnapshot.from_totals(0, asset, contributed, is_gift_year=False)]

    for year in timeline.years():
        gift_year = timeline.is_gift_year(year)
        if gift_year:
            assert inp.second_gift is not None
            asset += inp.second_gift.amount
            contributed += inp.second_gift.amount
        for _ in range(MONTHS_PER_YEAR):
            asset = asset * (1 + monthly_rate) + monthly
            contributed += monthly
        if not math.isfinite(contributed):
            raise InvalidInputError("monthly_contribution", "projection overflows")
        if not math.isfinite(asset):
            raise InvalidInputError("annual_return_rate_percent", "projection overflows")
        snapshots.append(YearSnapshot.from_totals(year, asset, contributed, gift_year))

    final = snapshots[-1]
    if final.total_contributed == 0:
        logger.debug(
            "Degenerate projection: nothing contributed over %d years", inp.target_age_years
        )
    logger.debug(
        "Projected %d years: asset=%d contributed=%d profit=%d",
        inp.target_age_years,
        final.total_asset,
        final.total_contributed,
        final.profit,
    )
    return snapshots
