"""Summary metrics derived from a projection."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from giftplan.core.engine import YearSnapshot
from giftplan.utils.exceptions import InvalidInputError
from giftplan.utils.rounding import round_half_up


@dataclass(frozen=True)
class ProjectionSummary:
    """Headline figures for the final projected year."""

    final_year: int
    total_asset: int
    total_contributed: int
    profit: int
    profit_ratio_percent: float
    contributed_fraction: float
    profit_fraction: float
    is_degenerate: bool


def profit_ratio_percent(snapshot: YearSnapshot) -> float:
    """Profit as a percentage of contributions, to one decimal.

    Returns 0.0 when nothing was contributed.
    """
    if snapshot.total_contributed == 0:
        return 0.0
    return round_half_up(snapshot.profit / snapshot.total_contributed * 100, 1)


def investment_split(snapshot: YearSnapshot) -> tuple[float, float]:
    """Fractions of the final balance that are contributions and profit.

    Both are 0.0 for an empty account.
    """
    if snapshot.total_asset == 0:
        return 0.0, 0.0
    return (
        snapshot.total_contributed / snapshot.total_asset,
        snapshot.profit / snapshot.total_asset,
    )


def compute_summary(snapshots: Sequence[YearSnapshot]) -> ProjectionSummary:
    """Compute summary metrics from the last snapshot of a projection.

    Raises:
        InvalidInputError: If ``snapshots`` is empty.
    """
    if not snapshots:
        raise InvalidInputError("snapshots", "projection has no snapshots")
    final = snapshots[-1]
    contributed_fraction, profit_fraction = investment_split(final)
    return ProjectionSummary(
        final_year=final.year,
        total_asset=final.total_asset,
        total_contributed=final.total_contributed,
        profit=final.profit,
        profit_ratio_percent=profit_ratio_percent(final),
        contributed_fraction=contributed_fraction,
        profit_fraction=profit_fraction,
        is_degenerate=final.total_contributed == 0,
    )


def snapshot_arrays(snapshots: Sequence[YearSnapshot]) -> dict[str, np.ndarray]:
    """Column arrays for charting.

    Returns:
        Dict with ``year``, ``total_asset``, ``total_contributed``, ``profit``
        (int64) and ``is_gift_year`` (bool) arrays.
    """
    return {
        "year": np.array([s.year for s in snapshots], dtype=np.int64),
        "total_asset": np.array([s.total_asset for s in snapshots], dtype=np.int64),
        "total_contributed": np.array([s.total_contributed for s in snapshots], dtype=np.int64),
        "profit": np.array([s.profit for s in snapshots], dtype=np.int64),
        "is_gift_year": np.array([s.is_gift_year for s in snapshots], dtype=bool),
    }
