"""Decimated tabular view of a projection."""

from __future__ import annotations

from collections.abc import Sequence

from giftplan.core.engine import YearSnapshot


def decimate(snapshots: Sequence[YearSnapshot], every: int = 2) -> list[YearSnapshot]:
    """Keep every ``every``-th snapshot plus the final one.

    Args:
        snapshots: Full projection.
        every: Stride between kept rows, starting at index 0.

    Returns:
        The kept snapshots in order, without duplicating the final row.
    """
    if every < 1:
        raise ValueError(f"every must be >= 1, got {every}")
    last = len(snapshots) - 1
    return [s for i, s in enumerate(snapshots) if i % every == 0 or i == last]
