"""Tests for Timeline."""

from __future__ import annotations

from giftplan.core.timeline import Timeline


class TestTimeline:
    def test_years_range(self) -> None:
        assert list(Timeline.from_years(3).years()) == [1, 2, 3]
        assert list(Timeline.from_years(0).years()) == []

    def test_gift_year(self) -> None:
        tl = Timeline.from_years(20, gift_year=10)
        assert tl.is_gift_year(10)
        assert not tl.is_gift_year(9)
        assert not Timeline.from_years(20).is_gift_year(10)
