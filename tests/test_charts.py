"""Smoke tests for chart functions — each returns a go.Figure with expected traces."""

from __future__ import annotations

import plotly.graph_objects as go
from app.components.charts import growth_area_chart, split_donut_chart
from app.components.theme import make_rgba, register_theme

from giftplan.analytics.metrics import compute_summary
from giftplan.config.schema import ProjectionInput, SecondGift
from giftplan.core.engine import project

# Register theme once for all tests
register_theme()


class TestGrowthAreaChart:
    def test_returns_figure(self, gift_input: ProjectionInput) -> None:
        fig = growth_area_chart(project(gift_input))
        assert isinstance(fig, go.Figure)
        assert len(fig.data) == 2

    def test_gift_line(self, gift_input: ProjectionInput) -> None:
        fig = growth_area_chart(project(gift_input))
        assert len(fig.layout.shapes) == 1

    def test_no_gift_line(self, simple_input: ProjectionInput) -> None:
        fig = growth_area_chart(project(simple_input))
        assert len(fig.layout.shapes) == 0

    def test_all_zero_projection(self) -> None:
        fig = growth_area_chart(project(ProjectionInput(target_age_years=3)))
        assert list(fig.data[1].y) == [0, 0, 0, 0]

    def test_gift_at_year_one(self) -> None:
        inp = ProjectionInput(target_age_years=2, second_gift=SecondGift(at_year=1, amount=5))
        fig = growth_area_chart(project(inp), locale="en_US")
        assert len(fig.layout.shapes) == 1


class TestSplitDonutChart:
    def test_values(self, simple_input: ProjectionInput) -> None:
        fig = split_donut_chart(compute_summary(project(simple_input)))
        assert isinstance(fig, go.Figure)
        assert list(fig.data[0].values) == [2200, 195]
        assert fig.layout.annotations[0].text == "+8.9%"


class TestTheme:
    def test_make_rgba(self) -> None:
        assert make_rgba("#3182F6", 0.5) == "rgba(49, 130, 246, 0.5)"
