"""Chart components for the Streamlit app."""

from __future__ import annotations

from collections.abc import Sequence

import plotly.graph_objects as go

from app.components.theme import (
    ASSET_COLOR,
    ASSET_FILL_OPACITY,
    CONTRIBUTED_COLOR,
    CONTRIBUTED_FILL_OPACITY,
    GIFT_COLOR,
    SPLIT_COLORS,
    make_rgba,
)
from giftplan.analytics.metrics import ProjectionSummary, snapshot_arrays
from giftplan.core.engine import YearSnapshot
from giftplan.formatting.currency import DEFAULT_LOCALE, format_short


def growth_area_chart(
    snapshots: Sequence[YearSnapshot],
    locale: str = DEFAULT_LOCALE,
) -> go.Figure:
    """Area chart of total asset and total contributed by year.

    The second-gift year, if any, is marked with a vertical line.
    """
    cols = snapshot_arrays(snapshots)
    years = cols["year"]

    fig = go.Figure()

    fig.add_trace(
        go.Scatter(
            x=years,
            y=cols["total_contributed"],
            mode="lines",
            fill="tozeroy",
            fillcolor=make_rgba(CONTRIBUTED_COLOR, CONTRIBUTED_FILL_OPACITY),
            line=dict(color=CONTRIBUTED_COLOR, width=1.5),
            name="Contributed",
        )
    )
    fig.add_trace(
        go.Scatter(
            x=years,
            y=cols["total_asset"],
            mode="lines",
            fill="tonexty",
            fillcolor=make_rgba(ASSET_COLOR, ASSET_FILL_OPACITY),
            line=dict(color=ASSET_COLOR, width=2),
            name="Total asset",
            customdata=cols["profit"],
            hovertemplate="%{y:,.0f} (profit +%{customdata:,.0f})<extra></extra>",
        )
    )

    gift_years = years[cols["is_gift_year"]]
    for year in gift_years:
        fig.add_vline(
            x=int(year),
            line_dash="dot",
            line_color=GIFT_COLOR,
            annotation_text="Gift",
        )

    # Tick labels in the locale's compact form
    top = int(cols["total_asset"].max()) if len(years) else 0
    tickvals = [top * i / 4 for i in range(5)] if top > 0 else [0]
    fig.update_layout(
        title="Asset Growth",
        xaxis_title="Year",
        yaxis=dict(
            tickvals=tickvals,
            ticktext=[format_short(v, locale) for v in tickvals],
        ),
        height=320,
    )
    return fig


def split_donut_chart(summary: ProjectionSummary) -> go.Figure:
    """Donut of contributed principal vs compounding profit."""
    fig = go.Figure(
        go.Pie(
            labels=["Contributed", "Profit"],
            values=[summary.total_contributed, summary.profit],
            hole=0.7,
            sort=False,
            direction="clockwise",
            rotation=90,
            marker=dict(colors=SPLIT_COLORS),
            textinfo="none",
        )
    )
    fig.update_layout(
        showlegend=False,
        height=200,
        margin=dict(l=10, r=10, t=10, b=10),
        annotations=[
            dict(
                text=f"+{summary.profit_ratio_percent:.1f}%",
                showarrow=False,
                font=dict(size=14),
            )
        ],
    )
    return fig
