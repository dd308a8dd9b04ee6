"""Custom Plotly theme for giftplan charts."""

from __future__ import annotations

import plotly.graph_objects as go
import plotly.io as pio

ASSET_COLOR = "#3182F6"
CONTRIBUTED_COLOR = "#D1D6DB"
GIFT_COLOR = "#F5B400"

# Donut slices: contributed, profit
SPLIT_COLORS = ["#E8EBED", ASSET_COLOR]

# Area fill opacity at the line
ASSET_FILL_OPACITY = 0.15
CONTRIBUTED_FILL_OPACITY = 0.5

_FONT_FAMILY = "Pretendard, -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif"


def make_rgba(hex_color: str, alpha: float) -> str:
    """Convert hex color string to rgba() with given alpha."""
    hex_color = hex_color.lstrip("#")
    r = int(hex_color[0:2], 16)
    g = int(hex_color[2:4], 16)
    b = int(hex_color[4:6], 16)
    return f"rgba({r}, {g}, {b}, {alpha})"


def register_theme() -> None:
    """Register and activate the giftplan Plotly template."""
    giftplan_layout = go.Layout(
        font=dict(family=_FONT_FAMILY, size=13),
        title_font=dict(size=16),
        colorway=[ASSET_COLOR, CONTRIBUTED_COLOR, GIFT_COLOR],
        plot_bgcolor="white",
        paper_bgcolor="white",
        xaxis=dict(
            showgrid=False,
            zerolinecolor="#F2F4F6",
        ),
        yaxis=dict(
            gridcolor="#F2F4F6",
            zerolinecolor="#F2F4F6",
            zerolinewidth=1,
        ),
        hovermode="x unified",
        legend=dict(
            orientation="h",
            yanchor="bottom",
            y=1.02,
            xanchor="left",
            x=0,
        ),
        margin=dict(l=60, r=20, t=60, b=40),
    )

    pio.templates["giftplan"] = go.layout.Template(layout=giftplan_layout)
    pio.templates.default = "giftplan"
