"""giftplan — savings projection for gifts to a child's account."""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the repo root is on sys.path so `from app.components...` imports work
# when running `streamlit run app/Home.py`.
_root = str(Path(__file__).resolve().parent.parent)
if _root not in sys.path:
    sys.path.insert(0, _root)

import streamlit as st

st.set_page_config(
    page_title="giftplan",
    page_icon="👼",
    layout="centered",
)

from app.components.charts import growth_area_chart, split_donut_chart
from app.components.forms import (
    build_input,
    init_slider_state,
    second_gift_form,
    set_slider_value,
    slider_input,
)
from app.components.theme import register_theme
from giftplan.analytics.metrics import compute_summary
from giftplan.analytics.table import decimate
from giftplan.config.defaults import default_input, load_presets
from giftplan.core.engine import project
from giftplan.formatting.currency import DEFAULT_LOCALE, format_full
from giftplan.utils.exceptions import InvalidInputError

register_theme()

st.title("👼 Savings for your child")
st.caption("A small investment started today can change your child's future.")

defaults = default_input()
locale = DEFAULT_LOCALE
init_slider_state(defaults)

st.subheader("Quick scenarios")
presets = load_presets()
for col, preset in zip(st.columns(len(presets)), presets.values(), strict=True):
    with col:
        if st.button(preset.label, help=preset.description, key=f"preset_{preset.name}"):
            set_slider_value("initial_gift", preset.initial_gift)
            set_slider_value("monthly_contribution", preset.monthly_contribution)

st.subheader("Conditions")
initial_gift = slider_input(
    "Initial gift",
    "initial_gift",
    hint="Tax-free limit 20,000,000",
)
monthly = slider_input(
    "Monthly contribution",
    "monthly_contribution",
    hint="Child allowance and parental benefit",
)
rate = slider_input(
    "Expected annual return (%)",
    "annual_return_rate_percent",
    hint="S&P 500 long-run average 7-10%",
)
second_gift = second_gift_form(defaults.target_age_years)

# Recomputed from scratch on every rerun
try:
    inp = build_input(initial_gift, monthly, rate, defaults.target_age_years, second_gift)
    snapshots = project(inp)
except InvalidInputError as exc:
    st.error(f"Invalid input: {exc}")
    st.stop()

summary = compute_summary(snapshots)

st.divider()
st.metric(
    f"Projected asset at age {summary.final_year}",
    format_full(summary.total_asset, locale),
    delta=f"+{summary.profit_ratio_percent:.1f}%",
)
col1, col2 = st.columns(2)
col1.metric("Contributed", format_full(summary.total_contributed, locale))
col2.metric("Compounding profit", format_full(summary.profit, locale))

st.plotly_chart(growth_area_chart(snapshots, locale), use_container_width=True)

col_donut, col_bars = st.columns([1, 2])
with col_donut:
    st.plotly_chart(split_donut_chart(summary), use_container_width=True)
with col_bars:
    st.caption(f"Contributed {format_full(summary.total_contributed, locale)}")
    st.progress(min(max(summary.contributed_fraction, 0.0), 1.0))
    st.caption(f"Profit {format_full(summary.profit, locale)}")
    st.progress(min(max(summary.profit_fraction, 0.0), 1.0))

st.subheader("Year by year")
st.dataframe(
    [
        {
            "Age": f"{s.year}" + (" (gift)" if s.is_gift_year else ""),
            "Contributed": format_full(s.total_contributed, locale),
            "Total asset": format_full(s.total_asset, locale),
            "Profit": "+" + format_full(s.profit, locale),
        }
        for s in decimate(snapshots)
    ],
    hide_index=True,
    use_container_width=True,
)

st.caption(
    "A simple simulation that ignores taxes and fees. "
    "Actual results depend on market conditions."
)
