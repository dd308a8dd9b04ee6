"""Reusable form components for the Streamlit app."""

from __future__ import annotations

import streamlit as st

from giftplan.config.defaults import SLIDER_BOUNDS, default_second_gift
from giftplan.config.schema import ProjectionInput, SecondGift, validate_input


def slider_key(field: str) -> str:
    """Session State key of the slider for ``field``."""
    return f"slider_{field}"


def _coerce(field: str, value: float) -> float:
    step = SLIDER_BOUNDS[field][2]
    return float(value) if isinstance(step, float) else int(value)


def set_slider_value(field: str, value: float) -> None:
    """Overwrite a slider's value before it is rendered."""
    st.session_state[slider_key(field)] = _coerce(field, value)


def init_slider_state(inp: ProjectionInput) -> None:
    """Seed slider values from ``inp`` on the first run only."""
    for field in SLIDER_BOUNDS:
        st.session_state.setdefault(slider_key(field), _coerce(field, getattr(inp, field)))


def slider_input(label: str, field: str, hint: str = "") -> float:
    """Render a slider bounded by the field's configured range.

    The value lives in Session State; call ``init_slider_state`` first.
    """
    lo, hi, step = SLIDER_BOUNDS[field]
    return st.slider(
        label,
        min_value=_coerce(field, lo),
        max_value=_coerce(field, hi),
        step=step,
        help=hint or None,
        key=slider_key(field),
    )


def second_gift_form(target_age_years: int) -> SecondGift | None:
    """Render the optional second gift controls."""
    enabled = st.checkbox(
        "Second gift",
        value=False,
        help="The tax-free gift allowance resets every ten years.",
        key="second_gift_enabled",
    )
    if not enabled or target_age_years < 1:
        return None

    default = default_second_gift()
    col1, col2 = st.columns(2)
    with col1:
        at_year = st.number_input(
            "Gift year",
            min_value=1,
            max_value=target_age_years,
            value=min(default.at_year, target_age_years),
            key="second_gift_year",
        )
    with col2:
        amount = st.number_input(
            "Gift amount",
            min_value=0.0,
            value=default.amount,
            step=1_000_000.0,
            key="second_gift_amount",
        )
    return SecondGift(at_year=int(at_year), amount=amount)


def build_input(
    initial_gift: float,
    monthly_contribution: float,
    annual_return_rate_percent: float,
    target_age_years: int,
    second_gift: SecondGift | None,
) -> ProjectionInput:
    """Validate widget values into a ProjectionInput.

    Raises:
        InvalidInputError: Naming the first field outside its domain.
    """
    return validate_input(
        {
            "initial_gift": initial_gift,
            "monthly_contribution": monthly_contribution,
            "annual_return_rate_percent": annual_return_rate_percent,
            "target_age_years": target_age_years,
            "second_gift": second_gift.model_dump() if second_gift is not None else None,
        }
    )
