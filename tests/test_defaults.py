"""Tests for defaults and scenario presets."""

from __future__ import annotations

import pytest

from giftplan.config.defaults import (
    SLIDER_BOUNDS,
    default_input,
    default_second_gift,
    load_presets,
    preset_input,
)
from giftplan.config.schema import ProjectionInput
from giftplan.utils.exceptions import ConfigError


class TestDefaults:
    def test_default_input(self) -> None:
        inp = default_input()
        assert inp.initial_gift == 20_000_000
        assert inp.monthly_contribution == 500_000
        assert inp.annual_return_rate_percent == 7.0
        assert inp.target_age_years == 20
        assert inp.second_gift is None

    def test_default_second_gift_fits_default_horizon(self) -> None:
        gift = default_second_gift()
        inp = default_input().model_copy(update={"second_gift": gift})
        assert 1 <= gift.at_year <= inp.target_age_years

    def test_slider_bounds_cover_defaults(self) -> None:
        inp = default_input()
        for field, (lo, hi, _step) in SLIDER_BOUNDS.items():
            assert lo <= getattr(inp, field) <= hi


class TestPresets:
    def test_bundled_presets(self) -> None:
        presets = load_presets()
        assert set(presets) == {"steady", "thrifty", "generous"}
        assert presets["generous"].initial_gift == 31_000_000
        assert presets["steady"].monthly_contribution == 100_000

    def test_preset_input_overlays_amounts(self) -> None:
        inp = preset_input("thrifty")
        assert inp.initial_gift == 10_000_000
        assert inp.monthly_contribution == 200_000
        assert inp.annual_return_rate_percent == 7.0

    def test_preset_input_keeps_base(self) -> None:
        base = ProjectionInput(annual_return_rate_percent=3.0, target_age_years=5)
        inp = preset_input("steady", base=base)
        assert inp.target_age_years == 5
        assert inp.annual_return_rate_percent == 3.0
        assert inp.initial_gift == 0

    def test_unknown_preset(self) -> None:
        with pytest.raises(ConfigError):
            preset_input("reckless")
