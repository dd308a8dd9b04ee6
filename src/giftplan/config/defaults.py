"""Default configuration values and scenario presets for giftplan."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from giftplan.config.schema import ProjectionInput, SecondGift, validate_input
from giftplan.io.yaml_loader import load_package_yaml
from giftplan.utils.exceptions import ConfigError

PRESETS_PATH = "config/presets.yaml"

# Gifts to a minor are tax-free up to this amount per ten-year window.
TAX_FREE_GIFT_LIMIT = 20_000_000
GIFT_LIMIT_RESET_YEARS = 10

DEFAULT_TARGET_AGE_YEARS = 20

# (min, max, step) for the interactive sliders
SLIDER_BOUNDS: dict[str, tuple[float, float, float]] = {
    "initial_gift": (0, 50_000_000, 1_000_000),
    "monthly_contribution": (0, 2_000_000, 100_000),
    "annual_return_rate_percent": (0.0, 15.0, 0.1),
}


@dataclass(frozen=True)
class Preset:
    """A named quick-start scenario."""

    name: str
    label: str
    description: str
    initial_gift: float
    monthly_contribution: float


def default_second_gift() -> SecondGift:
    """Second gift after the tax-free limit resets: 31,000,000 at year 10."""
    return SecondGift(at_year=GIFT_LIMIT_RESET_YEARS, amount=31_000_000)


def default_input() -> ProjectionInput:
    """Default projection: 20,000,000 gift, 500,000 a month, 7% for 20 years."""
    return ProjectionInput(
        initial_gift=TAX_FREE_GIFT_LIMIT,
        monthly_contribution=500_000,
        annual_return_rate_percent=7.0,
        target_age_years=DEFAULT_TARGET_AGE_YEARS,
    )


def load_presets() -> dict[str, Preset]:
    """Load the bundled scenario presets keyed by name."""
    raw: dict[str, dict[str, Any]] = load_package_yaml(PRESETS_PATH)
    presets: dict[str, Preset] = {}
    for name, entry in raw.items():
        try:
            presets[name] = Preset(
                name=name,
                label=entry["label"],
                description=entry.get("description", ""),
                initial_gift=float(entry["initial_gift"]),
                monthly_contribution=float(entry["monthly_contribution"]),
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise ConfigError(f"Malformed preset {name!r}: {exc}") from exc
    return presets


def preset_input(name: str, base: ProjectionInput | None = None) -> ProjectionInput:
    """Overlay a preset's amounts on ``base`` (defaults if omitted).

    Raises:
        ConfigError: If no preset has this name.
    """
    presets = load_presets()
    if name not in presets:
        raise ConfigError(f"Unknown preset {name!r}; expected one of {sorted(presets)}")
    preset = presets[name]
    data = (base or default_input()).model_dump()
    data.update(
        initial_gift=preset.initial_gift,
        monthly_contribution=preset.monthly_contribution,
    )
    return validate_input(data)
