"""Locale-aware currency strings for projection summaries and tables."""

from __future__ import annotations

from dataclasses import dataclass

from giftplan.utils.exceptions import ConfigError
from giftplan.utils.rounding import round_half_up, round_unit


@dataclass(frozen=True)
class UnitStep:
    """Abbreviation applied to values at or above ``threshold``."""

    threshold: float
    divisor: float
    suffix: str
    decimals: int = 0


@dataclass(frozen=True)
class LocaleFormat:
    """How one locale writes money.

    Attributes:
        code: Locale code, e.g. ``ko_KR``.
        units: Abbreviations, largest threshold first.
        prefix: Currency symbol placed before the number.
        plain_suffix: Currency word after an unabbreviated number.
        full_suffix: Currency word after an abbreviated number in full form.
    """

    code: str
    units: tuple[UnitStep, ...]
    prefix: str = ""
    plain_suffix: str = ""
    full_suffix: str = ""


KO_KR = LocaleFormat(
    code="ko_KR",
    units=(
        UnitStep(threshold=100_000_000, divisor=100_000_000, suffix="억", decimals=1),
        UnitStep(threshold=10_000, divisor=10_000, suffix="만"),
    ),
    plain_suffix="원",
    full_suffix="원",
)

EN_US = LocaleFormat(
    code="en_US",
    units=(
        UnitStep(threshold=1_000_000, divisor=1_000_000, suffix="M", decimals=1),
        UnitStep(threshold=10_000, divisor=1_000, suffix="K"),
    ),
    prefix="$",
)

LOCALES: dict[str, LocaleFormat] = {KO_KR.code: KO_KR, EN_US.code: EN_US}

DEFAULT_LOCALE = KO_KR.code


def get_locale(code: str) -> LocaleFormat:
    """Look up a locale by code (``ko_KR`` or ``ko-KR``)."""
    key = code.replace("-", "_")
    try:
        return LOCALES[key]
    except KeyError:
        raise ConfigError(
            f"Unknown locale {code!r}; expected one of {sorted(LOCALES)}"
        ) from None


def format_number(value: float) -> str:
    """Whole units with thousands separators, e.g. ``1,234,567``."""
    return f"{round_unit(value):,}"


def _scaled(value: float, unit: UnitStep | None) -> float:
    if unit is None:
        return round_unit(value)
    if unit.decimals == 0:
        return round_unit(value / unit.divisor)
    return round_half_up(value / unit.divisor, unit.decimals)


def _abbreviate(value: float, locale: LocaleFormat) -> tuple[str, bool]:
    # Smallest to largest; None is the unabbreviated form
    steps: list[UnitStep | None] = [None, *reversed(locale.units)]
    pos = 0
    for i, unit in enumerate(steps[1:], start=1):
        if unit is not None and value >= unit.threshold:
            pos = i
    # Rounding can carry into the next unit, e.g. 999.9996K
    while pos + 1 < len(steps):
        current, larger = steps[pos], steps[pos + 1]
        assert larger is not None
        shown = _scaled(value, current) * (current.divisor if current is not None else 1)
        if shown < larger.threshold:
            break
        pos += 1

    unit = steps[pos]
    if unit is None:
        return f"{locale.prefix}{format_number(value)}{locale.plain_suffix}", False
    scaled = _scaled(value, unit)
    text = str(int(scaled)) if unit.decimals == 0 else f"{scaled:.{unit.decimals}f}"
    return f"{locale.prefix}{text}{unit.suffix}", True


def format_short(value: float, locale: str | LocaleFormat = DEFAULT_LOCALE) -> str:
    """Compact form for chart axes, e.g. ``3.1억`` or ``520만``."""
    loc = get_locale(locale) if isinstance(locale, str) else locale
    text, _ = _abbreviate(value, loc)
    return text


def format_full(value: float, locale: str | LocaleFormat = DEFAULT_LOCALE) -> str:
    """Form used in summaries and tables, e.g. ``3.1억원`` or ``520만원``."""
    loc = get_locale(locale) if isinstance(locale, str) else locale
    text, abbreviated = _abbreviate(value, loc)
    return f"{text}{loc.full_suffix}" if abbreviated else text
