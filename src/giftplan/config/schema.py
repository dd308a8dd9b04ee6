"""Pydantic v2 input models for giftplan."""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from giftplan.utils.exceptions import InvalidInputError


class SecondGift(BaseModel):
    """A one-time lump sum added at the start of a later year."""

    model_config = ConfigDict(extra="forbid", frozen=True, allow_inf_nan=False)

    at_year: int = Field(ge=1, description="Year whose compounding the gift precedes")
    amount: float = Field(ge=0, description="Gift amount in whole currency units")


class ProjectionInput(BaseModel):
    """Parameters of a savings projection."""

    model_config = ConfigDict(extra="forbid", frozen=True, allow_inf_nan=False)

    initial_gift: float = Field(default=0.0, ge=0, description="Lump sum paid in at year 0")
    monthly_contribution: float = Field(
        default=0.0, ge=0, description="Amount added at the end of every month"
    )
    annual_return_rate_percent: float = Field(
        default=0.0,
        ge=0,
        description="Nominal annual rate in percent, compounded monthly",
    )
    target_age_years: int = Field(ge=0, description="Number of yearly periods to project")
    second_gift: SecondGift | None = Field(
        default=None,
        description="Optional additional lump sum at a later year",
    )

    @model_validator(mode="after")
    def _validate_second_gift(self) -> ProjectionInput:
        check_second_gift(self)
        return self

    @property
    def monthly_rate(self) -> float:
        """Effective monthly interest rate as a fraction."""
        return self.annual_return_rate_percent / 100 / 12

    @property
    def gift_year(self) -> int | None:
        """Year of the second gift, or None when not configured."""
        return self.second_gift.at_year if self.second_gift is not None else None


def check_second_gift(inp: ProjectionInput) -> None:
    """Raise InvalidInputError if the second gift falls outside ``[1, target_age_years]``."""
    gift = inp.second_gift
    if gift is None:
        return
    if not 1 <= gift.at_year <= inp.target_age_years:
        raise InvalidInputError(
            "second_gift.at_year",
            f"must lie in [1, {inp.target_age_years}], got {gift.at_year}",
        )


def _check_amount(field: str, value: float) -> None:
    if not math.isfinite(value):
        raise InvalidInputError(field, f"must be finite, got {value}")
    if value < 0:
        raise InvalidInputError(field, f"must be non-negative, got {value}")


def check_input(inp: ProjectionInput) -> None:
    """Check every field of an input against its domain.

    Models built through ``model_construct`` skip pydantic validation, so the
    engine runs this before projecting.
    """
    _check_amount("initial_gift", inp.initial_gift)
    _check_amount("monthly_contribution", inp.monthly_contribution)
    _check_amount("annual_return_rate_percent", inp.annual_return_rate_percent)
    if isinstance(inp.target_age_years, bool) or not isinstance(inp.target_age_years, int):
        raise InvalidInputError("target_age_years", "must be an integer")
    if inp.target_age_years < 0:
        raise InvalidInputError(
            "target_age_years", f"must be non-negative, got {inp.target_age_years}"
        )
    if inp.second_gift is not None:
        _check_amount("second_gift.amount", inp.second_gift.amount)
    check_second_gift(inp)


def validate_input(data: ProjectionInput | Mapping[str, Any]) -> ProjectionInput:
    """Coerce a mapping into a ProjectionInput, reporting the offending field.

    Raises:
        InvalidInputError: If any field is outside its domain.
    """
    if isinstance(data, ProjectionInput):
        check_input(data)
        return data
    try:
        return ProjectionInput.model_validate(data)
    except ValidationError as exc:
        first = exc.errors()[0]
        cause = first.get("ctx", {}).get("error")
        if isinstance(cause, InvalidInputError):
            raise cause from exc
        field = ".".join(str(part) for part in first["loc"]) or "input"
        raise InvalidInputError(field, first["msg"]) from exc
