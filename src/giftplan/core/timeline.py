"""Yearly timeline for a projection."""

from __future__ import annotations

from dataclasses import dataclass

MONTHS_PER_YEAR = 12


@dataclass(frozen=True, slots=True)
class Timeline:
    """Year grid derived from the projection horizon.

    Attributes:
        target_age_years: Last projected year (inclusive).
        gift_year: Year of the second gift, or None.
    """

    target_age_years: int
    gift_year: int | None

    @classmethod
    def from_years(cls, target_age_years: int, gift_year: int | None = None) -> Timeline:
        """Create a Timeline from the horizon and optional gift year."""
        return cls(target_age_years=target_age_years, gift_year=gift_year)

    def years(self) -> range:
        """Years that compound, i.e. 1 through ``target_age_years``."""
        return range(1, self.target_age_years + 1)

    def is_gift_year(self, year: int) -> bool:
        """Check if the second gift lands at the start of ``year``."""
        return self.gift_year is not None and year == self.gift_year
