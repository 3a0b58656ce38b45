"""Compounding cadence resolution."""

from enum import Enum
from typing import Any

from staking_calc.core.constants import (
    COMPOUNDING_PERIOD_DAYS,
    DAYS_PER_YEAR,
    DEFAULT_DAYS_PER_PERIOD,
)


class CompoundingFrequency(Enum):
    """Named compounding cadences offered to users."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    ANNUALLY = "annually"

    @property
    def days(self) -> int:
        """Days per compounding period."""
        return COMPOUNDING_PERIOD_DAYS[self.value]

    @property
    def label(self) -> str:
        return self.value.capitalize()


def get_compounding_frequency(frequency: Any) -> int:
    """Map a cadence name (or CompoundingFrequency) to days per period.

    Only the lower-case cadence names are recognised; anything else
    falls back to daily compounding (1).
    """
    if isinstance(frequency, CompoundingFrequency):
        return frequency.days
    if isinstance(frequency, str):
        return COMPOUNDING_PERIOD_DAYS.get(frequency, DEFAULT_DAYS_PER_PERIOD)
    return DEFAULT_DAYS_PER_PERIOD


def periods_per_year(days_per_period: float) -> float:
    """Convert days per period into compounding events per year."""
    return DAYS_PER_YEAR / days_per_period
