"""Reward calculators: interest formulas and compounding helpers."""

from .frequency import CompoundingFrequency, get_compounding_frequency, periods_per_year
from .interest import (
    apr_to_apy,
    calculate_simple_interest,
    calculate_compound_interest,
    calculate_staking_rewards,
)

__all__ = [
    "CompoundingFrequency",
    "get_compounding_frequency",
    "periods_per_year",
    "apr_to_apy",
    "calculate_simple_interest",
    "calculate_compound_interest",
    "calculate_staking_rewards",
]
