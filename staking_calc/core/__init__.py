"""Core module - models and constants."""

from .models import (
    StakingParameters,
    StakingResult,
    StakingPeriod,
    CoinStakingConstraints,
    YieldPool,
    Platform,
    CoinData,
    CoinPrice,
)
from .constants import DAYS_PER_YEAR, DEFAULT_COMPOUNDS_PER_YEAR, DEFAULT_DAYS_PER_PERIOD

__all__ = [
    "StakingParameters",
    "StakingResult",
    "StakingPeriod",
    "CoinStakingConstraints",
    "YieldPool",
    "Platform",
    "CoinData",
    "CoinPrice",
    "DAYS_PER_YEAR",
    "DEFAULT_COMPOUNDS_PER_YEAR",
    "DEFAULT_DAYS_PER_PERIOD",
]
