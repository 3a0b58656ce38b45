"""Core data models for the Staking Reward Calculator."""

from .staking import StakingParameters, StakingResult
from .constraints import StakingPeriod, CoinStakingConstraints
from .platform import YieldPool, Platform, CoinData, CoinPrice

__all__ = [
    "StakingParameters",
    "StakingResult",
    "StakingPeriod",
    "CoinStakingConstraints",
    "YieldPool",
    "Platform",
    "CoinData",
    "CoinPrice",
]
