"""UI widgets for the Staking Reward Calculator."""

from .growth_chart import GrowthChart

__all__ = ["GrowthChart"]
