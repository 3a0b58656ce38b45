"""Staking Reward Calculator.

Estimates staking rewards for crypto assets from live yield-aggregator data,
using simple or compound interest and a curated table of per-asset staking
constraints.
"""

__version__ = "0.1.0"
