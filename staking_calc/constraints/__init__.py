"""Per-asset staking constraints."""

from .registry import (
    STAKING_CONSTRAINTS,
    get_staking_constraints,
    get_all_staking_constraints,
    is_valid_stake_amount,
    is_valid_stake_duration,
    supported_symbols,
)

__all__ = [
    "STAKING_CONSTRAINTS",
    "get_staking_constraints",
    "get_all_staking_constraints",
    "is_valid_stake_amount",
    "is_valid_stake_duration",
    "supported_symbols",
]
