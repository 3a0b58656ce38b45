"""Static registry of staking constraints for supported assets.

The table is built once at import time and never mutated. Symbols without an
entry have no constraints: every amount and duration is accepted for them,
since live yield data covers far more assets than this curated list.
"""

import logging
from types import MappingProxyType
from typing import List, Mapping, Optional

from staking_calc.core.models import CoinStakingConstraints, StakingPeriod

logger = logging.getLogger(__name__)


_CONSTRAINTS_TABLE = (
    CoinStakingConstraints(
        symbol="ETH",
        name="Ethereum",
        min_stake_amount=0.01,
        unbonding_period=0,
        staking_periods=(StakingPeriod("Flexible", min_days=1, max_days=None),),
        notes="Can be staked through liquid staking, so there is no unbonding wait.",
        staking_method="Liquid Staking",
        staking_risks=("Smart contract risk", "Validator risk"),
        reward_type="ETH",
    ),
    CoinStakingConstraints(
        symbol="SOL",
        name="Solana",
        min_stake_amount=0.1,
        unbonding_period=2,
        staking_periods=(StakingPeriod("Flexible", min_days=1, max_days=None),),
        notes="Unstaking on Solana takes 2-3 days.",
        staking_method="Delegation",
        staking_risks=("Validator risk", "Network halt risk"),
        reward_type="SOL",
    ),
    CoinStakingConstraints(
        symbol="ADA",
        name="Cardano",
        min_stake_amount=5,
        unbonding_period=0,
        staking_periods=(StakingPeriod("Flexible", min_days=1, max_days=None),),
        notes="Staked ADA is never locked and can be withdrawn at any time.",
        staking_method="Delegation",
        staking_risks=("Low risk",),
        reward_type="ADA",
    ),
    CoinStakingConstraints(
        symbol="DOT",
        name="Polkadot",
        min_stake_amount=1,
        unbonding_period=28,
        staking_periods=(StakingPeriod("Bonded", min_days=28, max_days=None),),
        notes="Unbonding takes 28 days and earns no rewards.",
        staking_method="Bonding",
        staking_risks=("Liquidity lock", "Slashing risk"),
        reward_type="DOT",
    ),
    CoinStakingConstraints(
        symbol="AVAX",
        name="Avalanche",
        min_stake_amount=1,
        unbonding_period=14,
        staking_periods=(StakingPeriod("Flexible", min_days=14, max_days=365),),
        notes="Avalanche stakes run for between 14 and 365 days.",
        staking_method="Delegation",
        staking_risks=("Validator risk", "Liquidity lock"),
        reward_type="AVAX",
    ),
    CoinStakingConstraints(
        symbol="ATOM",
        name="Cosmos",
        min_stake_amount=0.1,
        unbonding_period=21,
        staking_periods=(StakingPeriod("Bonded", min_days=21, max_days=None),),
        notes="Unbonding takes 21 days and earns no rewards.",
        staking_method="Delegation",
        staking_risks=("Liquidity lock", "Slashing risk"),
        reward_type="ATOM",
    ),
    CoinStakingConstraints(
        symbol="ALGO",
        name="Algorand",
        min_stake_amount=1,
        unbonding_period=0,
        staking_periods=(StakingPeriod("Flexible", min_days=1, max_days=None),),
        notes="Algorand staking is instant and never locks funds.",
        staking_method="Participation",
        staking_risks=("Low risk",),
        reward_type="ALGO",
    ),
)


def _build_registry(entries) -> Mapping[str, CoinStakingConstraints]:
    """Index entries by symbol, rejecting duplicates."""
    registry = {}
    for entry in entries:
        if entry.symbol in registry:
            raise ValueError(f"Duplicate staking constraints for {entry.symbol}")
        registry[entry.symbol] = entry
    return MappingProxyType(registry)


# Read-only view keyed by upper-case symbol, in table order
STAKING_CONSTRAINTS: Mapping[str, CoinStakingConstraints] = _build_registry(_CONSTRAINTS_TABLE)


def get_staking_constraints(symbol: str) -> Optional[CoinStakingConstraints]:
    """
    Look up the constraints for a coin.

    Args:
        symbol: Coin symbol, any case

    Returns:
        Constraints, or None if the coin is not in the registry
    """
    if not symbol:
        return None
    return STAKING_CONSTRAINTS.get(symbol.upper())


def get_all_staking_constraints() -> List[CoinStakingConstraints]:
    """Return every registry entry in table order, as a new list."""
    return list(STAKING_CONSTRAINTS.values())


def supported_symbols() -> List[str]:
    """Symbols with curated constraints."""
    return list(STAKING_CONSTRAINTS.keys())


def is_valid_stake_amount(symbol: str, amount: float) -> bool:
    """Check the minimum stake. Unknown coins accept any amount."""
    constraints = get_staking_constraints(symbol)
    if constraints is None:
        return True
    valid = constraints.allows_amount(amount)
    if not valid:
        logger.debug(f"{constraints.symbol}: amount {amount} below minimum {constraints.min_stake_amount}")
    return valid


def is_valid_stake_duration(symbol: str, days: float) -> bool:
    """Check that the duration fits at least one staking window. Unknown coins accept any duration."""
    constraints = get_staking_constraints(symbol)
    if constraints is None:
        return True
    valid = constraints.allows_duration(days)
    if not valid:
        logger.debug(f"{constraints.symbol}: {days} days outside {constraints.duration_hint()}")
    return valid
