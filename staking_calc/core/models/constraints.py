"""Per-asset staking constraint models."""

from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True)
class StakingPeriod:
    """A permitted staking window in days. ``max_days=None`` means no maximum."""

    name: str
    min_days: int
    max_days: Optional[int] = None
    apr: Optional[float] = None  # Window-specific APR, if the network publishes one

    def __post_init__(self):
        if self.min_days < 0:
            raise ValueError(f"Staking period '{self.name}' has negative min_days: {self.min_days}")
        if self.max_days is not None and self.max_days < self.min_days:
            raise ValueError(
                f"Staking period '{self.name}' has max_days {self.max_days} "
                f"below min_days {self.min_days}"
            )

    @property
    def is_unbounded(self) -> bool:
        return self.max_days is None

    def contains(self, days: float) -> bool:
        """Check if a duration falls inside this window (inclusive)."""
        if days < self.min_days:
            return False
        return self.is_unbounded or days <= self.max_days

    def describe(self) -> str:
        """Human-readable range, e.g. ``14-365 days`` or ``28-unlimited days``."""
        upper = "unlimited" if self.is_unbounded else str(self.max_days)
        return f"{self.min_days}-{upper} days"


@dataclass(frozen=True)
class CoinStakingConstraints:
    """Static staking rules for one asset."""

    symbol: str
    name: str
    min_stake_amount: float
    unbonding_period: int  # Days without rewards after unstaking; 0 = liquid
    staking_periods: Tuple[StakingPeriod, ...]
    notes: Optional[str] = None
    staking_method: Optional[str] = None
    staking_risks: Tuple[str, ...] = field(default_factory=tuple)
    reward_type: Optional[str] = None

    def __post_init__(self):
        # Frozen dataclass: normalise through object.__setattr__
        object.__setattr__(self, "symbol", self.symbol.upper())
        object.__setattr__(self, "staking_periods", tuple(self.staking_periods))
        object.__setattr__(self, "staking_risks", tuple(self.staking_risks))
        if not self.staking_periods:
            raise ValueError(f"{self.symbol} must define at least one staking period")
        if self.min_stake_amount < 0:
            raise ValueError(f"{self.symbol} has negative min_stake_amount")
        if self.unbonding_period < 0:
            raise ValueError(f"{self.symbol} has negative unbonding_period")

    @property
    def is_liquid(self) -> bool:
        """True if funds can be withdrawn without an unbonding wait."""
        return self.unbonding_period == 0

    def allows_amount(self, amount: float) -> bool:
        return amount >= self.min_stake_amount

    def allows_duration(self, days: float) -> bool:
        """A duration is valid if any window accepts it."""
        return any(period.contains(days) for period in self.staking_periods)

    def duration_hint(self) -> str:
        """Describe the accepted durations for error messages."""
        return ", ".join(
            f"{period.name} ({period.describe()})" for period in self.staking_periods
        )
