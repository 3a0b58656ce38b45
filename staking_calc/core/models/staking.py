"""Calculation input and output models."""

from dataclasses import dataclass
from typing import Optional, Dict, Any


@dataclass(frozen=True)
class StakingParameters:
    """Inputs for a single reward calculation."""

    principal: float  # Amount of the asset being staked
    apr: float  # Nominal annual rate in percent (5.25 = 5.25%)
    days: float  # Staking duration in days
    compounding_frequency: Optional[int] = None  # Days per compounding period


@dataclass(frozen=True)
class StakingResult:
    """Outcome of a reward calculation."""

    principal: float
    interest: float
    total: float
    apr: float
    apy: Optional[float] = None  # Only set for compound calculations

    @property
    def uses_compounding(self) -> bool:
        """True if the result came from the compound path."""
        return self.apy is not None

    @property
    def return_pct(self) -> float:
        """Reward as a percentage of principal."""
        if self.principal == 0:
            return 0.0
        return self.interest / self.principal * 100

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "principal": self.principal,
            "interest": self.interest,
            "total": self.total,
            "apr": self.apr,
        }
        if self.apy is not None:
            data["apy"] = self.apy
        return data
