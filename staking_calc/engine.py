"""Reward calculation service.

Validates a stake request against the constraints registry and runs the
reward calculators. This is the layer that rejects bad input: the
calculators themselves accept any number.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple, Union

import numpy as np

from staking_calc.calculators import (
    CompoundingFrequency,
    calculate_staking_rewards,
    get_compounding_frequency,
)
from staking_calc.constraints import (
    get_staking_constraints,
    is_valid_stake_amount,
    is_valid_stake_duration,
)
from staking_calc.core.constants import DEFAULT_PROJECTION_POINTS
from staking_calc.core.models import (
    CoinStakingConstraints,
    Platform,
    StakingParameters,
    StakingResult,
)

logger = logging.getLogger(__name__)


class StakeValidationError(ValueError):
    """Raised when a stake request fails validation. The message is user-facing."""


@dataclass(frozen=True)
class StakeRequest:
    """Everything the user picked in the calculator form."""

    symbol: str
    amount: float
    days: int
    platform: Optional[Platform]
    use_compound: bool = False
    frequency: Union[CompoundingFrequency, str] = CompoundingFrequency.DAILY


@dataclass(frozen=True)
class CalculationOutcome:
    """A validated request together with its result."""

    request: StakeRequest
    params: StakingParameters
    result: StakingResult
    constraints: Optional[CoinStakingConstraints] = None

    @property
    def platform(self) -> Platform:
        return self.request.platform

    @property
    def unbonding_days(self) -> int:
        """Reward-free wait after unstaking, 0 when unknown."""
        if self.constraints is None:
            return 0
        return self.constraints.unbonding_period

    def value_in_currency(self, amount: float, price: Optional[float]) -> Optional[float]:
        """Convert a coin amount to the quote currency, if a price is known."""
        if not price:
            return None
        return amount * price


def parse_stake_inputs(amount_text: str, days_text: str) -> Tuple[float, int]:
    """
    Parse raw form input.

    Raises:
        StakeValidationError: if either value is missing, not a number or
            not finite
    """
    if not amount_text or not amount_text.strip() or not days_text or not days_text.strip():
        raise StakeValidationError("Please enter a valid coin, amount and duration.")
    try:
        amount = float(amount_text.strip())
    except ValueError:
        raise StakeValidationError("Please enter a valid amount.") from None
    if not np.isfinite(amount):
        raise StakeValidationError("Please enter a valid amount.")
    try:
        # int() raises OverflowError for inf and ValueError for nan
        days = int(float(days_text.strip()))
    except (ValueError, OverflowError):
        raise StakeValidationError("Please enter a valid duration.") from None
    return amount, days


class RewardCalculator:
    """Validates stake requests and computes their rewards."""

    def validate(self, request: StakeRequest) -> Optional[CoinStakingConstraints]:
        """
        Check a request, in the order the form reports problems.

        Returns:
            The coin's constraints, or None for coins without curated data

        Raises:
            StakeValidationError: on the first failed check
        """
        if not request.symbol:
            raise StakeValidationError("Please enter a valid coin, amount and duration.")

        if not np.isfinite(request.amount) or request.amount <= 0:
            raise StakeValidationError("Please enter a valid amount.")

        if request.days <= 0:
            raise StakeValidationError("Please enter a valid duration.")

        symbol = request.symbol.upper()
        constraints = get_staking_constraints(symbol)

        if not is_valid_stake_amount(symbol, request.amount):
            raise StakeValidationError(
                f"Minimum stake amount: {constraints.min_stake_amount:g} {symbol}"
            )

        if not is_valid_stake_duration(symbol, request.days):
            raise StakeValidationError(
                f"Staking duration for {symbol} must be within: {constraints.duration_hint()}"
            )

        if request.platform is None:
            raise StakeValidationError("Select a valid platform.")

        return constraints

    def build_parameters(self, request: StakeRequest) -> StakingParameters:
        return StakingParameters(
            principal=request.amount,
            apr=request.platform.apr,
            days=request.days,
            compounding_frequency=get_compounding_frequency(request.frequency),
        )

    def calculate(self, request: StakeRequest) -> CalculationOutcome:
        """Validate a request and calculate its rewards."""
        constraints = self.validate(request)
        params = self.build_parameters(request)
        result = calculate_staking_rewards(params, request.use_compound)

        logger.info(
            f"{request.symbol.upper()} on {request.platform.name}: "
            f"{result.interest:.6f} reward over {request.days}d "
            f"({'compound' if request.use_compound else 'simple'})"
        )

        return CalculationOutcome(
            request=request,
            params=params,
            result=result,
            constraints=constraints,
        )


def project_balance(
    params: StakingParameters,
    use_compound: bool = False,
    points: int = DEFAULT_PROJECTION_POINTS,
) -> np.ndarray:
    """
    Balance over the staking period, sampled at evenly spaced days.

    The last sample equals the calculator's total for the full duration.
    """
    if points < 2:
        raise ValueError("points must be at least 2")

    days = np.linspace(0.0, float(params.days), points)
    return np.array([
        calculate_staking_rewards(
            StakingParameters(
                principal=params.principal,
                apr=params.apr,
                days=float(d),
                compounding_frequency=params.compounding_frequency,
            ),
            use_compound,
        ).total
        for d in days
    ])
