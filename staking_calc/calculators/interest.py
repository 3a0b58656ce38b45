"""Simple and compound interest calculators.

Rates are nominal annual percentages over a 365-day year. The calculators
do not validate their inputs: negative or zero values produce the
mathematically defined result. Callers validate through
``staking_calc.constraints`` and ``staking_calc.engine`` first.
"""

from staking_calc.core.constants import DAYS_PER_YEAR, DEFAULT_COMPOUNDS_PER_YEAR, DEFAULT_DAYS_PER_PERIOD
from staking_calc.core.models import StakingParameters, StakingResult
from staking_calc.calculators.frequency import periods_per_year


def apr_to_apy(apr: float, compounding_frequency: float = DEFAULT_COMPOUNDS_PER_YEAR) -> float:
    """
    Convert a nominal APR into an effective APY.

    Args:
        apr: Annual rate in percent
        compounding_frequency: Compounding events per year (not days per period)

    Returns:
        Effective annual yield in percent
    """
    periodic_rate = apr / 100 / compounding_frequency
    apy = (1 + periodic_rate) ** compounding_frequency - 1
    return apy * 100


def calculate_simple_interest(params: StakingParameters) -> StakingResult:
    """Linear accrual: principal * daily rate * days."""
    daily_rate = params.apr / 100 / DAYS_PER_YEAR
    interest = params.principal * daily_rate * params.days
    return StakingResult(
        principal=params.principal,
        interest=interest,
        total=params.principal + interest,
        apr=params.apr,
    )


def calculate_compound_interest(params: StakingParameters) -> StakingResult:
    """
    Compound accrual over real-valued periods.

    periodic_rate = apr/100/365 * days_per_period
    periods = days / days_per_period (not truncated)
    total = principal * (1 + periodic_rate) ** periods
    """
    days_per_period = params.compounding_frequency or DEFAULT_DAYS_PER_PERIOD

    periodic_rate = params.apr / 100 / DAYS_PER_YEAR * days_per_period
    periods = params.days / days_per_period

    total = params.principal * (1 + periodic_rate) ** periods
    interest = total - params.principal

    return StakingResult(
        principal=params.principal,
        interest=interest,
        total=total,
        apr=params.apr,
        apy=apr_to_apy(params.apr, periods_per_year(days_per_period)),
    )


def calculate_staking_rewards(params: StakingParameters, use_compound: bool = False) -> StakingResult:
    """Calculate rewards with the compound or simple formula."""
    if use_compound:
        return calculate_compound_interest(params)
    return calculate_simple_interest(params)
