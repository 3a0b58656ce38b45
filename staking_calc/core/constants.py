"""Constants for staking reward calculations."""

# Time constants
DAYS_PER_YEAR = 365  # rates are quoted per 365-day year, no leap adjustment

# Compounding defaults
DEFAULT_COMPOUNDS_PER_YEAR = 365  # daily compounding when converting APR to APY
DEFAULT_DAYS_PER_PERIOD = 1

# Days per compounding period for each named cadence
COMPOUNDING_PERIOD_DAYS = {
    "daily": 1,
    "weekly": 7,
    "monthly": 30,
    "quarterly": 90,
    "annually": 365,
}

# Default calculator inputs
DEFAULT_STAKE_DAYS = 365
DEFAULT_PROJECTION_POINTS = 60
