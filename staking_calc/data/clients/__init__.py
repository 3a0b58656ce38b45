"""Market-data API clients."""

from staking_calc.data.clients.base import APIError, HTTPClient
from staking_calc.data.clients.defillama import DefiLlamaClient
from staking_calc.data.clients.coingecko import CoinGeckoClient

__all__ = [
    "APIError",
    "HTTPClient",
    "DefiLlamaClient",
    "CoinGeckoClient",
]
