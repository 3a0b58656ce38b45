"""Data layer for the Staking Reward Calculator."""

from .pipeline import StakingDataPipeline
from .cache.disk_cache import DiskCache, CacheKeys
from .clients import APIError, HTTPClient, DefiLlamaClient, CoinGeckoClient
from .fallback import get_fallback_coins

__all__ = [
    "StakingDataPipeline",
    "DiskCache",
    "CacheKeys",
    "APIError",
    "HTTPClient",
    "DefiLlamaClient",
    "CoinGeckoClient",
    "get_fallback_coins",
]
