"""Pytest configuration and fixtures."""

from typing import Any, Dict, List
from unittest.mock import AsyncMock, MagicMock

import pytest

from config.settings import Settings
from staking_calc.core.models import CoinData, Platform, StakingParameters
from staking_calc.data.cache.disk_cache import DiskCache
from staking_calc.data.clients.base import HTTPClient


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings with an isolated cache directory."""
    return Settings(
        cache_dir=tmp_path / "cache",
        min_pool_tvl_usd=10_000,
        max_assets=30,
        default_currency="usd",
    )


@pytest.fixture
def disk_cache(settings):
    """Real diskcache-backed cache in a temp directory."""
    cache = DiskCache(settings, namespace="test")
    yield cache
    cache.close()


@pytest.fixture
def mock_http():
    """HTTP client whose get_json is an AsyncMock."""
    http = MagicMock(spec=HTTPClient)
    http.get_json = AsyncMock()
    http.close = AsyncMock()
    return http


@pytest.fixture
def sample_params() -> StakingParameters:
    """1000 units at 12% APR for a year, compounded monthly."""
    return StakingParameters(principal=1000, apr=12, days=365, compounding_frequency=30)


@pytest.fixture
def raw_pools() -> List[Dict[str, Any]]:
    """Pool entries shaped like the DefiLlama /pools response."""
    return [
        {
            "pool": "747c1d2a-c668-4682-b9f9-296708a3dd90",
            "chain": "Ethereum",
            "project": "lido",
            "symbol": "STETH",
            "tvlUsd": 24_000_000_000,
            "apyBase": 3.1,
            "apyReward": None,
            "apy": 3.1,
            "stablecoin": False,
            "ilRisk": "no",
            "exposure": "single",
        },
        {
            "pool": "eth-usdc-uni",
            "chain": "Ethereum",
            "project": "uniswap-v3",
            "symbol": "ETH-USDC",
            "tvlUsd": 150_000_000,
            "apy": 12.5,
            "apyBase": 12.5,
            "stablecoin": False,
            "underlyingTokens": ["0xeth", "0xusdc"],
        },
        {
            "pool": "sol-marinade",
            "chain": "Solana",
            "project": "marinade-liquid-staking",
            "symbol": "SOL",
            "tvlUsd": 1_200_000_000,
            "apy": 7.2,
            "stablecoin": False,
        },
        {
            "pool": "usdc-weth-curve",
            "chain": "Ethereum",
            "project": "curve-dex",
            "symbol": "USDC-WETH",
            "tvlUsd": 5_000_000,
            "apy": 4.0,
            "stablecoin": False,
        },
        {
            # Below the TVL floor
            "pool": "tiny",
            "chain": "Base",
            "project": "tiny-farm",
            "symbol": "ETH",
            "tvlUsd": 500,
            "apy": 80.0,
        },
        {
            # Zero APY
            "pool": "dead",
            "chain": "Ethereum",
            "project": "dead-pool",
            "symbol": "DOT",
            "tvlUsd": 1_000_000,
            "apy": 0,
        },
        {
            # Missing APY
            "pool": "no-apy",
            "chain": "Ethereum",
            "project": "unknown",
            "symbol": "ATOM",
            "tvlUsd": 1_000_000,
            "apy": None,
        },
    ]


@pytest.fixture
def sample_coins() -> List[CoinData]:
    return [
        CoinData(
            name="ETH",
            symbol="ETH",
            platforms=[Platform(name="lido", apr=3.1, chain="Ethereum", tvl_usd=24e9)],
        ),
        CoinData(
            name="SOL",
            symbol="SOL",
            platforms=[Platform(name="marinade-liquid-staking", apr=7.2, chain="Solana")],
        ),
    ]
