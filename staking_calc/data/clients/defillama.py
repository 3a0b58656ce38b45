"""DefiLlama yields API client.

Lists yield-bearing pools and the staking platforms available per asset.
API: https://yields.llama.fi/pools
"""

import logging
import math
from typing import Any, Dict, List, Optional

from config.settings import Settings, get_settings
from staking_calc.core.models import YieldPool
from staking_calc.data.cache.disk_cache import CacheKeys, DiskCache
from staking_calc.data.clients.base import APIError, HTTPClient

logger = logging.getLogger(__name__)


class DefiLlamaClient:
    """Client for the DefiLlama yield pool listing."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        cache: Optional[DiskCache] = None,
        http: Optional[HTTPClient] = None,
    ):
        self.settings = settings or get_settings()
        self.cache = cache or DiskCache(self.settings)
        self._http = http or HTTPClient(self.settings.defillama_api_url, self.settings)

    @staticmethod
    def _parse_float(value: Any) -> Optional[float]:
        if value is None or isinstance(value, bool):
            return None
        try:
            return float(value)
        except (TypeError, ValueError):
            return None

    @classmethod
    def parse_pool(cls, data: Dict[str, Any]) -> YieldPool:
        """Parse one pool entry from the /pools response."""
        return YieldPool(
            pool=str(data.get("pool", "")),
            chain=str(data.get("chain", "")),
            project=str(data.get("project", "")),
            symbol=str(data.get("symbol", "")),
            tvl_usd=cls._parse_float(data.get("tvlUsd")) or 0.0,
            apy=cls._parse_float(data.get("apy")) or 0.0,
            apy_base=cls._parse_float(data.get("apyBase")),
            apy_reward=cls._parse_float(data.get("apyReward")),
            stablecoin=bool(data.get("stablecoin", False)),
            pool_meta=data.get("poolMeta"),
            reward_tokens=list(data.get("rewardTokens") or []),
            underlying_tokens=list(data.get("underlyingTokens") or []),
            il_risk=data.get("ilRisk"),
            exposure=data.get("exposure"),
        )

    def _is_usable(self, data: Dict[str, Any]) -> bool:
        """Keep pools with a finite positive APY and enough TVL."""
        apy = data.get("apy")
        if isinstance(apy, bool) or not isinstance(apy, (int, float)):
            return False
        if math.isnan(apy) or math.isinf(apy) or apy <= 0:
            return False
        tvl = self._parse_float(data.get("tvlUsd"))
        return tvl is not None and tvl >= self.settings.min_pool_tvl_usd

    async def _fetch_pools(self) -> List[Dict[str, Any]]:
        response = await self._http.get_json("/pools")
        if not isinstance(response, dict) or not isinstance(response.get("data"), list):
            raise APIError("Invalid response from DefiLlama API")

        raw_pools = response["data"]
        filtered = [p for p in raw_pools if isinstance(p, dict) and self._is_usable(p)]
        logger.info(f"DefiLlama returned {len(raw_pools)} pools, {len(filtered)} usable")
        return filtered

    async def get_yield_pools(self) -> List[YieldPool]:
        """Fetch all usable yield pools (cached)."""
        try:
            raw = await self.cache.get_or_set_async(
                CacheKeys.yield_pools(),
                self._fetch_pools,
                ttl=self.settings.pool_cache_ttl_seconds,
            )
        except Exception as e:
            logger.error(f"Error fetching yield pools: {e}")
            raise APIError("Failed to fetch yield pools") from e
        return [self.parse_pool(p) for p in raw]

    async def get_staking_platforms(self, asset_symbol: str) -> List[YieldPool]:
        """Pools that hold the asset directly or as one side of a pair."""
        try:
            pools = await self.get_yield_pools()
        except Exception as e:
            logger.error(f"Error fetching staking platforms for {asset_symbol}: {e}")
            raise APIError(f"Failed to fetch staking platforms for {asset_symbol}") from e
        return [p for p in pools if p.matches_asset(asset_symbol)]

    async def get_top_staking_platforms(self, limit: int = 10) -> List[YieldPool]:
        """Highest-APY pools first."""
        try:
            pools = await self.get_yield_pools()
        except Exception as e:
            logger.error(f"Error fetching top staking platforms: {e}")
            raise APIError("Failed to fetch top staking platforms") from e
        return sorted(pools, key=lambda p: p.apy, reverse=True)[:limit]

    async def get_supported_assets(self) -> List[str]:
        """Sorted unique base symbols across all pools."""
        try:
            pools = await self.get_yield_pools()
        except Exception as e:
            logger.error(f"Error fetching supported assets: {e}")
            raise APIError("Failed to fetch supported assets") from e
        return sorted({p.base_symbol for p in pools if p.base_symbol})

    async def close(self) -> None:
        await self._http.close()
