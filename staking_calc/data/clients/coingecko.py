"""CoinGecko API client for spot prices.

The free tier allows roughly 50 calls per minute; requests are throttled
with an AsyncLimiter and responses are cached on disk.
"""

import logging
from typing import Any, Dict, List, Optional

from aiolimiter import AsyncLimiter

from config.settings import Settings, get_settings
from staking_calc.core.models import CoinPrice
from staking_calc.data.cache.disk_cache import CacheKeys, DiskCache
from staking_calc.data.clients.base import APIError, HTTPClient

logger = logging.getLogger(__name__)


class CoinGeckoClient:
    """Rate-limited, cached CoinGecko client."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        cache: Optional[DiskCache] = None,
        http: Optional[HTTPClient] = None,
    ):
        self.settings = settings or get_settings()
        self.cache = cache or DiskCache(self.settings)
        self._http = http or HTTPClient(self.settings.coingecko_api_url, self.settings)
        self._rate_limiter = AsyncLimiter(
            self.settings.coingecko_rate_limit, self.settings.coingecko_rate_window
        )

    async def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """Execute a GET with rate limiting."""
        async with self._rate_limiter:
            return await self._http.get_json(path, params)

    async def get_coin_list(self) -> List[Dict[str, str]]:
        """All coins as ``{id, symbol, name}`` (cached for a day)."""
        try:
            return await self.cache.get_or_set_async(
                CacheKeys.coin_list(),
                lambda: self._get("/coins/list"),
                ttl=self.settings.coin_list_cache_ttl_seconds,
            )
        except Exception as e:
            logger.error(f"Error fetching coin list: {e}")
            raise APIError("Failed to fetch coin list") from e

    async def get_coin_details(self, coin_id: str, currency: Optional[str] = None) -> Dict[str, Any]:
        """Detailed market data for one coin."""
        currency = currency or self.settings.default_currency
        params = {
            "localization": "false",
            "tickers": "false",
            "market_data": "true",
            "community_data": "false",
            "developer_data": "false",
            "sparkline": "false",
        }
        try:
            return await self.cache.get_or_set_async(
                CacheKeys.coin_details(coin_id, currency),
                lambda: self._get(f"/coins/{coin_id}", params),
                ttl=self.settings.price_cache_ttl_seconds,
            )
        except Exception as e:
            logger.error(f"Error fetching details for coin {coin_id}: {e}")
            raise APIError(f"Failed to fetch details for coin {coin_id}") from e

    async def get_prices(
        self,
        coin_ids: List[str],
        currency: Optional[str] = None,
    ) -> Dict[str, Dict[str, float]]:
        """
        Spot prices for several coins.

        Returns:
            Mapping of coin id to ``{currency: price, f"{currency}_24h_change": pct}``
        """
        currency = currency or self.settings.default_currency
        if not coin_ids:
            return {}
        params = {
            "ids": ",".join(coin_ids),
            "vs_currencies": currency,
            "include_24hr_change": "true",
        }
        try:
            return await self.cache.get_or_set_async(
                CacheKeys.prices(coin_ids, currency),
                lambda: self._get("/simple/price", params),
                ttl=self.settings.price_cache_ttl_seconds,
            )
        except Exception as e:
            logger.error(f"Error fetching prices: {e}")
            raise APIError("Failed to fetch coin prices") from e

    async def get_price_quotes(
        self,
        coin_ids: List[str],
        currency: Optional[str] = None,
    ) -> Dict[str, CoinPrice]:
        """Typed variant of get_prices; coins without a quote are omitted."""
        currency = currency or self.settings.default_currency
        raw = await self.get_prices(coin_ids, currency)
        quotes = {}
        for coin_id, values in raw.items():
            price = (values or {}).get(currency)
            if price is None:
                continue
            quotes[coin_id] = CoinPrice(
                coin_id=coin_id,
                currency=currency,
                price=float(price),
                change_24h=values.get(f"{currency}_24h_change"),
            )
        return quotes

    async def get_id_from_symbol(self, symbol: str) -> Optional[str]:
        """First coin id whose symbol matches, case-insensitively."""
        coins = await self.get_coin_list()
        wanted = symbol.lower()
        for coin in coins:
            if str(coin.get("symbol", "")).lower() == wanted:
                return coin.get("id")
        return None

    async def close(self) -> None:
        await self._http.close()
