"""Data pipeline for the staking calculator.

Combines yield pools from DefiLlama with spot prices from CoinGecko into the
coin list the calculator offers, falling back to bundled data when the
yield source is unavailable.
"""

import asyncio
import logging
from typing import Dict, List, Optional

from config.settings import Settings, get_settings
from staking_calc.core.models import CoinData, Platform
from staking_calc.data.cache.disk_cache import DiskCache
from staking_calc.data.clients.coingecko import CoinGeckoClient
from staking_calc.data.clients.defillama import DefiLlamaClient
from staking_calc.data.fallback import get_fallback_coins

logger = logging.getLogger(__name__)


class StakingDataPipeline:
    """Orchestrates loading of coins, platforms and prices."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        yields: Optional[DefiLlamaClient] = None,
        prices: Optional[CoinGeckoClient] = None,
        cache: Optional[DiskCache] = None,
    ):
        """Initialize the pipeline.

        Args:
            settings: Application settings
            yields: Optional yield-pool client
            prices: Optional price client
            cache: Optional disk cache shared by the default clients
        """
        self.settings = settings or get_settings()
        self.cache = cache or DiskCache(self.settings)
        self.yields = yields or DefiLlamaClient(self.settings, self.cache)
        self.prices = prices or CoinGeckoClient(self.settings, self.cache)

        # Last loaded state
        self._coins: List[CoinData] = []
        self._prices: Dict[str, float] = {}
        self.used_fallback = False

    @property
    def coins(self) -> List[CoinData]:
        return list(self._coins)

    def get_coin(self, symbol: str) -> Optional[CoinData]:
        """Find a loaded coin by symbol (case-insensitive)."""
        wanted = symbol.upper()
        for coin in self._coins:
            if coin.symbol.upper() == wanted:
                return coin
        return None

    async def _load_coin(self, symbol: str) -> Optional[CoinData]:
        """Load one coin's platforms. Returns None if the lookup failed."""
        try:
            pools = await self.yields.get_staking_platforms(symbol)
        except Exception as e:
            logger.error(f"Error loading platforms for {symbol}: {e}")
            return None
        return CoinData(
            name=symbol,
            symbol=symbol,
            platforms=[Platform.from_pool(p) for p in pools],
        )

    async def load_coins(self) -> List[CoinData]:
        """
        Load stakeable coins with their platforms.

        Coins whose platform lookup fails, or that have no platforms, are
        skipped. If nothing could be loaded the bundled coin list is used.

        Returns:
            Coins sorted by symbol
        """
        self.used_fallback = False
        try:
            assets = await self.yields.get_supported_assets()
            results = await asyncio.gather(
                *(self._load_coin(symbol) for symbol in assets[: self.settings.max_assets])
            )
            coins = sorted(
                (c for c in results if c is not None and c.platforms),
                key=lambda c: c.symbol,
            )
        except Exception as e:
            logger.error(f"Error loading data: {e}")
            coins = []

        if not coins:
            logger.warning("No live staking data available, using bundled coin list")
            coins = get_fallback_coins()
            self.used_fallback = True

        self._coins = coins
        return self.coins

    async def _resolve_id(self, symbol: str) -> Optional[str]:
        try:
            return await self.prices.get_id_from_symbol(symbol)
        except Exception as e:
            logger.error(f"Error finding ID for {symbol}: {e}")
            return None

    async def load_prices(
        self,
        symbols: List[str],
        currency: Optional[str] = None,
    ) -> Dict[str, float]:
        """
        Spot prices keyed by symbol.

        Symbols that cannot be resolved or priced are left out. Any failure
        while fetching prices yields an empty mapping.
        """
        currency = currency or self.settings.default_currency
        try:
            coin_ids = await asyncio.gather(*(self._resolve_id(s) for s in symbols))
            valid_ids = [cid for cid in coin_ids if cid]
            if not valid_ids:
                return {}

            prices = await self.prices.get_prices(valid_ids, currency)

            price_map: Dict[str, float] = {}
            for symbol, coin_id in zip(symbols, coin_ids):
                quote = prices.get(coin_id) if coin_id else None
                if quote and quote.get(currency):
                    price_map[symbol] = float(quote[currency])
        except Exception as e:
            logger.error(f"Error loading coin prices: {e}")
            return {}

        self._prices = price_map
        for coin in self._coins:
            if coin.symbol in price_map:
                coin.current_price = price_map[coin.symbol]
        return dict(price_map)

    async def refresh_all(self) -> Dict[str, int]:
        """Reload coins, then prices for them."""
        coins = await self.load_coins()
        prices = await self.load_prices([c.symbol for c in coins])
        return {"coins": len(coins), "prices": len(prices)}

    def clear_cache(self) -> int:
        """Clear cached API responses and the in-memory state."""
        self._coins = []
        self._prices = {}
        return self.cache.clear()

    async def close(self) -> None:
        """Close clients and cache."""
        await self.yields.close()
        await self.prices.close()
        self.cache.close()
