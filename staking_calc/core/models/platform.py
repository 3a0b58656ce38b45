"""Market data models: yield pools, staking platforms and coins."""

from dataclasses import dataclass, field
from typing import Optional, List


@dataclass
class YieldPool:
    """A single yield-bearing pool as reported by the yield aggregator."""

    pool: str  # Aggregator pool identifier
    chain: str
    project: str
    symbol: str
    tvl_usd: float
    apy: float  # Percent

    apy_base: Optional[float] = None
    apy_reward: Optional[float] = None
    stablecoin: bool = False
    pool_meta: Optional[str] = None
    reward_tokens: List[str] = field(default_factory=list)
    underlying_tokens: List[str] = field(default_factory=list)
    il_risk: Optional[str] = None
    exposure: Optional[str] = None

    @property
    def base_symbol(self) -> str:
        """First segment of the pool symbol, e.g. ``ETH`` for ``ETH-USDC``."""
        return self.symbol.split("-")[0].upper()

    def matches_asset(self, asset_symbol: str) -> bool:
        """Check if the pool holds the asset directly or as part of a pair."""
        asset = asset_symbol.lower()
        pool_symbol = self.symbol.lower()
        return (
            pool_symbol == asset
            or f"-{asset}" in pool_symbol
            or f"{asset}-" in pool_symbol
        )


@dataclass
class Platform:
    """A place where a coin can be staked, with its advertised rate."""

    name: str
    apr: float  # Percent; aggregator APY values are used as-is
    chain: Optional[str] = None
    tvl_usd: Optional[float] = None

    @classmethod
    def from_pool(cls, pool: YieldPool) -> "Platform":
        return cls(
            name=pool.project,
            apr=pool.apy,
            chain=pool.chain,
            tvl_usd=pool.tvl_usd,
        )

    @property
    def label(self) -> str:
        """Display label for selection lists."""
        parts = [self.name]
        if self.chain:
            parts.append(f"[{self.chain}]")
        parts.append(f"{self.apr:.2f}% APR")
        if self.tvl_usd:
            parts.append(f"TVL ${self.tvl_usd / 1e6:,.1f}M")
        return " ".join(parts)


@dataclass
class CoinData:
    """A stakeable coin and its platforms."""

    name: str
    symbol: str
    platforms: List[Platform] = field(default_factory=list)
    id: Optional[str] = None  # Market-data provider id
    current_price: Optional[float] = None
    price_change_24h: Optional[float] = None

    @property
    def best_platform(self) -> Optional[Platform]:
        if not self.platforms:
            return None
        return max(self.platforms, key=lambda p: p.apr)


@dataclass(frozen=True)
class CoinPrice:
    """Spot price for a coin in a quote currency."""

    coin_id: str
    currency: str
    price: float
    change_24h: Optional[float] = None
