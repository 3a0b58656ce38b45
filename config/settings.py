"""Pydantic settings for Staking Reward Calculator configuration."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Data providers
    defillama_api_url: str = Field(
        default="https://yields.llama.fi",
        description="DefiLlama yields API base URL",
    )
    coingecko_api_url: str = Field(
        default="https://api.coingecko.com/api/v3",
        description="CoinGecko API base URL",
    )
    http_timeout_seconds: float = Field(default=15.0, gt=0, le=120, description="HTTP request timeout")

    # CoinGecko free tier limits
    coingecko_rate_limit: int = Field(default=50, ge=1, description="Requests allowed per rate window")
    coingecko_rate_window: float = Field(default=60.0, gt=0, description="Rate window in seconds")

    # Cache Configuration
    cache_dir: Path = Field(default=Path(".cache/staking"), description="Cache directory path")
    pool_cache_ttl_seconds: int = Field(default=900, ge=0, description="Yield pool cache TTL in seconds")
    price_cache_ttl_seconds: int = Field(default=300, ge=0, description="Price cache TTL in seconds")
    coin_list_cache_ttl_seconds: int = Field(default=86400, ge=0, description="Coin list cache TTL in seconds")

    # Pool selection
    min_pool_tvl_usd: float = Field(default=10_000.0, ge=0, description="Ignore pools below this TVL")
    max_assets: int = Field(default=30, ge=1, le=500, description="Number of assets loaded into the calculator")

    # Display
    default_currency: str = Field(default="usd", description="Quote currency for prices")
    log_level: str = Field(default="WARNING", description="Root logging level")

    @field_validator("cache_dir", mode="before")
    @classmethod
    def parse_cache_dir(cls, v):
        """Convert string to Path."""
        if isinstance(v, str):
            return Path(v)
        return v

    @field_validator("default_currency", mode="before")
    @classmethod
    def normalize_currency(cls, v):
        """Currencies are lower-case in the CoinGecko API."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        if isinstance(v, str):
            v = v.strip().upper()
        if v not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v}")
        return v

    def ensure_cache_dir(self) -> Path:
        """Ensure cache directory exists and return it."""
        self.cache_dir.mkdir(parents=True, exist_ok=True)
        return self.cache_dir


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
