"""Unit tests for the DefiLlama yields client."""

import pytest

from staking_calc.core.models import Platform, YieldPool
from staking_calc.data.clients.base import APIError
from staking_calc.data.clients.defillama import DefiLlamaClient


@pytest.fixture
def client(settings, disk_cache, mock_http, raw_pools):
    mock_http.get_json.return_value = {"status": "success", "data": raw_pools}
    return DefiLlamaClient(settings=settings, cache=disk_cache, http=mock_http)


class TestParsePool:
    """Tests for pool parsing."""

    def test_full_entry(self, raw_pools):
        pool = DefiLlamaClient.parse_pool(raw_pools[0])

        assert isinstance(pool, YieldPool)
        assert pool.project == "lido"
        assert pool.chain == "Ethereum"
        assert pool.symbol == "STETH"
        assert pool.tvl_usd == 24_000_000_000
        assert pool.apy == 3.1
        assert pool.apy_base == 3.1
        assert pool.apy_reward is None
        assert pool.il_risk == "no"

    def test_sparse_entry(self):
        pool = DefiLlamaClient.parse_pool({"symbol": "ATOM"})

        assert pool.apy == 0.0
        assert pool.tvl_usd == 0.0
        assert pool.reward_tokens == []
        assert pool.stablecoin is False

    def test_bad_numbers(self):
        pool = DefiLlamaClient.parse_pool({"symbol": "X", "apy": "n/a", "tvlUsd": None})
        assert pool.apy == 0.0
        assert pool.tvl_usd == 0.0

    def test_platform_from_pool(self, raw_pools):
        platform = Platform.from_pool(DefiLlamaClient.parse_pool(raw_pools[2]))

        assert platform.name == "marinade-liquid-staking"
        assert platform.apr == 7.2
        assert platform.chain == "Solana"
        assert "7.20% APR" in platform.label


class TestYieldPools:
    """Tests for pool fetching and filtering."""

    @pytest.mark.asyncio
    async def test_filters_unusable_pools(self, client):
        pools = await client.get_yield_pools()

        projects = {p.project for p in pools}
        assert projects == {"lido", "uniswap-v3", "marinade-liquid-staking", "curve-dex"}

    @pytest.mark.asyncio
    async def test_tvl_floor_from_settings(self, settings, disk_cache, mock_http, raw_pools):
        mock_http.get_json.return_value = {"data": raw_pools}
        strict = DefiLlamaClient(
            settings=settings.model_copy(update={"min_pool_tvl_usd": 1e9}),
            cache=disk_cache,
            http=mock_http,
        )

        pools = await strict.get_yield_pools()
        assert {p.project for p in pools} == {"lido", "marinade-liquid-staking"}

    @pytest.mark.asyncio
    async def test_cached(self, client, mock_http):
        await client.get_yield_pools()
        await client.get_yield_pools()

        mock_http.get_json.assert_called_once_with("/pools")

    @pytest.mark.asyncio
    async def test_empty_pool_list(self, client, mock_http):
        mock_http.get_json.return_value = {"status": "success", "data": []}

        assert await client.get_yield_pools() == []
        assert await client.get_supported_assets() == []

    @pytest.mark.asyncio
    async def test_data_not_a_list(self, client, mock_http):
        mock_http.get_json.return_value = {"data": {"pools": []}}

        with pytest.raises(APIError, match="Failed to fetch yield pools"):
            await client.get_yield_pools()

    @pytest.mark.asyncio
    async def test_invalid_response(self, client, mock_http):
        mock_http.get_json.return_value = {"status": "error"}

        with pytest.raises(APIError, match="Failed to fetch yield pools"):
            await client.get_yield_pools()

    @pytest.mark.asyncio
    async def test_http_failure(self, client, mock_http):
        mock_http.get_json.side_effect = APIError("API Error: 503 - Service Unavailable", status=503)

        with pytest.raises(APIError, match="Failed to fetch yield pools"):
            await client.get_yield_pools()


class TestStakingPlatforms:
    """Tests for per-asset platform lookup."""

    @pytest.mark.asyncio
    async def test_exact_and_pair_matches(self, client):
        pools = await client.get_staking_platforms("eth")

        # ETH alone is below the TVL floor; ETH-USDC matches as a pair
        assert [p.project for p in pools] == ["uniswap-v3"]

    @pytest.mark.asyncio
    async def test_pair_suffix_match(self, client):
        pools = await client.get_staking_platforms("USDC")
        assert {p.symbol for p in pools} == {"ETH-USDC", "USDC-WETH"}

    @pytest.mark.asyncio
    async def test_exact_match(self, client):
        pools = await client.get_staking_platforms("SOL")
        assert [p.project for p in pools] == ["marinade-liquid-staking"]

    @pytest.mark.asyncio
    async def test_no_match(self, client):
        assert await client.get_staking_platforms("DOGE") == []

    @pytest.mark.asyncio
    async def test_failure(self, client, mock_http):
        mock_http.get_json.side_effect = APIError("No response received from API")

        with pytest.raises(APIError, match="Failed to fetch staking platforms for SOL"):
            await client.get_staking_platforms("SOL")


class TestTopAndSupported:
    """Tests for ranking and asset listing."""

    @pytest.mark.asyncio
    async def test_top_platforms(self, client):
        top = await client.get_top_staking_platforms(limit=2)
        assert [p.apy for p in top] == [12.5, 7.2]

    @pytest.mark.asyncio
    async def test_supported_assets(self, client):
        assets = await client.get_supported_assets()
        assert assets == ["ETH", "SOL", "STETH", "USDC"]

    @pytest.mark.asyncio
    async def test_supported_assets_failure(self, client, mock_http):
        mock_http.get_json.side_effect = APIError("boom")

        with pytest.raises(APIError, match="Failed to fetch supported assets"):
            await client.get_supported_assets()
