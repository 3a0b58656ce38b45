"""Unit tests for the CoinGecko client."""

import pytest

from staking_calc.data.clients.base import APIError
from staking_calc.data.clients.coingecko import CoinGeckoClient

COIN_LIST = [
    {"id": "ethereum", "symbol": "eth", "name": "Ethereum"},
    {"id": "ethereum-wormhole", "symbol": "eth", "name": "Ethereum (Wormhole)"},
    {"id": "solana", "symbol": "sol", "name": "Solana"},
    {"id": "polkadot", "symbol": "dot", "name": "Polkadot"},
]


@pytest.fixture
def client(settings, disk_cache, mock_http):
    return CoinGeckoClient(settings=settings, cache=disk_cache, http=mock_http)


class TestCoinList:
    """Tests for the coin list and symbol resolution."""

    @pytest.mark.asyncio
    async def test_first_match_wins(self, client, mock_http):
        mock_http.get_json.return_value = COIN_LIST

        assert await client.get_id_from_symbol("ETH") == "ethereum"
        assert await client.get_id_from_symbol("dot") == "polkadot"

    @pytest.mark.asyncio
    async def test_unknown_symbol(self, client, mock_http):
        mock_http.get_json.return_value = COIN_LIST
        assert await client.get_id_from_symbol("XYZ") is None

    @pytest.mark.asyncio
    async def test_coin_list_cached(self, client, mock_http):
        mock_http.get_json.return_value = COIN_LIST

        await client.get_id_from_symbol("ETH")
        await client.get_id_from_symbol("SOL")

        mock_http.get_json.assert_called_once_with("/coins/list", None)

    @pytest.mark.asyncio
    async def test_coin_list_failure(self, client, mock_http):
        mock_http.get_json.side_effect = APIError("API Error: 429 - Too Many Requests", status=429)

        with pytest.raises(APIError, match="Failed to fetch coin list"):
            await client.get_coin_list()


class TestPrices:
    """Tests for price fetching."""

    @pytest.mark.asyncio
    async def test_get_prices(self, client, mock_http):
        mock_http.get_json.return_value = {
            "ethereum": {"usd": 3200.5, "usd_24h_change": -1.2},
            "solana": {"usd": 145.0, "usd_24h_change": 3.4},
        }

        prices = await client.get_prices(["ethereum", "solana"], "usd")

        assert prices["ethereum"]["usd"] == 3200.5
        path, params = mock_http.get_json.call_args.args
        assert path == "/simple/price"
        assert params["ids"] == "ethereum,solana"
        assert params["vs_currencies"] == "usd"

    @pytest.mark.asyncio
    async def test_prices_cached_per_id_set(self, client, mock_http):
        mock_http.get_json.return_value = {"ethereum": {"usd": 1.0}}

        await client.get_prices(["ethereum"])
        await client.get_prices(["ethereum"])
        await client.get_prices(["ethereum"], "eur")

        assert mock_http.get_json.call_count == 2

    @pytest.mark.asyncio
    async def test_empty_ids(self, client, mock_http):
        assert await client.get_prices([]) == {}
        mock_http.get_json.assert_not_called()

    @pytest.mark.asyncio
    async def test_price_quotes(self, client, mock_http):
        mock_http.get_json.return_value = {
            "ethereum": {"usd": 3200.5, "usd_24h_change": -1.2},
            "delisted": {},
        }

        quotes = await client.get_price_quotes(["ethereum", "delisted"])

        assert set(quotes) == {"ethereum"}
        assert quotes["ethereum"].price == 3200.5
        assert quotes["ethereum"].change_24h == -1.2
        assert quotes["ethereum"].currency == "usd"

    @pytest.mark.asyncio
    async def test_prices_failure(self, client, mock_http):
        mock_http.get_json.side_effect = APIError("No response received from API")

        with pytest.raises(APIError, match="Failed to fetch coin prices"):
            await client.get_prices(["ethereum"])

    @pytest.mark.asyncio
    async def test_coin_details(self, client, mock_http):
        mock_http.get_json.return_value = {"id": "solana", "market_data": {"current_price": {"usd": 145.0}}}

        details = await client.get_coin_details("solana")

        assert details["market_data"]["current_price"]["usd"] == 145.0
        path, params = mock_http.get_json.call_args.args
        assert path == "/coins/solana"
        assert params["market_data"] == "true"
