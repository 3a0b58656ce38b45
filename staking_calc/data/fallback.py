"""Bundled coin list used when live yield data cannot be loaded.

Rates are indicative snapshots, not live quotes.
"""

import copy
from typing import List

from staking_calc.core.models import CoinData, Platform

_FALLBACK_COINS = (
    CoinData(
        name="Ethereum",
        symbol="ETH",
        id="ethereum",
        platforms=[
            Platform(name="lido", apr=3.1, chain="Ethereum"),
            Platform(name="rocket-pool", apr=2.9, chain="Ethereum"),
            Platform(name="coinbase-wrapped-staked-eth", apr=2.8, chain="Ethereum"),
        ],
    ),
    CoinData(
        name="Solana",
        symbol="SOL",
        id="solana",
        platforms=[
            Platform(name="marinade-liquid-staking", apr=7.2, chain="Solana"),
            Platform(name="jito-liquid-staking", apr=7.6, chain="Solana"),
        ],
    ),
    CoinData(
        name="Cardano",
        symbol="ADA",
        id="cardano",
        platforms=[Platform(name="native-delegation", apr=3.0, chain="Cardano")],
    ),
    CoinData(
        name="Polkadot",
        symbol="DOT",
        id="polkadot",
        platforms=[
            Platform(name="native-nomination", apr=14.0, chain="Polkadot"),
            Platform(name="bifrost-liquid-staking", apr=13.5, chain="Polkadot"),
        ],
    ),
    CoinData(
        name="Avalanche",
        symbol="AVAX",
        id="avalanche-2",
        platforms=[
            Platform(name="benqi-staked-avax", apr=5.5, chain="Avalanche"),
            Platform(name="native-delegation", apr=7.0, chain="Avalanche"),
        ],
    ),
    CoinData(
        name="Cosmos",
        symbol="ATOM",
        id="cosmos",
        platforms=[
            Platform(name="stride", apr=15.0, chain="Cosmos"),
            Platform(name="native-delegation", apr=16.5, chain="Cosmos"),
        ],
    ),
    CoinData(
        name="Algorand",
        symbol="ALGO",
        id="algorand",
        platforms=[Platform(name="folks-finance", apr=5.0, chain="Algorand")],
    ),
)


def get_fallback_coins() -> List[CoinData]:
    """Fresh copies of the bundled coins, sorted by symbol."""
    coins = [copy.deepcopy(coin) for coin in _FALLBACK_COINS]
    return sorted(coins, key=lambda c: c.symbol)
