"""Pytest configuration and fixtures."""

from typing import Any, Dict, Optional

import pytest
from httpx import AsyncClient, ASGITransport

from rotfolio.main import app
from rotfolio.routers.coins import get_coin_addresses, get_ranking_service, get_refresh_interval


def build_coin_payload(mint: str, usd_market_cap: float = 10_000.0, **overrides: Any) -> Dict[str, Any]:
    """Build a pump.fun coin payload that passes validation."""
    payload = {
        "mint": mint,
        "name": f"Coin {mint}",
        "symbol": mint[:4].upper(),
        "description": "test coin",
        "image_uri": f"https://ipfs.io/ipfs/{mint}",
        "metadata_uri": f"https://ipfs.io/ipfs/{mint}-meta",
        "twitter": None,
        "telegram": None,
        "bonding_curve": f"{mint}-curve",
        "associated_bonding_curve": f"{mint}-assoc",
        "creator": "creator111",
        "created_timestamp": 1714000000000,
        "raydium_pool": f"{mint}-pool",
        "complete": True,
        "virtual_sol_reserves": 115005359994,
        "virtual_token_reserves": 279900000000000,
        "total_supply": 1000000000000000,
        "website": None,
        "show_name": True,
        "king_of_the_hill_timestamp": None,
        "market_cap": 74.5,
        "reply_count": 12,
        "last_reply": 1714000500000,
        "nsfw": False,
        "market_id": None,
        "usd_market_cap": usd_market_cap,
    }
    payload.update(overrides)
    return payload


def build_pair_payload(
    pair_address: str,
    volume_h24: Optional[float] = None,
    price_usd: str = "0.001234",
    price_change: Optional[Dict[str, float]] = None,
    **overrides: Any,
) -> Dict[str, Any]:
    """Build a DexScreener pair payload that passes validation."""
    payload: Dict[str, Any] = {
        "chainId": "solana",
        "dexId": "raydium",
        "url": f"https://dexscreener.com/solana/{pair_address}",
        "pairAddress": pair_address,
        "priceNative": "0.0000081",
        "priceUsd": price_usd,
        "liquidity": {"usd": 50000.5, "base": 1000, "quote": 10},
    }
    if volume_h24 is not None:
        payload["volume"] = {"h24": volume_h24, "h6": volume_h24 / 4, "h1": volume_h24 / 24, "m5": 0}
    if price_change is not None:
        payload["priceChange"] = price_change
    payload.update(overrides)
    return payload


@pytest.fixture
def coin_payload():
    """Factory for valid pump.fun coin payloads."""
    return build_coin_payload


@pytest.fixture
def pair_payload():
    """Factory for valid DexScreener pair payloads."""
    return build_pair_payload


@pytest.fixture(scope="function")
async def client():
    """Create test client; tests override the ranking dependencies as needed."""
    app.dependency_overrides[get_coin_addresses] = lambda: []
    app.dependency_overrides[get_refresh_interval] = lambda: 5

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def override_ranking():
    """Install a ranking service and coin list on the app."""

    def _override(service, addresses):
        app.dependency_overrides[get_ranking_service] = lambda: service
        app.dependency_overrides[get_coin_addresses] = lambda: list(addresses)

    return _override
