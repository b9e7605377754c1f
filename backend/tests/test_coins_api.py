"""Tests for the coin rankings API."""

import pytest
from unittest.mock import AsyncMock, Mock

from rotfolio.services.merge import merge_entry
from rotfolio.services.pump_fun import FetchFailed
from rotfolio.services.rankings import PipelineFailed, RankingService
from rotfolio.services.validation import validate_market_sample, validate_token_record


@pytest.fixture
def ranked_entries(coin_payload, pair_payload):
    """Five ranked entries, the leader with full market data."""
    leader = merge_entry(
        validate_token_record(coin_payload("lead", 2_000_000, twitter="leadcoin")),
        validate_market_sample(
            pair_payload("leadpair", volume_h24=1_500, price_change={"h24": 12.5, "h1": -0.5})
        ),
        2,
    )
    others = [
        merge_entry(validate_token_record(coin_payload(f"m{i}", 1_000_000 / (i + 2))), None, i)
        for i in range(4)
    ]
    return [leader] + others


def ranking_service(result=None, error=None):
    service = Mock(spec=RankingService)
    service.get_ranked_coins = AsyncMock(return_value=result, side_effect=error)
    return service


@pytest.mark.asyncio
async def test_get_all_coins(client, override_ranking, ranked_entries):
    """Test the ranked list is returned in order with market fields."""
    service = ranking_service(ranked_entries)
    override_ranking(service, ["m0", "m1", "lead", "m2", "m3"])

    response = await client.get("/api/coins")
    assert response.status_code == 200
    data = response.json()

    assert [c["unique_id"] for c in data] == ["lead-2", "m0-0", "m1-1", "m2-2", "m3-3"]
    assert data[0]["best_pair_address"] == "leadpair"
    assert data[0]["price_change"] == {"h24": 12.5, "h1": -0.5}
    assert data[1]["price_change"] is None
    assert data[1]["raydium_pool"] == "m0-pool"
    service.get_ranked_coins.assert_awaited_once_with(["m0", "m1", "lead", "m2", "m3"])


@pytest.mark.asyncio
async def test_get_all_coins_pipeline_failure(client, override_ranking):
    """Test a failed cycle returns no data and a generic error."""
    failure = PipelineFailed([FetchFailed("bad", ConnectionError("refused"))])
    override_ranking(ranking_service(error=failure), ["good", "bad"])

    response = await client.get("/api/coins")
    assert response.status_code == 502
    assert response.json()["detail"] == "Failed to fetch coins"


@pytest.mark.asyncio
async def test_get_all_coins_empty_configuration(client, override_ranking):
    override_ranking(ranking_service([]), [])

    response = await client.get("/api/coins")
    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.asyncio
async def test_get_podium(client, override_ranking, ranked_entries):
    """Test podium/list split and display strings."""
    override_ranking(ranking_service(ranked_entries), ["m0", "m1", "lead", "m2", "m3"])

    response = await client.get("/api/coins/podium")
    assert response.status_code == 200
    data = response.json()

    assert data["refresh_interval_seconds"] == 5
    assert [c["rank"] for c in data["podium"]] == [1, 2, 3]
    assert [c["rank"] for c in data["list"]] == [4, 5]

    leader = data["podium"][0]
    assert leader["coin"]["mint"] == "lead"
    assert leader["market_cap_display"] == "$2.00M"
    assert leader["price_change_24h_display"] == "+12.50%"
    assert leader["price_change_1h_display"] == "-0.50%"
    assert leader["volume_24h_display"] == "$1.50K"
    assert leader["progress_percent"] == 100.0
    assert leader["screener_url"] == "https://dexscreener.com/solana/leadpair"
    assert leader["twitter_url"] == "https://twitter.com/leadcoin"

    second = data["podium"][1]
    assert second["market_cap_display"] == "$500.00K"
    assert second["price_change_24h_display"] == "N/A"
    assert second["volume_24h_display"] == "$0.00"
    assert second["progress_percent"] == 25.0
    assert second["screener_url"] == "https://dexscreener.com/solana/m0-pool"
    assert second["twitter_url"] is None


@pytest.mark.asyncio
async def test_get_podium_short(client, override_ranking, ranked_entries):
    override_ranking(ranking_service(ranked_entries[:2]), ["m0", "lead"])

    response = await client.get("/api/coins/podium")
    data = response.json()

    assert len(data["podium"]) == 2
    assert data["list"] == []


@pytest.mark.asyncio
async def test_get_podium_pipeline_failure(client, override_ranking):
    failure = PipelineFailed([FetchFailed("bad", ValueError("not json"))])
    override_ranking(ranking_service(error=failure), ["bad"])

    response = await client.get("/api/coins/podium")
    assert response.status_code == 502
