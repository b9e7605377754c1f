"""DexScreener trading-pair client."""

import asyncio
import logging
from typing import Any, List, Optional, Sequence

import aiohttp

from ..models.coin import MarketSample
from .validation import validate_market_samples

logger = logging.getLogger(__name__)

DEFAULT_DEXSCREENER_URL = "https://api.dexscreener.com"
CHAIN_ID = "solana"


class MarketFetchFailed(Exception):
    """Raised when the pair list for a token could not be fetched."""

    def __init__(self, identifier: str, cause: Exception):
        self.identifier = identifier
        self.cause = cause
        super().__init__(f"Failed to fetch market data for {identifier}: {cause}")


def select_best_pair(samples: Sequence[MarketSample]) -> Optional[MarketSample]:
    """Pick the pair with the highest 24h volume.

    Missing volume counts as zero. Ties go to the first pair encountered.
    Returns None when there are no candidates.
    """
    if not samples:
        return None
    return max(samples, key=lambda sample: sample.volume_24h)


def _extract_pairs(payload: Any) -> List[Any]:
    """Return the raw pair list from a token-pairs response body."""
    if payload is None:
        return []
    if isinstance(payload, list):
        return payload
    # Older responses wrap the list as {"pairs": [...]}
    if isinstance(payload, dict) and "pairs" in payload:
        pairs = payload["pairs"]
        if pairs is None:
            return []
        if isinstance(pairs, list):
            return pairs
    raise ValueError(f"Expected a list of pairs, got {type(payload).__name__}")


class DexScreenerClient:
    """Fetches the trading pairs of a token and selects the best one."""

    def __init__(self, base_url: str = DEFAULT_DEXSCREENER_URL, chain_id: str = CHAIN_ID):
        self.base_url = base_url.rstrip("/")
        self.chain_id = chain_id

    def pairs_url(self, identifier: str) -> str:
        return f"{self.base_url}/token-pairs/v1/{self.chain_id}/{identifier}"

    async def _get_json(self, session: aiohttp.ClientSession, url: str) -> Any:
        async with session.get(url) as resp:
            resp.raise_for_status()
            return await resp.json(content_type=None)

    async def fetch_pairs(self, session: aiohttp.ClientSession, identifier: str) -> List[MarketSample]:
        """Fetch all valid pairs for a token.

        Pairs that fail validation are logged and dropped; only a failure of
        the request as a whole raises.

        Raises:
            MarketFetchFailed: On transport errors, error status codes,
                non-JSON bodies or a body that is not a pair list.
        """
        url = self.pairs_url(identifier)
        try:
            payload = await self._get_json(session, url)
            raw_pairs = _extract_pairs(payload)
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            raise MarketFetchFailed(identifier, e) from e

        samples = validate_market_samples(raw_pairs, identifier)
        logger.debug(f"{identifier}: {len(samples)}/{len(raw_pairs)} valid pairs")
        return samples

    async def fetch_best_pair(self, session: aiohttp.ClientSession, identifier: str) -> Optional[MarketSample]:
        """Fetch the pairs of a token and return the highest-volume one, if any."""
        samples = await self.fetch_pairs(session, identifier)
        return select_best_pair(samples)
