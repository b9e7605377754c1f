"""pump.fun coin metadata client."""

import asyncio
import logging
from typing import Any

import aiohttp

from ..models.coin import TokenRecord
from .validation import SchemaMismatch, validate_token_record

logger = logging.getLogger(__name__)

DEFAULT_PUMP_FUN_URL = "https://frontend-api-v3.pump.fun"


class FetchFailed(Exception):
    """Raised when a coin could not be fetched from pump.fun."""

    def __init__(self, identifier: str, cause: Exception):
        self.identifier = identifier
        self.cause = cause
        super().__init__(f"Failed to fetch coin {identifier}: {cause}")


class PumpFunClient:
    """Fetches base token metadata, one coin per request.

    Single shot: no retry, caching or backoff. The caller decides what a
    failure means.
    """

    def __init__(self, base_url: str = DEFAULT_PUMP_FUN_URL):
        self.base_url = base_url.rstrip("/")

    def coin_url(self, identifier: str) -> str:
        return f"{self.base_url}/coins/{identifier}"

    async def _get_json(self, session: aiohttp.ClientSession, url: str) -> Any:
        async with session.get(url) as resp:
            resp.raise_for_status()
            return await resp.json(content_type=None)

    async def fetch_coin(self, session: aiohttp.ClientSession, identifier: str) -> TokenRecord:
        """Fetch and validate one coin.

        Args:
            session: Session shared by the current poll cycle
            identifier: Token mint address

        Returns:
            The validated coin record

        Raises:
            FetchFailed: On transport errors, error status codes, non-JSON
                bodies or schema mismatches.
        """
        url = self.coin_url(identifier)
        try:
            payload = await self._get_json(session, url)
            record = validate_token_record(payload)
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError, SchemaMismatch) as e:
            raise FetchFailed(identifier, e) from e

        logger.debug(f"Fetched coin {identifier} ({record.symbol}), usd_market_cap={record.usd_market_cap}")
        return record
