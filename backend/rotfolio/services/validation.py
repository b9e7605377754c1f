"""Payload validation for external market-data responses."""

import logging
from typing import Any, List, Optional, Tuple

from pydantic import ValidationError

from ..models.coin import MarketSample, TokenRecord

logger = logging.getLogger(__name__)


class SchemaMismatch(Exception):
    """Raised when a payload does not match the expected shape."""

    def __init__(self, schema: str, field: str, reason: str):
        self.schema = schema
        self.field = field
        self.reason = reason
        location = field or "<root>"
        super().__init__(f"{schema}.{location}: {reason}")


def _first_error(exc: ValidationError) -> Tuple[str, str]:
    """Return the dotted field path and message of the first validation error."""
    error = exc.errors()[0]
    field = ".".join(str(part) for part in error.get("loc", ()))
    if error.get("type") == "missing":
        return field, "Required field missing"
    return field, error.get("msg", "Invalid value")


def validate_token_record(payload: Any) -> TokenRecord:
    """Narrow a raw pump.fun coin payload into a TokenRecord.

    Args:
        payload: Decoded JSON body

    Returns:
        The validated record

    Raises:
        SchemaMismatch: If a field is missing, null where not nullable, or of
            the wrong type.
    """
    if not isinstance(payload, dict):
        raise SchemaMismatch("TokenRecord", "", f"Expected object, got {type(payload).__name__}")

    try:
        return TokenRecord.model_validate(payload)
    except ValidationError as e:
        field, reason = _first_error(e)
        raise SchemaMismatch("TokenRecord", field, reason) from e


def validate_market_sample(payload: Any) -> MarketSample:
    """Narrow one raw DexScreener pair payload into a MarketSample.

    The ``priceChange`` and ``volume`` blocks are optional, and so is each of
    their windows.
    """
    if not isinstance(payload, dict):
        raise SchemaMismatch("MarketSample", "", f"Expected object, got {type(payload).__name__}")

    try:
        return MarketSample.model_validate(payload)
    except ValidationError as e:
        field, reason = _first_error(e)
        raise SchemaMismatch("MarketSample", field, reason) from e


def validate_market_samples(payloads: List[Any], identifier: Optional[str] = None) -> List[MarketSample]:
    """Validate each pair independently, dropping the ones that fail."""
    samples = []
    for position, payload in enumerate(payloads):
        try:
            samples.append(validate_market_sample(payload))
        except SchemaMismatch as e:
            logger.warning(f"Dropping pair #{position} for {identifier or 'unknown token'}: {e}")
    return samples
