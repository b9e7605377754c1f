# Business Logic Services

from .validation import (
    SchemaMismatch,
    validate_token_record,
    validate_market_sample,
    validate_market_samples,
)
from .pump_fun import (
    PumpFunClient,
    FetchFailed,
)
from .dexscreener import (
    DexScreenerClient,
    MarketFetchFailed,
    select_best_pair,
)
from .merge import (
    COLOR_PALETTE,
    merge_entry,
)
from .rankings import (
    RankingService,
    PipelineFailed,
    sort_by_market_cap,
    partition_podium,
    PODIUM_SIZE,
)
from .formatting import (
    format_market_cap,
    format_price_change,
    format_volume,
)
from .config import (
    ConfigService,
    config_service,
    ConfigValidationException,
    ConfigValidationError,
)
from .logging_service import configure_logging

__all__ = [
    # Validation
    "SchemaMismatch",
    "validate_token_record",
    "validate_market_sample",
    "validate_market_samples",
    # Sources
    "PumpFunClient",
    "FetchFailed",
    "DexScreenerClient",
    "MarketFetchFailed",
    "select_best_pair",
    # Merge
    "COLOR_PALETTE",
    "merge_entry",
    # Rankings
    "RankingService",
    "PipelineFailed",
    "sort_by_market_cap",
    "partition_podium",
    "PODIUM_SIZE",
    # Formatting
    "format_market_cap",
    "format_price_change",
    "format_volume",
    # Config
    "ConfigService",
    "config_service",
    "ConfigValidationException",
    "ConfigValidationError",
    # Logging
    "configure_logging",
]
