"""Rotfolio Rankings FastAPI Application.

Serves the market-cap leaderboard of the configured pump.fun coins,
enriched with DexScreener pair data.
"""

import logging
import sys
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .routers import coins, health, config as config_router
from .services.config import config_service, ConfigValidationException
from .services.logging_service import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup: Validate configuration
    try:
        config_service.load_and_validate()
    except ConfigValidationException as e:
        configure_logging()
        logger.critical(f"{e}")
        logger.critical("Server cannot start with invalid configuration.")
        sys.exit(1)

    configure_logging(config_service)

    addresses = config_service.coin_addresses
    if not addresses:
        logger.warning("No coin addresses configured, rankings will be empty")
    else:
        logger.info(f"Tracking {len(addresses)} coin(s)")

    yield

    logger.info("Shutdown complete")


app = FastAPI(
    title="Rotfolio Rankings API",
    description="Top coins ranked by market cap",
    version=__version__,
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:5173", "http://localhost:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router, prefix="/api", tags=["Health"])
app.include_router(coins.router, prefix="/api/coins", tags=["Coins"])
app.include_router(config_router.router, prefix="/api/config", tags=["Config"])


@app.get("/")
async def root():
    """Root endpoint redirect to docs."""
    return {"message": "Rotfolio Rankings API", "docs": "/docs"}
