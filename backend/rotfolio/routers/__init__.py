# API Routers

from . import coins, config, health

__all__ = ["coins", "config", "health"]
