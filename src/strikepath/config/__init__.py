"""
strikepath Configuration Module
"""

from strikepath.config.loader import load_and_validate_config, load_config
from strikepath.config.settings import (
    ChartConfig,
    LoggingConfig,
    MarketDataConfig,
    PricingConfig,
    StrikepathConfig,
)

__all__ = [
    "ChartConfig",
    "LoggingConfig",
    "MarketDataConfig",
    "PricingConfig",
    "StrikepathConfig",
    "load_config",
    "load_and_validate_config",
]
