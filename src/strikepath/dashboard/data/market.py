"""
Dashboard data loaders.

Wraps the async market data client for Streamlit's synchronous script run
and caches quotes for a short TTL.
"""

import asyncio

import streamlit as st
from loguru import logger

from strikepath.config.settings import MarketDataConfig
from strikepath.dashboard.config import DashboardConfig
from strikepath.market.data_client import MarketDataClient
from strikepath.models.quote_models import MarketQuote


def fetch_quote(symbol: str, config: MarketDataConfig) -> MarketQuote:
    """Latest quote for symbol; placeholder when credentials are missing or the fetch fails."""
    if not config.has_credentials:
        logger.warning("Market data credentials not configured, using placeholder quote")
        return MarketQuote.placeholder(symbol)

    client = MarketDataClient(config)
    return asyncio.run(client.get_quote(symbol))


@st.cache_data(ttl=DashboardConfig().cache_ttl_quotes)
def load_quote(symbol: str, _config: MarketDataConfig) -> dict:
    """Cached quote as a plain dict (Streamlit caches pickle-safe values)."""
    return fetch_quote(symbol, _config).model_dump()
