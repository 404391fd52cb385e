"""
Market Data Client

Thin async client for the brokerage data API (Alpaca v2 stock endpoints).
Combines latest quotes, latest trades and the last two daily bars into one
MarketQuote per symbol.

The options engine only consumes last_price, to seed the spot price for
contract generation and chart scaling. Failures are logged and degraded to
a zero-valued placeholder quote; there is no retry.
"""

from typing import Any, Dict, List, Optional

import httpx
from loguru import logger

from strikepath.config.settings import MarketDataConfig
from strikepath.exceptions import MarketDataError
from strikepath.models.quote_models import MarketQuote


class MarketDataClient:
    """
    Async market data client.

    Attributes:
        config: Provider settings (base URL, credentials, timeout)
        transport: Optional httpx transport (tests use httpx.MockTransport)
    """

    def __init__(
        self,
        config: Optional[MarketDataConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config or MarketDataConfig()
        self.transport = transport

        logger.info(f"✓ MarketDataClient initialized ({self.config.base_url})")

    def _headers(self) -> Dict[str, str]:
        return {
            "APCA-API-KEY-ID": self.config.api_key or "",
            "APCA-API-SECRET-KEY": self.config.api_secret or "",
        }

    async def _get_json(self, client: httpx.AsyncClient, path: str, params: Dict[str, Any]) -> Dict[str, Any]:
        response = await client.get(path, params=params)
        if response.status_code != 200:
            logger.error(f"Market data error on {path}: {response.status_code} {response.text}")
            raise MarketDataError(
                f"Market data API error: {response.status_code}",
                error_type="http",
                status_code=response.status_code,
            )
        try:
            return response.json()
        except ValueError as e:
            raise MarketDataError(f"Invalid JSON from {path}", error_type="payload") from e

    async def fetch_quotes(self, symbols: List[str]) -> Dict[str, MarketQuote]:
        """
        Fetch the latest quote for each symbol.

        Args:
            symbols: Ticker symbols

        Returns:
            Dict symbol -> MarketQuote (symbols the provider doesn't know get
            zero prices)

        Raises:
            MarketDataError: Missing credentials, empty symbol list, or a
                failed quotes/trades request
        """
        if not self.config.has_credentials:
            raise MarketDataError("Market data API credentials not configured", error_type="config")

        symbols = [s.strip().upper() for s in symbols if s and s.strip()]
        if not symbols:
            raise MarketDataError("Symbols list is required", error_type="request")

        symbols_param = ",".join(symbols)

        async with httpx.AsyncClient(
            base_url=self.config.base_url,
            headers=self._headers(),
            timeout=self.config.timeout,
            transport=self.transport,
        ) as client:
            quotes_data = await self._get_json(client, "/stocks/quotes/latest", {"symbols": symbols_param})
            trades_data = await self._get_json(client, "/stocks/trades/latest", {"symbols": symbols_param})

            # Bars only feed the change figures
            try:
                bars_data = await self._get_json(
                    client,
                    "/stocks/bars",
                    {"symbols": symbols_param, "timeframe": "1Day", "limit": 2},
                )
            except MarketDataError as e:
                logger.warning(f"Daily bars unavailable, change set to 0: {e}")
                bars_data = {"bars": {}}

        market_data = {
            symbol: self._combine(
                symbol,
                (quotes_data.get("quotes") or {}).get(symbol) or {},
                (trades_data.get("trades") or {}).get(symbol) or {},
                (bars_data.get("bars") or {}).get(symbol) or [],
            )
            for symbol in symbols
        }

        logger.info(f"Market data fetched for: {symbols}")
        return market_data

    @staticmethod
    def _combine(symbol: str, quote: Dict[str, Any], trade: Dict[str, Any], bars: List[Dict[str, Any]]) -> MarketQuote:
        last_price = trade.get("p") or quote.get("ap") or 0.0

        if len(bars) >= 2:
            prev_close = bars[-2].get("c") or last_price
        elif bars:
            prev_close = bars[0].get("c") or last_price
        else:
            prev_close = last_price

        change = last_price - prev_close
        change_percent = (change / prev_close) * 100 if prev_close > 0 else 0.0

        fields = {
            "symbol": symbol,
            "last_price": last_price,
            "bid_price": quote.get("bp") or 0.0,
            "ask_price": quote.get("ap") or 0.0,
            "bid_size": quote.get("bs") or 0.0,
            "ask_size": quote.get("as") or 0.0,
            "last_size": trade.get("s") or 0.0,
            "change": change,
            "change_percent": change_percent,
        }
        timestamp = trade.get("t") or quote.get("t")
        if timestamp:
            fields["timestamp"] = timestamp
        return MarketQuote(**fields)

    async def get_quote(self, symbol: str) -> MarketQuote:
        """
        Latest quote for one symbol, or a placeholder on any provider failure.

        "Symbol not found" and transient network failures look the same to
        the caller.
        """
        try:
            quotes = await self.fetch_quotes([symbol])
            return quotes.get(symbol.strip().upper()) or MarketQuote.placeholder(symbol)
        except (MarketDataError, httpx.HTTPError) as e:
            logger.error(f"Failed to fetch price for {symbol}: {e}")
            return MarketQuote.placeholder(symbol)

    def resolve_spot(self, quote: MarketQuote) -> float:
        """Spot price for the options engine: last price or the configured default."""
        return quote.last_price or self.config.default_spot
