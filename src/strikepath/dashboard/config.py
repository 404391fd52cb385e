"""
Dashboard Configuration

Provides configuration settings for the Streamlit dashboard.
"""

from dataclasses import dataclass, field


@dataclass(slots=True)
class DashboardConfig:
    """
    Dashboard configuration settings.

    Attributes:
        cache_ttl_quotes: Cache TTL for market quotes (seconds)
        heatmap_price_steps: Rows in the P&L heatmap
        heatmap_day_step: Day spacing of heatmap columns
        watch_symbols: Tickers offered in the sidebar
    """

    cache_ttl_quotes: int = 30  # seconds
    heatmap_price_steps: int = 21
    heatmap_day_step: int = 1
    watch_symbols: list[str] = field(
        default_factory=lambda: ["SPY", "QQQ", "AAPL", "MSFT", "NVDA", "TSLA", "AMZN", "META"]
    )
