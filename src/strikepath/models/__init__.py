"""
Data models for strikepath.

- chart_state: dataclasses for contracts and the drawn path (internal data)
- quote_models: Pydantic models for market data (external data)
"""

from strikepath.models.chart_state import (
    ContractType,
    GridCell,
    OptionContract,
    PricePoint,
    RecorderMode,
)
from strikepath.models.quote_models import MarketQuote

__all__ = [
    "ContractType",
    "GridCell",
    "OptionContract",
    "PricePoint",
    "RecorderMode",
    "MarketQuote",
]
