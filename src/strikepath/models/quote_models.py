"""
Pydantic Models for Market Data Validation

Quotes come from the brokerage data API, so they are external and can be
malformed. Pydantic validates them before they seed the options engine.

Decision tree:
    Does this data come from outside my process?
    ├─ Yes → Use Pydantic (validation critical) ← WE ARE HERE
    └─ No → Use dataclass (see chart_state.py)
"""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, field_validator


class MarketQuote(BaseModel):
    """
    Latest market snapshot for one symbol.

    Attributes:
        symbol: Ticker symbol
        last_price: Last trade price (falls back to ask when no trade)
        bid_price: Best bid
        bid_size: Size at best bid
        ask_price: Best ask
        ask_size: Size at best ask
        last_size: Size of the last trade
        change: Last price minus previous close
        change_percent: Change as a percentage of previous close
        timestamp: Trade or quote timestamp
    """

    model_config = ConfigDict(validate_assignment=True)

    symbol: str = Field(..., min_length=1)
    last_price: float = Field(0.0, ge=0, description="Last trade price")
    bid_price: float = Field(0.0, ge=0)
    bid_size: float = Field(0.0, ge=0)
    ask_price: float = Field(0.0, ge=0)
    ask_size: float = Field(0.0, ge=0)
    last_size: float = Field(0.0, ge=0)
    change: float = 0.0
    change_percent: float = 0.0
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @field_validator("symbol")
    def normalize_symbol(cls, v):
        """Symbols are stored upper-case."""
        return v.strip().upper()

    @property
    def is_placeholder(self) -> bool:
        return self.last_price == 0 and self.bid_price == 0 and self.ask_price == 0

    @classmethod
    def placeholder(cls, symbol: str) -> "MarketQuote":
        """Zero-valued quote shown when the provider could not be reached."""
        return cls(symbol=symbol)
