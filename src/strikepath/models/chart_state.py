"""
Dataclasses for Chart and Contract State

This module provides dataclasses for the option contracts and the drawn
prediction path. Dataclasses are used here (instead of Pydantic) because this
data is generated inside the process (synthetic chain, pointer samples) and
doesn't need validation overhead.

Key patterns:
- frozen=True: OptionContract and PricePoint are immutable once created
- slots=True: GridCell is created many times per drawing gesture
- GridCell only ever changes its opacity (decay)
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class ContractType(str, Enum):
    """Option type enum."""

    CALL = "call"
    PUT = "put"


class RecorderMode(Enum):
    """Path recorder state."""

    IDLE = "idle"
    DRAWING = "drawing"


@dataclass(frozen=True, slots=True)
class OptionContract:
    """
    Option contract offered in the selectable matrix.

    Created in batch from a spot price and dropped when a new underlying
    ticker is selected.

    Attributes:
        symbol: Contract symbol (e.g. "SPY261023C450000")
        strike: Strike price
        expiry: Expiry label (e.g. "OCT 23, 2026")
        contract_type: CALL or PUT
        bid: Best bid per share
        ask: Best ask per share
        premium: Price paid per share (x100 for one contract)
        open_interest: Open interest
        days_to_expiry: Calendar days until expiry
    """

    symbol: str
    strike: float
    expiry: str
    contract_type: ContractType
    bid: float
    ask: float
    premium: float
    open_interest: int
    days_to_expiry: int

    @property
    def is_call(self) -> bool:
        return self.contract_type == ContractType.CALL

    @property
    def mid(self) -> float:
        """Mid price, or premium when either side of the quote is empty."""
        if self.bid > 0 and self.ask > 0:
            return (self.bid + self.ask) / 2
        return self.premium

    @property
    def cost_basis(self) -> float:
        """Premium paid for one contract (100 shares)."""
        return self.premium * 100


@dataclass(frozen=True, slots=True)
class PricePoint:
    """
    One sample of the drawn prediction path.

    Attributes:
        x: Screen x coordinate (px)
        y: Screen y coordinate (px)
        price: Implied underlying price at y
        timestamp: Implied date at x
    """

    x: float
    y: float
    price: float
    timestamp: datetime


@dataclass(slots=True)
class GridCell:
    """
    Fading P&L marker left behind by a recorded PricePoint.

    Every field except opacity is fixed at creation time. Opacity starts at
    1.0 and only decreases until the cell is removed.

    Attributes:
        x: Screen x coordinate (px)
        y: Screen y coordinate (px)
        price: Underlying price the cell was valued at
        timestamp: Date the cell was valued at
        pnl: Profit/loss of one long contract at (price, timestamp)
        contract_value: Value of one contract at (price, timestamp)
        opacity: Fade level in [0, 1]
    """

    x: float
    y: float
    price: float
    timestamp: datetime
    pnl: float
    contract_value: float
    opacity: float = 1.0

    @property
    def is_profitable(self) -> bool:
        return self.pnl > 0

    def fade(self, amount: float) -> None:
        """Lower opacity by amount, clamped at zero."""
        self.opacity = max(0.0, self.opacity - amount)
