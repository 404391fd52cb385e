"""
Path insights shown next to the prediction chart.

Summarizes a finished path: where it ends, how far it moved, how wide it
swung, and what a long call would be worth at the end at intrinsic value.
"""

from dataclasses import dataclass
from typing import Optional, Sequence

from strikepath.models.chart_state import OptionContract, PricePoint
from strikepath.pricing.black_scholes import intrinsic_value
from strikepath.pricing.pnl_mapper import CONTRACT_MULTIPLIER

MIN_POINTS = 5


@dataclass(frozen=True, slots=True)
class PathInsights:
    """
    Attributes:
        price_change_pct: End vs start price, percent
        volatility_pct: (max - min) / start, percent
        is_bullish: True if the path ends above where it started
        end_price: Last point's price
        max_price: Highest price on the path
        min_price: Lowest price on the path
        expected_pnl: Intrinsic value at end x100 minus premium x100 (0 without a contract)
    """

    price_change_pct: float
    volatility_pct: float
    is_bullish: bool
    end_price: float
    max_price: float
    min_price: float
    expected_pnl: float


def summarize_path(
    path: Sequence[PricePoint],
    current_price: float,
    contract: Optional[OptionContract] = None,
) -> Optional[PathInsights]:
    """Return insights for a path of at least MIN_POINTS points, else None."""
    if len(path) < MIN_POINTS:
        return None

    start_price = path[0].price or current_price
    end_price = path[-1].price or current_price
    prices = [p.price for p in path]
    max_price = max(prices)
    min_price = min(prices)

    price_change_pct = (end_price - start_price) / start_price * 100
    volatility_pct = (max_price - min_price) / start_price * 100

    expected_pnl = 0.0
    if contract is not None:
        value_at_end = intrinsic_value(end_price, contract.strike) * CONTRACT_MULTIPLIER
        expected_pnl = value_at_end - contract.cost_basis

    return PathInsights(
        price_change_pct=price_change_pct,
        volatility_pct=volatility_pct,
        is_bullish=price_change_pct > 0,
        end_price=end_price,
        max_price=max_price,
        min_price=min_price,
        expected_pnl=expected_pnl,
    )
