"""
Option valuation: Black-Scholes pricing and the path-to-P&L mapper.
"""

from strikepath.pricing.black_scholes import (
    call_price,
    call_price_array,
    intrinsic_value,
    moneyness,
    norm_cdf,
    norm_cdf_array,
    option_price,
    put_price,
)
from strikepath.pricing.pnl_mapper import PathPnLMapper, PnLValue, value_at

__all__ = [
    "call_price",
    "call_price_array",
    "intrinsic_value",
    "moneyness",
    "norm_cdf",
    "norm_cdf_array",
    "option_price",
    "put_price",
    "PathPnLMapper",
    "PnLValue",
    "value_at",
]
