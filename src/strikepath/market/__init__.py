"""
Market collaborators: data provider client and synthetic chain/history generators.
"""

from strikepath.market.contract_generator import (
    contract_from_target,
    generate_options_chain,
    group_by_expiry,
)
from strikepath.market.data_client import MarketDataClient
from strikepath.market.price_history import generate_price_history

__all__ = [
    "MarketDataClient",
    "contract_from_target",
    "generate_options_chain",
    "generate_price_history",
    "group_by_expiry",
]
