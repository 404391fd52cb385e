#!/usr/bin/env python
"""
Contract Valuation Script

Prints a long call's value and P&L over a grid of prices and days ahead.
Uses the live spot price when market data credentials are configured,
otherwise the configured default spot.

Usage:
    python scripts/value_contract.py --symbol SPY --strike 455 --days 30 --premium 4.20
    python scripts/value_contract.py --symbol QQQ --days 14 --step 1
"""

import argparse
import asyncio
import sys

import numpy as np
from loguru import logger

from strikepath.config import load_and_validate_config
from strikepath.exceptions import StrikepathError
from strikepath.market.contract_generator import contract_from_target
from strikepath.market.data_client import MarketDataClient
from strikepath.models.chart_state import ContractType, OptionContract
from strikepath.pricing.pnl_mapper import PathPnLMapper
from strikepath.utils.logging_setup import setup_logging


def parse_args():
    parser = argparse.ArgumentParser(description="Value a long call over price and time")
    parser.add_argument("--symbol", default=None, help="Underlying symbol (default from config)")
    parser.add_argument("--strike", type=float, default=None, help="Strike (default: generated near spot)")
    parser.add_argument("--days", type=int, default=30, help="Days to expiry (default: 30)")
    parser.add_argument("--premium", type=float, default=None, help="Premium paid per share")
    parser.add_argument("--step", type=int, default=2, help="Day spacing of the grid (default: 2)")
    return parser.parse_args()


async def main() -> int:
    args = parse_args()

    try:
        config = load_and_validate_config()
    except StrikepathError as e:
        logger.error(f"Configuration error: {e}")
        return 1
    setup_logging(config.logging)

    symbol = (args.symbol or config.market_data.default_symbol).upper()
    client = MarketDataClient(config.market_data)
    if config.market_data.has_credentials:
        spot = client.resolve_spot(await client.get_quote(symbol))
    else:
        logger.warning("Market data credentials not configured, using default spot")
        spot = config.market_data.default_spot

    contract = contract_from_target(symbol, spot, spot * 1.02, args.days)
    if args.strike is not None or args.premium is not None:
        contract = OptionContract(
            symbol=contract.symbol,
            strike=args.strike if args.strike is not None else contract.strike,
            expiry=contract.expiry,
            contract_type=ContractType.CALL,
            bid=contract.bid,
            ask=contract.ask,
            premium=args.premium if args.premium is not None else contract.premium,
            open_interest=contract.open_interest,
            days_to_expiry=args.days,
        )

    mapper = PathPnLMapper(config.pricing.volatility, config.pricing.risk_free_rate)
    prices = np.linspace(spot * config.chart.price_floor, spot * config.chart.price_ceiling, 11)
    grid = mapper.pnl_grid(contract, prices, range(0, args.days + 1, max(args.step, 1)))

    print("=" * 60)
    print(f"{contract.symbol}  strike ${contract.strike:.2f}  premium ${contract.premium:.2f}  spot ${spot:.2f}")
    print("=" * 60)
    print(grid.pivot(on="day_offset", index="price", values="pnl").sort("price"))
    return 0


if __name__ == "__main__":
    exit_code = asyncio.run(main())
    sys.exit(exit_code)
