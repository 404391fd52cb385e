"""
Path-to-P&L Mapper

Values a long-call position at a hypothetical future (price, date) point.
Used by the path recorder for every drawn sample and by the dashboard heatmap.

Assumes implied volatility and the risk-free rate stay constant along the
drawn path; there is no term structure.
"""

import math
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Callable, Iterable, Optional

import numpy as np
import polars as pl
from loguru import logger

from strikepath.models.chart_state import OptionContract
from strikepath.pricing.black_scholes import (
    DEFAULT_RISK_FREE_RATE,
    DEFAULT_VOLATILITY,
    call_price,
    call_price_array,
)

CONTRACT_MULTIPLIER = 100
DAYS_PER_YEAR = 365
SECONDS_PER_DAY = 24 * 60 * 60


@dataclass(frozen=True, slots=True)
class PnLValue:
    """Value of one contract and P&L versus the premium paid."""

    pnl: float
    value: float


ZERO_PNL = PnLValue(pnl=0.0, value=0.0)


def elapsed_days(when: datetime, today: datetime) -> int:
    """Whole days from today to when, floored (negative in the past)."""
    return math.floor((when - today).total_seconds() / SECONDS_PER_DAY)


def value_at(
    price: float,
    when: datetime,
    contract: Optional[OptionContract],
    today: datetime,
    volatility: float = DEFAULT_VOLATILITY,
    risk_free_rate: float = DEFAULT_RISK_FREE_RATE,
) -> PnLValue:
    """
    Value a long call at a future price and date.

    Args:
        price: Hypothetical underlying price
        when: Hypothetical date
        contract: Selected contract, or None
        today: Reference "now" for elapsed days
        volatility: Annualized volatility held constant along the path
        risk_free_rate: Risk-free rate held constant along the path

    Returns:
        PnLValue; (0, 0) when no contract is selected
    """
    if contract is None:
        return ZERO_PNL

    days_left = max(0, contract.days_to_expiry - elapsed_days(when, today))
    T = days_left / DAYS_PER_YEAR

    value = call_price(price, contract.strike, T, volatility, risk_free_rate) * CONTRACT_MULTIPLIER
    pnl = value - contract.premium * CONTRACT_MULTIPLIER
    return PnLValue(pnl=pnl, value=value)


class PathPnLMapper:
    """
    Stateless valuation service bound to a volatility, rate and clock.

    The clock is injectable so tests can pin "today".
    """

    def __init__(
        self,
        volatility: float = DEFAULT_VOLATILITY,
        risk_free_rate: float = DEFAULT_RISK_FREE_RATE,
        clock: Callable[[], datetime] = datetime.now,
    ):
        """
        Initialize mapper.

        Args:
            volatility: Annualized volatility (default 20%)
            risk_free_rate: Risk-free rate (default 5%)
            clock: Callable returning the current datetime
        """
        self.volatility = volatility
        self.risk_free_rate = risk_free_rate
        self.clock = clock

        logger.debug(
            f"✓ Initialized PathPnLMapper (vol: {volatility:.2%}, rate: {risk_free_rate:.2%})"
        )

    def value_at(
        self,
        price: float,
        when: datetime,
        contract: Optional[OptionContract],
        today: Optional[datetime] = None,
    ) -> PnLValue:
        """Value a long call at (price, when); see module-level value_at."""
        return value_at(
            price,
            when,
            contract,
            today if today is not None else self.clock(),
            self.volatility,
            self.risk_free_rate,
        )

    def pnl_grid(
        self,
        contract: OptionContract,
        prices: Iterable[float],
        day_offsets: Iterable[int],
        today: Optional[datetime] = None,
    ) -> pl.DataFrame:
        """
        Value a contract over a (price, day offset) grid.

        Args:
            contract: Contract to value
            prices: Underlying prices (rows)
            day_offsets: Days from today (columns)
            today: Reference date (defaults to the clock)

        Returns:
            DataFrame with columns price, day_offset, value, pnl
        """
        today = today if today is not None else self.clock()
        prices = np.asarray(list(prices), dtype=float)

        frames = []
        for day in day_offsets:
            when = today + timedelta(days=int(day))
            days_left = max(0, contract.days_to_expiry - elapsed_days(when, today))
            values = call_price_array(
                prices,
                contract.strike,
                days_left / DAYS_PER_YEAR,
                self.volatility,
                self.risk_free_rate,
            ) * CONTRACT_MULTIPLIER
            frames.append(pl.DataFrame({
                "price": prices,
                "day_offset": np.full(len(prices), int(day), dtype=np.int64),
                "value": values,
                "pnl": values - contract.cost_basis,
            }))

        if not frames:
            return pl.DataFrame(
                schema={"price": pl.Float64, "day_offset": pl.Int64, "value": pl.Float64, "pnl": pl.Float64}
            )
        return pl.concat(frames)
