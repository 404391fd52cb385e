"""
Synthetic Option Chain Generator

Builds the selectable contract matrix around a spot price. Premiums use a
simple time-value heuristic plus noise, not the Black-Scholes estimator, so
the chain looks plausible without claiming to be a market.

Randomness comes from an injectable random.Random so a seed reproduces the
same chain.
"""

import math
import random
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Dict, List, Optional

from loguru import logger

from strikepath.models.chart_state import ContractType, OptionContract
from strikepath.pricing.black_scholes import intrinsic_value, option_price


@dataclass(frozen=True, slots=True)
class ExpirySlot:
    """A fixed expiry offset offered in the chain."""

    label: str
    days: int


EXPIRY_SLOTS = (
    ExpirySlot("This Week", 3),
    ExpirySlot("Next Week", 10),
    ExpirySlot("2 Weeks", 17),
    ExpirySlot("Monthly", 30),
)
STRIKE_OFFSETS = (-15, -10, -5, 0, 5, 10, 15, 20)
STRIKE_STEP = 5
TIME_VALUE_FACTOR = 0.3
PREMIUM_NOISE = 0.5
QUOTE_HALF_SPREAD = 0.05
MIN_PRICE = 0.01
CALL_OPEN_INTEREST = (500, 15499)
PUT_OPEN_INTEREST = (300, 12299)

# Contracts picked from a price target
TARGET_VOLATILITY = 0.25
TARGET_SPREAD_PCT = 0.05


def expiry_label(expiry_date: datetime) -> str:
    """Format like "MAR 20, 2026"."""
    return f"{expiry_date:%b} {expiry_date.day}, {expiry_date.year}".upper()


def contract_symbol(underlying: str, expiry_date: datetime, contract_type: ContractType, strike: float) -> str:
    """Symbol like "SPY260320C450000": ticker, yymmdd, C/P, strike x 1000."""
    right = "C" if contract_type == ContractType.CALL else "P"
    return f"{underlying}{expiry_date:%y%m%d}{right}{round(strike * 1000)}"


def _resolve_rng(rng: Optional[random.Random], seed: Optional[int]) -> random.Random:
    if rng is not None:
        return rng
    return random.Random(seed)


def generate_options_chain(
    symbol: str,
    current_price: float,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
    today: Optional[datetime] = None,
) -> List[OptionContract]:
    """
    Generate calls and puts for every expiry slot and strike offset.

    Args:
        symbol: Underlying ticker
        current_price: Spot price the strikes are centered on
        rng: Random source (takes precedence over seed)
        seed: Seed for a fresh random.Random when rng is not given
        today: Reference date for expiry labels (default: now)

    Returns:
        List of OptionContract, call then put for each (expiry, strike)
    """
    rng = _resolve_rng(rng, seed)
    today = today or datetime.now()
    symbol = symbol.upper()

    base_strike = round(current_price / STRIKE_STEP) * STRIKE_STEP
    contracts: List[OptionContract] = []

    for slot in EXPIRY_SLOTS:
        expiry_date = today + timedelta(days=slot.days)
        label = expiry_label(expiry_date)

        for offset in STRIKE_OFFSETS:
            strike = base_strike + offset
            distance_from_atm = abs(strike - current_price)
            time_value = (
                (slot.days / 365) * current_price * TIME_VALUE_FACTOR
                * math.exp(-distance_from_atm / current_price)
            )

            for contract_type, oi_range in (
                (ContractType.CALL, CALL_OPEN_INTEREST),
                (ContractType.PUT, PUT_OPEN_INTEREST),
            ):
                premium = (
                    intrinsic_value(current_price, strike, contract_type)
                    + time_value
                    + rng.random() * PREMIUM_NOISE
                )
                contracts.append(OptionContract(
                    symbol=contract_symbol(symbol, expiry_date, contract_type, strike),
                    strike=float(strike),
                    expiry=label,
                    contract_type=contract_type,
                    bid=max(MIN_PRICE, premium - QUOTE_HALF_SPREAD),
                    ask=premium + QUOTE_HALF_SPREAD,
                    premium=premium,
                    open_interest=rng.randint(*oi_range),
                    days_to_expiry=slot.days,
                ))

    logger.debug(f"Generated {len(contracts)} contracts for {symbol} around ${current_price:.2f}")
    return contracts


def contract_from_target(
    symbol: str,
    current_price: float,
    target_price: float,
    days_ahead: int,
    today: Optional[datetime] = None,
) -> OptionContract:
    """
    Build the contract implied by clicking a price target on the chart.

    Targets at or above spot give a call, below spot a put. Strikes round to
    $2.50 for underlyings above $100, else $1. The premium is the
    Black-Scholes price at 25% volatility with a 5% spread around it.

    Args:
        symbol: Underlying ticker
        current_price: Spot price
        target_price: Clicked price
        days_ahead: Clicked expiry, days from today (at least 1)
        today: Reference date (default: now)
    """
    today = today or datetime.now()
    days_ahead = max(1, days_ahead)
    contract_type = ContractType.CALL if target_price >= current_price else ContractType.PUT

    strike_rounding = 2.5 if current_price > 100 else 1.0
    strike = round(target_price / strike_rounding) * strike_rounding

    premium = option_price(current_price, strike, days_ahead / 365, contract_type, sigma=TARGET_VOLATILITY)
    spread = premium * TARGET_SPREAD_PCT
    expiry_date = today + timedelta(days=days_ahead)

    return OptionContract(
        symbol=contract_symbol(symbol.upper(), expiry_date, contract_type, strike),
        strike=strike,
        expiry=expiry_label(expiry_date),
        contract_type=contract_type,
        bid=max(MIN_PRICE, premium - spread),
        ask=premium + spread,
        premium=max(MIN_PRICE, premium),
        open_interest=0,
        days_to_expiry=days_ahead,
    )


def group_by_expiry(
    contracts: List[OptionContract],
    contract_type: ContractType = ContractType.CALL,
) -> Dict[str, List[OptionContract]]:
    """Contracts of one type keyed by expiry label, in first-seen order."""
    groups: Dict[str, List[OptionContract]] = {}
    for contract in contracts:
        if contract.contract_type != contract_type:
            continue
        groups.setdefault(contract.expiry, []).append(contract)
    return groups
