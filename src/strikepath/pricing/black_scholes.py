"""
Black-Scholes Pricing

Closed-form European option pricing used by the prediction chart.

Key patterns:
- norm_cdf: Abramowitz-Stegun 7.1.26 approximation (|error| < 1.5e-7)
- call_price: expired contracts (T <= 0) return intrinsic value before any
  validation or division
- Constant volatility and rate; there is no volatility surface
"""

import math
from typing import Union

import numpy as np

from strikepath.exceptions import PricingInputError
from strikepath.models.chart_state import ContractType

DEFAULT_VOLATILITY = 0.20
DEFAULT_RISK_FREE_RATE = 0.05

# Abramowitz & Stegun 7.1.26 coefficients
_A1 = 0.254829592
_A2 = -0.284496736
_A3 = 1.421413741
_A4 = -1.453152027
_A5 = 1.061405429
_P = 0.3275911


def norm_cdf(x: float) -> float:
    """
    Standard normal CDF, Phi(x).

    Evaluates erf(|x|/sqrt(2)) with the A&S rational approximation and
    reflects negative inputs: Phi(x) = 1 - Phi(-x).

    Args:
        x: Any real number

    Returns:
        Probability that a standard normal variable is <= x
    """
    sign = -1.0 if x < 0 else 1.0
    z = abs(x) / math.sqrt(2.0)
    t = 1.0 / (1.0 + _P * z)
    y = 1.0 - (((((_A5 * t + _A4) * t) + _A3) * t + _A2) * t + _A1) * t * math.exp(-z * z)
    return 0.5 * (1.0 + sign * y)


def norm_cdf_array(x: Union[np.ndarray, list]) -> np.ndarray:
    """Vectorized norm_cdf for numpy arrays."""
    x = np.asarray(x, dtype=float)
    sign = np.where(x < 0, -1.0, 1.0)
    z = np.abs(x) / math.sqrt(2.0)
    t = 1.0 / (1.0 + _P * z)
    y = 1.0 - (((((_A5 * t + _A4) * t) + _A3) * t + _A2) * t + _A1) * t * np.exp(-z * z)
    return 0.5 * (1.0 + sign * y)


def intrinsic_value(spot: float, strike: float, contract_type: ContractType = ContractType.CALL) -> float:
    """Value if exercised now: max(0, S - K) for calls, max(0, K - S) for puts."""
    if contract_type == ContractType.CALL:
        return max(0.0, spot - strike)
    return max(0.0, strike - spot)


def _validate(spot: float, strike: float) -> None:
    if spot <= 0:
        raise PricingInputError("spot", spot)
    if strike <= 0:
        raise PricingInputError("strike", strike)


def _d1_d2(spot: float, strike: float, T: float, sigma: float, r: float) -> tuple[float, float]:
    sigma_sqrt_t = sigma * math.sqrt(T)
    d1 = (math.log(spot / strike) + (r + sigma ** 2 / 2) * T) / sigma_sqrt_t
    return d1, d1 - sigma_sqrt_t


def call_price(
    spot: float,
    strike: float,
    T: float,
    sigma: float = DEFAULT_VOLATILITY,
    r: float = DEFAULT_RISK_FREE_RATE,
) -> float:
    """
    Black-Scholes price of a European call, per share.

    Args:
        spot: Underlying price S (must be > 0 when T > 0)
        strike: Strike K (must be > 0 when T > 0)
        T: Time to expiry in years
        sigma: Annualized volatility (default 20%)
        r: Risk-free rate (default 5%)

    Returns:
        Call price, never negative

    Raises:
        PricingInputError: If T > 0 and spot or strike is not positive
    """
    if T <= 0:
        return max(0.0, spot - strike)

    _validate(spot, strike)

    if sigma <= 0:
        # Deterministic forward: the option pays S - K*e^(-rT) or nothing
        return max(0.0, spot - strike * math.exp(-r * T))

    d1, d2 = _d1_d2(spot, strike, T, sigma, r)
    price = spot * norm_cdf(d1) - strike * math.exp(-r * T) * norm_cdf(d2)
    return max(0.0, price)


def call_price_array(
    spots: Union[np.ndarray, list],
    strike: float,
    T: float,
    sigma: float = DEFAULT_VOLATILITY,
    r: float = DEFAULT_RISK_FREE_RATE,
) -> np.ndarray:
    """
    call_price over an array of spot prices sharing one strike and expiry.

    Same branches as call_price; used to value heatmap rows in one pass.
    """
    spots = np.asarray(spots, dtype=float)
    if T <= 0:
        return np.maximum(0.0, spots - strike)

    if np.any(spots <= 0):
        raise PricingInputError("spot", float(spots.min()))
    _validate(1.0, strike)

    if sigma <= 0:
        return np.maximum(0.0, spots - strike * math.exp(-r * T))

    sigma_sqrt_t = sigma * math.sqrt(T)
    d1 = (np.log(spots / strike) + (r + sigma ** 2 / 2) * T) / sigma_sqrt_t
    d2 = d1 - sigma_sqrt_t
    prices = spots * norm_cdf_array(d1) - strike * math.exp(-r * T) * norm_cdf_array(d2)
    return np.maximum(0.0, prices)


def put_price(
    spot: float,
    strike: float,
    T: float,
    sigma: float = 0.25,
    r: float = DEFAULT_RISK_FREE_RATE,
) -> float:
    """
    Black-Scholes price of a European put, per share.

    Mirrors call_price. The default volatility is 25%, the figure used when
    pricing contracts picked from a price target.
    """
    if T <= 0:
        return max(0.0, strike - spot)

    _validate(spot, strike)

    if sigma <= 0:
        return max(0.0, strike * math.exp(-r * T) - spot)

    d1, d2 = _d1_d2(spot, strike, T, sigma, r)
    price = strike * math.exp(-r * T) * norm_cdf(-d2) - spot * norm_cdf(-d1)
    return max(0.0, price)


def option_price(
    spot: float,
    strike: float,
    T: float,
    contract_type: ContractType,
    sigma: float = DEFAULT_VOLATILITY,
    r: float = DEFAULT_RISK_FREE_RATE,
) -> float:
    """Dispatch to call_price or put_price."""
    if contract_type == ContractType.CALL:
        return call_price(spot, strike, T, sigma, r)
    return put_price(spot, strike, T, sigma, r)


def moneyness(spot: float, strike: float, contract_type: ContractType = ContractType.CALL) -> str:
    """
    Classify moneyness as "ITM", "ATM" or "OTM".

    Spot within 5% of strike counts as at-the-money.
    """
    ratio = spot / strike
    if contract_type == ContractType.CALL:
        if ratio > 1.05:
            return "ITM"
        elif ratio < 0.95:
            return "OTM"
        return "ATM"
    else:
        if ratio < 0.95:
            return "ITM"
        elif ratio > 1.05:
            return "OTM"
        return "ATM"
