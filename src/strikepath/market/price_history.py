"""
Synthetic price history for the left-hand side of the prediction chart.
"""

import random
from datetime import datetime, timedelta
from typing import Optional

import polars as pl

HISTORY_START_OFFSET = 5.0
STEP_BIAS = 0.48
STEP_SCALE = 0.5


def generate_price_history(
    current_price: float,
    points: int = 100,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
    end: Optional[datetime] = None,
    interval: timedelta = timedelta(minutes=5),
) -> pl.DataFrame:
    """
    Random walk leading up to the current price.

    Starts $5 below current_price and drifts slightly upward with each step
    ((U - 0.48) * 0.5).

    Args:
        current_price: Latest spot price
        points: Number of samples
        rng: Random source (takes precedence over seed)
        seed: Seed for a fresh random.Random
        end: Timestamp of the last sample (default: now)
        interval: Spacing between samples

    Returns:
        DataFrame with columns timestamp, price (oldest first)
    """
    rng = rng if rng is not None else random.Random(seed)
    end = end or datetime.now()

    price = current_price - HISTORY_START_OFFSET
    prices = []
    for _ in range(points):
        price += (rng.random() - STEP_BIAS) * STEP_SCALE
        prices.append(price)

    timestamps = [end - interval * (points - 1 - i) for i in range(points)]
    return pl.DataFrame({"timestamp": timestamps, "price": prices})
