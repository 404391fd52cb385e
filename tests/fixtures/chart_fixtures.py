"""
Chart fixtures: contracts, geometry and a recorder on a pinned clock.

Usage:
    def test_record(recorder, sample_call):
        recorder.select_contract(sample_call)
        assert recorder.begin(500, 200)
"""

from datetime import datetime

import pytest

from strikepath.chart.geometry import ChartGeometry
from strikepath.chart.path_recorder import PathRecorder
from strikepath.models.chart_state import ContractType, OptionContract
from strikepath.pricing.pnl_mapper import PathPnLMapper


@pytest.fixture
def fixed_today():
    """Reference "now" shared by mapper, recorder and expectations."""
    return datetime(2026, 3, 2, 12, 0, 0)


@pytest.fixture
def sample_call():
    """
    30-day at-the-money SPY call bought for $5.00 per share.

    Returns:
        OptionContract: strike 450, premium 5.00 ($500 per contract)
    """
    return OptionContract(
        symbol="SPY260401C450000",
        strike=450.0,
        expiry="APR 1, 2026",
        contract_type=ContractType.CALL,
        bid=4.95,
        ask=5.05,
        premium=5.0,
        open_interest=1200,
        days_to_expiry=30,
    )


@pytest.fixture
def sample_put():
    """30-day SPY put, strike 440, premium 3.00."""
    return OptionContract(
        symbol="SPY260401P440000",
        strike=440.0,
        expiry="APR 1, 2026",
        contract_type=ContractType.PUT,
        bid=2.95,
        ask=3.05,
        premium=3.0,
        open_interest=800,
        days_to_expiry=30,
    )


@pytest.fixture
def geometry():
    """800x450 chart around $450 with 14 days ahead (future region starts at x=320)."""
    return ChartGeometry(current_price=450.0)


@pytest.fixture
def mapper(fixed_today):
    """Mapper with default 20% vol / 5% rate and a pinned clock."""
    return PathPnLMapper(clock=lambda: fixed_today)


@pytest.fixture
def recorder(geometry, mapper):
    """Idle recorder with no contract selected."""
    return PathRecorder(geometry, mapper)
