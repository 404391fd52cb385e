"""Test fixtures for strikepath tests.

This package provides reusable test fixtures for:
- Contracts, chart geometry and a recorder on a pinned clock
- Market data API payloads and configs

Fixtures are auto-discovered by pytest through conftest.py.
"""

from tests.fixtures.chart_fixtures import (
    fixed_today,
    geometry,
    mapper,
    recorder,
    sample_call,
    sample_put,
)
from tests.fixtures.market_fixtures import (
    alpaca_payloads,
    market_config,
)

__all__ = [
    # Chart fixtures
    "fixed_today",
    "geometry",
    "mapper",
    "recorder",
    "sample_call",
    "sample_put",
    # Market fixtures
    "alpaca_payloads",
    "market_config",
]
