"""
strikepath - options price-prediction engine.

Draw a predicted price path over the future half of a chart and see the
profit/loss of a selected option contract at every point.

Subpackages:
- pricing: Black-Scholes estimator and the path-to-P&L mapper
- chart: chart geometry, path recorder, decay ticker, path insights
- market: market data client, synthetic option chain and price history
- models: contract, path and quote models
- config: YAML/env configuration
- dashboard: Streamlit front end
"""

__version__ = "0.1.0"
