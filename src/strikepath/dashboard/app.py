"""
Options Prediction Dashboard

Pick an underlying and a contract, sketch a predicted price path with
waypoints, and see the contract's P&L along the path and over a price/date
grid.

Usage:
    streamlit run src/strikepath/dashboard/app.py
"""

import time
from datetime import datetime

import numpy as np
import streamlit as st
from loguru import logger

from strikepath.chart.decay_ticker import DecayTicker
from strikepath.chart.geometry import ChartGeometry
from strikepath.chart.insights import summarize_path
from strikepath.chart.path_recorder import PathRecorder
from strikepath.config import StrikepathConfig, load_and_validate_config
from strikepath.dashboard.components.options_matrix import options_matrix
from strikepath.dashboard.components.prediction_chart import (
    build_pnl_heatmap,
    build_prediction_figure,
    replay_waypoints,
)
from strikepath.dashboard.config import DashboardConfig
from strikepath.dashboard.data.market import load_quote
from strikepath.market.contract_generator import generate_options_chain
from strikepath.market.price_history import generate_price_history
from strikepath.models.quote_models import MarketQuote
from strikepath.pricing.black_scholes import moneyness
from strikepath.pricing.pnl_mapper import PathPnLMapper
from strikepath.utils.logging_setup import setup_logging


def build_recorder(config: StrikepathConfig, spot: float) -> PathRecorder:
    """Recorder wired to the configured chart geometry and pricing."""
    chart = config.chart
    geometry = ChartGeometry(
        current_price=spot,
        width=chart.width,
        height=chart.height,
        history_fraction=chart.history_fraction,
        days_ahead=chart.days_ahead,
        price_floor=chart.price_floor,
        price_ceiling=chart.price_ceiling,
    )
    mapper = PathPnLMapper(
        volatility=config.pricing.volatility,
        risk_free_rate=config.pricing.risk_free_rate,
    )
    return PathRecorder(
        geometry,
        mapper,
        min_sample_distance=chart.min_sample_distance,
        tick_decay=chart.tick_decay,
        insert_decay=chart.insert_decay,
    )


def load_underlying(symbol: str, config: StrikepathConfig) -> None:
    """(Re)build chain, history and recorder for a new underlying."""
    quote = MarketQuote(**load_quote(symbol, config.market_data))
    spot = quote.last_price or config.market_data.default_spot

    recorder = build_recorder(config, spot)
    st.session_state.symbol = symbol
    st.session_state.quote = quote
    st.session_state.spot = spot
    st.session_state.contracts = generate_options_chain(symbol, spot, seed=config.market_data.seed)
    st.session_state.history = generate_price_history(spot, seed=config.market_data.seed)
    st.session_state.recorder = recorder
    st.session_state.ticker = DecayTicker(recorder, interval=config.chart.frame_interval)
    st.session_state.last_frame = time.monotonic()

    logger.info(f"Loaded {symbol} at ${spot:.2f} ({len(st.session_state.contracts)} contracts)")


def advance_decay() -> None:
    """Catch the decay animation up with wall-clock time since the last rerun."""
    ticker: DecayTicker = st.session_state.ticker
    now = time.monotonic()
    frames = int((now - st.session_state.last_frame) / ticker.interval)
    if frames > 0:
        ticker.step(frames)
        st.session_state.last_frame = now


def display_header(quote: MarketQuote, spot: float) -> None:
    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("Spot", f"${spot:.2f}", f"{quote.change_percent:+.2f}%")
    with col2:
        st.metric("Bid / Ask", f"${quote.bid_price:.2f} / ${quote.ask_price:.2f}")
    with col3:
        if quote.is_placeholder:
            st.warning("Live quote unavailable, using placeholder price")
        else:
            st.caption(f"As of {quote.timestamp:%H:%M:%S}")


def display_insights(recorder: PathRecorder, spot: float) -> None:
    st.markdown("### Path Insights")
    insights = summarize_path(recorder.path, spot, recorder.contract)
    if insights is None:
        st.info("Draw a path with at least 5 points to see insights.")
        return

    direction = "📈 Bullish" if insights.is_bullish else "📉 Bearish"
    col1, col2, col3 = st.columns(3)
    col1.metric("Projected", f"${insights.end_price:.2f}", f"{insights.price_change_pct:+.1f}%")
    col2.metric("Swing", f"{insights.volatility_pct:.1f}%", direction)
    col3.metric("Expected P&L at end", f"${insights.expected_pnl:,.0f}")


def main():
    """Prediction dashboard main function."""
    st.set_page_config(page_title="Options Prediction", page_icon="🎯", layout="wide")

    config = load_and_validate_config()
    dashboard_config = DashboardConfig()
    if "logging_ready" not in st.session_state:
        setup_logging(config.logging)
        st.session_state.logging_ready = True

    st.title("🎯 Options Price Prediction")

    with st.sidebar:
        st.markdown("### Underlying")
        symbols = dashboard_config.watch_symbols
        default = config.market_data.default_symbol
        index = symbols.index(default) if default in symbols else 0
        symbol = st.selectbox("Symbol", symbols, index=index).upper()
        if st.button("🔄 Refresh Quote"):
            st.cache_data.clear()
            st.session_state.pop("symbol", None)

    if st.session_state.get("symbol") != symbol:
        load_underlying(symbol, config)

    recorder: PathRecorder = st.session_state.recorder
    spot: float = st.session_state.spot
    advance_decay()

    display_header(st.session_state.quote, spot)
    st.markdown("---")

    left, right = st.columns([1, 2])

    with left:
        chosen = options_matrix(st.session_state.contracts, recorder.contract, spot)
        if chosen is not None and chosen != recorder.contract:
            recorder.select_contract(chosen)

        if recorder.contract is not None:
            c = recorder.contract
            st.success(
                f"{c.symbol}: {c.contract_type.value.upper()} ${c.strike:.0f} exp {c.expiry} "
                f"({moneyness(spot, c.strike, c.contract_type)}) mid ${c.mid:.2f}, cost ${c.cost_basis:,.0f}"
            )

    with right:
        st.markdown("### Prediction Chart")
        st.caption("Waypoints are days from today and price; the path is sampled like a pointer drag.")
        default_waypoints = [
            {"day": 0.0, "price": round(spot, 2)},
            {"day": recorder.geometry.days_ahead / 2, "price": round(spot * 1.02, 2)},
            {"day": float(recorder.geometry.days_ahead), "price": round(spot * 1.03, 2)},
        ]
        waypoints = st.data_editor(default_waypoints, num_rows="dynamic", key="waypoints")

        col1, col2 = st.columns(2)
        if col1.button("✏️ Draw Path"):
            points = [(float(w["day"]), float(w["price"])) for w in waypoints if w.get("day") is not None]
            replay_waypoints(recorder, _densify(points))
        if col2.button("Clear Drawing"):
            recorder.clear()

        today = recorder.mapper.clock()
        st.plotly_chart(
            build_prediction_figure(recorder.geometry, st.session_state.history, recorder.path, recorder.cells, today),
            use_container_width=True,
        )

    st.markdown("---")

    if recorder.contract is not None:
        geometry = recorder.geometry
        prices = np.linspace(geometry.price_min, geometry.price_max, dashboard_config.heatmap_price_steps)
        days = range(0, geometry.days_ahead + 1, dashboard_config.heatmap_day_step)
        grid = recorder.mapper.pnl_grid(recorder.contract, prices, days)
        st.plotly_chart(build_pnl_heatmap(grid), use_container_width=True)

    display_insights(recorder, spot)
    st.caption(f"Last refresh: {datetime.now():%H:%M:%S}")


def _densify(points: list[tuple[float, float]], steps: int = 10) -> list[tuple[float, float]]:
    """Linearly interpolate between waypoints so the recorder sees a drag."""
    if len(points) < 2:
        return points
    dense = [points[0]]
    for (d0, p0), (d1, p1) in zip(points, points[1:]):
        for i in range(1, steps + 1):
            t = i / steps
            dense.append((d0 + (d1 - d0) * t, p0 + (p1 - p0) * t))
    return dense


if __name__ == "__main__":
    main()
