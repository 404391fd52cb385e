"""
Tests for dashboard chart components and data helpers.
"""

import numpy as np
import pytest

from strikepath.config.settings import MarketDataConfig
from strikepath.dashboard.components.options_matrix import contracts_to_frame
from strikepath.dashboard.components.prediction_chart import (
    build_pnl_heatmap,
    build_prediction_figure,
    cell_color,
    replay_waypoints,
)
from strikepath.dashboard.data.market import fetch_quote
from strikepath.market.contract_generator import generate_options_chain
from strikepath.market.price_history import generate_price_history
from strikepath.models.chart_state import GridCell, RecorderMode


class TestReplayWaypoints:
    """Test typed waypoints driving the recorder."""

    def test_draws_path_through_waypoints(self, recorder):
        path = replay_waypoints(recorder, [(1.0, 450.0), (3.0, 455.0), (7.0, 460.0)])

        assert [p.price for p in path] == pytest.approx([450.0, 455.0, 460.0])
        assert recorder.mode == RecorderMode.IDLE
        assert len(recorder.cells) == 3

    def test_notifies_listener(self, recorder):
        calls = []
        recorder.subscribe(calls.append)

        replay_waypoints(recorder, [(1.0, 450.0), (5.0, 458.0)])

        assert len(calls) == 1
        assert len(calls[0]) == 2

    def test_start_in_history_draws_nothing(self, recorder):
        path = replay_waypoints(recorder, [(-2.0, 450.0), (3.0, 455.0)])

        assert path == ()
        assert recorder.path == ()
        assert recorder.mode == RecorderMode.IDLE

    def test_later_waypoint_does_not_start_drawing(self, recorder):
        path = replay_waypoints(recorder, [(-2.0, 450.0), (-1.0, 452.0), (3.0, 455.0), (6.0, 458.0)])

        assert path == ()
        assert recorder.cells == ()

    def test_start_off_price_axis_draws_nothing(self, recorder):
        path = replay_waypoints(recorder, [(0.0, 10000.0), (7.0, 451.0)])

        assert path == ()
        assert recorder.mode == RecorderMode.IDLE

    def test_off_axis_waypoint_after_start_is_skipped(self, recorder):
        path = replay_waypoints(recorder, [(1.0, 450.0), (4.0, 10000.0), (7.0, 455.0)])

        assert [p.price for p in path] == pytest.approx([450.0, 455.0])

    def test_no_waypoints(self, recorder):
        assert replay_waypoints(recorder, []) == ()

    def test_close_waypoints_are_throttled(self, recorder):
        path = replay_waypoints(recorder, [(1.0, 450.0), (1.05, 450.1), (4.0, 456.0)])

        assert len(path) == 2


class TestCellColor:
    """Test P&L cell colouring."""

    def make_cell(self, pnl, opacity=1.0, fixed_today=None):
        return GridCell(x=400.0, y=200.0, price=455.0, timestamp=fixed_today, pnl=pnl, contract_value=0.0, opacity=opacity)

    def test_profit_is_green(self, fixed_today):
        assert cell_color(self.make_cell(250.0, fixed_today=fixed_today)).startswith("rgba(34, 197, 94,")

    def test_loss_is_red(self, fixed_today):
        assert cell_color(self.make_cell(-250.0, fixed_today=fixed_today)).startswith("rgba(239, 68, 68,")

    def test_alpha_follows_opacity(self, fixed_today):
        assert cell_color(self.make_cell(500.0, fixed_today=fixed_today)) == "rgba(34, 197, 94, 0.4)"
        assert cell_color(self.make_cell(500.0, opacity=0.5, fixed_today=fixed_today)) == "rgba(34, 197, 94, 0.2)"
        assert cell_color(self.make_cell(500.0, opacity=0.0, fixed_today=fixed_today)) == "rgba(34, 197, 94, 0.0)"


class TestPredictionFigure:
    """Test the prediction chart figure."""

    def test_history_only(self, geometry, fixed_today):
        history = generate_price_history(450.0, seed=1, end=fixed_today)

        fig = build_prediction_figure(geometry, history, (), (), fixed_today)

        assert [t.name for t in fig.data] == ["History"]
        assert min(fig.data[0].x) < 0
        assert list(fig.layout.yaxis.range) == pytest.approx([432.0, 477.0])

    def test_with_path_and_cells(self, geometry, recorder, sample_call, fixed_today):
        recorder.select_contract(sample_call)
        replay_waypoints(recorder, [(1.0, 450.0), (4.0, 455.0), (8.0, 462.0)])
        history = generate_price_history(450.0, seed=1, end=fixed_today)

        fig = build_prediction_figure(geometry, history, recorder.path, recorder.cells, fixed_today)

        assert [t.name for t in fig.data] == ["History", "P&L", "Prediction"]
        assert list(fig.data[2].x) == pytest.approx([1.0, 4.0, 8.0])


class TestPnLHeatmap:
    """Test the P&L heatmap."""

    def test_heatmap_from_grid(self, mapper, sample_call):
        prices = np.linspace(432.0, 477.0, 5)
        grid = mapper.pnl_grid(sample_call, prices, range(0, 15, 7))

        fig = build_pnl_heatmap(grid)
        heatmap = fig.data[0]

        assert np.asarray(heatmap.z).shape == (5, 3)
        assert list(heatmap.x) == [0, 7, 14]
        assert list(heatmap.y) == pytest.approx(list(prices))

    def test_empty_grid(self, mapper, sample_call):
        fig = build_pnl_heatmap(mapper.pnl_grid(sample_call, [450.0], []))

        assert len(fig.data) == 0
        assert "No Data" in fig.layout.title.text


class TestContractsToFrame:
    """Test matrix tabulation."""

    def test_columns_and_rows(self, fixed_today):
        contracts = generate_options_chain("SPY", 450.0, seed=1, today=fixed_today)[:8]

        frame = contracts_to_frame(contracts)

        assert frame.height == 8
        assert frame.columns == [
            "symbol", "expiry", "dte", "type", "strike", "bid", "ask", "premium", "open_interest",
        ]
        assert frame["type"].to_list()[:2] == ["call", "put"]

    def test_empty(self):
        assert contracts_to_frame([]).is_empty()


class TestFetchQuote:
    """Test dashboard quote loading."""

    def test_without_credentials_returns_placeholder(self):
        quote = fetch_quote("spy", MarketDataConfig())

        assert quote.is_placeholder
        assert quote.symbol == "SPY"
