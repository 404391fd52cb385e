"""
Tests for PathRecorder.

Tests the IDLE/DRAWING state machine, sample throttling, per-point
valuation, cell fading and listener notification.
"""

import pytest

from strikepath.chart.path_recorder import PathRecorder
from strikepath.models.chart_state import RecorderMode


class TestRecorderInit:
    """Test PathRecorder initialization."""

    def test_initial_state(self, recorder):
        assert recorder.mode == RecorderMode.IDLE
        assert recorder.path == ()
        assert recorder.cells == ()
        assert recorder.contract is None
        assert not recorder.is_drawing

    def test_default_rates(self, recorder):
        assert recorder.min_sample_distance == 5.0
        assert recorder.tick_decay == 0.005
        assert recorder.insert_decay == 0.02

    @pytest.mark.parametrize("tick_decay", [0.0, -0.01])
    def test_rejects_non_positive_tick_decay(self, geometry, tick_decay):
        with pytest.raises(ValueError):
            PathRecorder(geometry, tick_decay=tick_decay)


class TestBegin:
    """Test pointer-down handling."""

    def test_begin_in_history_region_is_ignored(self, recorder):
        assert recorder.begin(100.0, 200.0) is False
        assert recorder.mode == RecorderMode.IDLE
        assert recorder.path == ()

    @pytest.mark.parametrize("x,y", [(850.0, 200.0), (500.0, -5.0), (500.0, 460.0), (5000.0, -900.0)])
    def test_begin_outside_canvas_is_ignored(self, recorder, x, y):
        assert recorder.begin(x, y) is False
        assert recorder.mode == RecorderMode.IDLE
        assert recorder.path == ()
        assert recorder.cells == ()

    def test_begin_on_canvas_edges(self, recorder):
        assert recorder.begin(320.0, 0.0) is True
        recorder.end()
        assert recorder.begin(800.0, 450.0) is True

    def test_begin_in_future_region_starts_drawing(self, recorder):
        assert recorder.begin(400.0, 200.0) is True
        assert recorder.mode == RecorderMode.DRAWING
        assert len(recorder.path) == 1
        assert len(recorder.cells) == 1

    def test_begin_maps_to_price_and_date(self, recorder, geometry, fixed_today):
        recorder.begin(560.0, 225.0)
        point = recorder.path[0]

        assert (point.x, point.y) == (560.0, 225.0)
        assert (point.price, point.timestamp) == geometry.screen_to_chart(560.0, 225.0, fixed_today)

    def test_begin_discards_previous_path(self, recorder):
        recorder.begin(400.0, 200.0)
        recorder.extend(450.0, 180.0)
        recorder.end()

        recorder.begin(600.0, 100.0)

        assert len(recorder.path) == 1
        assert recorder.path[0].x == 600.0
        assert len(recorder.cells) == 1


class TestExtend:
    """Test pointer-move handling and throttling."""

    def test_extend_while_idle_is_ignored(self, recorder):
        assert recorder.extend(400.0, 200.0) is False
        assert recorder.path == ()

    def test_small_move_is_throttled(self, recorder):
        recorder.begin(400.0, 200.0)

        assert recorder.extend(402.0, 203.0) is False
        assert recorder.extend(404.9, 195.1) is False
        assert len(recorder.path) == 1

    def test_move_on_either_axis_is_recorded(self, recorder):
        recorder.begin(400.0, 200.0)

        assert recorder.extend(406.0, 200.0) is True
        assert recorder.extend(407.0, 206.0) is True
        assert len(recorder.path) == 3

    def test_threshold_is_inclusive(self, recorder):
        recorder.begin(400.0, 200.0)

        assert recorder.extend(405.0, 200.0) is True

    def test_throttle_compares_with_last_recorded_point(self, recorder):
        recorder.begin(400.0, 200.0)
        recorder.extend(403.0, 200.0)  # throttled

        assert recorder.extend(406.0, 200.0) is True

    @pytest.mark.parametrize("x,y", [(200.0, 200.0), (850.0, 200.0), (500.0, -5.0), (500.0, 460.0)])
    def test_out_of_bounds_is_ignored(self, recorder, x, y):
        recorder.begin(400.0, 200.0)

        assert recorder.extend(x, y) is False
        assert recorder.is_drawing

    def test_path_keeps_insertion_order(self, recorder):
        recorder.begin(400.0, 200.0)
        for x in (420.0, 440.0, 460.0, 480.0):
            recorder.extend(x, 200.0)

        assert [p.x for p in recorder.path] == [400.0, 420.0, 440.0, 460.0, 480.0]


class TestEndAndClear:
    """Test gesture completion, clearing and listeners."""

    def test_end_returns_path_and_idles(self, recorder):
        recorder.begin(400.0, 200.0)
        recorder.extend(420.0, 190.0)

        path = recorder.end()

        assert len(path) == 2
        assert recorder.mode == RecorderMode.IDLE
        assert recorder.path == path

    def test_end_keeps_cells(self, recorder):
        recorder.begin(400.0, 200.0)
        recorder.end()

        assert len(recorder.cells) == 1

    def test_end_while_idle_is_noop(self, recorder):
        calls = []
        recorder.subscribe(calls.append)

        assert recorder.end() is None
        assert calls == []

    def test_listener_receives_completed_path(self, recorder):
        calls = []
        recorder.subscribe(calls.append)

        recorder.begin(400.0, 200.0)
        recorder.extend(430.0, 200.0)
        recorder.end()

        assert len(calls) == 1
        assert [p.x for p in calls[0]] == [400.0, 430.0]

    def test_extend_after_end_is_ignored(self, recorder):
        recorder.begin(400.0, 200.0)
        recorder.end()

        assert recorder.extend(450.0, 200.0) is False
        assert len(recorder.path) == 1

    def test_unsubscribe(self, recorder):
        calls = []
        unsubscribe = recorder.subscribe(calls.append)
        unsubscribe()

        recorder.begin(400.0, 200.0)
        recorder.end()

        assert calls == []

    def test_clear_resets_everything(self, recorder):
        calls = []
        recorder.subscribe(calls.append)
        recorder.begin(400.0, 200.0)
        recorder.extend(450.0, 200.0)

        recorder.clear()

        assert recorder.mode == RecorderMode.IDLE
        assert recorder.path == ()
        assert recorder.cells == ()
        assert calls == [()]

    def test_select_contract_clears(self, recorder, sample_call):
        recorder.begin(400.0, 200.0)
        recorder.end()

        recorder.select_contract(sample_call)

        assert recorder.contract is sample_call
        assert recorder.path == ()
        assert recorder.cells == ()


class TestCellValuation:
    """Test that each recorded point is valued against the selected contract."""

    def test_cells_without_contract_are_zero(self, recorder):
        recorder.begin(400.0, 200.0)
        recorder.extend(450.0, 150.0)

        assert len(recorder.cells) == 2
        assert all(c.pnl == 0.0 and c.contract_value == 0.0 for c in recorder.cells)

    def test_cell_matches_mapper(self, recorder, mapper, sample_call, fixed_today):
        recorder.select_contract(sample_call)
        recorder.begin(500.0, 100.0)
        recorder.extend(600.0, 50.0)

        for point, cell in zip(recorder.path, recorder.cells):
            expected = mapper.value_at(point.price, point.timestamp, sample_call, fixed_today)
            assert (cell.x, cell.y) == (point.x, point.y)
            assert cell.price == point.price
            assert cell.timestamp == point.timestamp
            assert cell.pnl == pytest.approx(expected.pnl)
            assert cell.contract_value == pytest.approx(expected.value)

    def test_high_path_is_profitable(self, recorder, sample_call):
        recorder.select_contract(sample_call)
        recorder.begin(330.0, 0.0)  # $477, same day

        assert recorder.cells[0].is_profitable

    def test_low_path_loses(self, recorder, sample_call):
        recorder.select_contract(sample_call)
        recorder.begin(790.0, 450.0)  # $432, two weeks out

        assert not recorder.cells[0].is_profitable

    def test_value_at_uses_selected_contract(self, recorder, mapper, sample_call, fixed_today):
        recorder.select_contract(sample_call)

        assert recorder.value_at(455.0, fixed_today) == mapper.value_at(455.0, fixed_today, sample_call)


class TestDecay:
    """Test insert fading and per-tick decay."""

    def test_new_cells_fade_older_ones(self, recorder):
        recorder.begin(400.0, 200.0)
        recorder.extend(420.0, 200.0)
        recorder.extend(440.0, 200.0)

        assert [c.opacity for c in recorder.cells] == pytest.approx([0.96, 0.98, 1.0])

    def test_tick_lowers_opacity(self, recorder):
        recorder.begin(400.0, 200.0)

        removed = recorder.tick()

        assert removed == 0
        assert recorder.cells[0].opacity == pytest.approx(0.995)

    def test_tick_while_idle(self, recorder):
        recorder.begin(400.0, 200.0)
        recorder.end()

        recorder.tick()

        assert recorder.cells[0].opacity == pytest.approx(0.995)

    def test_cells_are_removed_at_zero(self, recorder):
        recorder.begin(400.0, 200.0)

        for _ in range(199):
            recorder.tick()
        assert len(recorder.cells) == 1

        removed = sum(recorder.tick() for _ in range(2))
        assert removed == 1
        assert recorder.cells == ()

    def test_decay_does_not_touch_path(self, recorder):
        recorder.begin(400.0, 200.0)
        recorder.end()

        for _ in range(250):
            recorder.tick()

        assert recorder.cells == ()
        assert len(recorder.path) == 1

    def test_opacity_stays_in_range(self, geometry, mapper):
        recorder = PathRecorder(geometry, mapper, tick_decay=0.3)
        recorder.begin(400.0, 200.0)
        recorder.extend(420.0, 200.0)

        for _ in range(3):
            recorder.tick()
            assert all(0.0 < c.opacity <= 1.0 for c in recorder.cells)

        recorder.tick()
        assert recorder.cells == ()

    def test_tick_with_no_cells(self, recorder):
        assert recorder.tick() == 0
