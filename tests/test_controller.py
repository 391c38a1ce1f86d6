import csv
import json

import pytest

from orbit_viewer.core.controller import SimulationController
from orbit_viewer.core.errors import InvalidGeometryError, InvalidParameterError, UnknownBodyError
from orbit_viewer.core.logging_utils import RunLogger
from orbit_viewer.core.units import UnitSystem
from orbit_viewer.render import OrbitRenderer


@pytest.fixture
def controller(state, canvas, notice_font):
    ctrl = SimulationController(state, renderer=OrbitRenderer(notice_font=notice_font), surface=canvas)
    yield ctrl
    ctrl.close()


def test_start_runs_and_renders(controller):
    assert controller.start()
    for _ in range(5):
        assert controller.run_frame() == 1
    assert controller.state.phase_angle == pytest.approx(0.1)
    assert len(controller.state.trail) == 5
    assert controller.last_frame.satellite is not None


def test_pause_stops_ticks_and_trail(controller):
    controller.start()
    controller.run_frame()
    assert controller.pause()
    assert not controller.pause()
    phase, trail_len = controller.state.phase_angle, len(controller.state.trail)
    for _ in range(20):
        assert controller.run_frame() == 0
    assert controller.state.phase_angle == phase
    assert len(controller.state.trail) == trail_len
    assert controller.last_frame is not None


def test_start_is_noop_while_running(controller):
    assert controller.start()
    assert not controller.start()
    assert controller.tick_source.pending == 1


def test_toggle_running(controller):
    assert controller.toggle_running() is True
    assert controller.toggle_running() is False
    assert controller.tick_source.pending == 0


def test_unknown_body_is_refused(controller, earth):
    assert not controller.select_body("krypton")
    assert isinstance(controller.last_error, UnknownBodyError)
    assert controller.state.body is earth


def test_select_body_resets_history(controller, moon):
    controller.start()
    controller.run_frame()
    assert controller.select_body("moon")
    assert controller.last_error is None
    assert controller.state.body is moon
    assert controller.state.phase_angle == 0.0
    assert len(controller.state.trail) == 0
    assert controller.state.is_running


def test_invalid_parameters_keep_last_good_state(controller):
    controller.set_altitude(1_234.0)
    assert not controller.set_altitude(-5.0)
    assert isinstance(controller.last_error, InvalidParameterError)
    assert controller.state.satellite.altitude == 1_234.0
    assert not controller.set_mass(0.0)
    assert controller.state.satellite.mass > 0.0
    assert not controller.select_preset("nonexistent")
    assert controller.state.preset_key == "custom"


def test_unbounded_altitude_is_refused(controller):
    controller.set_altitude(1_234.0)
    assert not controller.set_altitude(1e300)
    assert isinstance(controller.last_error, InvalidGeometryError)
    assert controller.state.satellite.altitude == 1_234.0
    assert controller.metrics().orbital_period_hours > 0.0


def test_zoom_commands(controller):
    controller.set_zoom(1.0)
    assert controller.state.zoom_level == 0.1
    controller.zoom_by(0.5)
    assert controller.state.zoom_level == pytest.approx(0.05)
    assert controller.reset_zoom()
    assert controller.state.zoom_level == pytest.approx(0.0301, abs=1e-4)


def test_metrics_follow_unit_system(controller):
    metric = controller.metrics()
    controller.toggle_unit_system()
    assert controller.state.unit_system is UnitSystem.IMPERIAL
    assert controller.metrics().distance_from_center == pytest.approx(metric.distance_from_center * 0.621371)


def test_close_releases_tick_chain(controller):
    controller.start()
    controller.close()
    assert controller.tick_source.pending == 0
    assert not controller.state.is_running
    assert controller.tick_source.run_pending() == 0


def test_start_after_close_leaves_state_paused(controller):
    controller.close()
    with pytest.raises(RuntimeError):
        controller.start()
    assert not controller.state.is_running


def test_controller_without_renderer(state):
    ctrl = SimulationController(state)
    ctrl.start()
    ctrl.run_frame()
    assert ctrl.last_frame is None
    assert state.phase_angle == pytest.approx(0.02)
    ctrl.close()


def test_session_is_logged(state, tmp_path):
    logger = RunLogger(tmp_path, run_id="test")
    with SimulationController(state, logger=logger) as ctrl:
        ctrl.start()
        for _ in range(25):
            ctrl.run_frame()
        ctrl.set_mass(-1.0)
        ctrl.select_body("mars")
    assert logger.closed

    meta = json.loads(logger.meta_path.read_text(encoding="utf-8"))
    assert meta["body"] == "earth"
    assert meta["physics"]["trail_capacity"] == 200

    with logger.events_path.open(newline="") as fh:
        events = list(csv.DictReader(fh))
    kinds = [row["type"] for row in events]
    assert kinds[0] == "session_start"
    assert "start" in kinds
    assert "rejected" in kinds
    assert "select_body" in kinds
    assert kinds[-1] == "session_end"

    with logger.timeseries_path.open(newline="") as fh:
        rows = list(csv.DictReader(fh))
    assert [int(row["tick"]) for row in rows] == [10, 20]
    assert rows[0]["body"] == "earth"
    assert float(rows[0]["velocity_kms"]) > 7.0
