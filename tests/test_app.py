import pygame
import pytest

from orbit_viewer.app import handle_key, hud_lines, next_in, parse_args, save_snapshot
from orbit_viewer.core.config import RENDER_CFG
from orbit_viewer.core.controller import SimulationController


@pytest.fixture
def controller(state):
    ctrl = SimulationController(state)
    yield ctrl
    ctrl.close()


def test_parse_args_defaults():
    args = parse_args([])
    assert args.body == "earth"
    assert args.preset == "low"
    assert not args.mass_effect
    assert not args.no_log


def test_next_in_wraps():
    keys = ["a", "b", "c"]
    assert next_in(keys, "a") == "b"
    assert next_in(keys, "c") == "a"
    assert next_in(keys, "custom") == "a"


def test_key_bindings(controller, canvas, tmp_path):
    args = parse_args(["--snapshot-dir", str(tmp_path)])
    state = controller.state
    assert handle_key(controller, pygame.K_SPACE, args, canvas)
    assert state.is_running
    altitude = state.satellite.altitude
    handle_key(controller, pygame.K_UP, args, canvas)
    assert state.satellite.altitude == pytest.approx(altitude + 100.0)
    assert state.preset_key == "custom"
    handle_key(controller, pygame.K_p, args, canvas)
    assert state.preset_key == "low"
    handle_key(controller, pygame.K_2, args, canvas)
    assert state.body.key == "moon"
    handle_key(controller, pygame.K_RIGHTBRACKET, args, canvas)
    assert state.satellite.mass == 2_000.0
    handle_key(controller, pygame.K_u, args, canvas)
    assert state.unit_system.value == "imperial"
    handle_key(controller, pygame.K_s, args, canvas)
    assert len(list(tmp_path.glob("orbit_moon_*.png"))) == 1
    assert not handle_key(controller, pygame.K_ESCAPE, args, canvas)


def test_altitude_cannot_go_below_surface(controller, canvas):
    args = parse_args([])
    controller.set_altitude(50.0)
    handle_key(controller, pygame.K_DOWN, args, canvas)
    assert controller.state.satellite.altitude == 50.0
    assert controller.last_error is not None


def test_hud_lines_include_metrics_and_errors(controller):
    texts = [text for text, _ in hud_lines(controller, RENDER_CFG)]
    assert texts[0].startswith("Earth")
    assert any(text.startswith("Orbital Velocity") for text in texts)
    controller.set_mass(0.0)
    texts = [text for text, _ in hud_lines(controller, RENDER_CFG)]
    assert "Mass must be > 0 kg" in texts[-1]


def test_save_snapshot(canvas, tmp_path):
    path = save_snapshot(canvas, tmp_path / "shots", "earth")
    assert path.exists()
    assert path.suffix == ".png"
