import numpy as np
import pytest

from orbit_viewer.sweep import altitude_sweep, main, plot_sweep


def test_sweep_is_monotonic(earth):
    result = altitude_sweep(earth, np.linspace(0.0, 40_000.0, 50))
    assert np.all(np.diff(result.velocity) < 0.0)
    assert np.all(np.diff(result.period) > 0.0)
    assert np.all(np.diff(result.force) < 0.0)
    np.testing.assert_allclose(result.escape, result.velocity * np.sqrt(2.0))


def test_sweep_matches_reference_point(earth):
    result = altitude_sweep(earth, [400.0])
    assert result.velocity[0] == pytest.approx(7.67, abs=0.01)
    assert result.period[0] == pytest.approx(1.54, abs=0.01)


def test_plot_sweep_writes_figure(moon, tmp_path):
    result = altitude_sweep(moon, np.linspace(0.0, 5_000.0, 20))
    path = plot_sweep(result, tmp_path)
    assert path.exists()
    assert path.name == "sweep_moon.png"


def test_cli(tmp_path):
    assert main(["--body", "mars", "--points", "10", "--out", str(tmp_path)]) == 0
    assert (tmp_path / "sweep_mars.png").exists()


def test_cli_unknown_body_falls_back_to_default(tmp_path, capsys):
    assert main(["--body", "vulcan", "--points", "5", "--out", str(tmp_path)]) == 0
    assert (tmp_path / "sweep_earth.png").exists()
    assert "vulcan" in capsys.readouterr().out
