import pytest

from orbit_viewer.core.errors import InvalidParameterError
from orbit_viewer.core.physics import orbital_velocity
from orbit_viewer.data.bodies import BODY_DEFINITIONS, lookup
from orbit_viewer.data.presets import resolve_preset, resolve_presets


def test_tiers_present_for_every_body():
    for body in BODY_DEFINITIONS:
        presets = resolve_presets(body)
        assert {"low", "medium", "high"} <= set(presets)
        assert presets["low"].altitude < presets["medium"].altitude < presets["high"].altitude


def test_moon_low_orbit_uses_altitude_floor(moon):
    assert resolve_preset(moon, "low").altitude == 200.0


def test_jupiter_low_orbit_scales_with_radius():
    jupiter = lookup("jupiter")
    assert resolve_preset(jupiter, "low").altitude == pytest.approx(jupiter.radius * 0.05)


def test_preset_velocity_is_consistent_with_physics():
    for body in BODY_DEFINITIONS:
        for preset in resolve_presets(body).values():
            assert preset.altitude > 0.0
            assert preset.mass > 0.0
            assert preset.derived_velocity == pytest.approx(orbital_velocity(body, preset.altitude))


def test_named_orbits_only_for_earth(earth, moon):
    earth_presets = resolve_presets(earth)
    assert earth_presets["iss"].altitude == 408.0
    assert earth_presets["iss"].derived_velocity == pytest.approx(7.66, abs=0.01)
    assert earth_presets["geo"].derived_velocity == pytest.approx(3.07, abs=0.01)
    assert earth_presets["gps"].derived_velocity == pytest.approx(3.87, abs=0.01)
    assert "iss" not in resolve_presets(moon)


def test_unknown_preset(moon):
    with pytest.raises(InvalidParameterError):
        resolve_preset(moon, "geo")
