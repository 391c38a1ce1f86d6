import math
from dataclasses import replace

import pytest

from orbit_viewer.core.config import PHYSICS_CFG
from orbit_viewer.core.errors import InvalidGeometryError
from orbit_viewer.core.physics import (
    clamp,
    escape_velocity,
    gravitational_force,
    mass_effect_factor,
    orbit_radius_meters,
    orbital_period_hours,
    orbital_velocity,
)
from orbit_viewer.data.bodies import BODY_DEFINITIONS


def test_earth_iss_altitude_reference_values(earth):
    assert orbital_velocity(earth, 400.0) == pytest.approx(7.67, abs=0.01)
    assert escape_velocity(earth, 400.0) == pytest.approx(10.85, abs=0.01)
    assert orbital_period_hours(earth, 400.0) == pytest.approx(1.54, abs=0.01)


def test_orbit_radius_in_meters(earth):
    assert orbit_radius_meters(earth, 400.0) == pytest.approx(6_771_000.0)


def test_non_positive_radius_is_rejected(earth):
    with pytest.raises(InvalidGeometryError):
        orbit_radius_meters(earth, -earth.radius)
    with pytest.raises(InvalidGeometryError):
        orbital_velocity(earth, -earth.radius - 10.0)


def test_velocity_positive_and_decreasing_with_altitude():
    altitudes = [0.0, 200.0, 1_000.0, 10_000.0, 35_786.0, 100_000.0]
    for body in BODY_DEFINITIONS:
        speeds = [orbital_velocity(body, h) for h in altitudes]
        assert all(v > 0.0 for v in speeds)
        assert all(a > b for a, b in zip(speeds, speeds[1:]))


def test_period_increasing_with_altitude():
    altitudes = [0.0, 200.0, 1_000.0, 10_000.0, 35_786.0, 100_000.0]
    for body in BODY_DEFINITIONS:
        periods = [orbital_period_hours(body, h) for h in altitudes]
        assert all(a < b for a, b in zip(periods, periods[1:]))


def test_escape_velocity_is_sqrt2_times_orbital():
    for body in BODY_DEFINITIONS:
        for h in (0.0, 400.0, 20_200.0, 384_400.0):
            assert escape_velocity(body, h) == pytest.approx(orbital_velocity(body, h) * math.sqrt(2.0))


def test_geostationary_period_is_about_one_sidereal_day(earth):
    assert orbital_period_hours(earth, 35_786.0) == pytest.approx(23.93, abs=0.05)


def test_gravitational_force_inverse_square(earth):
    f_surface = gravitational_force(earth, 0.0, 1_000.0)
    f_double = gravitational_force(earth, earth.radius, 1_000.0)
    assert f_surface == pytest.approx(9_820.0, rel=0.01)
    assert f_double == pytest.approx(f_surface / 4.0)


def test_mass_effect_disabled_by_default(earth):
    assert mass_effect_factor(420_000.0) == 1.0
    assert orbital_velocity(earth, 400.0, 420_000.0) == orbital_velocity(earth, 400.0)


def test_mass_effect_scales_velocity_and_period(earth):
    cfg = replace(PHYSICS_CFG, mass_effect_enabled=True, mass_effect_coefficient=1e-6)
    factor = mass_effect_factor(2_000.0, cfg)
    assert factor == pytest.approx(1.001)
    assert orbital_velocity(earth, 400.0, 2_000.0, cfg) == pytest.approx(orbital_velocity(earth, 400.0) * factor)
    assert orbital_period_hours(earth, 400.0, 2_000.0, cfg) == pytest.approx(orbital_period_hours(earth, 400.0) / factor)
    # the reference mass is unperturbed
    assert mass_effect_factor(cfg.reference_mass, cfg) == 1.0
    # escape velocity ignores the approximation
    assert escape_velocity(earth, 400.0, cfg) == escape_velocity(earth, 400.0)


def test_clamp():
    assert clamp(5.0, 0.0, 1.0) == 1.0
    assert clamp(-5.0, 0.0, 1.0) == 0.0
    assert clamp(0.5, 0.0, 1.0) == 0.5


def test_period_and_force_stay_finite_far_out(earth):
    period = orbital_period_hours(earth, 1e100)
    force = gravitational_force(earth, 1e100, 1_000.0)
    assert math.isfinite(period) and period > 0.0
    assert math.isfinite(force) and force >= 0.0


def test_non_finite_radius_is_rejected(earth):
    with pytest.raises(InvalidGeometryError):
        orbit_radius_meters(earth, 1e306)
