"""Closed-form circular orbit physics.

All distances passed in are in km and all masses in kg. Results are returned in
km/s, hours and Newtons.
"""
from __future__ import annotations

import math
from typing import TYPE_CHECKING

from .config import PHYSICS_CFG, PhysicsCfg
from .errors import InvalidGeometryError

if TYPE_CHECKING:  # pragma: no cover
    from orbit_viewer.data.bodies import CelestialBody


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp *value* between *lo* and *hi*."""

    return max(lo, min(hi, value))


def orbit_radius_meters(body: CelestialBody, altitude_km: float) -> float:
    """Distance from the body centre to the satellite in metres."""

    r = (body.radius + altitude_km) * 1000.0
    if not (r > 0.0 and math.isfinite(r)):
        raise InvalidGeometryError(
            f"Orbit radius must be positive and finite, got {r:.3f} m "
            f"({body.name}, altitude {altitude_km} km)"
        )
    return r


def mass_effect_factor(satellite_mass: float | None, cfg: PhysicsCfg = PHYSICS_CFG) -> float:
    """Linear correction applied to velocity and period when the mass effect is on.

    This is a teaching approximation with no physical basis at these scales. It
    is disabled in the default configuration.
    """

    if not cfg.mass_effect_enabled or satellite_mass is None:
        return 1.0
    return 1.0 + cfg.mass_effect_coefficient * (satellite_mass - cfg.reference_mass)


def orbital_velocity(
    body: CelestialBody,
    altitude_km: float,
    satellite_mass: float | None = None,
    cfg: PhysicsCfg = PHYSICS_CFG,
) -> float:
    """Circular orbit speed in km/s."""

    r = orbit_radius_meters(body, altitude_km)
    v = math.sqrt(cfg.gravitational_constant * body.mass / r) / 1000.0
    return v * mass_effect_factor(satellite_mass, cfg)


def orbital_period_hours(
    body: CelestialBody,
    altitude_km: float,
    satellite_mass: float | None = None,
    cfg: PhysicsCfg = PHYSICS_CFG,
) -> float:
    """Circular orbit period in hours."""

    r = orbit_radius_meters(body, altitude_km)
    period = 2.0 * math.pi * r * math.sqrt(r / (cfg.gravitational_constant * body.mass))
    return period / 3600.0 / mass_effect_factor(satellite_mass, cfg)


def escape_velocity(
    body: CelestialBody,
    altitude_km: float,
    cfg: PhysicsCfg = PHYSICS_CFG,
) -> float:
    """Escape velocity in km/s at the orbit radius."""

    r = orbit_radius_meters(body, altitude_km)
    return math.sqrt(2.0 * cfg.gravitational_constant * body.mass / r) / 1000.0


def gravitational_force(
    body: CelestialBody,
    altitude_km: float,
    satellite_mass: float,
    cfg: PhysicsCfg = PHYSICS_CFG,
) -> float:
    """Newtonian attraction between body and satellite in Newtons."""

    r = orbit_radius_meters(body, altitude_km)
    return (cfg.gravitational_constant * body.mass / r) * satellite_mass / r


__all__ = [
    "PHYSICS_CFG",
    "PhysicsCfg",
    "clamp",
    "escape_velocity",
    "gravitational_force",
    "mass_effect_factor",
    "orbit_radius_meters",
    "orbital_period_hours",
    "orbital_velocity",
]
