"""Body-relative preset orbits."""
from __future__ import annotations

from dataclasses import dataclass

from orbit_viewer.core.config import PHYSICS_CFG, PhysicsCfg
from orbit_viewer.core.errors import InvalidParameterError
from orbit_viewer.core.physics import orbital_velocity
from orbit_viewer.data.bodies import CelestialBody


@dataclass(frozen=True)
class PresetDefinition:
    """Concrete satellite parameters for one preset on one body."""

    key: str
    display_name: str
    altitude: float          # km above the surface
    derived_velocity: float  # km/s, from the physics engine
    mass: float              # kg
    description: str = ""


@dataclass(frozen=True)
class _Tier:
    key: str
    name: str
    radius_fraction: float
    mass: float


@dataclass(frozen=True)
class _NamedOrbit:
    key: str
    name: str
    altitude: float
    mass: float
    description: str


TIERS: tuple[_Tier, ...] = (
    _Tier("low", "Low Orbit", radius_fraction=0.05, mass=1_000.0),
    _Tier("medium", "Medium Orbit", radius_fraction=0.4, mass=2_000.0),
    _Tier("high", "High Orbit", radius_fraction=1.0, mass=5_000.0),
)

# Hand-picked real missions, only offered for the body they actually orbit
NAMED_ORBITS: dict[str, tuple[_NamedOrbit, ...]] = {
    "earth": (
        _NamedOrbit("iss", "ISS (LEO)", altitude=408.0, mass=420_000.0,
                    description="International Space Station."),
        _NamedOrbit("gps", "GPS (MEO)", altitude=20_200.0, mass=2_000.0,
                    description="Navigation constellation in medium Earth orbit."),
        _NamedOrbit("geo", "Geostationary", altitude=35_786.0, mass=5_000.0,
                    description="24-hour orbital period above the equator."),
    ),
}

CUSTOM_PRESET_KEY = "custom"
DEFAULT_PRESET_KEY = "low"


def tier_altitude(body: CelestialBody, radius_fraction: float, cfg: PhysicsCfg = PHYSICS_CFG) -> float:
    """Altitude for a tier: a fraction of the body radius, never below the floor."""

    return max(cfg.min_preset_altitude, body.radius * radius_fraction)


def resolve_presets(body: CelestialBody, cfg: PhysicsCfg = PHYSICS_CFG) -> dict[str, PresetDefinition]:
    """
    Compute the presets available for ``body``.

    Velocities are derived from the physics engine so every preset is a
    consistent circular orbit for the active body.
    """
    presets: dict[str, PresetDefinition] = {}
    for tier in TIERS:
        altitude = tier_altitude(body, tier.radius_fraction, cfg)
        velocity = orbital_velocity(body, altitude, tier.mass, cfg)
        presets[tier.key] = PresetDefinition(
            key=tier.key,
            display_name=tier.name,
            altitude=altitude,
            derived_velocity=velocity,
            mass=tier.mass,
            description=f"{altitude:,.0f} km above {body.name} (~{velocity:.2f} km/s).",
        )
    for orbit in NAMED_ORBITS.get(body.key, ()):
        presets[orbit.key] = PresetDefinition(
            key=orbit.key,
            display_name=orbit.name,
            altitude=orbit.altitude,
            derived_velocity=orbital_velocity(body, orbit.altitude, orbit.mass, cfg),
            mass=orbit.mass,
            description=orbit.description,
        )
    return presets


def resolve_preset(body: CelestialBody, key: str, cfg: PhysicsCfg = PHYSICS_CFG) -> PresetDefinition:
    presets = resolve_presets(body, cfg)
    preset = presets.get(key)
    if preset is None:
        available = ", ".join(presets)
        raise InvalidParameterError(f"Unknown preset '{key}' for {body.name}. Available: {available}")
    return preset


__all__ = [
    "CUSTOM_PRESET_KEY",
    "DEFAULT_PRESET_KEY",
    "NAMED_ORBITS",
    "PresetDefinition",
    "TIERS",
    "resolve_preset",
    "resolve_presets",
    "tier_altitude",
]
