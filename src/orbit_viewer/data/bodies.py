"""Catalog of central bodies the satellite can orbit."""
from __future__ import annotations

from dataclasses import dataclass

from orbit_viewer.core.errors import UnknownBodyError

Color = tuple[int, int, int]


@dataclass(frozen=True)
class CelestialBody:
    """
    Physical constants of a central body.

    Attributes:
        key: Registry key (lower case)
        name: Display name
        radius: Mean radius in km
        mass: Mass in kg
        surface_gravity: Surface gravity in m/s² (informational)
        render_colors: (center, rim) colours of the radial gradient
    """

    key: str
    name: str
    radius: float
    mass: float
    surface_gravity: float
    render_colors: tuple[Color, Color]


# Data sources: NASA planetary fact sheets
BODY_DEFINITIONS: tuple[CelestialBody, ...] = (
    CelestialBody(
        key="earth",
        name="Earth",
        radius=6_371.0,
        mass=5.972e24,
        surface_gravity=9.81,
        render_colors=((16, 185, 129), (59, 130, 246)),
    ),
    CelestialBody(
        key="moon",
        name="Moon",
        radius=1_737.0,
        mass=7.342e22,
        surface_gravity=1.62,
        render_colors=((220, 220, 220), (120, 120, 130)),
    ),
    CelestialBody(
        key="mars",
        name="Mars",
        radius=3_389.5,
        mass=6.39e23,
        surface_gravity=3.72,
        render_colors=((210, 105, 30), (193, 68, 14)),
    ),
    CelestialBody(
        key="venus",
        name="Venus",
        radius=6_051.8,
        mass=4.867e24,
        surface_gravity=8.87,
        render_colors=((255, 248, 220), (218, 165, 32)),
    ),
    CelestialBody(
        key="mercury",
        name="Mercury",
        radius=2_439.7,
        mass=3.285e23,
        surface_gravity=3.7,
        render_colors=((190, 185, 180), (110, 105, 100)),
    ),
    CelestialBody(
        key="jupiter",
        name="Jupiter",
        radius=69_911.0,
        mass=1.898e27,
        surface_gravity=24.79,
        render_colors=((234, 214, 183), (201, 144, 57)),
    ),
    CelestialBody(
        key="saturn",
        name="Saturn",
        radius=58_232.0,
        mass=5.683e26,
        surface_gravity=10.44,
        render_colors=((250, 230, 180), (210, 180, 120)),
    ),
    CelestialBody(
        key="uranus",
        name="Uranus",
        radius=25_362.0,
        mass=8.681e25,
        surface_gravity=8.69,
        render_colors=((176, 224, 230), (72, 209, 204)),
    ),
    CelestialBody(
        key="neptune",
        name="Neptune",
        radius=24_622.0,
        mass=1.024e26,
        surface_gravity=11.15,
        render_colors=((135, 206, 250), (70, 130, 180)),
    ),
    CelestialBody(
        key="io",
        name="Io",
        radius=1_821.6,
        mass=8.932e22,
        surface_gravity=1.796,
        render_colors=((255, 255, 0), (255, 140, 0)),
    ),
)

BODIES: dict[str, CelestialBody] = {body.key: body for body in BODY_DEFINITIONS}
BODY_DISPLAY_ORDER: list[str] = [body.key for body in BODY_DEFINITIONS]
DEFAULT_BODY_KEY = "earth"


def lookup(key: str) -> CelestialBody:
    """
    Return the body registered under ``key`` (case-insensitive).

    Raises:
        UnknownBodyError: If the key is not in the catalog
    """
    body = BODIES.get(key.lower()) if isinstance(key, str) else None
    if body is None:
        raise UnknownBodyError(str(key), BODY_DISPLAY_ORDER)
    return body


def list_bodies() -> list[str]:
    return list(BODY_DISPLAY_ORDER)


__all__ = [
    "BODIES",
    "BODY_DEFINITIONS",
    "BODY_DISPLAY_ORDER",
    "CelestialBody",
    "DEFAULT_BODY_KEY",
    "list_bodies",
    "lookup",
]
