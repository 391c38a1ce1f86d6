"""Data models for the orbit viewer state."""
from __future__ import annotations

import math
from collections import deque
from dataclasses import dataclass, field
from typing import Iterator

from orbit_viewer.data.bodies import DEFAULT_BODY_KEY, CelestialBody, lookup
from orbit_viewer.data.presets import CUSTOM_PRESET_KEY, DEFAULT_PRESET_KEY, resolve_preset

from .config import PHYSICS_CFG, RENDER_CFG, PhysicsCfg
from .errors import InvalidGeometryError, InvalidParameterError, UnknownBodyError
from .physics import (
    clamp,
    escape_velocity,
    gravitational_force,
    orbit_radius_meters,
    orbital_period_hours,
    orbital_velocity,
)
from .units import (
    UnitSystem,
    distance_unit,
    force_unit,
    to_display_distance,
    to_display_force,
    to_display_velocity,
    velocity_unit,
)

Point = tuple[float, float]


@dataclass
class SatelliteState:
    """Mutable parameters of the orbiting satellite (km, kg, km/s)."""

    mass: float = 1_000.0
    altitude: float = 400.0
    velocity: float = 7.66  # advisory display value, physics derives speed from altitude
    orbit_kind: str = "circular"


class TrailHistory:
    """Capped FIFO of recent satellite screen positions, oldest first."""

    def __init__(self, capacity: int = PHYSICS_CFG.trail_capacity) -> None:
        if capacity <= 0:
            raise ValueError("Trail capacity must be positive")
        self._points: deque[Point] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._points.maxlen or 0

    def append(self, point: Point) -> None:
        self._points.append((float(point[0]), float(point[1])))

    def clear(self) -> None:
        self._points.clear()

    def points(self) -> list[Point]:
        return list(self._points)

    @property
    def latest(self) -> Point | None:
        return self._points[-1] if self._points else None

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(list(self._points))


@dataclass(frozen=True)
class OrbitalMetrics:
    """Derived quantities, already converted for display."""

    orbital_velocity: float
    orbital_period_hours: float
    escape_velocity: float
    gravitational_force: float
    distance_from_center: float
    unit_system: UnitSystem = UnitSystem.METRIC
    units: dict[str, str] = field(default_factory=dict)

    def lines(self) -> list[tuple[str, str]]:
        """(label, formatted value) pairs in HUD order."""

        return [
            ("Orbital Velocity", f"{self.orbital_velocity:,.2f} {self.units['velocity']}"),
            ("Orbital Period", f"{self.orbital_period_hours:,.2f} hours"),
            ("Escape Velocity", f"{self.escape_velocity:,.2f} {self.units['velocity']}"),
            ("Gravitational Force", f"{self.gravitational_force:,.0f} {self.units['force']}"),
            ("Distance from Center", f"{self.distance_from_center:,.0f} {self.units['distance']}"),
        ]


def zoom_for_body(
    body: CelestialBody,
    view_size: tuple[int, int] = RENDER_CFG.size,
    cfg: PhysicsCfg = PHYSICS_CFG,
) -> float:
    """Zoom (px/km) that makes the body fill a fixed share of the half view."""

    half_extent = min(view_size) / 2.0
    return clamp(cfg.zoom_fill_fraction * half_extent / body.radius, cfg.min_zoom, cfg.max_zoom)


def _require_number(name: str, value: float) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidParameterError(f"{name} must be a number, got {value!r}") from exc
    if not math.isfinite(number):
        raise InvalidParameterError(f"{name} must be finite, got {value!r}")
    return number


class SimulationState:
    """
    Mutable simulation model shared by the scheduler and the renderer.

    Every mutation goes through a validated operation so the trail stays capped
    and the zoom stays inside its range. A rejected mutation leaves the previous
    state untouched.
    """

    def __init__(
        self,
        body: CelestialBody,
        satellite: SatelliteState | None = None,
        *,
        cfg: PhysicsCfg = PHYSICS_CFG,
        view_size: tuple[int, int] = RENDER_CFG.size,
        unit_system: UnitSystem = UnitSystem.METRIC,
    ) -> None:
        self._cfg = cfg
        self._view_size = view_size
        self._body = body
        self._satellite = SatelliteState()
        self.phase_angle = 0.0
        self.trail = TrailHistory(cfg.trail_capacity)
        self._zoom = zoom_for_body(body, view_size, cfg)
        self._running = False
        self.unit_system = unit_system
        self.preset_key = CUSTOM_PRESET_KEY
        if satellite is None:
            self._apply_preset(DEFAULT_PRESET_KEY)
        else:
            self._validate_altitude(satellite.altitude)
            self._validate_mass(satellite.mass)
            self._check_derived(satellite.altitude, satellite.mass)
            self._satellite = satellite

    @classmethod
    def for_body_key(cls, key: str, **kwargs) -> "SimulationState":
        """Build a state for ``key``, falling back to the default body."""

        try:
            body = lookup(key)
        except UnknownBodyError:
            body = lookup(DEFAULT_BODY_KEY)
        return cls(body, **kwargs)

    # ------------------------------------------------------------ accessors
    @property
    def cfg(self) -> PhysicsCfg:
        return self._cfg

    @property
    def body(self) -> CelestialBody:
        return self._body

    @property
    def satellite(self) -> SatelliteState:
        return self._satellite

    @property
    def zoom_level(self) -> float:
        return self._zoom

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def orbit_radius_km(self) -> float:
        return self._body.radius + self._satellite.altitude

    # ------------------------------------------------------------ run state
    def start(self) -> None:
        self._running = True

    def pause(self) -> None:
        self._running = False

    def toggle(self) -> bool:
        self._running = not self._running
        return self._running

    def reset(self) -> None:
        self.phase_angle = 0.0
        self.trail.clear()

    def advance(self, step: float | None = None) -> float:
        self.phase_angle += self._cfg.phase_step if step is None else step
        return self.phase_angle

    # ------------------------------------------------------------ body / presets
    def change_body(self, body: CelestialBody) -> None:
        self._body = body
        self.reset()
        self._apply_preset(DEFAULT_PRESET_KEY)
        self._zoom = zoom_for_body(body, self._view_size, self._cfg)

    def select_preset(self, key: str) -> None:
        if key == CUSTOM_PRESET_KEY:
            self.preset_key = CUSTOM_PRESET_KEY
            return
        self._apply_preset(key)

    def _apply_preset(self, key: str) -> None:
        preset = resolve_preset(self._body, key, self._cfg)
        self._satellite.altitude = preset.altitude
        self._satellite.velocity = preset.derived_velocity
        self._satellite.mass = preset.mass
        self.preset_key = preset.key

    # ------------------------------------------------------------ parameters
    def _validate_altitude(self, km: float) -> float:
        km = _require_number("Altitude", km)
        if km < 0.0:
            raise InvalidParameterError(f"Altitude must be >= 0 km, got {km}")
        orbit_radius_meters(self._body, km)
        return km

    def _check_derived(self, km: float, kg: float) -> None:
        """Reject parameters whose derived orbit quantities are not finite."""

        body, cfg = self._body, self._cfg
        velocity = orbital_velocity(body, km, kg, cfg)
        derived = (
            velocity,
            orbital_period_hours(body, km, kg, cfg),
            escape_velocity(body, km, cfg),
            gravitational_force(body, km, kg, cfg),
        )
        if not (velocity > 0.0 and all(math.isfinite(value) for value in derived)):
            raise InvalidGeometryError(
                f"Orbit at {km} km with {kg} kg has no finite solution around {body.name}"
            )

    @staticmethod
    def _validate_mass(kg: float) -> float:
        kg = _require_number("Mass", kg)
        if kg <= 0.0:
            raise InvalidParameterError(f"Mass must be > 0 kg, got {kg}")
        return kg

    def set_altitude(self, km: float) -> None:
        km = self._validate_altitude(km)
        self._check_derived(km, self._satellite.mass)
        self._satellite.altitude = km
        self._satellite.velocity = orbital_velocity(self._body, km, self._satellite.mass, self._cfg)
        self.preset_key = CUSTOM_PRESET_KEY

    def set_mass(self, kg: float) -> None:
        kg = self._validate_mass(kg)
        self._check_derived(self._satellite.altitude, kg)
        self._satellite.mass = kg
        self._satellite.velocity = orbital_velocity(
            self._body, self._satellite.altitude, kg, self._cfg
        )
        self.preset_key = CUSTOM_PRESET_KEY

    # ------------------------------------------------------------ zoom / units
    def set_zoom(self, level: float) -> float:
        level = _require_number("Zoom", level)
        return self._rescale(clamp(level, self._cfg.min_zoom, self._cfg.max_zoom))

    def zoom_by(self, factor: float) -> float:
        factor = _require_number("Zoom factor", factor)
        if factor <= 0.0:
            raise InvalidParameterError(f"Zoom factor must be > 0, got {factor}")
        return self.set_zoom(self._zoom * factor)

    def reset_zoom(self) -> float:
        return self._rescale(zoom_for_body(self._body, self._view_size, self._cfg))

    def _rescale(self, zoom: float) -> float:
        # trail points are in screen pixels, so a new scale invalidates them
        if zoom != self._zoom:
            self._zoom = zoom
            self.trail.clear()
        return self._zoom

    def toggle_unit_system(self) -> UnitSystem:
        self.unit_system = self.unit_system.toggled()
        return self.unit_system

    # ------------------------------------------------------------ metrics
    def metrics(self) -> OrbitalMetrics:
        body, sat, cfg, units = self._body, self._satellite, self._cfg, self.unit_system
        return OrbitalMetrics(
            orbital_velocity=to_display_velocity(
                orbital_velocity(body, sat.altitude, sat.mass, cfg), units
            ),
            orbital_period_hours=orbital_period_hours(body, sat.altitude, sat.mass, cfg),
            escape_velocity=to_display_velocity(escape_velocity(body, sat.altitude, cfg), units),
            gravitational_force=to_display_force(
                gravitational_force(body, sat.altitude, sat.mass, cfg), units
            ),
            distance_from_center=to_display_distance(self.orbit_radius_km, units),
            unit_system=units,
            units={
                "distance": distance_unit(units),
                "velocity": velocity_unit(units),
                "force": force_unit(units),
            },
        )


__all__ = [
    "OrbitalMetrics",
    "SatelliteState",
    "SimulationState",
    "TrailHistory",
    "zoom_for_body",
]
