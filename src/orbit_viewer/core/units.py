"""Display unit conversion.

Simulation state is always kept in km, kg and seconds. These helpers are only
applied when values leave the core for presentation.
"""
from __future__ import annotations

from enum import Enum

KM_TO_MILES = 0.621371
KMPS_TO_MPH = 2236.94
NEWTON_TO_LBF = 0.224809


class UnitSystem(Enum):
    METRIC = "metric"
    IMPERIAL = "imperial"

    def toggled(self) -> "UnitSystem":
        if self is UnitSystem.METRIC:
            return UnitSystem.IMPERIAL
        return UnitSystem.METRIC


def to_display_distance(km: float, unit_system: UnitSystem) -> float:
    if unit_system is UnitSystem.IMPERIAL:
        return km * KM_TO_MILES
    return km


def to_display_velocity(kmps: float, unit_system: UnitSystem) -> float:
    if unit_system is UnitSystem.IMPERIAL:
        return kmps * KMPS_TO_MPH
    return kmps


def to_display_force(newtons: float, unit_system: UnitSystem) -> float:
    if unit_system is UnitSystem.IMPERIAL:
        return newtons * NEWTON_TO_LBF
    return newtons


def distance_unit(unit_system: UnitSystem) -> str:
    return "mi" if unit_system is UnitSystem.IMPERIAL else "km"


def velocity_unit(unit_system: UnitSystem) -> str:
    return "mph" if unit_system is UnitSystem.IMPERIAL else "km/s"


def force_unit(unit_system: UnitSystem) -> str:
    return "lbf" if unit_system is UnitSystem.IMPERIAL else "N"


__all__ = [
    "KMPS_TO_MPH",
    "KM_TO_MILES",
    "NEWTON_TO_LBF",
    "UnitSystem",
    "distance_unit",
    "force_unit",
    "to_display_distance",
    "to_display_force",
    "to_display_velocity",
    "velocity_unit",
]
