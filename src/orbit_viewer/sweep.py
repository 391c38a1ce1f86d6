"""Altitude sweep of circular-orbit quantities for one central body."""
from __future__ import annotations

import argparse
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Sequence

import numpy as np

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt

from orbit_viewer.core.config import PHYSICS_CFG, PhysicsCfg
from orbit_viewer.core.errors import UnknownBodyError
from orbit_viewer.core.physics import (
    escape_velocity,
    gravitational_force,
    orbital_period_hours,
    orbital_velocity,
)
from orbit_viewer.data.bodies import DEFAULT_BODY_KEY, CelestialBody, lookup

FIGURES_DIR = Path("figures")


@dataclass(frozen=True)
class SweepResult:
    body: CelestialBody
    satellite_mass: float
    altitudes: np.ndarray   # km
    velocity: np.ndarray    # km/s
    period: np.ndarray      # hours
    escape: np.ndarray      # km/s
    force: np.ndarray       # N


def altitude_sweep(
    body: CelestialBody,
    altitudes_km: Sequence[float] | np.ndarray,
    satellite_mass: float = 1_000.0,
    cfg: PhysicsCfg = PHYSICS_CFG,
) -> SweepResult:
    altitudes = np.asarray(altitudes_km, dtype=float)
    velocity = np.array([orbital_velocity(body, h, satellite_mass, cfg) for h in altitudes])
    period = np.array([orbital_period_hours(body, h, satellite_mass, cfg) for h in altitudes])
    escape = np.array([escape_velocity(body, h, cfg) for h in altitudes])
    force = np.array([gravitational_force(body, h, satellite_mass, cfg) for h in altitudes])
    return SweepResult(body, satellite_mass, altitudes, velocity, period, escape, force)


def plot_sweep(result: SweepResult, out_dir: Path = FIGURES_DIR) -> Path:
    out_dir.mkdir(parents=True, exist_ok=True)
    fig, (ax_v, ax_t) = plt.subplots(2, 1, figsize=(8, 8), sharex=True)

    ax_v.plot(result.altitudes, result.velocity, label="Orbital velocity")
    ax_v.plot(result.altitudes, result.escape, "--", label="Escape velocity")
    ax_v.set_ylabel("Velocity [km/s]")
    ax_v.set_title(f"Circular orbits around {result.body.name}")
    ax_v.grid(True, alpha=0.3)
    ax_v.legend()

    ax_t.plot(result.altitudes, result.period, color="tab:green")
    ax_t.set_xlabel("Altitude [km]")
    ax_t.set_ylabel("Period [h]")
    ax_t.grid(True, alpha=0.3)

    fig.tight_layout()
    path = out_dir / f"sweep_{result.body.key}.png"
    fig.savefig(path, dpi=150)
    plt.close(fig)
    return path


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Plot velocity and period against altitude.")
    parser.add_argument("--body", default=DEFAULT_BODY_KEY)
    parser.add_argument("--max-altitude", type=float, default=40_000.0, help="km")
    parser.add_argument("--points", type=int, default=400)
    parser.add_argument("--mass", type=float, default=1_000.0, help="satellite mass in kg")
    parser.add_argument("--mass-effect", action="store_true")
    parser.add_argument("--out", type=Path, default=FIGURES_DIR)
    args = parser.parse_args(argv)

    try:
        body = lookup(args.body)
    except UnknownBodyError as exc:
        print(f"{exc}; using {DEFAULT_BODY_KEY}")
        body = lookup(DEFAULT_BODY_KEY)
    cfg = replace(PHYSICS_CFG, mass_effect_enabled=args.mass_effect)
    altitudes = np.linspace(0.0, args.max_altitude, max(2, args.points))
    result = altitude_sweep(body, altitudes, args.mass, cfg)
    path = plot_sweep(result, args.out)
    print(f"Saved {path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
