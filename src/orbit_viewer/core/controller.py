"""Command dispatch between the host UI and the simulation core."""
from __future__ import annotations

from dataclasses import asdict
from typing import Any, Callable, TYPE_CHECKING

from orbit_viewer.data.bodies import lookup

from .errors import OrbitViewerError
from .logging_utils import RunLogger
from .model import OrbitalMetrics, SimulationState
from .physics import (
    escape_velocity,
    gravitational_force,
    orbital_period_hours,
    orbital_velocity,
)
from .scheduler import AnimationScheduler, FrameTickSource

if TYPE_CHECKING:  # pragma: no cover
    import pygame

    from orbit_viewer.render.renderer import FrameInfo, OrbitRenderer


class SimulationController:
    """
    Applies discrete UI commands to a :class:`SimulationState`.

    Commands return ``True`` when applied. A command that fails validation is
    refused, the previous state is kept, the error is stored in
    ``last_error`` and a ``rejected`` event is logged.
    """

    def __init__(
        self,
        state: SimulationState,
        *,
        tick_source: FrameTickSource | None = None,
        renderer: OrbitRenderer | None = None,
        surface: pygame.Surface | None = None,
        logger: RunLogger | None = None,
    ) -> None:
        self.state = state
        self.tick_source = tick_source or FrameTickSource()
        self.renderer = renderer
        self.surface = surface
        self.logger = logger
        self.scheduler = AnimationScheduler(state, self.tick_source, self._on_frame)
        self.last_frame: FrameInfo | None = None
        self.last_error: OrbitViewerError | None = None
        if logger is not None:
            logger.write_meta(
                {
                    "body": state.body.key,
                    "preset": state.preset_key,
                    "satellite": asdict(state.satellite),
                    "zoom": state.zoom_level,
                    "unit_system": state.unit_system.value,
                    "physics": asdict(state.cfg),
                }
            )
            self._log_event("session_start", state.preset_key)

    # ------------------------------------------------------------ logging
    def _log_event(self, kind: str, details: object = "") -> None:
        if self.logger is None:
            return
        self.logger.log_event([self.scheduler.ticks, kind, self.state.body.key, details])

    def _log_state(self) -> None:
        if self.logger is None:
            return
        state = self.state
        body, sat, cfg = state.body, state.satellite, state.cfg
        self.logger.log_ts(
            [
                self.scheduler.ticks,
                state.phase_angle,
                body.key,
                sat.altitude,
                orbital_velocity(body, sat.altitude, sat.mass, cfg),
                orbital_period_hours(body, sat.altitude, sat.mass, cfg),
                escape_velocity(body, sat.altitude, cfg),
                gravitational_force(body, sat.altitude, sat.mass, cfg),
                len(state.trail),
                state.zoom_level,
            ]
        )

    def _apply(self, name: str, action: Callable[..., Any], *args: Any) -> bool:
        try:
            action(*args)
        except OrbitViewerError as exc:
            self.last_error = exc
            self._log_event("rejected", f"{name}: {exc}")
            return False
        self.last_error = None
        self._log_event(name, " ".join(str(a) for a in args))
        return True

    # ------------------------------------------------------------ frames
    def _on_frame(self, state: SimulationState) -> None:
        self.last_frame = self._draw(record_trail=True)
        if self.scheduler.ticks % max(1, state.cfg.log_every_ticks) == 0:
            self._log_state()

    def _draw(self, *, record_trail: bool) -> FrameInfo | None:
        if self.renderer is None:
            return None
        return self.renderer.render(self.surface, self.state, record_trail=record_trail)

    def render_frame(self) -> FrameInfo | None:
        """Redraw the current state without advancing it or touching the trail."""

        self.last_frame = self._draw(record_trail=False)
        return self.last_frame

    def run_frame(self) -> int:
        """Drive one display refresh; return how many ticks fired."""

        fired = self.tick_source.run_pending()
        if fired == 0:
            self.render_frame()
        return fired

    # ------------------------------------------------------------ commands
    def start(self) -> bool:
        if self.state.is_running and self.scheduler.is_active:
            return False
        self.scheduler.start()
        self.state.start()
        self._log_event("start")
        return True

    def pause(self) -> bool:
        if not self.state.is_running:
            return False
        self.state.pause()
        self.scheduler.stop()
        self._log_event("pause")
        return True

    def toggle_running(self) -> bool:
        if self.state.is_running:
            self.pause()
        else:
            self.start()
        return self.state.is_running

    def reset(self) -> bool:
        return self._apply("reset", self.state.reset)

    def select_body(self, key: str) -> bool:
        return self._apply("select_body", lambda k: self.state.change_body(lookup(k)), key)

    def select_preset(self, key: str) -> bool:
        return self._apply("select_preset", self.state.select_preset, key)

    def set_altitude(self, km: float) -> bool:
        return self._apply("set_altitude", self.state.set_altitude, km)

    def set_mass(self, kg: float) -> bool:
        return self._apply("set_mass", self.state.set_mass, kg)

    def set_zoom(self, level: float) -> bool:
        return self._apply("set_zoom", self.state.set_zoom, level)

    def zoom_by(self, factor: float) -> bool:
        return self._apply("zoom_by", self.state.zoom_by, factor)

    def reset_zoom(self) -> bool:
        return self._apply("reset_zoom", self.state.reset_zoom)

    def toggle_unit_system(self) -> bool:
        return self._apply("toggle_unit_system", self.state.toggle_unit_system)

    def metrics(self) -> OrbitalMetrics:
        return self.state.metrics()

    # ------------------------------------------------------------ teardown
    def close(self) -> None:
        self.scheduler.close()
        self.state.pause()
        if self.logger is not None and not self.logger.closed:
            self._log_event("session_end")
            self.logger.close()

    def __enter__(self) -> "SimulationController":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


__all__ = ["SimulationController"]
