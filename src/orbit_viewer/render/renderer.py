"""Frame rendering for the orbit viewer."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import pygame

from orbit_viewer.core.config import RENDER_CFG, RenderCfg

from .assets import AssetLibrary, load_font
from .draw import (
    draw_body,
    draw_dashed_circle,
    draw_notice,
    draw_satellite,
    draw_trail,
    draw_velocity_indicator,
)
from .viewport import Viewport

if TYPE_CHECKING:  # pragma: no cover
    from orbit_viewer.core.model import SimulationState


@dataclass(frozen=True)
class FrameInfo:
    """What a render call produced."""

    body_radius_px: float
    orbit_radius_px: float
    satellite: tuple[float, float] | None
    velocity_tip: tuple[float, float] | None
    too_large: bool


class OrbitRenderer:
    """
    Draws the body, orbit path, trail and satellite for a simulation state.

    Rendering is a function of the state and the surface size. Its only side
    effect is appending the satellite's screen position to the state's trail,
    and that append is skipped when the orbit does not fit on the canvas.
    """

    def __init__(
        self,
        render_cfg: RenderCfg = RENDER_CFG,
        *,
        assets: AssetLibrary | None = None,
        notice_font: pygame.font.Font | None = None,
    ) -> None:
        self._cfg = render_cfg
        self._assets = assets or AssetLibrary()
        self._notice_font = notice_font
        self._viewport: Viewport | None = None
        self._layer: pygame.Surface | None = None

    def _prepare(self, size: tuple[int, int]) -> tuple[Viewport, pygame.Surface]:
        if self._viewport is None:
            self._viewport = Viewport(size)
        elif self._viewport.size != size:
            self._viewport.update_size(size)
        if self._layer is None or self._layer.get_size() != size:
            self._layer = pygame.Surface(size, pygame.SRCALPHA)
        self._layer.fill((0, 0, 0, 0))
        return self._viewport, self._layer

    def _font(self) -> pygame.font.Font:
        if self._notice_font is None:
            self._notice_font = load_font(self._cfg.font_names, self._cfg.notice_font_size, bold=True)
        return self._notice_font

    def render(
        self,
        surface: pygame.Surface | None,
        state: SimulationState,
        *,
        record_trail: bool = True,
    ) -> FrameInfo | None:
        if surface is None:
            return None
        cfg = self._cfg
        viewport, layer = self._prepare(surface.get_size())
        zoom = state.zoom_level
        center = viewport.center_int

        surface.fill(cfg.background_color)
        body_radius_px = state.body.radius * zoom
        draw_body(
            surface,
            center,
            int(round(body_radius_px)),
            body=state.body,
            assets=self._assets,
            render_cfg=cfg,
        )

        orbit_radius_px = state.orbit_radius_km * zoom
        if not viewport.fits(orbit_radius_px):
            draw_notice(surface, cfg.notice_text, font=self._font(), color=cfg.notice_color)
            return FrameInfo(body_radius_px, orbit_radius_px, None, None, True)

        satellite = viewport.polar_to_screen(orbit_radius_px, state.phase_angle)
        draw_dashed_circle(
            layer,
            viewport.center,
            orbit_radius_px,
            color=cfg.orbit_path_color,
            dash_pixels=cfg.orbit_dash_pixels,
            width=cfg.orbit_path_width,
        )
        draw_trail(layer, state.trail.points(), color=cfg.trail_color, width=cfg.trail_width)
        draw_satellite(layer, satellite, render_cfg=cfg)
        tip = draw_velocity_indicator(layer, satellite, state.phase_angle, render_cfg=cfg)
        surface.blit(layer, (0, 0))

        if record_trail:
            state.trail.append(satellite)
        return FrameInfo(body_radius_px, orbit_radius_px, satellite, tip, False)


__all__ = ["FrameInfo", "OrbitRenderer"]
