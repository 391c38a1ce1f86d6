from __future__ import annotations

import math
from typing import Sequence, TYPE_CHECKING

import pygame

from .assets import MAX_GRADIENT_DIAMETER, AssetLibrary, Color, get_text_surface

if TYPE_CHECKING:  # pragma: no cover
    from orbit_viewer.core.config import RenderCfg
    from orbit_viewer.data.bodies import CelestialBody


def _ipoint(point: tuple[float, float]) -> tuple[int, int]:
    return int(round(point[0])), int(round(point[1]))


def draw_body(
    surface: pygame.Surface,
    position: tuple[int, int],
    radius: int,
    *,
    body: CelestialBody,
    assets: AssetLibrary,
    render_cfg: RenderCfg,
) -> None:
    """Radial gradient disc plus a thin translucent glow ring."""

    if radius <= 0:
        return
    diameter = radius * 2
    if diameter > MAX_GRADIENT_DIAMETER:
        # Zoomed far in: a flat disc avoids building huge sprites
        pygame.draw.circle(surface, body.render_colors[1], position, radius)
    else:
        disc = assets.get_body_disc(body, diameter, steps=render_cfg.body_gradient_steps)
        surface.blit(disc, disc.get_rect(center=position))

    glow_radius = radius + render_cfg.body_glow_offset
    width = render_cfg.body_glow_width
    if glow_radius * 2 > MAX_GRADIENT_DIAMETER:
        pygame.draw.circle(surface, render_cfg.body_glow_color[:3], position, glow_radius, width)
        return
    size = glow_radius * 2 + width * 2
    glow_surface = pygame.Surface((size, size), pygame.SRCALPHA)
    pygame.draw.circle(
        glow_surface,
        render_cfg.body_glow_color,
        (size // 2, size // 2),
        glow_radius,
        width,
    )
    surface.blit(glow_surface, glow_surface.get_rect(center=position))


def draw_satellite(
    layer: pygame.Surface,
    position: tuple[float, float],
    *,
    render_cfg: RenderCfg,
) -> None:
    center = _ipoint(position)
    if render_cfg.satellite_glow_radius > 0:
        pygame.draw.circle(
            layer, render_cfg.satellite_glow_color, center, render_cfg.satellite_glow_radius
        )
    if render_cfg.satellite_pixel_radius > 0:
        pygame.draw.circle(
            layer, render_cfg.satellite_color, center, render_cfg.satellite_pixel_radius
        )


def velocity_indicator_end(
    start: tuple[float, float],
    phase_angle: float,
    length: float,
) -> tuple[float, float]:
    """Tip of a fixed-length segment tangent to the orbit (perpendicular to the radius)."""

    return (
        start[0] - math.sin(phase_angle) * length,
        start[1] + math.cos(phase_angle) * length,
    )


def draw_velocity_indicator(
    layer: pygame.Surface,
    start: tuple[float, float],
    phase_angle: float,
    *,
    render_cfg: RenderCfg,
) -> tuple[float, float]:
    end = velocity_indicator_end(start, phase_angle, render_cfg.velocity_indicator_pixels)
    pygame.draw.line(
        layer,
        render_cfg.velocity_indicator_color,
        _ipoint(start),
        _ipoint(end),
        render_cfg.velocity_indicator_width,
    )
    return end


def dash_count(radius: float, dash_pixels: int) -> int:
    """Number of dash/gap pairs around a circle of ``radius`` pixels."""

    circumference = 2.0 * math.pi * radius
    return max(8, int(circumference / (2 * max(1, dash_pixels))))


def draw_dashed_circle(
    layer: pygame.Surface,
    center: tuple[float, float],
    radius: float,
    *,
    color: Color,
    dash_pixels: int,
    width: int,
) -> int:
    if radius <= 0:
        return 0
    dashes = dash_count(radius, dash_pixels)
    slice_angle = 2.0 * math.pi / dashes
    cx, cy = center
    for i in range(dashes):
        a0 = i * slice_angle
        a1 = a0 + slice_angle * 0.5
        p0 = (cx + math.cos(a0) * radius, cy + math.sin(a0) * radius)
        p1 = (cx + math.cos(a1) * radius, cy + math.sin(a1) * radius)
        pygame.draw.line(layer, color, _ipoint(p0), _ipoint(p1), width)
    return dashes


def draw_trail(
    layer: pygame.Surface,
    points: Sequence[tuple[float, float]],
    *,
    color: Color,
    width: int,
) -> None:
    if len(points) < 2:
        return
    pixels = [_ipoint(p) for p in points]
    if width <= 1:
        pygame.draw.aalines(layer, color, False, pixels)
    else:
        pygame.draw.lines(layer, color, False, pixels, width)
        pygame.draw.aalines(layer, color, False, pixels)


def draw_notice(
    surface: pygame.Surface,
    text: str,
    *,
    font: pygame.font.Font,
    color: Color,
) -> pygame.Rect:
    """Blit ``text`` centred on the surface and return its rect."""

    text_surf = get_text_surface(font, text, color)
    rect = text_surf.get_rect(center=(surface.get_width() // 2, surface.get_height() // 2))
    surface.blit(text_surf, rect)
    return rect
