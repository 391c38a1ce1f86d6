from __future__ import annotations

from collections import OrderedDict
from typing import Iterable, TYPE_CHECKING

import pygame

if TYPE_CHECKING:  # pragma: no cover
    from orbit_viewer.data.bodies import CelestialBody


Color = tuple[int, int, int] | tuple[int, int, int, int]

# Above this diameter a flat disc is drawn instead of a cached gradient sprite
MAX_GRADIENT_DIAMETER = 2048


def _mix(inner: Color, outer: Color, t: float) -> tuple[int, int, int]:
    return (
        int(round(inner[0] + (outer[0] - inner[0]) * t)),
        int(round(inner[1] + (outer[1] - inner[1]) * t)),
        int(round(inner[2] + (outer[2] - inner[2]) * t)),
    )


def build_gradient_disc(
    diameter: int,
    inner: Color,
    outer: Color,
    steps: int,
) -> pygame.Surface:
    """Radial gradient from ``inner`` at the centre to ``outer`` at the rim."""

    if diameter <= 0:
        raise ValueError("Disc diameter must be positive")
    radius = diameter / 2.0
    surface = pygame.Surface((diameter, diameter), pygame.SRCALPHA)
    steps = max(1, min(steps, int(radius) or 1))
    center = (diameter // 2, diameter // 2)
    for i in range(steps):
        t = 1.0 - i / steps
        ring_radius = max(1, int(round(radius * t)))
        pygame.draw.circle(surface, _mix(inner, outer, t), center, ring_radius)
    return surface


class AssetLibrary:
    """Cache for gradient body sprites, keyed by body and pixel diameter."""

    def __init__(self, max_entries: int = 64) -> None:
        self._max_entries = max(1, max_entries)
        self._disc_cache: OrderedDict[tuple[str, int, int], pygame.Surface] = OrderedDict()

    def __len__(self) -> int:
        return len(self._disc_cache)

    def get_body_disc(self, body: CelestialBody, diameter: int, *, steps: int) -> pygame.Surface:
        key = (body.key, diameter, steps)
        cached = self._disc_cache.get(key)
        if cached is not None:
            self._disc_cache.move_to_end(key)
            return cached
        inner, outer = body.render_colors
        disc = build_gradient_disc(diameter, inner, outer, steps)
        self._disc_cache[key] = disc
        if len(self._disc_cache) > self._max_entries:
            self._disc_cache.popitem(last=False)
        return disc


_TEXT_SURFACE_CACHE_MAX_SIZE = 256
_TEXT_SURFACE_CACHE: OrderedDict[tuple[int, str, Color], pygame.Surface] = OrderedDict()


def get_text_surface(font: pygame.font.Font, text: str, color: Color) -> pygame.Surface:
    """Return a cached rendered surface for the given font, text and color."""

    key = (id(font), text, color)
    cached = _TEXT_SURFACE_CACHE.get(key)
    if cached is not None:
        _TEXT_SURFACE_CACHE.move_to_end(key)
        return cached
    rendered = font.render(text, True, color)
    _TEXT_SURFACE_CACHE[key] = rendered
    if len(_TEXT_SURFACE_CACHE) > _TEXT_SURFACE_CACHE_MAX_SIZE:
        _TEXT_SURFACE_CACHE.popitem(last=False)
    return rendered


def load_font(preferred_names: Iterable[str], size: int, *, bold: bool = False) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    names = list(preferred_names)
    for name in names:
        try:
            match = pygame.font.match_font(name, bold=bold)
        except Exception:
            match = None
        if match:
            return pygame.font.Font(match, size)
    fallback = names[0] if names else None
    return pygame.font.SysFont(fallback, size, bold=bold)
