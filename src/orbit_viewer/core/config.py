"""Configuration dataclasses for the orbit viewer."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PhysicsCfg:
    gravitational_constant: float = 6.674e-11
    phase_step: float = 0.02
    trail_capacity: int = 200
    min_zoom: float = 0.005
    max_zoom: float = 0.1
    zoom_fill_fraction: float = 0.48
    min_preset_altitude: float = 200.0
    # Pedagogical approximation: not real two-body mechanics.
    mass_effect_enabled: bool = False
    mass_effect_coefficient: float = 1e-9
    reference_mass: float = 1_000.0
    log_every_ticks: int = 10


@dataclass(frozen=True)
class RenderCfg:
    width: int = 800
    height: int = 800
    target_fps: int = 60
    background_color: tuple[int, int, int] = (6, 12, 28)
    body_glow_color: tuple[int, int, int, int] = (59, 130, 246, 77)
    body_glow_offset: int = 5
    body_glow_width: int = 3
    body_gradient_steps: int = 32
    orbit_path_color: tuple[int, int, int, int] = (59, 130, 246, 128)
    orbit_path_width: int = 2
    orbit_dash_pixels: int = 5
    satellite_color: tuple[int, int, int] = (249, 115, 22)
    satellite_pixel_radius: int = 4
    satellite_glow_color: tuple[int, int, int, int] = (249, 115, 22, 77)
    satellite_glow_radius: int = 8
    velocity_indicator_color: tuple[int, int, int] = (34, 197, 94)
    velocity_indicator_pixels: int = 10
    velocity_indicator_width: int = 2
    trail_color: tuple[int, int, int, int] = (249, 115, 22, 77)
    trail_width: int = 1
    notice_text: str = "Orbit too large - zoom out"
    notice_color: tuple[int, int, int] = (255, 214, 130)
    notice_font_size: int = 28
    hud_text_color: tuple[int, int, int] = (234, 241, 255)
    hud_value_color: tuple[int, int, int] = (100, 220, 255)
    hud_font_size: int = 18
    hud_background_color: tuple[int, int, int, int] = (12, 18, 30, int(255 * 0.6))
    button_color: tuple[int, int, int, int] = (8, 32, 64, int(255 * 0.78))
    button_hover_color: tuple[int, int, int, int] = (18, 52, 94, int(255 * 0.88))
    button_text_color: tuple[int, int, int] = (234, 241, 255)
    button_border_color: tuple[int, int, int, int] = (88, 140, 255, int(255 * 0.55))
    button_radius: int = 12
    font_names: tuple[str, ...] = ("Segoe UI", "Helvetica", "DejaVu Sans", "Arial")

    @property
    def size(self) -> tuple[int, int]:
        return self.width, self.height


PHYSICS_CFG = PhysicsCfg()
RENDER_CFG = RenderCfg()


__all__ = ["PHYSICS_CFG", "RENDER_CFG", "PhysicsCfg", "RenderCfg"]
