"""Rendering helpers for the orbit viewer."""

from .assets import (
    AssetLibrary,
    build_gradient_disc,
    get_text_surface,
    load_font,
)
from .draw import (
    dash_count,
    draw_body,
    draw_dashed_circle,
    draw_notice,
    draw_satellite,
    draw_trail,
    draw_velocity_indicator,
    velocity_indicator_end,
)
from .renderer import FrameInfo, OrbitRenderer
from .ui import (
    Button,
    ButtonVisualStyle,
    build_text_panel,
)
from .viewport import Viewport

__all__ = [
    "AssetLibrary",
    "Button",
    "ButtonVisualStyle",
    "FrameInfo",
    "OrbitRenderer",
    "Viewport",
    "build_gradient_disc",
    "build_text_panel",
    "dash_count",
    "draw_body",
    "draw_dashed_circle",
    "draw_notice",
    "draw_satellite",
    "draw_trail",
    "draw_velocity_indicator",
    "get_text_surface",
    "load_font",
    "velocity_indicator_end",
]
