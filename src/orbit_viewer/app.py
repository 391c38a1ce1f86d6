"""
Orbit Viewer - interactive two-body orbit visualisation
=======================================================

Keys:
    Space        start / pause
    R            reset phase and trail
    1-9, B       select body / next body
    P            next preset
    Up / Down    altitude +/- 100 km
    ] / [        mass x2 / /2
    + / -        zoom in / out
    0            reset zoom
    U            toggle metric / imperial
    S            save a PNG snapshot
    Esc          quit
"""
from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from datetime import datetime
from pathlib import Path
from typing import Sequence

import pygame

from orbit_viewer.core.config import PHYSICS_CFG, RENDER_CFG, RenderCfg
from orbit_viewer.core.controller import SimulationController
from orbit_viewer.core.logging_utils import RunLogger
from orbit_viewer.core.model import SimulationState
from orbit_viewer.data.bodies import BODY_DISPLAY_ORDER, DEFAULT_BODY_KEY
from orbit_viewer.data.presets import DEFAULT_PRESET_KEY, resolve_presets
from orbit_viewer.render import (
    Button,
    ButtonVisualStyle,
    OrbitRenderer,
    build_text_panel,
    load_font,
)

ALTITUDE_STEP_KM = 100.0
MASS_STEP_FACTOR = 2.0
ZOOM_STEP_FACTOR = 1.2


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Real-time circular orbit viewer.")
    parser.add_argument("--body", default=DEFAULT_BODY_KEY, help="central body key")
    parser.add_argument("--preset", default=DEFAULT_PRESET_KEY, help="initial preset key")
    parser.add_argument(
        "--mass-effect",
        action="store_true",
        help="enable the simplified mass/velocity teaching approximation",
    )
    parser.add_argument("--log-dir", default="data/runs", help="directory for run logs")
    parser.add_argument("--no-log", action="store_true", help="disable run logging")
    parser.add_argument("--snapshot-dir", default="snapshots", help="directory for PNG snapshots")
    return parser.parse_args(argv)


def next_in(keys: Sequence[str], current: str) -> str:
    if current not in keys:
        return keys[0]
    return keys[(keys.index(current) + 1) % len(keys)]


def save_snapshot(surface: pygame.Surface, directory: str | Path, body_key: str) -> Path:
    target_dir = Path(directory)
    target_dir.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
    path = target_dir / f"orbit_{body_key}_{timestamp}.png"
    pygame.image.save(surface, path.as_posix())
    return path


def hud_lines(controller: SimulationController, render_cfg: RenderCfg) -> list[tuple[str, tuple[int, int, int]]]:
    state = controller.state
    label, value = render_cfg.hud_text_color, render_cfg.hud_value_color
    metrics = controller.metrics()
    lines = [
        (f"{state.body.name}  |  preset: {state.preset_key}", label),
        (f"{'Running' if state.is_running else 'Paused'}  |  zoom {state.zoom_level:.4f} px/km", label),
        (f"Altitude: {state.satellite.altitude:,.0f} km   Mass: {state.satellite.mass:,.0f} kg", label),
    ]
    lines.extend((f"{name}: {text}", value) for name, text in metrics.lines())
    if controller.last_error is not None:
        lines.append((str(controller.last_error), render_cfg.notice_color))
    return lines


def handle_key(controller: SimulationController, key: int, args: argparse.Namespace, screen: pygame.Surface) -> bool:
    """Apply a key press; return ``False`` when the app should quit."""

    state = controller.state
    if key == pygame.K_ESCAPE:
        return False
    if key == pygame.K_SPACE:
        controller.toggle_running()
    elif key == pygame.K_r:
        controller.reset()
    elif pygame.K_1 <= key <= pygame.K_9:
        index = key - pygame.K_1
        if index < len(BODY_DISPLAY_ORDER):
            controller.select_body(BODY_DISPLAY_ORDER[index])
    elif key == pygame.K_b:
        controller.select_body(next_in(BODY_DISPLAY_ORDER, state.body.key))
    elif key == pygame.K_p:
        controller.select_preset(next_in(list(resolve_presets(state.body, state.cfg)), state.preset_key))
    elif key == pygame.K_UP:
        controller.set_altitude(state.satellite.altitude + ALTITUDE_STEP_KM)
    elif key == pygame.K_DOWN:
        controller.set_altitude(state.satellite.altitude - ALTITUDE_STEP_KM)
    elif key == pygame.K_RIGHTBRACKET:
        controller.set_mass(state.satellite.mass * MASS_STEP_FACTOR)
    elif key == pygame.K_LEFTBRACKET:
        controller.set_mass(state.satellite.mass / MASS_STEP_FACTOR)
    elif key in (pygame.K_EQUALS, pygame.K_PLUS, pygame.K_KP_PLUS):
        controller.zoom_by(ZOOM_STEP_FACTOR)
    elif key in (pygame.K_MINUS, pygame.K_KP_MINUS):
        controller.zoom_by(1.0 / ZOOM_STEP_FACTOR)
    elif key == pygame.K_0:
        controller.reset_zoom()
    elif key == pygame.K_u:
        controller.toggle_unit_system()
    elif key == pygame.K_s:
        save_snapshot(screen, args.snapshot_dir, state.body.key)
    return True


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    physics_cfg = replace(PHYSICS_CFG, mass_effect_enabled=args.mass_effect)
    render_cfg = RENDER_CFG

    pygame.init()
    pygame.display.set_caption("Orbit Viewer")
    screen = pygame.display.set_mode(render_cfg.size)
    clock = pygame.time.Clock()
    hud_font = load_font(render_cfg.font_names, render_cfg.hud_font_size)

    state = SimulationState.for_body_key(args.body, cfg=physics_cfg, view_size=render_cfg.size)
    if args.preset in resolve_presets(state.body, physics_cfg):
        state.select_preset(args.preset)
    logger = None if args.no_log else RunLogger(args.log_dir)
    controller = SimulationController(
        state,
        renderer=OrbitRenderer(render_cfg),
        surface=screen,
        logger=logger,
    )

    style = ButtonVisualStyle(
        base_color=render_cfg.button_color,
        hover_color=render_cfg.button_hover_color,
        text_color=render_cfg.button_text_color,
        radius=render_cfg.button_radius,
        border_color=render_cfg.button_border_color,
        border_width=1,
    )
    margin, width, height = 16, 110, 40
    buttons = [
        Button(
            (render_cfg.width - 2 * (width + margin), render_cfg.height - height - margin, width, height),
            "Start",
            controller.toggle_running,
            lambda: "Pause" if state.is_running else "Start",
            style=style,
        ),
        Button(
            (render_cfg.width - (width + margin), render_cfg.height - height - margin, width, height),
            "Reset",
            controller.reset,
            style=style,
        ),
    ]

    running = True
    try:
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    running = handle_key(controller, event.key, args, screen)
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    if event.button == 4:
                        controller.zoom_by(ZOOM_STEP_FACTOR)
                    elif event.button == 5:
                        controller.zoom_by(1.0 / ZOOM_STEP_FACTOR)
                    else:
                        for button in buttons:
                            button.handle_event(event)
                if not running:
                    break

            controller.run_frame()
            panel = build_text_panel(
                hud_font,
                hud_lines(controller, render_cfg),
                background_color=render_cfg.hud_background_color,
            )
            screen.blit(panel, (margin, margin))
            for button in buttons:
                button.draw(screen, hud_font)

            pygame.display.flip()
            clock.tick(render_cfg.target_fps)
    finally:
        controller.close()
        pygame.quit()
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        pygame.quit()
