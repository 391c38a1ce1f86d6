from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

import pygame

from .assets import Color, get_text_surface


@dataclass(frozen=True)
class ButtonVisualStyle:
    base_color: Color
    hover_color: Color
    text_color: tuple[int, int, int]
    radius: int
    border_color: Color | None = None
    border_width: int = 0


class Button:
    """Rectangular button with hover feedback and a click callback."""

    def __init__(
        self,
        rect: tuple[int, int, int, int],
        text: str,
        callback: Callable[[], None],
        text_getter: Callable[[], str] | None = None,
        *,
        style: ButtonVisualStyle,
    ) -> None:
        self.rect = pygame.Rect(rect)
        self._text = text
        self._callback = callback
        self._text_getter = text_getter
        self._style = style

    def get_text(self) -> str:
        if self._text_getter is not None:
            return self._text_getter()
        return self._text

    def draw(
        self,
        surface: pygame.Surface,
        font: pygame.font.Font,
        mouse_pos: tuple[int, int] | None = None,
    ) -> None:
        if mouse_pos is None:
            mouse_pos = pygame.mouse.get_pos()
        style = self._style
        hovered = self.rect.collidepoint(mouse_pos)
        color = style.hover_color if hovered else style.base_color
        button_surface = pygame.Surface(self.rect.size, pygame.SRCALPHA)
        pygame.draw.rect(
            button_surface,
            color,
            button_surface.get_rect(),
            border_radius=style.radius,
        )
        if style.border_color is not None and style.border_width > 0:
            pygame.draw.rect(
                button_surface,
                style.border_color,
                button_surface.get_rect(),
                style.border_width,
                border_radius=style.radius,
            )
        surface.blit(button_surface, self.rect.topleft)
        text_surf = get_text_surface(font, self.get_text(), style.text_color)
        surface.blit(text_surf, text_surf.get_rect(center=self.rect.center))

    def handle_event(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self._callback()
                return True
        return False


def build_text_panel(
    font: pygame.font.Font,
    lines: Sequence[tuple[str, tuple[int, int, int]]],
    *,
    background_color: Color,
    padding: tuple[int, int] = (14, 14),
) -> pygame.Surface:
    if not lines:
        raise ValueError("lines must not be empty")
    padding_x, padding_y = padding
    line_height = font.get_linesize()
    width = max(font.size(text)[0] for text, _ in lines) + padding_x * 2
    height = line_height * len(lines) + padding_y * 2
    panel_surface = pygame.Surface((width, height), pygame.SRCALPHA)
    pygame.draw.rect(
        panel_surface,
        background_color,
        panel_surface.get_rect(),
        border_radius=12,
    )
    for idx, (text, color) in enumerate(lines):
        if not text:
            continue
        text_surf = get_text_surface(font, text, color)
        panel_surface.blit(text_surf, (padding_x, padding_y + idx * line_height))
    return panel_surface
