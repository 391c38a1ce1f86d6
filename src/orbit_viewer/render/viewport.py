from __future__ import annotations

import math

import numpy as np


class Viewport:
    """Maps orbit-plane kilometres onto canvas pixels.

    The body sits at the canvas centre and screen y grows downward.
    """

    def __init__(self, size: tuple[int, int]) -> None:
        self._size = size
        self._center = np.array([size[0] / 2.0, size[1] / 2.0], dtype=float)

    @property
    def size(self) -> tuple[int, int]:
        return self._size

    def update_size(self, size: tuple[int, int]) -> None:
        self._size = size
        self._center[:] = (size[0] / 2.0, size[1] / 2.0)

    @property
    def center(self) -> tuple[float, float]:
        return float(self._center[0]), float(self._center[1])

    @property
    def center_int(self) -> tuple[int, int]:
        return int(self._center[0]), int(self._center[1])

    @property
    def visible_extent(self) -> float:
        """Largest radius in pixels that still fits around the centre."""

        return min(self._size) / 2.0

    def fits(self, radius_px: float) -> bool:
        return radius_px < self.visible_extent

    def polar_to_screen(self, radius_px: float, angle: float) -> tuple[float, float]:
        cx, cy = self._center
        return (
            float(cx + math.cos(angle) * radius_px),
            float(cy + math.sin(angle) * radius_px),
        )

