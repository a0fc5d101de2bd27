"""Mapping between screen pixels and grid cells, with pan and zoom."""

from __future__ import annotations

import math
from dataclasses import dataclass

from wireworld.constants import (
    DEFAULT_SCALE,
    MAX_SCALE,
    MIN_SCALE,
    PANEL_WIDTH,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    ZOOM_FACTOR,
)


@dataclass
class Viewport:
    """The visible part of the grid: cell size in pixels and a pixel offset."""

    scale: float = DEFAULT_SCALE
    offset_x: float = 0.0
    offset_y: float = 0.0

    def screen_to_cell(self, x: int, y: int) -> tuple[int, int]:
        """Return the cell under a screen pixel; the panel maps to (0, 0)."""
        if x < PANEL_WIDTH:
            return 0, 0
        fx = (x - PANEL_WIDTH - self.offset_x) / self.scale
        fy = (y - self.offset_y) / self.scale
        return math.floor(fx), math.floor(fy)

    def cell_to_screen(self, x: int, y: int) -> tuple[float, float]:
        """Return the screen position of a cell's top-left corner."""
        return PANEL_WIDTH + self.offset_x + x * self.scale, self.offset_y + y * self.scale

    def pan(self, dx: float, dy: float) -> None:
        """Move the view by a number of pixels."""
        self.offset_x += dx
        self.offset_y += dy

    def zoom(self, wheel: float, x: int, y: int) -> None:
        """Zoom by wheel notches, keeping the point under the cursor in place."""
        if wheel == 0:
            return
        old_scale = self.scale
        self.scale = min(max(self.scale * ZOOM_FACTOR**wheel, MIN_SCALE), MAX_SCALE)
        if x >= PANEL_WIDTH:
            ratio = self.scale / old_scale
            fx = float(x - PANEL_WIDTH)
            fy = float(y)
            self.offset_x = fx - (fx - self.offset_x) * ratio
            self.offset_y = fy - (fy - self.offset_y) * ratio

    def visible_range(self) -> tuple[range, range]:
        """Return the column and row ranges of cells that may be on screen."""
        min_x = -self.offset_x / self.scale
        max_x = (SCREEN_WIDTH - PANEL_WIDTH - self.offset_x) / self.scale
        min_y = -self.offset_y / self.scale
        max_y = (SCREEN_HEIGHT - self.offset_y) / self.scale
        return (
            range(math.floor(min_x), math.ceil(max_x) + 1),
            range(math.floor(min_y), math.ceil(max_y) + 1),
        )