"""Editor state and input handling for the Wireworld simulator."""

from __future__ import annotations

import time
from dataclasses import dataclass
from enum import Enum

from wireworld.constants import PANEL_WIDTH, CellState
from wireworld.viewport import Viewport
from wireworld.world import World

_MIN_SPEED = 1.0
_MAX_SPEED = 10.0


class Action(Enum):
    """Panel requests the front end has to carry out."""

    NONE = "none"
    SAVE = "save"
    LOAD = "load"


@dataclass(frozen=True)
class Rect:
    """A rectangle, inclusive at the top-left and exclusive at the bottom-right."""

    left: int
    top: int
    right: int
    bottom: int

    def contains(self, x: int, y: int) -> bool:
        return self.left <= x < self.right and self.top <= y < self.bottom

    def width(self) -> int:
        return self.right - self.left

    def height(self) -> int:
        return self.bottom - self.top


class Game:
    """The editor: grid, view, panel widgets and the simulation clock."""

    def __init__(self, now: float | None = None) -> None:
        self.world = World()
        self.viewport = Viewport()
        self.current_state = CellState.CONDUCTOR
        self.running = False
        self.speed = _MIN_SPEED
        self.start_button = Rect(10, 300, 190, 340)
        self.save_button = Rect(10, 400, 190, 440)
        self.load_button = Rect(10, 450, 190, 490)
        self.state_buttons = [Rect(10, top, 190, top + 40) for top in (10, 60, 110, 160)]
        self.slider = Rect(10, 250, 190, 270)
        self.slider_pos = 0.0
        self.dragging_slider = False
        self.is_drawing = False
        self.last_update = time.monotonic() if now is None else now
        self._last_cell = (0, 0)
        self._prev_mouse: tuple[int, int] | None = None

    def press_left(self, x: int, y: int) -> Action:
        """Handle the left button going down; return what the front end should do."""
        action = Action.NONE
        if x < PANEL_WIDTH:
            for state, button in zip(CellState, self.state_buttons):
                if button.contains(x, y):
                    self.current_state = state
            if self.start_button.contains(x, y):
                self.running = not self.running
            if self.save_button.contains(x, y):
                action = Action.SAVE
            if self.load_button.contains(x, y):
                action = Action.LOAD
            if self.slider.contains(x, y):
                self.dragging_slider = True
        else:
            self.is_drawing = True
            self._last_cell = self.viewport.screen_to_cell(x, y)
            self.world.paint(*self._last_cell, self.current_state)
        self.hold_left(x, y)
        return action

    def hold_left(self, x: int, y: int) -> None:
        """Handle the cursor at (x, y) while the left button is held."""
        if self.is_drawing and x >= PANEL_WIDTH:
            cell = self.viewport.screen_to_cell(x, y)
            if cell != self._last_cell:
                self.world.draw_line(*self._last_cell, *cell, self.current_state)
                self._last_cell = cell
        if self.dragging_slider:
            clamped = min(max(x, self.slider.left), self.slider.right)
            self.slider_pos = float(clamped - self.slider.left)
            fraction = self.slider_pos / self.slider.width()
            self.speed = fraction * (_MAX_SPEED - _MIN_SPEED) + _MIN_SPEED

    def release_left(self) -> None:
        self.is_drawing = False
        self.dragging_slider = False

    def hold_middle(self, x: int, y: int) -> None:
        """Pan the view while the middle button is held."""
        if self._prev_mouse is not None:
            self.viewport.pan(x - self._prev_mouse[0], y - self._prev_mouse[1])
        self._prev_mouse = (x, y)

    def release_middle(self) -> None:
        self._prev_mouse = None

    def wheel(self, amount: float, x: int, y: int) -> None:
        """Zoom the view around the cursor."""
        self.viewport.zoom(amount, x, y)

    def tick(self, now: float) -> bool:
        """Step the simulation if running and due; return whether it stepped."""
        if self.running and now - self.last_update >= 1.0 / self.speed:
            self.world.step()
            self.last_update = now
            return True
        return False