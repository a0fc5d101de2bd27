"""Cell states, screen geometry and colours shared by the simulator."""

from __future__ import annotations

from enum import IntEnum


class CellState(IntEnum):
    """The four states a Wireworld cell can be in."""

    EMPTY = 0
    CONDUCTOR = 1
    ELECTRON_HEAD = 2
    ELECTRON_TAIL = 3


SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600
PANEL_WIDTH = 200

DEFAULT_SCALE = 16.0
MIN_SCALE = 4.0
MAX_SCALE = 64.0
ZOOM_FACTOR = 1.1

SAVE_SUFFIX = ".wws"

Color = tuple[int, int, int, int]

PANEL_BACKGROUND: Color = (50, 50, 50, 255)
BUTTON_BORDER_ACTIVE: Color = (255, 255, 255, 255)
SLIDER_BACKGROUND: Color = (100, 100, 100, 255)
SLIDER_HANDLE: Color = (255, 255, 255, 255)
START_BUTTON_BLUE: Color = (0, 128, 255, 255)
START_BUTTON_RED: Color = (255, 0, 0, 255)
ACTION_BUTTON_GREEN: Color = (0, 255, 0, 255)
GRID_LINES: Color = (50, 50, 50, 50)
TEXT_COLOR: Color = (255, 255, 255, 255)

STATE_COLORS: dict[CellState, Color] = {
    CellState.EMPTY: (0, 0, 0, 255),
    CellState.CONDUCTOR: (255, 255, 0, 255),
    CellState.ELECTRON_HEAD: (0, 0, 255, 255),
    CellState.ELECTRON_TAIL: (255, 0, 0, 255),
}