import math

import pytest

from wireworld.constants import (
    MAX_SCALE,
    MIN_SCALE,
    PANEL_WIDTH,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
)
from wireworld.viewport import Viewport


def test_origin_maps_to_cell_zero():
    assert Viewport().screen_to_cell(PANEL_WIDTH, 0) == (0, 0)


def test_panel_pixels_map_to_zero_cell():
    view = Viewport(scale=8.0, offset_x=-100.0, offset_y=-100.0)
    assert view.screen_to_cell(PANEL_WIDTH - 1, 300) == (0, 0)


def test_screen_to_cell_floors_negative_positions():
    view = Viewport(scale=16.0, offset_x=10.0, offset_y=10.0)
    assert view.screen_to_cell(PANEL_WIDTH + 5, 5) == (-1, -1)


@pytest.mark.parametrize("scale", [4.0, 16.0, 37.5, 64.0])
@pytest.mark.parametrize("offset", [(0.0, 0.0), (13.0, -29.0), (-250.0, 400.0)])
@pytest.mark.parametrize("cell", [(0, 0), (3, 7), (-5, -2)])
def test_cell_to_screen_round_trip(scale, offset, cell):
    view = Viewport(scale=scale, offset_x=offset[0], offset_y=offset[1])
    sx, sy = view.cell_to_screen(*cell)
    # Sample the centre of the cell to avoid edge rounding.
    px = math.floor(sx + scale / 2)
    py = math.floor(sy + scale / 2)
    assert view.screen_to_cell(px, py) == cell


def test_pan_moves_cells_on_screen():
    view = Viewport()
    before = view.cell_to_screen(2, 3)
    view.pan(15, -20)
    after = view.cell_to_screen(2, 3)
    assert after == (before[0] + 15, before[1] - 20)


def test_zoom_is_clamped():
    view = Viewport()
    for _ in range(100):
        view.zoom(1, 400, 300)
    assert view.scale == MAX_SCALE
    for _ in range(100):
        view.zoom(-1, 400, 300)
    assert view.scale == MIN_SCALE


def test_zoom_keeps_point_under_cursor():
    view = Viewport(offset_x=30.0, offset_y=-12.0)
    x, y = 517, 233

    def world_point():
        return (
            (x - PANEL_WIDTH - view.offset_x) / view.scale,
            (y - view.offset_y) / view.scale,
        )

    before = world_point()
    view.zoom(2, x, y)
    after = world_point()
    assert after == pytest.approx(before)
    assert view.scale > 16.0


def test_zoom_over_panel_keeps_offsets():
    view = Viewport(offset_x=30.0, offset_y=-12.0)
    view.zoom(1, PANEL_WIDTH - 1, 100)
    assert (view.offset_x, view.offset_y) == (30.0, -12.0)
    assert view.scale > 16.0


def test_zero_wheel_changes_nothing():
    view = Viewport(scale=20.0, offset_x=5.0, offset_y=6.0)
    view.zoom(0, 500, 300)
    assert view == Viewport(scale=20.0, offset_x=5.0, offset_y=6.0)


@pytest.mark.parametrize(
    "view",
    [Viewport(), Viewport(scale=7.3, offset_x=-91.0, offset_y=44.0), Viewport(scale=64.0, offset_x=33.0)],
)
def test_visible_range_covers_game_area(view):
    columns, rows = view.visible_range()
    for px in (PANEL_WIDTH, (PANEL_WIDTH + SCREEN_WIDTH) // 2, SCREEN_WIDTH - 1):
        for py in (0, SCREEN_HEIGHT // 2, SCREEN_HEIGHT - 1):
            cx, cy = view.screen_to_cell(px, py)
            assert cx in columns
            assert cy in rows