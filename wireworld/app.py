"""The pygame front end: window, drawing and file dialogs."""

from __future__ import annotations

import argparse
import logging
import time

import pygame

from wireworld.constants import (
    ACTION_BUTTON_GREEN,
    BUTTON_BORDER_ACTIVE,
    GRID_LINES,
    PANEL_BACKGROUND,
    PANEL_WIDTH,
    SAVE_SUFFIX,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    SLIDER_BACKGROUND,
    SLIDER_HANDLE,
    START_BUTTON_BLUE,
    START_BUTTON_RED,
    STATE_COLORS,
    TEXT_COLOR,
    CellState,
)
from wireworld.controller import Action, Game, Rect

log = logging.getLogger(__name__)

_FILE_TYPES = [("Wireworld Save File", "*" + SAVE_SUFFIX)]
_font: pygame.font.Font | None = None


def _fill(surface: pygame.Surface, rect: Rect, color) -> None:
    pygame.draw.rect(surface, color, pygame.Rect(rect.left, rect.top, rect.width(), rect.height()))


def _button(surface: pygame.Surface, rect: Rect, color, text: str, dx: int) -> None:
    global _font
    _fill(surface, rect, color)
    if _font is None:
        pygame.font.init()
        _font = pygame.font.Font(None, 18)
    rendered = _font.render(text, True, TEXT_COLOR)
    surface.blit(rendered, (rect.left + dx, rect.top + 24 - rendered.get_height()))


def draw(surface: pygame.Surface, game: Game) -> None:
    """Render the panel, the grid lines and the cells onto a surface."""
    surface.fill(STATE_COLORS[CellState.EMPTY])
    pygame.draw.rect(surface, PANEL_BACKGROUND, pygame.Rect(0, 0, PANEL_WIDTH, SCREEN_HEIGHT))

    for state, button in zip(CellState, game.state_buttons):
        if state == game.current_state:
            _fill(surface, button, BUTTON_BORDER_ACTIVE)
            button = Rect(button.left + 2, button.top + 2, button.right - 2, button.bottom - 2)
        _fill(surface, button, STATE_COLORS[state])
    _button(surface, game.start_button,
            START_BUTTON_RED if game.running else START_BUTTON_BLUE, "Start/Stop", 20)
    _button(surface, game.save_button, ACTION_BUTTON_GREEN, "Save", 60)
    _button(surface, game.load_button, ACTION_BUTTON_GREEN, "Load", 60)
    _fill(surface, game.slider, SLIDER_BACKGROUND)
    handle_x = round(game.slider.left + game.slider_pos)
    _fill(surface, Rect(handle_x, game.slider.top, handle_x + 4, game.slider.bottom), SLIDER_HANDLE)

    view = game.viewport
    columns, rows = view.visible_range()
    overlay = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT), pygame.SRCALPHA)
    for x in columns:
        sx, _ = view.cell_to_screen(x, 0)
        if sx >= PANEL_WIDTH:
            pygame.draw.line(overlay, GRID_LINES, (sx, 0), (sx, SCREEN_HEIGHT))
    for y in rows:
        _, sy = view.cell_to_screen(0, y)
        pygame.draw.line(overlay, GRID_LINES, (PANEL_WIDTH, sy), (SCREEN_WIDTH, sy))
    surface.blit(overlay, (0, 0))

    size = view.scale
    for x, y in game.world:
        if x not in columns or y not in rows:
            continue
        sx, sy = view.cell_to_screen(x, y)
        if sx >= PANEL_WIDTH:
            left, top = round(sx), round(sy)
            rect = pygame.Rect(left, top, round(sx + size) - left, round(sy + size) - top)
            pygame.draw.rect(surface, STATE_COLORS[game.world[(x, y)]], rect)


def _ask_path(save: bool) -> str:
    import tkinter
    from tkinter import filedialog

    root = tkinter.Tk()
    root.withdraw()
    try:
        ask = filedialog.asksaveasfilename if save else filedialog.askopenfilename
        return ask(title="Save Game" if save else "Load Game", filetypes=_FILE_TYPES) or ""
    finally:
        root.destroy()


def save_with_dialog(game: Game) -> None:
    """Ask for a file name and save the grid there."""
    try:
        filename = _ask_path(save=True)
    except Exception as exc:  # the dialog itself failed to open
        log.warning("Save dialog canceled: %s", exc)
        return
    if not filename:
        return
    if not filename.endswith(SAVE_SUFFIX):
        filename += SAVE_SUFFIX
    try:
        game.world.save(filename)
    except OSError as exc:
        log.error("Failed to save game: %s", exc)
    else:
        log.info("Game saved to: %s", filename)


def load_with_dialog(game: Game) -> None:
    """Ask for a file and replace the grid with its contents."""
    try:
        filename = _ask_path(save=False)
    except Exception as exc:  # the dialog itself failed to open
        log.warning("Load dialog canceled: %s", exc)
        return
    if not filename:
        return
    try:
        game.world.load(filename)
    except (OSError, UnicodeDecodeError) as exc:
        log.error("Failed to load game: %s", exc)
    else:
        log.info("Game loaded from: %s", filename)


def _handle(event: pygame.event.Event, game: Game) -> None:
    if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
        action = game.press_left(*event.pos)
        if action is Action.SAVE:
            save_with_dialog(game)
        elif action is Action.LOAD:
            load_with_dialog(game)
    elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 2:
        game.hold_middle(*event.pos)
    elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
        game.release_left()
    elif event.type == pygame.MOUSEBUTTONUP and event.button == 2:
        game.release_middle()
    elif event.type == pygame.MOUSEMOTION:
        if event.buttons[0]:
            game.hold_left(*event.pos)
        if event.buttons[1]:
            game.hold_middle(*event.pos)
    elif event.type == pygame.MOUSEWHEEL:
        game.wheel(event.y, *pygame.mouse.get_pos())


def main(argv: list[str] | None = None) -> int:
    """Open the editor window and run until it is closed."""
    argparse.ArgumentParser(prog="wireworld", description="Interactive Wireworld editor.").parse_args(argv)
    logging.basicConfig(level=logging.INFO)
    pygame.init()
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption("Wireworld")
        clock = pygame.time.Clock()
        game = Game(time.monotonic())
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                _handle(event, game)
            game.tick(time.monotonic())
            draw(screen, game)
            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()