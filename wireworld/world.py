"""A sparse Wireworld grid with drawing, stepping and file persistence."""

from __future__ import annotations

import os
import re
from collections.abc import Iterator, Mapping
from pathlib import Path

from wireworld.constants import CellState

Cell = tuple[int, int]

_INTEGER = re.compile(r"[+-]?[0-9]+")


def line_cells(x0: int, y0: int, x1: int, y1: int) -> Iterator[Cell]:
    """Yield the cells of a Bresenham line from (x0, y0) to (x1, y1), inclusive."""
    dx, dy = abs(x1 - x0), -abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx + dy
    while True:
        yield x0, y0
        if (x0, y0) == (x1, y1):
            return
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x0 += sx
        if e2 <= dx:
            err += dx
            y0 += sy


class World:
    """An unbounded grid holding only its non-empty cells."""

    def __init__(self, cells: Mapping[Cell, int] | None = None) -> None:
        self._cells: dict[Cell, CellState] = {}
        for (x, y), state in (cells or {}).items():
            self.paint(x, y, CellState(state))

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)

    def __getitem__(self, cell: Cell) -> CellState:
        return self._cells.get(cell, CellState.EMPTY)

    def __contains__(self, cell: object) -> bool:
        return cell in self._cells

    def paint(self, x: int, y: int, state: CellState) -> None:
        """Set one cell; painting EMPTY removes it."""
        if state == CellState.EMPTY:
            self._cells.pop((x, y), None)
        else:
            self._cells[(x, y)] = CellState(state)

    def draw_line(self, x0: int, y0: int, x1: int, y1: int, state: CellState) -> None:
        """Paint every cell on the line between two cells."""
        for x, y in line_cells(x0, y0, x1, y1):
            self.paint(x, y, state)

    def step(self) -> None:
        """Advance the grid by one Wireworld generation."""
        def heads(x: int, y: int) -> int:
            return sum(
                self._cells.get((x + dx, y + dy)) == CellState.ELECTRON_HEAD
                for dx in (-1, 0, 1)
                for dy in (-1, 0, 1)
                if dx or dy
            )

        following = {
            CellState.ELECTRON_HEAD: lambda x, y: CellState.ELECTRON_TAIL,
            CellState.ELECTRON_TAIL: lambda x, y: CellState.CONDUCTOR,
            CellState.CONDUCTOR: lambda x, y: (
                CellState.ELECTRON_HEAD if heads(x, y) in (1, 2) else CellState.CONDUCTOR
            ),
        }
        self._cells = {
            (x, y): following[state](x, y) for (x, y), state in self._cells.items()
        }

    def clear(self) -> None:
        """Remove every cell."""
        self._cells.clear()

    def save(self, path: str | os.PathLike[str]) -> None:
        """Write the grid as lines of 'x y state'."""
        with open(path, "w", encoding="utf-8") as handle:
            for (x, y), state in sorted(self._cells.items()):
                handle.write(f"{x} {y} {int(state)}\n")

    def load(self, path: str | os.PathLike[str]) -> None:
        """Replace the grid with the cells in a file; it is emptied first.

        Lines without exactly three fields are skipped, non-integer fields
        count as 0, and unknown states are ignored.
        """
        self._cells.clear()
        valid = {int(state) for state in CellState}
        for line in Path(path).read_text(encoding="utf-8").split("\n"):
            parts = line.split()
            if len(parts) != 3:
                continue
            x, y, state = (int(p) if _INTEGER.fullmatch(p) else 0 for p in parts)
            if state in valid:
                self.paint(x, y, CellState(state))