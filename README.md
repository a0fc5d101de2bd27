# wireworld

An interactive editor and simulator for the Wireworld cellular automaton.
You draw circuits of conductors and electrons on an unbounded grid. Then you
start the simulation and watch signals travel along the wires.

## Installation

```
pip install .
```

To run the tests, install the `test` extra and run `pytest`:

```
pip install ".[test]"
pytest
```

## Running

```
wireworld
```

This opens an 800×600 window titled "Wireworld". The control panel is on the
left and the grid fills the rest of the window. The command takes no options
apart from `--help`.

## Controls

- **State buttons** (the four swatches at the top of the panel): choose the
  state to paint. The states are empty (black), conductor (yellow), electron
  head (blue) and electron tail (red). The chosen swatch has a white border.
  Painting with the empty state erases cells.
- **Left mouse on the grid**: paint the chosen state. Drag to paint a
  continuous line between the cells the cursor passes over.
- **Middle mouse drag**: pan the view.
- **Mouse wheel**: zoom around the cursor. The cell size runs from 4 to 64
  pixels.
- **Speed slider**: drag it to set the simulation rate, from 1 to 10
  generations per second.
- **Start/Stop**: run or pause the simulation. The button is red while the
  simulation runs and blue while it is paused.
- **Save / Load**: open a file dialog to write the grid to a `.wws` file or to
  read one back. When saving, `.wws` is added to the name if it is missing.
  The dialogs use Python's `tkinter`, so it must be available. If a dialog
  cannot open, or the file cannot be read or written, a message is logged and
  the grid is left as it was.

## Rules

Each generation follows these rules:

- An electron head becomes an electron tail.
- An electron tail becomes a conductor.
- A conductor becomes an electron head if exactly one or two of its eight
  neighbours are electron heads. Otherwise it stays a conductor.
- Empty cells stay empty.

## Save file format

A `.wws` file is plain text with one cell per line, written as `x y state`.
Cells are written in sorted order. The state is `1` for a conductor, `2` for
an electron head and `3` for an electron tail. Empty cells are not written.

When a file is loaded, the grid is cleared first. Then:

- lines that do not have exactly three whitespace-separated fields are skipped;
- fields that are not integers count as `0`;
- lines whose state is not 0–3 are ignored;
- a state of `0` leaves the cell empty.

## Using the model from Python

The simulation does not need a window.

`wireworld.world.World` is a sparse grid. It supports `len()`, iteration over
the occupied cells, `in`, and indexing by `(x, y)`, which returns
`CellState.EMPTY` for cells that are not set. Its methods are `paint`,
`draw_line`, `step`, `clear`, `save` and `load`.

```python
from wireworld.constants import CellState
from wireworld.world import World, line_cells

world = World()
world.draw_line(0, 0, 5, 0, CellState.CONDUCTOR)
world.paint(0, 0, CellState.ELECTRON_HEAD)
world.step()
print(world[(0, 0)], world[(1, 0)])  # ELECTRON_TAIL, ELECTRON_HEAD
world.save("circuit.wws")

print(list(line_cells(0, 0, 3, 1)))   # Bresenham line cells, endpoints included
```

Other modules:

- `wireworld.viewport.Viewport` converts between screen pixels and cells. It
  provides `screen_to_cell`, `cell_to_screen`, `pan`, `zoom` and
  `visible_range`.
- `wireworld.controller.Game` holds the editor state and takes input events:
  `press_left`, `hold_left`, `release_left`, `hold_middle`, `release_middle`,
  `wheel` and `tick(now)`. `tick` advances the simulation when it is running
  and a step is due. `press_left` returns an `Action` (`NONE`, `SAVE` or
  `LOAD`) for the front end to carry out.
- `wireworld.app` has the pygame front end: `draw(surface, game)`,
  `save_with_dialog(game)`, `load_with_dialog(game)` and `main()`.