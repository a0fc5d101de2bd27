"""Interactive Wireworld cellular automaton editor and simulator."""

__version__ = "0.1.0"