"""Editor state for a Neovim external UI: redraw event parsing, grids, windows, cursor and draw command batching."""

__version__ = "0.1.0"