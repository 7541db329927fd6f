"""Conway's Game of Life on a wrapping grid, with PGM image input and output and a pygame window."""

__version__ = "0.1.0"