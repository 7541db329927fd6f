"""Text rendering of worlds and alive-cell lists for side-by-side comparison."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from lifegrid.cell import Cell

Matrix = Sequence[Sequence[int]]

_ALIVE = 0xFF
_DEAD = 0x00


def visualise_matrix(given: Matrix, width: int, height: int) -> None:
    """Print a world matrix inside a box."""
    print(matrices_to_string(given, None, width, height), end="")


def _cells_to_matrix(cells: Iterable[Cell], width: int, height: int) -> list[list[int]]:
    alive = set(cells)
    return [
        [_ALIVE if Cell(x, y) in alive else _DEAD for x in range(width)]
        for y in range(height)
    ]


def alive_cells_to_string(
    given: Iterable[Cell], expected: Iterable[Cell], width: int, height: int
) -> str:
    """Render two alive-cell lists next to each other."""
    given_matrix = _cells_to_matrix(given or (), width, height)
    expected_matrix = _cells_to_matrix(expected or (), width, height)
    output = ["  Your alive cells:                      Expected alive cells:\n"]
    output.extend(squares_to_strings(given_matrix, expected_matrix, width, height))
    return "".join(output)


def matrices_to_string(
    given: Matrix, expected: Optional[Matrix], width: int, height: int
) -> str:
    """Render a world matrix, and an expected one beside it when given."""
    output = ["  Your world matrix:                     "]
    output.append("Expected world matrix:\n" if expected is not None else "\n")
    output.extend(squares_to_strings(given, expected, width, height))
    return "".join(output)


def _horizontal_border(start: str, end: str, width: int) -> str:
    return start + "─" * (width * 2) + end


def _row_squares(row: Sequence[int], width: int) -> str:
    squares = []
    for value in row[:width]:
        if value == _ALIVE:
            squares.append("██")
        elif value == _DEAD:
            squares.append("  ")
    return "".join(squares)


def squares_to_strings(
    given: Matrix, expected: Optional[Matrix], width: int, height: int
) -> list[str]:
    """Return the boxed rows of one or two matrices as string pieces."""
    output = [_horizontal_border("  ┌", "┐ ", width)]
    if expected is not None:
        output.append(_horizontal_border("    ┌", "┐", width))
    output.append("\n")

    for i in range(height):
        output.append(f"{i:2d}│")
        output.append(_row_squares(given[i], width))
        if expected is not None:
            output.append(f"│   {i:2d}│")
            output.append(_row_squares(expected[i], width))
        output.append("│\n")

    output.append(_horizontal_border("  └", "┘ ", width))
    if expected is not None:
        output.append(_horizontal_border("    └", "┘", width))
    output.append("\n")
    return output