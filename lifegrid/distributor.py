"""The turn loop: evolves the world and reports what happens as events."""

from __future__ import annotations

import queue
import time
from typing import Optional, Protocol, Sequence

from lifegrid.cell import Cell
from lifegrid.events import (
    AliveCellsCount,
    CellFlipped,
    FinalTurnComplete,
    State,
    StateChange,
    TurnComplete,
)
from lifegrid.params import Params

ALIVE = 0xFF
DEAD = 0x00

_OFFSETS = [(dx, dy) for dy in (-1, 0, 1) for dx in (-1, 0, 1) if dx or dy]


class ImageIo(Protocol):
    def read_image(self, filename: str) -> Sequence[Sequence[int]]: ...

    def write_image(self, filename: str, world: Sequence[Sequence[int]]) -> object: ...


def _alive_neighbours(world: Sequence[Sequence[int]], x: int, y: int, width: int, height: int) -> int:
    return sum(
        1
        for dx, dy in _OFFSETS
        if world[(y + dy) % height][(x + dx) % width] == ALIVE
    )


def cells_to_flip(world: Sequence[Sequence[int]], width: int, height: int) -> list[Cell]:
    """Cells that change state in the next turn on a wrapping board, row by row."""
    flips = []
    for y in range(height):
        for x in range(width):
            neighbours = _alive_neighbours(world, x, y, width, height)
            value = world[y][x]
            if value == ALIVE and (neighbours < 2 or neighbours > 3):
                flips.append(Cell(x, y))
            elif value == DEAD and neighbours == 3:
                flips.append(Cell(x, y))
    return flips


def count_alive(world: Sequence[Sequence[int]]) -> int:
    """Number of non-zero cells."""
    return sum(1 for row in world for value in row if value != 0)


def alive_cells(world: Sequence[Sequence[int]]) -> list[Cell]:
    """Alive cells in row-major order."""
    return [
        Cell(x, y)
        for y, row in enumerate(world)
        for x, value in enumerate(row)
        if value == ALIVE
    ]


def _poll_key(key_presses: "queue.Queue[str]") -> Optional[str]:
    try:
        return key_presses.get_nowait()
    except queue.Empty:
        return None


def _wait_for_resume(key_presses: "queue.Queue[str]") -> None:
    while key_presses.get().lower() != "p":
        pass


def distributor(
    params: Params,
    events: "queue.Queue",
    key_presses: "queue.Queue[str]",
    image_io: ImageIo,
    tick_interval: float = 2.0,
) -> None:
    """Run every turn, reacting to keys, and put events on ``events``.

    Keys: ``s`` saves the world, ``p`` pauses until ``p`` is pressed again,
    ``q`` stops early. The alive-cell count is reported every
    ``tick_interval`` seconds. ``None`` is put on ``events`` once nothing
    more will follow.
    """
    if tick_interval <= 0:
        raise ValueError("tick_interval must be positive")

    world = [bytearray(row) for row in image_io.read_image(params.size_name())]
    for y, row in enumerate(world):
        for x, value in enumerate(row):
            if value != 0:
                events.put(CellFlipped(0, Cell(x, y)))

    width, height = params.image_width, params.image_height
    turn = 0
    next_tick = time.monotonic() + tick_interval

    while turn < params.turns:
        key = _poll_key(key_presses)
        if key is not None:
            action = key.lower()
            if action == "s":
                image_io.write_image(params.output_name(), world)
            elif action == "p":
                events.put(StateChange(turn, State.PAUSED))
                _wait_for_resume(key_presses)
                events.put(StateChange(turn, State.EXECUTING))
                print("Continuing...")
            elif action == "q":
                events.put(StateChange(turn, State.QUITTING))
                print("quit")
                break
            continue

        now = time.monotonic()
        if now >= next_tick:
            next_tick = now + tick_interval
            events.put(AliveCellsCount(turn, count_alive(world)))
            continue

        for cell in cells_to_flip(world, width, height):
            world[cell.y][cell.x] ^= ALIVE
            events.put(CellFlipped(turn + 1, cell))
        turn += 1
        events.put(TurnComplete(turn))

    image_io.write_image(params.output_name(), world)
    events.put(FinalTurnComplete(turn, alive_cells(world)))
    events.put(StateChange(turn, State.QUITTING))
    events.put(None)