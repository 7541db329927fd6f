"""Events reported by the simulation to whoever is watching it."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from lifegrid.cell import Cell


class State(enum.Enum):
    """State of execution."""

    PAUSED = 0
    EXECUTING = 1
    QUITTING = 2

    def __str__(self) -> str:
        return self.name.capitalize()


@dataclass(frozen=True)
class Event:
    """Base event; ``completed_turns`` is the number of fully completed turns."""

    completed_turns: int

    def __str__(self) -> str:
        return ""


@dataclass(frozen=True)
class AliveCellsCount(Event):
    """Number of currently alive cells, reported periodically."""

    cells_count: int

    def __str__(self) -> str:
        return f"Alive Cells {self.cells_count}"


@dataclass(frozen=True)
class ImageOutputComplete(Event):
    """An image has been saved."""

    filename: str

    def __str__(self) -> str:
        return f"File {self.filename} output complete"


@dataclass(frozen=True)
class StateChange(Event):
    """Execution was paused, resumed or quit."""

    new_state: State

    def __str__(self) -> str:
        return str(self.new_state)


@dataclass(frozen=True)
class CellFlipped(Event):
    """A single cell changed state."""

    cell: Cell


@dataclass(frozen=True)
class TurnComplete(Event):
    """A turn finished; all its CellFlipped events came before this."""


@dataclass(frozen=True)
class FinalTurnComplete(Event):
    """The world state after execution finished."""

    alive: list[Cell] = field(default_factory=list)