import dataclasses

import pytest

from lifegrid.cell import Cell
from lifegrid.events import (
    AliveCellsCount,
    CellFlipped,
    Event,
    FinalTurnComplete,
    ImageOutputComplete,
    State,
    StateChange,
    TurnComplete,
)


def test_state_strings():
    names = [str(State(value)) for value in range(3)]
    assert names == ["Paused", "Executing", "Quitting"]


def test_state_order():
    assert State(0) is State.PAUSED
    assert State(1) is State.EXECUTING
    assert State(2) is State.QUITTING
    with pytest.raises(ValueError):
        State(3)


def test_state_change_string_is_state():
    for state in State:
        event = StateChange(7, state)
        assert str(event) == str(state)
        assert event.completed_turns == 7


def test_alive_cells_count_string():
    event = AliveCellsCount(completed_turns=3, cells_count=42)
    assert str(event) == "Alive Cells 42"
    assert event.completed_turns == 3


def test_image_output_complete_string():
    event = ImageOutputComplete(10, "16x16x10")
    assert str(event) == "File 16x16x10 output complete"


@pytest.mark.parametrize(
    "event",
    [
        CellFlipped(1, Cell(0, 0)),
        TurnComplete(1),
        FinalTurnComplete(1, [Cell(1, 2)]),
        Event(1),
    ],
)
def test_silent_events(event):
    assert str(event) == ""
    assert event.completed_turns == 1


def test_events_share_base():
    events = [AliveCellsCount(1, 0), TurnComplete(2), StateChange(3, State.PAUSED)]
    assert [e.completed_turns for e in events] == [1, 2, 3]
    assert [isinstance(e, Event) for e in events] == [True, True, True]


def test_events_are_frozen():
    event = TurnComplete(5)
    with pytest.raises(dataclasses.FrozenInstanceError):
        event.completed_turns = 6
    assert event.completed_turns == 5


def test_final_turn_default_alive():
    assert FinalTurnComplete(0).alive == []