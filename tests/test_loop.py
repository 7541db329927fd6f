import queue

import pygame

from lifegrid.cell import Cell
from lifegrid.events import (
    AliveCellsCount,
    CellFlipped,
    FinalTurnComplete,
    State,
    StateChange,
    TurnComplete,
)
from lifegrid.loop import describe_event, key_for_event, start
from lifegrid.params import Params
from lifegrid.window import Window


class ScriptedWindow:
    def __init__(self, width, height, scripted):
        self.inner = Window(width, height, headless=True)
        self.scripted = list(scripted)

    def poll_event(self):
        return self.scripted.pop(0) if self.scripted else None

    def flip_pixel(self, x, y):
        self.inner.flip_pixel(x, y)

    def render_frame(self):
        self.inner.render_frame()

    def destroy(self):
        self.inner.destroy()


def test_key_for_event_control_keys():
    for key, char in [(pygame.K_p, "p"), (pygame.K_s, "s"), (pygame.K_q, "q"), (pygame.K_k, "k")]:
        assert key_for_event(pygame.event.Event(pygame.KEYDOWN, key=key)) == char


def test_key_for_event_ignores_others():
    assert key_for_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a)) is None
    assert key_for_event(pygame.event.Event(pygame.QUIT)) is None
    assert key_for_event(None) is None


def test_describe_event_pads_turns():
    assert describe_event(AliveCellsCount(5, 12)) == "Completed Turns 5       Alive Cells 12"
    assert describe_event(StateChange(3, State.PAUSED)) == "Completed Turns 3       Paused"


def test_describe_event_silent_events():
    assert describe_event(TurnComplete(1)) is None
    assert describe_event(CellFlipped(1, Cell(0, 0))) is None
    assert describe_event(FinalTurnComplete(1, [])) is None


def test_start_draws_and_prints(capsys):
    params = Params(turns=1, image_width=3, image_height=3)
    events = queue.Queue()
    keys = queue.Queue()
    window = ScriptedWindow(3, 3, [])
    for event in [
        CellFlipped(0, Cell(1, 2)),
        TurnComplete(1),
        AliveCellsCount(1, 1),
        StateChange(1, State.QUITTING),
        None,
    ]:
        events.put(event)

    start(params, events, keys, window)

    offset = 4 * (2 * 3 + 1)
    assert bytes(window.inner.pixels[offset:offset + 4]) == b"\xff\xff\xff\xff"
    assert window.inner.frames_rendered == 1
    assert window.inner.closed is True
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "Completed Turns 1       Alive Cells 1",
        "Completed Turns 1       Quitting",
    ]


def test_start_forwards_keys():
    params = Params(turns=1, image_width=2, image_height=2)
    events = queue.Queue()
    keys = queue.Queue()
    window = ScriptedWindow(
        2,
        2,
        [
            pygame.event.Event(pygame.KEYDOWN, key=pygame.K_s),
            pygame.event.Event(pygame.KEYDOWN, key=pygame.K_x),
            pygame.event.Event(pygame.KEYDOWN, key=pygame.K_q),
        ],
    )

    def feed():
        return None

    # Events arrive only after the scripted key presses have been polled.
    for _ in range(5):
        events.put(AliveCellsCount(0, 0))
    events.put(None)
    feed()

    start(params, events, keys, window)

    received = []
    while not keys.empty():
        received.append(keys.get_nowait())
    assert received == ["s", "q"]