"""The display loop: forwards key presses and draws what the simulation reports."""

from __future__ import annotations

import queue
from typing import Optional

import pygame

from lifegrid.events import CellFlipped, Event, TurnComplete
from lifegrid.params import Params
from lifegrid.window import Window

_KEYS = {
    pygame.K_p: "p",
    pygame.K_s: "s",
    pygame.K_q: "q",
    pygame.K_k: "k",
}


def key_for_event(event: Optional[pygame.event.Event]) -> Optional[str]:
    """The control key a key-down event stands for, or ``None``."""
    if event is None or event.type != pygame.KEYDOWN:
        return None
    return _KEYS.get(getattr(event, "key", None))


def describe_event(event: Event) -> Optional[str]:
    """A line reporting ``event``, or ``None`` for events with nothing to say."""
    text = str(event)
    if not text:
        return None
    return f"Completed Turns {event.completed_turns:<8}{text}"


def start(
    params: Params,
    events: "queue.Queue",
    key_presses: "queue.Queue[str]",
    window=None,
) -> None:
    """Run until ``None`` arrives on ``events``, then destroy the window."""
    if window is None:
        window = Window(params.image_width, params.image_height)

    while True:
        key = key_for_event(window.poll_event())
        if key is not None:
            key_presses.put(key)

        try:
            event = events.get(timeout=0.001)
        except queue.Empty:
            continue

        if event is None:
            window.destroy()
            break
        if isinstance(event, CellFlipped):
            window.flip_pixel(event.cell.x, event.cell.y)
        elif isinstance(event, TurnComplete):
            window.render_frame()
        else:
            line = describe_event(event)
            if line is not None:
                print(line)