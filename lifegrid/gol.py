"""Starting a simulation in the background."""

from __future__ import annotations

import os
import queue
import threading
from typing import Union

from lifegrid.distributor import distributor
from lifegrid.params import Params
from lifegrid.pgm import PgmIo


def run(
    params: Params,
    events: "queue.Queue",
    key_presses: "queue.Queue[str]",
    image_dir: Union[str, os.PathLike] = "images",
    output_dir: Union[str, os.PathLike] = "out",
) -> threading.Thread:
    """Start the simulation on a daemon thread and return that thread."""
    image_io = PgmIo(params, image_dir, output_dir)
    worker = threading.Thread(
        target=distributor,
        args=(params, events, key_presses, image_io),
        name="distributor",
        daemon=True,
    )
    worker.start()
    return worker