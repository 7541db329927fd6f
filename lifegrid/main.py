"""Command-line entry point: run a simulation and show it in a window."""

from __future__ import annotations

import argparse
import queue
from typing import Optional, Sequence

from lifegrid.gol import run
from lifegrid.loop import start
from lifegrid.params import Params


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lifegrid",
        description="Run Conway's Game of Life on a PGM image.",
        add_help=False,
    )
    parser.add_argument("--help", action="help", help="Show this message and exit.")
    parser.add_argument(
        "-t", dest="threads", type=int, default=8,
        help="Number of worker threads to use. Defaults to 8.",
    )
    parser.add_argument(
        "-w", dest="width", type=int, default=256,
        help="Width of the image. Defaults to 256.",
    )
    parser.add_argument(
        "-h", dest="height", type=int, default=256,
        help="Height of the image. Defaults to 256.",
    )
    parser.add_argument(
        "-turns", "--turns", dest="turns", type=int, default=10000,
        help="Number of turns to process. Defaults to 10000.",
    )
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> Params:
    """Build run parameters from command-line arguments."""
    args = _parser().parse_args(argv)
    return Params(
        turns=args.turns,
        threads=args.threads,
        image_width=args.width,
        image_height=args.height,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse arguments, start the simulation and run the display loop."""
    params = parse_args(argv)
    print("Threads:", params.threads)
    print("Width:", params.image_width)
    print("Height:", params.image_height)

    key_presses: "queue.Queue[str]" = queue.Queue(maxsize=10)
    events: queue.Queue = queue.Queue(maxsize=1000)

    run(params, events, key_presses)
    start(params, events, key_presses)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())