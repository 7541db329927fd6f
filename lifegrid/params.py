"""Run parameters for a simulation."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Params:
    """How many turns to run, with how many workers, on which image size."""

    turns: int = 10000
    threads: int = 8
    image_width: int = 256
    image_height: int = 256

    def size_name(self) -> str:
        """Name of the input image, e.g. ``WxH``."""
        return f"{self.image_width}x{self.image_height}"

    def output_name(self) -> str:
        """Name of the output image, e.g. ``WxHxTURNS``."""
        return f"{self.image_width}x{self.image_height}x{self.turns}"