"""Reading and writing binary (P5) PGM images of the world."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Sequence, Union

from lifegrid.cell import PgmFormatError
from lifegrid.params import Params

_INTEGER = re.compile(rb"[+-]?\d+")
_MAXVAL = 255


def _atoi(field: bytes) -> int:
    """Parse a decimal integer field, yielding 0 when it is not one."""
    return int(field) if _INTEGER.fullmatch(field) else 0


def encode_pgm(world: Sequence[Sequence[int]], width: int, height: int) -> bytes:
    """Encode a ``width`` x ``height`` world as a P5 image."""
    header = f"P5\n{width} {height}\n{_MAXVAL}\n".encode("ascii")
    pixels = bytearray()
    for row in world[:height]:
        pixels.extend(row[:width])
    return header + bytes(pixels)


def _decode_pgm(data: bytes, width: int, height: int) -> list[bytearray]:
    fields = data.split()
    if not fields or fields[0] != b"P5":
        raise PgmFormatError("Not a pgm file")
    if len(fields) < 5:
        raise PgmFormatError("Truncated pgm header")
    if _atoi(fields[1]) != width:
        raise PgmFormatError("Incorrect width")
    if _atoi(fields[2]) != height:
        raise PgmFormatError("Incorrect height")
    if _atoi(fields[3]) != _MAXVAL:
        raise PgmFormatError("Incorrect maxval/bit depth")

    image = fields[4]
    if len(image) < width * height:
        raise PgmFormatError("Image data too short")
    return [bytearray(image[y * width:(y + 1) * width]) for y in range(height)]


class PgmIo:
    """Loads input images from one directory and saves output images to another."""

    def __init__(
        self,
        params: Params,
        image_dir: Union[str, os.PathLike] = "images",
        output_dir: Union[str, os.PathLike] = "out",
    ) -> None:
        self.params = params
        self.image_dir = Path(image_dir)
        self.output_dir = Path(output_dir)

    def read_image(self, filename: str) -> list[bytearray]:
        """Read ``<image_dir>/<filename>.pgm`` and return its rows of pixels."""
        data = (self.image_dir / f"{filename}.pgm").read_bytes()
        world = _decode_pgm(data, self.params.image_width, self.params.image_height)
        print("File", filename, "input done!")
        return world

    def write_image(self, filename: str, world: Sequence[Sequence[int]]) -> Path:
        """Write ``world`` to ``<output_dir>/<filename>.pgm`` and return the path."""
        self.output_dir.mkdir(parents=True, exist_ok=True)
        path = self.output_dir / f"{filename}.pgm"
        data = encode_pgm(world, self.params.image_width, self.params.image_height)
        with open(path, "wb") as handle:
            handle.write(data)
            handle.flush()
            os.fsync(handle.fileno())
        print("File", filename, "output done!")
        return path