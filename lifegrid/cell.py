"""Grid cells and reading alive cells out of binary PGM images."""

from __future__ import annotations

import re
from dataclasses import dataclass
from os import PathLike
from typing import Union

_INTEGER = re.compile(rb"[+-]?\d+")


@dataclass(frozen=True, order=True)
class Cell:
    """A position on the board: column ``x`` and row ``y``."""

    x: int
    y: int


class PgmFormatError(ValueError):
    """Raised when PGM data is malformed or does not match the expected size."""


def _atoi(field: bytes) -> int:
    """Parse a decimal integer field, yielding 0 when it is not one."""
    if _INTEGER.fullmatch(field):
        return int(field)
    return 0


def _header_fields(data: bytes) -> list[bytes]:
    fields = data.split()
    if len(fields) < 5:
        if not fields or fields[0] != b"P5":
            raise PgmFormatError("Not a pgm file")
        raise PgmFormatError("Truncated pgm header")
    return fields


def parse_pgm(data: Union[bytes, bytearray, str], width: int, height: int) -> list[Cell]:
    """Return the non-zero cells of a ``width`` x ``height`` P5 image, row by row."""
    if isinstance(data, str):
        data = data.encode("latin-1")
    fields = bytes(data).split()

    if not fields or fields[0] != b"P5":
        raise PgmFormatError("Not a pgm file")
    if len(fields) < 5:
        raise PgmFormatError("Truncated pgm header")
    if _atoi(fields[1]) != width:
        raise PgmFormatError("Incorrect width")
    if _atoi(fields[2]) != height:
        raise PgmFormatError("Incorrect height")
    if _atoi(fields[3]) != 255:
        raise PgmFormatError("Incorrect maxval/bit depth")

    image = fields[4]
    if len(image) < width * height:
        raise PgmFormatError("Image data too short")

    pixels = iter(image)
    return [
        Cell(x, y)
        for y in range(height)
        for x in range(width)
        if next(pixels) != 0
    ]


def read_alive_cells(
    path: Union[str, PathLike], width: int, height: int
) -> list[Cell]:
    """Read a PGM file and return its alive cells."""
    with open(path, "rb") as handle:
        data = handle.read()
    return parse_pgm(data, width, height)