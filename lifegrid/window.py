"""A window that shows the board as white (alive) and black (dead) pixels."""

from __future__ import annotations

from typing import Optional

import pygame

_TITLE = "GOL GUI"
_BYTES_PER_PIXEL = 4


class Window:
    """A ``width`` x ``height`` pixel buffer, drawn to a pygame window.

    With ``headless`` set no display is opened: the pixel buffer is still
    kept, but rendering only counts frames and no input events arrive.
    """

    def __init__(self, width: int, height: int, headless: bool = False) -> None:
        self.width = width
        self.height = height
        self.headless = headless
        self.pixels = bytearray(width * height * _BYTES_PER_PIXEL)
        self.frames_rendered = 0
        self.closed = False
        self._screen: Optional[pygame.Surface] = None
        if not headless:
            pygame.init()
            pygame.display.set_caption(_TITLE)
            self._screen = pygame.display.set_mode((width, height))
            pygame.event.set_allowed(None)
            pygame.event.set_blocked(None)
            pygame.event.set_allowed([pygame.KEYDOWN, pygame.QUIT])

    def destroy(self) -> None:
        """Close the window and shut the display down."""
        if self.closed:
            return
        self.closed = True
        if self._screen is not None:
            self._screen = None
            pygame.display.quit()
            pygame.quit()

    def render_frame(self) -> None:
        """Draw the current pixel buffer."""
        self.frames_rendered += 1
        if self._screen is None:
            return
        image = pygame.image.frombuffer(
            bytes(self.pixels), (self.width, self.height), "RGBA"
        )
        self._screen.fill((0, 0, 0))
        self._screen.blit(image, (0, 0))
        pygame.display.flip()

    def poll_event(self) -> Optional[pygame.event.Event]:
        """Return the next key-down or quit event, or ``None`` if there is none."""
        if self._screen is None:
            return None
        event = pygame.event.poll()
        if event.type in (pygame.KEYDOWN, pygame.QUIT):
            return event
        return None

    def _offset(self, x: int, y: int) -> int:
        offset = _BYTES_PER_PIXEL * (y * self.width + x)
        if offset < 0 or offset + _BYTES_PER_PIXEL > len(self.pixels):
            raise IndexError(f"pixel ({x}, {y}) is outside the window")
        return offset

    def set_pixel(self, x: int, y: int) -> None:
        """Make the pixel at ``(x, y)`` white."""
        offset = self._offset(x, y)
        self.pixels[offset:offset + _BYTES_PER_PIXEL] = b"\xff" * _BYTES_PER_PIXEL

    def flip_pixel(self, x: int, y: int) -> None:
        """Invert every channel of the pixel at ``(x, y)``."""
        offset = self._offset(x, y)
        for i in range(offset, offset + _BYTES_PER_PIXEL):
            self.pixels[i] ^= 0xFF

    def clear_pixels(self) -> None:
        """Make every pixel black."""
        self.pixels[:] = bytes(len(self.pixels))