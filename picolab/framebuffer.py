"""Page-organised monochrome framebuffer in the SSD1306 memory layout."""

from __future__ import annotations

from .font import glyph

PAGE_HEIGHT = 8
DEFAULT_WIDTH = 128
DEFAULT_HEIGHT = 64


class Framebuffer:
    """One byte per column per 8-pixel page; bit ``y % 8`` is row ``y``."""

    def __init__(
        self,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        extended_font: bool = True,
    ) -> None:
        if width <= 0 or height <= 0 or height % PAGE_HEIGHT:
            raise ValueError(
                f"invalid size {width}x{height}: height must be a positive multiple of 8"
            )
        self.width = width
        self.height = height
        self.extended_font = extended_font
        self.buffer = bytearray(width * height // PAGE_HEIGHT)

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        return (y // PAGE_HEIGHT) * self.width + x

    def set_pixel(self, x: int, y: int, on: bool = True) -> None:
        """Light or clear one pixel."""
        index = self._index(x, y)
        mask = 1 << (y % PAGE_HEIGHT)
        if on:
            self.buffer[index] |= mask
        else:
            self.buffer[index] &= ~mask & 0xFF

    def get_pixel(self, x: int, y: int) -> bool:
        """Return whether a pixel is lit."""
        return bool(self.buffer[self._index(x, y)] >> (y % PAGE_HEIGHT) & 1)

    def draw_line(self, x0: int, y0: int, x1: int, y1: int, on: bool = True) -> None:
        """Draw a line with Bresenham's algorithm, both endpoints included."""
        dx = abs(x1 - x0)
        dy = -abs(y1 - y0)
        sx = 1 if x0 < x1 else -1
        sy = 1 if y0 < y1 else -1
        error = dx + dy
        while True:
            self.set_pixel(x0, y0, on)
            if x0 == x1 and y0 == y1:
                break
            error2 = 2 * error
            if error2 >= dy:
                error += dy
                x0 += sx
            if error2 <= dx:
                error += dx
                y0 += sy

    def draw_char(self, x: int, y: int, character: str) -> None:
        """Copy a glyph into the page containing row ``y``, starting at column ``x``.

        Characters that would not fit on the right or bottom edge are skipped.
        """
        if x > self.width - 8 or y > self.height - 8:
            return
        if x < 0 or y < 0:
            raise IndexError(f"character position ({x}, {y}) is negative")
        upper = character.upper()
        if len(upper) == 1:
            character = upper
        start = (y // PAGE_HEIGHT) * self.width + x
        self.buffer[start:start + 8] = glyph(character, self.extended_font)

    def draw_string(self, x: int, y: int, text: str) -> None:
        """Draw ``text`` left to right, eight columns per character."""
        if x > self.width - 8 or y > self.height - 8:
            return
        for character in text:
            self.draw_char(x, y, character)
            x += 8

    def clear(self) -> None:
        """Turn every pixel off."""
        self.buffer[:] = bytes(len(self.buffer))

    def to_bytes(self) -> bytes:
        """Return a copy of the raw display memory."""
        return bytes(self.buffer)