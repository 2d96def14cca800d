"""Buffer for a chain of WS2812-style RGB LEDs sent in GRB order."""

from __future__ import annotations

import time
from collections.abc import Callable, Iterator
from dataclasses import dataclass

RESET_DELAY_S = 100e-6


@dataclass
class Pixel:
    """Colour of one LED."""

    r: int = 0
    g: int = 0
    b: int = 0


def _check_channel(value: int) -> int:
    if not 0 <= value <= 255:
        raise ValueError(f"colour channel {value} outside 0..255")
    return value


class NeoPixelStrip:
    """Holds LED colours and pushes them to ``sink`` as G, R, B bytes per LED."""

    def __init__(self, count: int, sink: Callable[[bytes], object] | None = None) -> None:
        if count < 0:
            raise ValueError("LED count must not be negative")
        self.pixels = [Pixel() for _ in range(count)]
        self.sink = sink

    def __len__(self) -> int:
        return len(self.pixels)

    def __getitem__(self, index: int) -> Pixel:
        return self.pixels[index]

    def __iter__(self) -> Iterator[Pixel]:
        return iter(self.pixels)

    def set_led(self, index: int, r: int, g: int, b: int) -> None:
        """Set the colour of the LED at ``index``."""
        if not 0 <= index < len(self.pixels):
            raise IndexError(f"LED {index} outside 0..{len(self.pixels) - 1}")
        self.pixels[index] = Pixel(_check_channel(r), _check_channel(g), _check_channel(b))

    def clear(self) -> None:
        """Turn every LED off in the buffer."""
        for pixel in self.pixels:
            pixel.r = pixel.g = pixel.b = 0

    def grb_bytes(self) -> bytes:
        """Return the wire data: G, R, B for each LED in order."""
        return bytes(channel for p in self.pixels for channel in (p.g, p.r, p.b))

    def write(self) -> bytes:
        """Send the buffer to the sink, then hold for the latch reset time."""
        data = self.grb_bytes()
        if self.sink is not None:
            self.sink(data)
        time.sleep(RESET_DELAY_S)
        return data