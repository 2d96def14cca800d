"""Galton board simulation drawn sideways on a 128x64 framebuffer."""

from __future__ import annotations

import random
import struct
from dataclasses import dataclass

from .framebuffer import Framebuffer

ROWS = 57
COLS = 13
MAX_OBJECTS = 40

BALL = 0
SQUARE = 1

LAUNCH_ROW = 2
LAUNCH_COLUMN = 6
LAUNCH_EVERY = 4
PYRAMID_LEVELS = 6
PYRAMID_TOP_ROW = 4
PYRAMID_EXIT_ROW = 14
ELEMENT_RADIUS = 2
PROBABILITY_STEP = 0.05

DIGIT_FONT: tuple[tuple[int, ...], ...] = (
    (0x1F, 0x11, 0x11, 0x11, 0x1F),  # 0
    (0x00, 0x00, 0x1F, 0x00, 0x00),  # 1
    (0x1D, 0x15, 0x15, 0x15, 0x17),  # 2
    (0x11, 0x15, 0x15, 0x15, 0x1F),  # 3
    (0x07, 0x04, 0x04, 0x04, 0x1F),  # 4
    (0x17, 0x15, 0x15, 0x15, 0x1D),  # 5
    (0x1F, 0x15, 0x15, 0x15, 0x1D),  # 6
    (0x01, 0x01, 0x01, 0x01, 0x1F),  # 7
    (0x1F, 0x15, 0x15, 0x15, 0x1F),  # 8
    (0x17, 0x15, 0x15, 0x15, 0x1F),  # 9
)

_PROBABILITY_TENS = (53, 2)
_PROBABILITY_UNITS = (59, 2)
_COUNTER_TENS = (2, 2)
_COUNTER_UNITS = (8, 2)


def _f32(value: float) -> float:
    """Round a value to single precision, as the probability is stored."""
    return struct.unpack("f", struct.pack("f", value))[0]


@dataclass(frozen=True)
class Coord:
    """Logical screen position of a grid cell and the shape drawn there."""

    x: int
    y: int
    shape: int


@dataclass
class FallingObject:
    """A ball's grid position and state."""

    i: int = 0
    j: int = 0
    active: bool = False
    released: bool = False


def build_coord_matrix() -> list[list[Coord]]:
    """Grid of positions; odd rows sit one pixel right and down of the row above."""
    matrix: list[list[Coord]] = []
    for i in range(ROWS):
        if i % 2 == 0:
            row = [Coord(2 + j * 5, 3 + i * 2, BALL) for j in range(COLS)]
        else:
            row = [Coord(above.x + 1, above.y + 1, SQUARE) for above in matrix[i - 1]]
        matrix.append(row)
    return matrix


def set_pixel_rotated(framebuffer: Framebuffer, x: int, y: int, on: bool = True) -> None:
    """Set a pixel in the rotated view; pixels off the panel are ignored."""
    phys_x = framebuffer.width - 1 - y
    phys_y = x
    if 0 <= phys_x < framebuffer.width and 0 <= phys_y < framebuffer.height:
        framebuffer.set_pixel(phys_x, phys_y, on)


def draw_ball(
    framebuffer: Framebuffer, x0: int, y0: int, radius: int, on: bool = True
) -> None:
    """Fill (or clear) a disc centred at ``(x0, y0)``."""
    span = range(-radius, radius + 1)
    for y in span:
        for x in span:
            if x * x + y * y <= radius * radius:
                set_pixel_rotated(framebuffer, x0 + x, y0 + y, on)


def draw_hollow_corner_square(
    framebuffer: Framebuffer, x0: int, y0: int, on: bool = True
) -> None:
    """Fill (or clear) a 4x4 square whose corner pixels stay untouched."""
    corners = {(0, 0), (3, 0), (0, 3), (3, 3)}
    for y in range(4):
        for x in range(4):
            if (x, y) not in corners:
                set_pixel_rotated(framebuffer, x0 + x, y0 + y, on)


def draw_digit(framebuffer: Framebuffer, x: int, y: int, digit: int) -> None:
    """Draw a 5x5 digit, overwriting both lit and dark pixels; other values are ignored."""
    if not 0 <= digit <= 9:
        return
    for col, line in enumerate(DIGIT_FONT[digit]):
        for row in range(5):
            set_pixel_rotated(framebuffer, x + col, y + row, bool(line >> row & 1))


def _draw_two_digits(
    framebuffer: Framebuffer,
    value: int,
    tens_at: tuple[int, int],
    units_at: tuple[int, int],
) -> None:
    draw_digit(framebuffer, *tens_at, (value // 10) % 10)
    draw_digit(framebuffer, *units_at, value % 10)


def draw_probability(framebuffer: Framebuffer, probability: float) -> None:
    """Show the probability as a percentage from 00 to 99."""
    percent = int(_f32(_f32(probability) * 100.0))
    percent = min(max(percent, 0), 99)
    _draw_two_digits(framebuffer, percent, _PROBABILITY_TENS, _PROBABILITY_UNITS)


def draw_ball_counter(framebuffer: Framebuffer, count: int) -> None:
    """Show the last two digits of the launched-ball count."""
    _draw_two_digits(framebuffer, count, _COUNTER_TENS, _COUNTER_UNITS)


class GaltonBoard:
    """Balls dropping through a peg pyramid and piling up below it."""

    def __init__(
        self,
        framebuffer: Framebuffer,
        rng: random.Random | None = None,
        fall_prob: float = 0.5,
    ) -> None:
        if not 0.0 <= fall_prob <= 1.0:
            raise ValueError(f"fall probability {fall_prob} outside 0..1")
        self.framebuffer = framebuffer
        self.rng = rng if rng is not None else random.Random()
        self.fall_prob = _f32(fall_prob)
        self._clear_state()
        self._draw_pyramid()
        draw_probability(self.framebuffer, self.fall_prob)

    def _clear_state(self) -> None:
        self.framebuffer.clear()
        self.coords = build_coord_matrix()
        self.occupied = [[False] * COLS for _ in range(ROWS)]
        self.objects = [FallingObject() for _ in range(MAX_OBJECTS)]
        self.launched_count = 0
        self.cycle_counter = 0
        self.step = True
        self.done = False

    def _is_occupied(self, i: int, j: int) -> bool:
        return 0 <= i < ROWS and 0 <= j < COLS and self.occupied[i][j]

    def _occupy(self, i: int, j: int) -> None:
        if 0 <= i < ROWS and 0 <= j < COLS:
            self.occupied[i][j] = True

    def _draw_element(self, i: int, j: int, on: bool = True) -> None:
        if not (0 <= i < ROWS and 0 <= j < COLS):
            return
        coord = self.coords[i][j]
        if coord.shape == BALL:
            draw_ball(self.framebuffer, coord.x, coord.y, ELEMENT_RADIUS, on)
        else:
            draw_hollow_corner_square(self.framebuffer, coord.x, coord.y, on)

    def _draw_pyramid(self) -> None:
        center = COLS // 2
        for level in range(PYRAMID_LEVELS):
            row = PYRAMID_TOP_ROW + level * 2
            for dx in range(-level, level + 1, 2):
                column = center + dx
                if 0 <= column < COLS and row < ROWS:
                    self._draw_element(row, column)
                    self.occupied[row][column] = True

    def reset(self) -> None:
        """Start a new run with the current probability."""
        self._clear_state()
        self._draw_pyramid()
        draw_probability(self.framebuffer, self.fall_prob)
        draw_ball_counter(self.framebuffer, self.launched_count)

    def launch(self) -> FallingObject | None:
        """Release the next ball at the top; ``None`` once all are released."""
        for obj in self.objects:
            if not obj.released:
                obj.i, obj.j = LAUNCH_ROW, LAUNCH_COLUMN
                obj.active = obj.released = True
                self._draw_element(obj.i, obj.j)
                self.launched_count += 1
                draw_ball_counter(self.framebuffer, self.launched_count)
                return obj
        return None

    def _fall(self, obj: FallingObject) -> None:
        below = obj.i + 2
        if below > ROWS - 1 or self._is_occupied(below, obj.j):
            self._occupy(obj.i, obj.j)
            obj.active = False
        else:
            obj.i = below

    def _decide(self, obj: FallingObject) -> None:
        go_left = self.rng.random() < self.fall_prob
        can_descend = obj.i + 2 < ROWS
        if go_left and obj.j > 0 and can_descend:
            obj.i += 1
            obj.j -= 1
        elif obj.j < COLS and can_descend:
            obj.i += 1
        else:
            obj.active = False

    def _slide(self, obj: FallingObject) -> None:
        if self._is_occupied(obj.i + 1, obj.j):
            obj.j += 1
        obj.i += 1

    def update(self, step: bool) -> None:
        """Move every active ball: a random decision on ``step``, a slide otherwise."""
        for obj in self.objects:
            if not (obj.active and obj.released):
                continue
            old = (obj.i, obj.j)
            if obj.i >= PYRAMID_EXIT_ROW:
                self._fall(obj)
            elif step:
                self._decide(obj)
            else:
                self._slide(obj)
            self._draw_element(*old, on=False)
            self._draw_element(obj.i, obj.j)

    def all_inactive(self) -> bool:
        """True once every ball has been released and has come to rest."""
        return all(obj.released and not obj.active for obj in self.objects)

    def tick(self) -> bool:
        """Advance one cycle; return whether the run has finished."""
        if self.done:
            return True
        if self.cycle_counter % LAUNCH_EVERY == 0:
            self.launch()
        self.update(self.step)
        self.step = not self.step
        self.cycle_counter += 1
        if self.all_inactive():
            self.done = True
        return self.done

    def adjust_probability(self, delta: float) -> float:
        """Change the left-fall probability, clamped to 0..1, and redraw it."""
        value = _f32(self.fall_prob + _f32(delta))
        self.fall_prob = min(max(value, 0.0), 1.0)
        draw_probability(self.framebuffer, self.fall_prob)
        return self.fall_prob