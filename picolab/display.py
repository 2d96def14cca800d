"""SSD1306 OLED controller over I2C: command sequences and display drivers."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import IntEnum

DEFAULT_WIDTH = 128
DEFAULT_HEIGHT = 64
PAGE_HEIGHT = 8
I2C_ADDRESS = 0x3C
I2C_CLOCK_KHZ = 400

COMMAND_CONTROL = 0x80
DATA_CONTROL = 0x40

Transport = Callable[[int, bytes], object]
"""Writes ``data`` to the device at an I2C address."""


class Command(IntEnum):
    """SSD1306 command opcodes."""

    SET_MEMORY_MODE = 0x20
    SET_COLUMN_ADDRESS = 0x21
    SET_PAGE_ADDRESS = 0x22
    SET_HORIZONTAL_SCROLL = 0x26
    SET_SCROLL = 0x2E
    SET_DISPLAY_START_LINE = 0x40
    SET_CONTRAST = 0x81
    SET_CHARGE_PUMP = 0x8D
    SET_SEGMENT_REMAP = 0xA0
    SET_ENTIRE_ON = 0xA4
    SET_ALL_ON = 0xA5
    SET_NORMAL_DISPLAY = 0xA6
    SET_INVERSE_DISPLAY = 0xA7
    SET_MUX_RATIO = 0xA8
    SET_DISPLAY = 0xAE
    SET_COMMON_OUTPUT_DIRECTION = 0xC0
    SET_DISPLAY_OFFSET = 0xD3
    SET_DISPLAY_CLOCK_DIVIDE_RATIO = 0xD5
    SET_PRECHARGE = 0xD9
    SET_COMMON_PIN_CONFIGURATION = 0xDA
    SET_VCOMH_DESELECT_LEVEL = 0xDB
    WRITE_MODE = 0xFE
    READ_MODE = 0xFF


def _check_byte(name: str, value: int) -> int:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{name} {value} outside 0..255")
    return value


@dataclass(frozen=True)
class RenderArea:
    """Rectangle of columns and pages to be refreshed, both ends inclusive."""

    start_column: int = 0
    end_column: int = DEFAULT_WIDTH - 1
    start_page: int = 0
    end_page: int = DEFAULT_HEIGHT // PAGE_HEIGHT - 1

    def __post_init__(self) -> None:
        for name in ("start_column", "end_column", "start_page", "end_page"):
            _check_byte(name, getattr(self, name))
        if self.end_column < self.start_column or self.end_page < self.start_page:
            raise ValueError("render area ends before it starts")

    @classmethod
    def full(cls, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT) -> RenderArea:
        """Area covering a whole display of the given size."""
        return cls(0, width - 1, 0, height // PAGE_HEIGHT - 1)

    def buffer_length(self) -> int:
        """Number of display-memory bytes the area covers."""
        return (self.end_column - self.start_column + 1) * (
            self.end_page - self.start_page + 1
        )


def init_commands(width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT) -> list[int]:
    """Command bytes that bring up a panel of the given size."""
    com_pins = 0x12 if (width, height) == (128, 64) else 0x02
    return [
        Command.SET_DISPLAY,
        Command.SET_MEMORY_MODE, 0x00,
        Command.SET_DISPLAY_START_LINE,
        Command.SET_SEGMENT_REMAP | 0x01,
        Command.SET_MUX_RATIO, _check_byte("height - 1", height - 1),
        Command.SET_COMMON_OUTPUT_DIRECTION | 0x08,
        Command.SET_DISPLAY_OFFSET, 0x00,
        Command.SET_COMMON_PIN_CONFIGURATION, com_pins,
        Command.SET_DISPLAY_CLOCK_DIVIDE_RATIO, 0x80,
        Command.SET_PRECHARGE, 0xF1,
        Command.SET_VCOMH_DESELECT_LEVEL, 0x30,
        Command.SET_CONTRAST, 0xFF,
        Command.SET_ENTIRE_ON,
        Command.SET_NORMAL_DISPLAY,
        Command.SET_CHARGE_PUMP, 0x14,
        Command.SET_SCROLL | 0x00,
        Command.SET_DISPLAY | 0x01,
    ]


def scroll_commands(enabled: bool) -> list[int]:
    """Command bytes that set up horizontal scrolling and switch it on or off."""
    return [
        Command.SET_HORIZONTAL_SCROLL | 0x00, 0x00, 0x00, 0x00, 0x03,
        0x00, 0xFF, Command.SET_SCROLL | (0x01 if enabled else 0x00),
    ]


def render_commands(area: RenderArea) -> list[int]:
    """Command bytes that select ``area`` as the write window."""
    return [
        Command.SET_COLUMN_ADDRESS, area.start_column, area.end_column,
        Command.SET_PAGE_ADDRESS, area.start_page, area.end_page,
    ]


class Display:
    """Drives a panel by sending commands and frame data over a transport."""

    def __init__(self, transport: Transport, address: int = I2C_ADDRESS) -> None:
        self.transport = transport
        self.address = _check_byte("address", address)

    def send_command(self, command: int) -> None:
        """Send one command byte, preceded by the command control byte."""
        self.transport(self.address, bytes((COMMAND_CONTROL, command)))

    def send_commands(self, commands: Iterable[int]) -> None:
        """Send each command in turn."""
        for command in commands:
            self.send_command(command)

    def send_buffer(self, data: bytes | bytearray) -> None:
        """Send display memory, preceded by the data control byte."""
        self.transport(self.address, bytes((DATA_CONTROL,)) + bytes(data))

    def init(self, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT) -> None:
        """Run the power-up sequence."""
        self.send_commands(init_commands(width, height))

    def scroll(self, enabled: bool) -> None:
        """Switch horizontal scrolling on or off."""
        self.send_commands(scroll_commands(enabled))

    def render(self, data: bytes | bytearray, area: RenderArea | None = None) -> None:
        """Write the first ``area.buffer_length()`` bytes of ``data`` into ``area``."""
        area = area if area is not None else RenderArea()
        length = area.buffer_length()
        if len(data) < length:
            raise ValueError(f"need {length} bytes for the render area, got {len(data)}")
        self.send_commands(render_commands(area))
        self.send_buffer(data[:length])


class BitmapDisplay:
    """Display holding its own RAM image, for showing whole bitmaps."""

    def __init__(
        self,
        transport: Transport,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        address: int = I2C_ADDRESS,
        external_vcc: bool = False,
    ) -> None:
        self.transport = transport
        self.width = _check_byte("width", width)
        self.height = _check_byte("height", height)
        self.pages = height // PAGE_HEIGHT
        self.address = _check_byte("address", address)
        self.external_vcc = external_vcc
        self.bufsize = self.pages * self.width + 1
        self.ram_buffer = bytearray(self.bufsize)
        self.ram_buffer[0] = DATA_CONTROL

    def command(self, command: int) -> None:
        """Send one command byte."""
        self.transport(self.address, bytes((COMMAND_CONTROL, command)))

    def config(self) -> None:
        """Run the power-up sequence for vertical addressing mode."""
        for command in (
            Command.SET_DISPLAY | 0x00,
            Command.SET_MEMORY_MODE, 0x01,
            Command.SET_DISPLAY_START_LINE | 0x00,
            Command.SET_SEGMENT_REMAP | 0x01,
            Command.SET_MUX_RATIO, DEFAULT_HEIGHT - 1,
            Command.SET_COMMON_OUTPUT_DIRECTION | 0x08,
            Command.SET_DISPLAY_OFFSET, 0x00,
            Command.SET_COMMON_PIN_CONFIGURATION, 0x12,
            Command.SET_DISPLAY_CLOCK_DIVIDE_RATIO, 0x80,
            Command.SET_PRECHARGE, 0xF1,
            Command.SET_VCOMH_DESELECT_LEVEL, 0x30,
            Command.SET_CONTRAST, 0xFF,
            Command.SET_ENTIRE_ON,
            Command.SET_NORMAL_DISPLAY,
            Command.SET_CHARGE_PUMP, 0x14,
            Command.SET_DISPLAY | 0x01,
        ):
            self.command(command)

    def send_data(self) -> None:
        """Select the whole panel and send the RAM image."""
        for command in (
            Command.SET_COLUMN_ADDRESS, 0, self.width - 1,
            Command.SET_PAGE_ADDRESS, 0, self.pages - 1,
        ):
            self.command(command)
        self.transport(self.address, bytes(self.ram_buffer))

    def draw_bitmap(self, bitmap: bytes | bytearray) -> None:
        """Copy ``bitmap`` into RAM byte by byte, sending the image after each byte."""
        size = self.bufsize - 1
        if len(bitmap) < size:
            raise ValueError(f"bitmap needs {size} bytes, got {len(bitmap)}")
        for offset, value in enumerate(bitmap[:size], start=1):
            self.ram_buffer[offset] = value
            self.send_data()