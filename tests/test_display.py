import pytest

from picolab.display import (
    BitmapDisplay,
    Command,
    Display,
    RenderArea,
    init_commands,
    render_commands,
    scroll_commands,
)
from picolab.framebuffer import Framebuffer


class Recorder:
    def __init__(self):
        self.writes = []

    def __call__(self, address, data):
        self.writes.append((address, data))


def test_full_area_matches_framebuffer_size():
    assert RenderArea().buffer_length() == len(Framebuffer().to_bytes())
    assert RenderArea.full() == RenderArea()


def test_partial_area_length():
    area = RenderArea(start_column=10, end_column=19, start_page=2, end_page=3)
    assert area.buffer_length() == 10 * 2


def test_area_rejects_reversed_bounds():
    with pytest.raises(ValueError):
        RenderArea(start_column=5, end_column=4)
    with pytest.raises(ValueError):
        RenderArea(end_column=300)


def test_init_commands_structure():
    commands = init_commands(128, 64)
    assert commands[0] == Command.SET_DISPLAY
    assert commands[-1] == Command.SET_DISPLAY | 0x01
    mux = commands.index(Command.SET_MUX_RATIO)
    assert commands[mux + 1] == 63
    pins = commands.index(Command.SET_COMMON_PIN_CONFIGURATION)
    assert commands[pins + 1] == 0x12


def test_init_commands_small_panel_pins():
    commands = init_commands(128, 32)
    pins = commands.index(Command.SET_COMMON_PIN_CONFIGURATION)
    assert commands[pins + 1] == 0x02
    assert commands[commands.index(Command.SET_MUX_RATIO) + 1] == 31


def test_scroll_commands_toggle_last_byte():
    on = scroll_commands(True)
    off = scroll_commands(False)
    assert on[:-1] == off[:-1]
    assert on[-1] == Command.SET_SCROLL | 0x01
    assert off[-1] == Command.SET_SCROLL
    assert on[0] == Command.SET_HORIZONTAL_SCROLL


def test_render_commands_carry_area():
    area = RenderArea(1, 2, 3, 4)
    assert render_commands(area) == [
        Command.SET_COLUMN_ADDRESS, 1, 2, Command.SET_PAGE_ADDRESS, 3, 4,
    ]


def test_send_command_wire_bytes():
    rec = Recorder()
    Display(rec).send_command(0xAF)
    assert rec.writes == [(0x3C, b"\x80\xaf")]


def test_init_sends_each_command_separately():
    rec = Recorder()
    Display(rec).init()
    expected = init_commands()
    assert [data[1] for _, data in rec.writes] == expected
    assert all(data[0] == 0x80 and len(data) == 2 for _, data in rec.writes)


def test_scroll_sends_scroll_sequence():
    rec = Recorder()
    Display(rec, address=0x3D).scroll(True)
    assert [data[1] for _, data in rec.writes] == scroll_commands(True)
    assert {address for address, _ in rec.writes} == {0x3D}


def test_send_buffer_prefixes_data_control():
    rec = Recorder()
    Display(rec).send_buffer(b"\x01\x02")
    assert rec.writes == [(0x3C, b"\x40\x01\x02")]


def test_render_full_frame():
    rec = Recorder()
    fb = Framebuffer()
    fb.set_pixel(0, 0)
    Display(rec).render(fb.to_bytes())
    commands = [data[1] for _, data in rec.writes[:-1]]
    assert commands == render_commands(RenderArea())
    assert rec.writes[-1][1] == b"\x40" + fb.to_bytes()


def test_render_rejects_short_data():
    with pytest.raises(ValueError):
        Display(Recorder()).render(b"\x00" * 10)


def test_bitmap_display_initial_ram():
    display = BitmapDisplay(Recorder())
    assert display.ram_buffer[0] == 0x40
    assert len(display.ram_buffer) == len(Framebuffer().to_bytes()) + 1
    assert display.pages == 8


def test_bitmap_config_sends_commands():
    rec = Recorder()
    BitmapDisplay(rec).config()
    sent = [data[1] for _, data in rec.writes]
    assert sent[0] == Command.SET_DISPLAY
    assert sent[-1] == Command.SET_DISPLAY | 0x01
    assert sent[1:3] == [Command.SET_MEMORY_MODE, 0x01]
    assert all(data[0] == 0x80 for _, data in rec.writes)


def test_bitmap_send_data():
    rec = Recorder()
    display = BitmapDisplay(rec, width=8, height=16)
    display.send_data()
    sent = [data[1] for _, data in rec.writes[:-1]]
    assert sent == [Command.SET_COLUMN_ADDRESS, 0, 7, Command.SET_PAGE_ADDRESS, 0, 1]
    assert rec.writes[-1][1] == bytes(display.ram_buffer)


def test_draw_bitmap_sends_after_every_byte():
    rec = Recorder()
    display = BitmapDisplay(rec, width=4, height=8)
    bitmap = bytes([9, 8, 7, 6])
    display.draw_bitmap(bitmap)
    images = [data for _, data in rec.writes if data[0] == 0x40]
    assert len(images) == len(bitmap)
    assert images[0] == b"\x40\x09\x00\x00\x00"
    assert images[-1] == b"\x40" + bitmap


def test_draw_bitmap_rejects_short_bitmap():
    with pytest.raises(ValueError):
        BitmapDisplay(Recorder(), width=4, height=8).draw_bitmap(b"\x01")