# picolab

Pure-Python logic for a small board with a 128x64 SSD1306 OLED, a 5x5
NeoPixel matrix, buttons, buzzers and a microphone. It has no dependencies
outside the standard library.

| Module | What it holds |
| --- | --- |
| `picolab.font` | 8x8 column glyphs: `glyph_index`, `glyph` (letters, digits and, in the extended font, `+-#:/.<>`) |
| `picolab.framebuffer` | `Framebuffer`: page-organised monochrome memory with `set_pixel`, `get_pixel`, `draw_line`, `draw_char`, `draw_string`, `clear`, `to_bytes` |
| `picolab.display` | SSD1306 command sequences (`init_commands`, `scroll_commands`, `render_commands`), `RenderArea`, and the `Display` and `BitmapDisplay` drivers |
| `picolab.neopixel` | `NeoPixelStrip` and `Pixel`: LED colours written to a sink as G, R, B bytes |
| `picolab.galton` | `GaltonBoard`: balls falling through a peg pyramid, drawn sideways on a framebuffer, with a ball counter and left-fall probability display |
| `picolab.cli` | `render_ascii` and the `picolab-galton` command |
| `picolab.tuner` | `fft`, `dominant_frequency`, `find_closest_note`, `center_text`, `tuner_lines`, `training_lines` and the `NOTES` table |
| `picolab.ear_training` | `Round`, `new_round`, `pick_distinct`, `displayed_note`, `wrap_for`, `pwm_level`, `arrow_pattern`, `playing_pattern`, `attention_frames`, `evaluate` |
| `picolab.app` | `Screen`, `Menu`, `screen_lines`, `joystick_bar`, `next_screen`, `decode_remote_guess` and the `picolab-music` command |

## Install

```
pip install .
pip install ".[test]"   # with pytest
```

## Commands

### picolab-galton

Runs one Galton board simulation and prints the final display as ASCII
(`#` lit, `.` dark) followed by the number of balls launched.

```
picolab-galton galton --seed 1 --prob 0.5
picolab-galton --seed 1             # "galton" is the default
picolab-galton galton --frames --delay 0.05
picolab-galton hello --count 3 --interval 1.0
```

- `--seed`: random seed
- `--prob`: probability of falling left, 0..1 (default 0.5)
- `--frames`: print every frame; `--delay` waits between frames
- `hello` prints `Hello, world!` `--count` times, `--interval` seconds apart

### picolab-music

```
picolab-music menu 4095 4095 0    # feed joystick readings (0..4095), print the screen
picolab-music tune 440            # detect the note of a synthetic sine tone
picolab-music train --seed 7 --players 2
```

`menu` moves between the `TRAINING`, `WELCOME` and `TUNER` screens one step
per reading and prints the shown screen's name and its ASCII rendering.
`tune` samples a 4096-point sine at the board's ADC rate, finds the dominant
frequency and prints the tuner lines. `train` draws one ear-training round
for one or two boards and prints the training lines and the correct buzzer.

## Library use

```python
import random
from picolab.framebuffer import Framebuffer
from picolab.galton import GaltonBoard
from picolab.cli import render_ascii

fb = Framebuffer(128, 64, extended_font=False)
board = GaltonBoard(fb, random.Random(1), fall_prob=0.5)
while not board.tick():
    pass
print(render_ascii(fb))
```

```python
from picolab.tuner import dominant_frequency, find_closest_note, tuner_lines

freq = dominant_frequency(samples)          # raw 12-bit ADC readings
note, error = find_closest_note(freq)
for line in tuner_lines(freq, note, error):
    print(line)
```

The display drivers send bytes through a transport, any callable taking an
I2C address and a `bytes` payload, so they can target real hardware or a
recording stub:

```python
from picolab.display import Display, RenderArea

sent = []
display = Display(lambda address, data: sent.append((address, data)), address=0x3C)
display.init(128, 64)
display.render(fb.to_bytes(), RenderArea(0, 127, 0, 7))
```

`NeoPixelStrip(25, sink)` works the same way: `write()` passes the GRB bytes
to `sink` and returns them.

## What it does not do

The package does no hardware input or output of its own. There is no I2C,
GPIO, PWM, ADC or UART access: displays and LED strips only produce bytes
for a transport or sink you supply, buttons and the joystick are plain
numbers passed in, the tuner analyses samples you give it rather than
recording from a microphone, and the ear-training game computes notes, PWM
wrap values and LED patterns but plays no sound and does not talk to a
second board.

## Tests

```
pytest
```