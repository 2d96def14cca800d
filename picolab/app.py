"""Menu of the music board: joystick navigation between ear training and tuner."""

from __future__ import annotations

import argparse
import math
import random
import sys
from enum import IntEnum

from .cli import render_ascii
from .ear_training import displayed_note, new_round
from .framebuffer import Framebuffer
from .tuner import (
    ADC_MIDPOINT,
    SAMPLE_RATE,
    SAMPLES,
    center_text,
    dominant_frequency,
    find_closest_note,
    training_lines,
    tuner_lines,
)

ADC_MAX = (1 << 12) - 1
BAR_WIDTH = 40
RIGHT_ZONE = range(30, 41)
LEFT_ZONE = range(0, 11)

TEXT_X = 5
LINE_HEIGHT = 8
REMOTE_GUESSES = {"a": 2, "b": 3}


class Screen(IntEnum):
    """Menu screens, ordered left to right."""

    TRAINING = 0
    WELCOME = 1
    TUNER = 2


_SCREEN_TEXT: dict[Screen, tuple[str, ...]] = {
    Screen.TRAINING: ("", "", "", "    Treinar ->", "Ouvido", "", ""),
    Screen.WELCOME: ("MUSIC LAB", "", "", "<-         ->", "", "MENU", ""),
    Screen.TUNER: ("", "", "", "<- Afinador   ", "", "", ""),
}


def screen_lines(screen: Screen | int) -> list[str]:
    """The centred text lines shown for ``screen``."""
    return [center_text(line) for line in _SCREEN_TEXT[Screen(screen)]]


def joystick_bar(raw: int) -> int:
    """Map a 12-bit joystick reading onto the 0..40 position bar."""
    if not 0 <= raw <= ADC_MAX:
        raise ValueError(f"joystick reading {raw} outside 0..{ADC_MAX}")
    return raw * BAR_WIDTH // ADC_MAX


def next_screen(current: Screen | int, bar: int) -> Screen:
    """Screen selected after the joystick sits at ``bar``: one step at a time."""
    screen = Screen(current)
    if bar in RIGHT_ZONE and screen != Screen.TUNER:
        screen = Screen(screen + 1)
    if bar in LEFT_ZONE and screen != Screen.TRAINING:
        screen = Screen(screen - 1)
    return screen


def decode_remote_guess(char: str) -> int | None:
    """Guess sent by the second board: 'a' is buzzer 2, 'b' buzzer 3, else ``None``."""
    return REMOTE_GUESSES.get(char)


class Menu:
    """Tracks the selected screen and draws it into a framebuffer."""

    def __init__(self, framebuffer: Framebuffer | None = None) -> None:
        self.framebuffer = framebuffer if framebuffer is not None else Framebuffer()
        self.screen = Screen.WELCOME
        self.shown = Screen.WELCOME
        self.render()

    def update(self, raw: int) -> bool:
        """Apply one joystick reading; redraw and return True if the screen changed."""
        self.screen = next_screen(self.screen, joystick_bar(raw))
        if self.screen == self.shown:
            return False
        self.shown = self.screen
        self.render()
        return True

    def render(self) -> None:
        """Clear the framebuffer and draw the shown screen."""
        self.framebuffer.clear()
        for row, line in enumerate(screen_lines(self.shown)):
            self.framebuffer.draw_string(TEXT_X, row * LINE_HEIGHT, line)


def _sine_samples(frequency: float, amplitude: float = 1000.0) -> list[int]:
    return [
        round(ADC_MIDPOINT + amplitude * math.sin(2 * math.pi * frequency * n / SAMPLE_RATE))
        for n in range(SAMPLES)
    ]


def _run_menu(args: argparse.Namespace) -> int:
    menu = Menu()
    for raw in args.readings:
        menu.update(raw)
    print(menu.shown.name)
    print(render_ascii(menu.framebuffer))
    return 0


def _run_tune(args: argparse.Namespace) -> int:
    frequency = dominant_frequency(_sine_samples(args.frequency))
    note, error = find_closest_note(frequency)
    for line in tuner_lines(frequency, note, error):
        print(line)
    return 0


def _run_train(args: argparse.Namespace) -> int:
    round_ = new_round(random.Random(args.seed), args.players)
    target = displayed_note(round_)
    for line in training_lines(target.frequency, target):
        print(line)
    print(f"correct buzzer: {round_.correct}")
    return 0


def _reading(text: str) -> int:
    try:
        value = int(text)
        joystick_bar(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc
    return value


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="picolab-music")
    commands = parser.add_subparsers(dest="command", required=True)

    menu = commands.add_parser("menu", help="feed joystick readings to the menu")
    menu.add_argument("readings", nargs="*", type=_reading)
    menu.set_defaults(handler=_run_menu)

    tune = commands.add_parser("tune", help="detect the note of a synthetic tone")
    tune.add_argument("frequency", type=float)
    tune.set_defaults(handler=_run_tune)

    train = commands.add_parser("train", help="show one ear-training round")
    train.add_argument("--seed", type=int, default=None)
    train.add_argument("--players", type=int, choices=(1, 2), default=1)
    train.set_defaults(handler=_run_train)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run a menu, tuner or training command."""
    args = _build_parser().parse_args(sys.argv[1:] if argv is None else argv)
    return args.handler(args)


if __name__ == "__main__":
    sys.exit(main())