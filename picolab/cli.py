"""Command line entry: run the Galton board in the terminal or greet."""

from __future__ import annotations

import argparse
import random
import sys
import time

from .framebuffer import Framebuffer
from .galton import GaltonBoard

_COMMANDS = ("galton", "hello", "-h", "--help")


def render_ascii(framebuffer: Framebuffer) -> str:
    """Draw the framebuffer as text: ``#`` for a lit pixel, ``.`` for a dark one."""
    return "\n".join(
        "".join("#" if framebuffer.get_pixel(x, y) else "." for x in range(framebuffer.width))
        for y in range(framebuffer.height)
    )


def _probability(text: str) -> float:
    try:
        value = float(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"not a number: {text!r}") from exc
    if not 0.0 <= value <= 1.0:
        raise argparse.ArgumentTypeError(f"probability {value} outside 0..1")
    return value


def _run_galton(args: argparse.Namespace) -> int:
    board = GaltonBoard(Framebuffer(), random.Random(args.seed), args.prob)
    while not board.tick():
        if args.frames:
            print(render_ascii(board.framebuffer))
            print()
            if args.delay:
                time.sleep(args.delay)
    print(render_ascii(board.framebuffer))
    print(f"balls launched: {board.launched_count}")
    return 0


def _run_hello(args: argparse.Namespace) -> int:
    for n in range(args.count):
        if n:
            time.sleep(args.interval)
        print("Hello, world!")
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="picolab")
    commands = parser.add_subparsers(dest="command")

    galton = commands.add_parser("galton", help="run one Galton board simulation")
    galton.add_argument("--seed", type=int, default=None, help="random seed")
    galton.add_argument(
        "--prob", type=_probability, default=0.5, help="probability of falling left"
    )
    galton.add_argument("--frames", action="store_true", help="print every frame")
    galton.add_argument("--delay", type=float, default=0.0, help="seconds between frames")
    galton.set_defaults(handler=_run_galton)

    hello = commands.add_parser("hello", help="print a greeting")
    hello.add_argument("--count", type=int, default=1)
    hello.add_argument("--interval", type=float, default=1.0)
    hello.set_defaults(handler=_run_hello)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Parse arguments and run the chosen command; ``galton`` is the default."""
    arguments = list(sys.argv[1:] if argv is None else argv)
    if not arguments or arguments[0] not in _COMMANDS:
        arguments = ["galton", *arguments]
    args = _build_parser().parse_args(arguments)
    return args.handler(args)


if __name__ == "__main__":
    sys.exit(main())