"""Ear-training game: pick notes, map them to buzzers and judge the guess."""

from __future__ import annotations

import random
from dataclasses import dataclass

from .tuner import NOTES, Note

Color = tuple[int, int, int]

RED: Color = (100, 0, 0)
GREEN: Color = (0, 100, 0)
YELLOW: Color = (100, 100, 0)

DEFAULT_WRAP_DIVIDER = 8
FEEDBACK_FLASHES = 3
CORRECT_MESSAGE = "Acertou"
WRONG_MESSAGE = "Errou"

# PWM wrap values that make each note's pitch with a clock divider of 16.
NOTE_WRAPS: dict[str, int] = {
    "C3": 59700, "D3": 53200, "E3": 47403, "F3": 44750, "G3": 39812,
    "A3": 35511, "B3": 31650, "C4": 29868, "D4": 26600, "E4": 23712,
    "F4": 22380, "G4": 19928, "A4": 17757, "B4": 15825, "C5": 14941,
    "D5": 13300, "E5": 11855, "F5": 11195, "G5": 9971, "A5": 8885,
    "B5": 7910,
}

LEFT_ARROW: tuple[int, ...] = (14, 13, 12, 11, 10, 16, 22, 6, 2)
RIGHT_ARROW: tuple[int, ...] = (14, 13, 12, 11, 10, 8, 2, 18, 22)

_CENTER = (12,)
_INNER_RING = (11, 13, 18, 17, 16, 8, 7, 6)
_OUTER_RING = (0, 1, 2, 3, 4, 5, 14, 15, 24, 23, 22, 21, 20, 19, 10, 9)

_NOTES_PER_PLAYERS = {1: 2, 2: 4}


@dataclass(frozen=True)
class Round:
    """Notes chosen for one round and the buzzer that plays the target note.

    With one board there are two notes and buzzers 0 (A) and 1 (B); with two
    boards there are four notes and buzzers 2 and 3 belong to the second board.
    Buzzer A of a board plays the second note of its pair, buzzer B the first.
    """

    notes: tuple[Note, ...]
    correct: int

    def __post_init__(self) -> None:
        if len(self.notes) not in _NOTES_PER_PLAYERS.values():
            raise ValueError(f"a round holds 2 or 4 notes, not {len(self.notes)}")
        if not 0 <= self.correct < len(self.notes):
            raise ValueError(f"buzzer {self.correct} outside 0..{len(self.notes) - 1}")

    @property
    def played(self) -> tuple[Note, ...]:
        """Notes in buzzer order: A and B of the first board, then of the second."""
        return tuple(self.notes[buzzer ^ 1] for buzzer in range(len(self.notes)))


def wrap_for(name: str) -> int:
    """PWM wrap value for the note called ``name``."""
    try:
        return NOTE_WRAPS[name]
    except KeyError:
        raise KeyError(f"no wrap value for note {name!r}") from None


def pick_distinct(rng: random.Random, count: int) -> list[int]:
    """Draw ``count`` different indices into the note table, in drawing order."""
    if not 0 <= count <= len(NOTES):
        raise ValueError(f"cannot pick {count} distinct notes out of {len(NOTES)}")
    chosen: list[int] = []
    while len(chosen) < count:
        index = rng.randrange(len(NOTES))
        if index not in chosen:
            chosen.append(index)
    return chosen


def new_round(rng: random.Random, players: int = 1) -> Round:
    """Choose the notes and the target buzzer for one or two boards."""
    try:
        count = _NOTES_PER_PLAYERS[players]
    except KeyError:
        raise ValueError(f"players must be 1 or 2, not {players}") from None
    indices = pick_distinct(rng, count)
    correct = rng.randrange(count)
    return Round(tuple(NOTES[i] for i in indices), correct)


def displayed_note(round_: Round) -> Note:
    """The note shown on screen: the one played by the correct buzzer."""
    return round_.played[round_.correct]


def pwm_level(wrap: int, divider: int = DEFAULT_WRAP_DIVIDER) -> int:
    """Duty-cycle level for a buzzer running at ``wrap``."""
    if not 0 <= wrap <= 0xFFFF:
        raise ValueError(f"wrap {wrap} outside 0..65535")
    if divider <= 0:
        raise ValueError("divider must be positive")
    return wrap // divider


def arrow_pattern(direction: int) -> dict[int, Color]:
    """LEDs lit for an arrow.

    0 and 1 are red arrows left and right (wrong guess), 2 and 3 green
    arrows left and right (right guess).
    """
    if direction not in range(4):
        raise ValueError(f"arrow direction {direction} outside 0..3")
    leds = LEFT_ARROW if direction % 2 == 0 else RIGHT_ARROW
    color = RED if direction < 2 else GREEN
    return {led: color for led in leds}


def playing_pattern(buzzer: int) -> dict[int, Color]:
    """Yellow arrow shown while buzzer 0 (A, left) or 1 (B, right) plays."""
    if buzzer not in (0, 1):
        raise ValueError(f"buzzer {buzzer} must be 0 or 1")
    leds = LEFT_ARROW if buzzer == 0 else RIGHT_ARROW
    return {led: YELLOW for led in leds}


def attention_frames() -> list[dict[int, Color]]:
    """Lit LEDs of each frame of the pulse shown before the notes play."""
    phases = (_CENTER, _INNER_RING, _OUTER_RING, _INNER_RING, _CENTER)
    return [{led: YELLOW for led in leds} for leds in phases]


def evaluate(correct: int, guess: int) -> tuple[str, int] | None:
    """Message and arrow direction for a guess.

    Returns ``None`` when the correct buzzer is on the second board, which
    judges the guess itself.
    """
    if correct not in range(4):
        raise ValueError(f"buzzer {correct} outside 0..3")
    if correct >= 2:
        return None
    if guess == correct:
        return CORRECT_MESSAGE, correct + 2
    return WRONG_MESSAGE, correct