"""Pitch detection for the tuner: FFT, nearest-note lookup and screen text."""

from __future__ import annotations

import cmath
import math
from collections.abc import Sequence
from dataclasses import dataclass

ADC_CLOCK_HZ = 48_000_000
ADC_DIVIDER = 24576.0
SAMPLE_RATE = ADC_CLOCK_HZ / ADC_DIVIDER
SAMPLES = 4096
ADC_MIDPOINT = 2048

TEXT_LINES = 6
TEXT_LENGTH = 16


@dataclass(frozen=True)
class Note:
    """A named musical note and its frequency in hertz."""

    name: str
    frequency: float


NOTES: tuple[Note, ...] = (
    Note("C3", 130.81), Note("D3", 146.83), Note("E3", 164.81), Note("F3", 174.61),
    Note("G3", 196.00), Note("A3", 220.00), Note("B3", 246.94),
    Note("C4", 261.63), Note("D4", 293.66), Note("E4", 329.63), Note("F4", 349.23),
    Note("G4", 392.00), Note("A4", 440.00), Note("B4", 493.88),
    Note("C5", 523.25), Note("D5", 587.33), Note("E5", 659.25), Note("F5", 698.46),
    Note("G5", 783.99), Note("A5", 880.00), Note("B5", 987.77),
)


def _fft(values: list[complex]) -> list[complex]:
    n = len(values)
    if n <= 1:
        return list(values)
    even = _fft(values[0::2])
    odd = _fft(values[1::2])
    half = n // 2
    result = [0j] * n
    for k, (e, o) in enumerate(zip(even, odd)):
        t = cmath.exp(complex(0.0, -2.0 * math.pi * k / n)) * o
        result[k] = e + t
        result[k + half] = e - t
    return result


def fft(values: Sequence[complex | float]) -> list[complex]:
    """Return the discrete Fourier transform of ``values`` (radix-2, recursive).

    The length must be zero or a power of two.
    """
    n = len(values)
    if n and n & (n - 1):
        raise ValueError(f"length {n} is not a power of two")
    return _fft([complex(v) for v in values])


def dominant_frequency(
    samples: Sequence[float], sample_rate: float = SAMPLE_RATE
) -> float:
    """Frequency of the strongest FFT bin below Nyquist, from raw 12-bit ADC samples.

    Samples are centred on the ADC midpoint first; the DC bin is ignored.
    Returns 0.0 when no bin has any energy.
    """
    spectrum = fft([float(s) - ADC_MIDPOINT for s in samples])
    n = len(spectrum)
    best_index = 0
    best_magnitude = 0.0
    for index in range(1, n // 2):
        magnitude = abs(spectrum[index])
        if magnitude > best_magnitude:
            best_magnitude = magnitude
            best_index = index
    if n == 0:
        return 0.0
    return best_index * sample_rate / n


def find_closest_note(frequency: float) -> tuple[Note, float]:
    """Return the nearest note and ``frequency`` minus that note's frequency.

    On a tie the lower note wins.
    """
    closest = min(NOTES, key=lambda note: abs(note.frequency - frequency))
    return closest, frequency - closest.frequency


def center_text(text: str, width: int = TEXT_LENGTH) -> str:
    """Pad ``text`` equally on both sides, then cut it to at most ``width`` characters."""
    padding = (width - len(text)) // 2 if width > len(text) else 0
    return f"{' ' * padding}{text}{' ' * padding}"[: max(width, 0)]


def _field(text: str) -> str:
    # Formatted fields are limited to one character less than a display line.
    return text[: TEXT_LENGTH - 1]


def _name(note: str | Note) -> str:
    return note.name if isinstance(note, Note) else note


def tuner_lines(frequency: float, note: str | Note, error: float) -> list[str]:
    """Display lines showing the measured frequency, nearest note and error."""
    return [
        center_text(""),
        center_text(_field(f"Freq: {frequency:.0f} HZ")),
        center_text(""),
        center_text(_field(f"Nota: {_name(note)}")),
        center_text(""),
        center_text(_field(f"Erro: {error:.0f} HZ")),
    ]


def training_lines(frequency: float, note: str | Note) -> list[str]:
    """Display lines asking the player to find the button of the given note."""
    return [
        center_text("ACERTE O BOTAO"),
        center_text("DA NOTA"),
        center_text(""),
        center_text(_field(f"Nota: {_name(note)}")),
        center_text(""),
        center_text(_field(f"Freq: {frequency:.0f} HZ")),
    ]