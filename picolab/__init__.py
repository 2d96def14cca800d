"""Galton board simulation, SSD1306 framebuffer and commands, NeoPixel buffer, tuner and ear-training logic."""

__version__ = "0.1.0"