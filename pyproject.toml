[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "picolab"
version = "0.1.0"
description = "Galton board simulation, SSD1306 framebuffer and command streams, NeoPixel buffer, tuner and ear-training logic for a small OLED board"
requires-python = ">=3.10"
dependencies = []
keywords = ["galton", "ssd1306", "oled", "neopixel", "tuner", "fft", "simulation", "ear-training"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Simulation",
    "Topic :: Multimedia :: Sound/Audio :: Analysis",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
picolab-galton = "picolab.cli:main"
picolab-music = "picolab.app:main"

[tool.hatch.build.targets.wheel]
packages = ["picolab"]

[tool.pytest.ini_options]
addopts = "-ra"
