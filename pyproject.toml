[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mediocremapper"
version = "0.1.0"
description = "Audio spectrum analysis, spectrogram meshes and file utilities for a rhythm game map editor"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["audio", "spectrum", "fft", "spectrogram", "beat mapping"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Sound/Audio :: Analysis",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["mediocremapper"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
