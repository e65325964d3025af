[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "isohourly"
version = "0.1.0"
description = "Simple hourly building energy model after ISO 13790 Annex C, with EPW weather reading."
requires-python = ">=3.10"
keywords = ["building energy", "ISO 13790", "EUI", "simulation", "EPW", "weather"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["isohourly"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
