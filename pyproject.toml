[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cosmicterm"
version = "0.1.0"
description = "Terminal emulator input and view logic: key encoding, pointer handling, viewport helpers and thumbnailer lookup"
requires-python = ">=3.10"
dependencies = []
keywords = ["terminal", "emulator", "escape-codes", "keyboard", "scrollback", "thumbnailer"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Terminals :: Terminal Emulators/X Terminals",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cosmicterm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
