[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "iksoks"
version = "1.0.0"
description = "Two-player terminal tic-tac-toe (Iks-Oks) with a persistent score file"
requires-python = ">=3.10"
dependencies = []
keywords = ["tic-tac-toe", "iks-oks", "game", "terminal", "scores"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
iksoks = "iksoks.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["iksoks"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
