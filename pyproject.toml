[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hexbattle"
version = "0.1.0"
description = "Deterministic turn-based battle simulation of two teams on a hexagonal grid, with animated playback of the recorded steps"
requires-python = ">=3.10"
dependencies = []
keywords = ["hex", "hexagonal grid", "battle", "simulation", "auto-battler", "game"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hexbattle = "hexbattle.gamemode:main"

[tool.hatch.build.targets.wheel]
packages = ["hexbattle"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
