[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "towerdefence"
version = "0.1.0"
description = "A tile-based tower defence game: place and upgrade towers, fight waves of enemies, protect your home."
requires-python = ">=3.10"
keywords = ["game", "tower defence", "strategy", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Real Time Strategy",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
towerdefence = "towerdefence.game:main"

[tool.hatch.build.targets.wheel]
packages = ["towerdefence"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
