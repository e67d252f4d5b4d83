[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zombiequest"
version = "0.1.0"
description = "A side-scrolling platformer: a knight fights flying enemies, zombies and a boss across a tile map."
requires-python = ">=3.10"
keywords = ["game", "platformer", "side-scroller", "pygame", "zombie"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
zombiequest = "zombiequest.engine:main"

[tool.hatch.build.targets.wheel]
packages = ["zombiequest"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
