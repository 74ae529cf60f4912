[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "snakenet"
version = "0.1.0"
description = "Snake on a square grid, single-player in a desktop window, with a small UDP server for multiplayer rooms"
requires-python = ">=3.10"
dependencies = []
keywords = ["snake", "game", "arcade", "multiplayer", "udp", "tkinter"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
snakenet = "snakenet.gui:main"
snakenet-server = "snakenet.server:main"

[tool.hatch.build.targets.wheel]
packages = ["snakenet"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
