[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pongjb"
version = "0.1.0"
description = "A two-player Pong game: first to ten points wins"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["pong", "game", "arcade", "two-player", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
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
test = [
    "pytest",
]

[project.scripts]
pongjb = "pongjb.main:main"

[tool.hatch.build.targets.wheel]
packages = ["pongjb"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
