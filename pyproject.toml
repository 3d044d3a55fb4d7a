[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "astroduel"
version = "0.1.0"
description = "Two-player terminal asteroid shooter with ANSI drawing, fixed-point maths and an in-memory LCD status display model"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "arcade", "terminal", "ansi", "asteroids", "two-player", "fixed-point"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
astroduel = "astroduel.game:main"

[tool.hatch.build.targets.wheel]
packages = ["astroduel"]

[tool.pytest.ini_options]
addopts = "-ra"
