[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "retrosnake"
version = "1.0.0"
description = "Game logic and pygame drawing helpers for a retro grid-based snake game with special apples and floating score text."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["snake", "game", "arcade", "retro", "pygame"]
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
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["retrosnake"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
