[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mazerunner"
version = "0.1.0"
description = "Generate, build and solve block mazes in a Minecraft world from the terminal"
requires-python = ">=3.10"
dependencies = []
keywords = ["minecraft", "maze", "bfs", "puzzle", "game"]
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
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mazerunner = "mazerunner.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["mazerunner"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
