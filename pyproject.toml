[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fillit"
version = "0.1.0"
description = "Fit tetrominoes into the smallest possible square"
requires-python = ">=3.10"
dependencies = []
keywords = ["tetromino", "puzzle", "backtracking", "packing"]
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
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fillit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
