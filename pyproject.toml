[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "puzzlebox"
version = "0.1.0"
description = "Solvers for grid, string and counting puzzles: pipe loops, galaxy distances, spring records, mirrors, tilting dishes, lens hashing and light beams"
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "grid", "solver", "dynamic-programming"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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
puzzlebox-pipes = "puzzlebox.pipes:main"
puzzlebox-galaxies = "puzzlebox.galaxies:main"
puzzlebox-springs = "puzzlebox.springs:main"
puzzlebox-mirrors = "puzzlebox.mirrors:main"
puzzlebox-dish = "puzzlebox.dish:main"
puzzlebox-lenses = "puzzlebox.lenses:main"
puzzlebox-beams = "puzzlebox.beams:main"

[tool.hatch.build.targets.wheel]
packages = ["puzzlebox"]

[tool.hatch.build.targets.sdist]
include = ["puzzlebox", "tests", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP", "SIM"]

[tool.mypy]
python_version = "3.10"
