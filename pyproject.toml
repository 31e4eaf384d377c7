[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sudoku_csp"
version = "0.1.0"
description = "Backtracking constraint-satisfaction solver for generalised p-by-q Sudoku boards"
requires-python = ">=3.10"
dependencies = []
keywords = ["sudoku", "csp", "constraint satisfaction", "backtracking", "forward checking", "puzzle"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sudoku-csp = "sudoku_csp.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sudoku_csp"]

[tool.pytest.ini_options]
addopts = "-ra"
