[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsa-drills"
version = "0.1.0"
description = "Classic data-structure and algorithm exercises, plus console Minesweeper and five-in-a-row"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "hashing",
    "two-pointers",
    "sliding-window",
    "linked-list",
    "binary-search-tree",
    "minesweeper",
    "gomoku",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dsa-minesweeper = "dsa_drills.minesweeper:main"
dsa-tictactoe = "dsa_drills.tictactoe:main"

[tool.hatch.build.targets.wheel]
packages = ["dsa_drills"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
