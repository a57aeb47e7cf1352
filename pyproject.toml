[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gridpath"
version = "0.1.0"
description = "Tile maps read from delimited text files, a trail-walking iterator, and depth-first and A* path search with a coloured terminal view."
requires-python = ">=3.10"
dependencies = []
keywords = ["pathfinding", "a-star", "depth-first search", "grid", "maze", "csv"]
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
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gridpath = "gridpath.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["gridpath"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
