[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dungeoncrawl"
version = "0.1.0"
description = "Grid-based dungeon levels loaded from JSON files, with randomly placed monsters and treasure"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "rpg", "dungeon", "grid", "level", "json"]
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
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dungeoncrawl = "dungeoncrawl.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dungeoncrawl"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
